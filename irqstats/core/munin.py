"""Munin protocol output for interrupt records."""

from typing import TYPE_CHECKING

from irqstats.core.output import Output
from irqstats.core.parser import InterruptRecord
from irqstats.lib.filesystem import check_readable

if TYPE_CHECKING:
    from irqstats.core.context import Context


GRAPH_HEADER = [
    "graph_title Individual interrupts",
    "graph_args --base 1000 --logarithmic",
    "graph_vlabel interrupts / ${graph_period}",
    "graph_category system",
    "graph_info Shows the number of different IRQs received by the kernel.  "
    "High disk or network traffic can cause a high number of interrupts "
    "(with good hardware and drivers this will be less so). Sudden high "
    "interrupt activity with no associated higher system activity is not normal.",
]

# Info for well-known interrupts that have no description of their own
CANNED_INFO = {
    "NMI": "Non-maskable interrupt. Either 0 or quite high. If it's normally 0 "
    "then just one NMI will often mark some hardware failure.",
    "LOC": "Local (per CPU core) APIC timer interrupt. Until 2.6.21 normally 250 "
    "or 1000 per second. On modern 'tickless' kernels it more or less reflects "
    "how busy the machine is.",
}


def field_name(record: InterruptRecord) -> str:
    """Munin field name for a record."""
    return f"i{record.name}"


def _hwirq_suffix(record: InterruptRecord) -> str:
    if record.hardware_irq is None:
        return ""
    return f" [{record.hardware_irq}]"


def autoconf(path: str, output: Output, context: "Context | None" = None) -> bool:
    """
    Report whether the interrupt report is readable.

    Args:
        path: Report path
        output: Output helper
        context: Execution context (for testing)

    Returns:
        True if readable
    """
    reason = check_readable(path, context)
    if reason is None:
        output.line("yes")
        return True

    output.line(f"no ({path} isn't readable: {reason})")
    return False


def render_config(records: list[InterruptRecord], output: Output) -> None:
    """Write the graph and field declarations."""
    for line in GRAPH_HEADER:
        output.line(line)
    output.line()

    output.line("graph_order " + " ".join(field_name(r) for r in records))

    for record in records:
        name = field_name(record)
        label = record.description if record.description is not None else record.name
        output.line(f"{name}.label {label}{_hwirq_suffix(record)}")

        # Some, like ERR and MIS, do not have a description
        if record.description is not None:
            output.line(
                f"{name}.info Interrupt {record.name}, for device(s): "
                f"{record.description}{_hwirq_suffix(record)}"
            )
        elif record.name in CANNED_INFO:
            output.line(f"{name}.info {CANNED_INFO[record.name]}")

        output.line(f"{name}.type DERIVE")
        output.line(f"{name}.min 0")


def render_fetch(records: list[InterruptRecord], output: Output) -> None:
    """Write the current counter values."""
    for record in records:
        output.line(f"{field_name(record)}.value {record.total_count}")
