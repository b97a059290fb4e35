"""
Parse /proc/interrupts into interrupt records.

The report is a header line with one column per CPU, followed by one row per
interrupt:

               CPU0       CPU1
      0:         44          0   IO-APIC   2-edge      timer
     16:      12345        678   IO-APIC  16-fasteoi   ehci_hcd:usb1
    NMI:          0          0   Non-maskable interrupts
    ERR:          0

Any malformed line aborts the whole parse; callers never see partial results.
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from irqstats.core.errors import (
    GarbageWhereCounterExpected,
    LineTooLong,
    MalformedHeader,
    MalformedRowName,
    NoCounters,
    SourceUnavailable,
)
from irqstats.core.rules import Layout, RuleSet, is_numeric, normalize_description
from irqstats.lib.filesystem import FileError, read_file

if TYPE_CHECKING:
    from irqstats.core.context import Context


INTERRUPTS = "/proc/interrupts"

# Stop processing after this many IRQs have been seen
MAX_IRQS = 256

# Sufficient even on a system with 256 threads
MAX_LINE = 4096

CPU_MARKER = "CPU"

FIELD_RE = re.compile(r"\S+")


@dataclass
class InterruptRecord:
    """One interrupt line from the report."""

    name: str
    total_count: int = 0
    description: str | None = None
    hardware_irq: int | None = None


def iter_lines(content: str) -> Iterator[tuple[int, str]]:
    """
    Split report content into lines.

    Args:
        content: Full report text

    Yields:
        tuple of (line number, line without its newline)

    Raises:
        LineTooLong: If a line isn't newline-terminated within MAX_LINE
    """
    start = 0
    line_num = 0
    while start < len(content):
        # The line and its newline must fit in MAX_LINE - 1 characters
        end = content.find("\n", start, start + MAX_LINE - 1)
        if end == -1:
            raise LineTooLong(
                f"line_num={line_num} is not newline-terminated within {MAX_LINE} characters",
                line_num,
            )
        yield line_num, content[start:end]
        start = end + 1
        line_num += 1


def parse_header(line: str, line_num: int = 0) -> int:
    """
    Count the CPU columns of the header line.

    Args:
        line: First line of the report
        line_num: Line number, for error messages

    Returns:
        Number of CPUs (at least 1)

    Raises:
        MalformedHeader: If a column isn't a CPU marker or there are none
    """
    fields = line.split()
    for field in fields:
        if not field.startswith(CPU_MARKER):
            raise MalformedHeader(
                f"expected {CPU_MARKER} at line_num={line_num}, got '{field}'", line_num
            )

    if not fields:
        raise MalformedHeader("no CPUs found", line_num)

    return len(fields)


def sum_counters(
    name: str,
    fields: list[str],
    cpu_count: int,
    line_num: int | None = None,
) -> tuple[int, int]:
    """
    Add up the per-CPU counters of a row.

    Some interrupts, such as ERR or MIS, only have a single counter rather
    than one per CPU, so consumption stops at the first missing or
    non-numeric field.

    Args:
        name: Interrupt name, for error messages
        fields: Fields following the name
        cpu_count: Maximum number of counters to consume
        line_num: Line number, for error messages

    Returns:
        tuple of (total count, number of fields consumed)

    Raises:
        NoCounters: If there are no fields at all
        GarbageWhereCounterExpected: If the first field isn't a number
    """
    total = 0
    consumed = 0
    for value in fields[:cpu_count]:
        if not is_numeric(value):
            break
        total += int(value)
        consumed += 1

    if consumed == 0:
        if not fields:
            raise NoCounters(f"'{name}' has no counters", line_num)
        raise GarbageWhereCounterExpected(
            f"'{name}' has only garbage '{fields[0]}'", line_num
        )

    return total, consumed


def parse_row(
    line: str,
    cpu_count: int,
    include_description: bool,
    rules: RuleSet,
    line_num: int | None = None,
) -> InterruptRecord | None:
    """
    Parse one interrupt row.

    Args:
        line: Row text without its newline
        cpu_count: Number of CPU columns from the header
        include_description: Whether to extract description and hardware IRQ
        rules: Description rules for this architecture
        line_num: Line number, for error messages

    Returns:
        The parsed record, or None if the row is a skipped marker row

    Raises:
        MalformedRowName: If the row doesn't start with a 'name:' field
        NoCounters: If the row has no counters
        GarbageWhereCounterExpected: If the first counter isn't a number
    """
    fields = list(FIELD_RE.finditer(line))
    if not fields:
        raise MalformedRowName(f"line_num={line_num} is empty", line_num)

    label = fields[0].group()
    if len(label) < 2 or not label.endswith(":"):
        raise MalformedRowName(f"expected name '{label}' is missing ':'", line_num)
    name = label[:-1]

    if name in rules.skip_labels:
        return None

    total, consumed = sum_counters(
        name, [m.group() for m in fields[1:]], cpu_count, line_num
    )
    record = InterruptRecord(name=name, total_count=total)

    rest = fields[consumed + 1:]
    if not include_description or not rest:
        return record

    # Everything from the first unconsumed field on, spacing intact
    remainder = line[rest[0].start():].strip()

    if not is_numeric(name):
        record.description = " ".join(remainder.split())
        return record

    record.description, record.hardware_irq = normalize_description(
        int(name), remainder, rules
    )
    return record


def parse_interrupts(
    content: str,
    include_description: bool = False,
    rules: RuleSet | None = None,
    max_irqs: int = MAX_IRQS,
) -> list[InterruptRecord]:
    """
    Parse report content into records, in row order.

    Args:
        content: Full report text
        include_description: Whether to extract descriptions
        rules: Description rules (default: generic layout)
        max_irqs: Stop after this many records

    Returns:
        List of InterruptRecord

    Raises:
        ParseError: On any malformed line
    """
    if rules is None:
        rules = RuleSet(layout=Layout.GENERIC)

    lines = iter_lines(content)
    try:
        line_num, header = next(lines)
    except StopIteration:
        raise MalformedHeader("no CPUs found", 0) from None

    cpu_count = parse_header(header, line_num)

    records = []
    for line_num, line in lines:
        record = parse_row(line, cpu_count, include_description, rules, line_num)
        if record is None:
            continue
        records.append(record)
        if len(records) >= max_irqs:
            break

    return records


def read_interrupts(
    include_description: bool = False,
    context: "Context | None" = None,
    path: str = INTERRUPTS,
    rules: RuleSet | None = None,
    max_irqs: int = MAX_IRQS,
) -> list[InterruptRecord]:
    """
    Read and parse the interrupt report.

    Args:
        include_description: Whether to extract descriptions
        context: Execution context (for testing)
        path: Report path
        rules: Description rules (default: generic layout)
        max_irqs: Stop after this many records

    Returns:
        List of InterruptRecord

    Raises:
        SourceUnavailable: If the report can't be read
        ParseError: On any malformed line
    """
    try:
        content = read_file(path, context)
    except FileError as e:
        raise SourceUnavailable(str(e)) from e

    return parse_interrupts(content, include_description, rules, max_irqs)
