"""
Description normalization for numbered interrupts.

The text after the counters in /proc/interrupts depends on the interrupt
controller and the architecture. A few common layouts:

    38:  150262  0  0  0   OpenPIC    38 Level  i2c-mpc, i2c-mpc
     3:  247552271         MIPS        3  ehci_hcd:usb1
    33:  617373   f1010140.gpio       17 Edge   pps.-1
     0:  44  0             IR-IO-APIC  2-edge   timer
    30:  5                 PCI-MSI     512000-edge  ahci
    16:  1234  0           sun4v      -edge    MSIQ

Leading tokens are controller metadata, sometimes carrying a hardware IRQ
number that differs from the row label. The rest is the device list.
"""

import re
from dataclasses import dataclass
from enum import Enum

# Tokens beyond this are dropped from the description
MAX_TOKENS = 32

TRIGGER_TYPES = frozenset({"Edge", "Level", "None"})

TRIGGER_SUFFIXES = ("-fasteoi", "-edge")

# SPARC shows one MSIQ interrupt per thread, all with the same description
AMBIGUOUS_DEVICES = frozenset({"MSIQ"})

LEADING_DIGITS = re.compile(r"^[0-9]+")


class Layout(Enum):
    """Column layout of the description text."""

    GENERIC = "generic"
    SPARC = "sparc"


@dataclass(frozen=True)
class RuleSet:
    """Description rules selected once per run from the architecture."""

    layout: Layout
    trigger_types: frozenset[str] = TRIGGER_TYPES
    trigger_suffixes: tuple[str, ...] = TRIGGER_SUFFIXES
    ambiguous_devices: frozenset[str] = frozenset()
    skip_labels: frozenset[str] = frozenset()


def is_numeric(value: str) -> bool:
    """True if value is a non-empty string of ASCII digits."""
    return value.isascii() and value.isdigit()


def select_description_rule(
    architecture: str,
    skip_labels: frozenset[str] = frozenset(),
) -> RuleSet:
    """
    Pick the rule set for an architecture.

    Args:
        architecture: Machine name as reported by platform.machine()
        skip_labels: Row labels that carry no counters on this platform

    Returns:
        RuleSet to use for every row of the report
    """
    if architecture.lower().startswith("sparc"):
        return RuleSet(
            layout=Layout.SPARC,
            ambiguous_devices=AMBIGUOUS_DEVICES,
            skip_labels=frozenset(skip_labels),
        )
    return RuleSet(layout=Layout.GENERIC, skip_labels=frozenset(skip_labels))


def _suffixed_hwirq(token: str, rules: RuleSet) -> int | None:
    """Return the number in an APIC/PCI token like 18-fasteoi or 1048579-edge."""
    match = LEADING_DIGITS.match(token)
    if match is None or not token.endswith(rules.trigger_suffixes):
        return None
    return int(match.group())


def _controller_only(irq: int, tokens: list[str], rules: RuleSet) -> tuple[int, int | None]:
    # Most x86 interrupts, old ARM
    if len(tokens) >= 2:
        hwirq = _suffixed_hwirq(tokens[1], rules)
        if hwirq is not None:
            return 2, (hwirq if hwirq != irq else None)
    return 1, None


def _generic(irq: int, tokens: list[str], rules: RuleSet) -> tuple[int, int | None]:
    # Newer ARM, MIPS, PowerPC, some x86: controller, pin, optional trigger type
    if len(tokens) >= 2 and is_numeric(tokens[1]):
        hwirq = int(tokens[1])
        start = 2
        # MIPS has been seen to not show the type
        if len(tokens) > 2 and tokens[2] in rules.trigger_types:
            start = 3
        return start, (hwirq if hwirq != irq else None)
    return _controller_only(irq, tokens, rules)


def _sparc(irq: int, tokens: list[str], rules: RuleSet) -> tuple[int, int | None]:
    if len(tokens) >= 3:
        if tokens[2] in rules.ambiguous_devices:
            return 2, irq
        return 2, None
    return _controller_only(irq, tokens, rules)


_LAYOUTS = {
    Layout.GENERIC: _generic,
    Layout.SPARC: _sparc,
}


def normalize_description(
    irq: int,
    remainder: str,
    rules: RuleSet,
) -> tuple[str, int | None]:
    """
    Extract the device description and hardware IRQ of a numbered interrupt.

    Args:
        irq: The row label as a number
        remainder: Non-empty text following the counters
        rules: Rule set from select_description_rule()

    Returns:
        tuple of (description, hardware IRQ or None)
    """
    tokens = remainder.split()[:MAX_TOKENS]
    start, hwirq = _LAYOUTS[rules.layout](irq, tokens, rules)

    if start >= len(tokens):
        return tokens[-1], hwirq

    return " ".join(tokens[start:]), hwirq
