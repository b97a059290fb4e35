"""Core irqstats functionality."""

from irqstats.core.context import Context
from irqstats.core.errors import (
    GarbageWhereCounterExpected,
    IrqStatsError,
    LineTooLong,
    MalformedHeader,
    MalformedRowName,
    NoCounters,
    ParseError,
    SourceUnavailable,
)
from irqstats.core.output import Output
from irqstats.core.parser import InterruptRecord, parse_interrupts, read_interrupts
from irqstats.core.rules import Layout, RuleSet, select_description_rule

__all__ = [
    "Context",
    "GarbageWhereCounterExpected",
    "InterruptRecord",
    "IrqStatsError",
    "Layout",
    "LineTooLong",
    "MalformedHeader",
    "MalformedRowName",
    "NoCounters",
    "Output",
    "ParseError",
    "RuleSet",
    "SourceUnavailable",
    "parse_interrupts",
    "read_interrupts",
    "select_description_rule",
]
