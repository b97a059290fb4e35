"""Errors raised while reading and parsing the interrupt report."""


class IrqStatsError(Exception):
    """Base class for all irqstats failures."""

    pass


class SourceUnavailable(IrqStatsError):
    """The interrupt report could not be opened or read."""

    pass


class ParseError(IrqStatsError):
    """
    The interrupt report could not be parsed.

    Any parse error aborts the whole read; no partial records are returned.
    """

    def __init__(self, message: str, line_num: int | None = None):
        super().__init__(message)
        self.line_num = line_num


class LineTooLong(ParseError):
    """A line was not newline-terminated within MAX_LINE."""

    pass


class MalformedHeader(ParseError):
    """The first line is not a list of CPU columns."""

    pass


class MalformedRowName(ParseError):
    """A row does not start with a non-empty 'label:' field."""

    pass


class NoCounters(ParseError):
    """A row has a label but no counter fields."""

    pass


class GarbageWhereCounterExpected(ParseError):
    """The first field after the label is not a counter."""

    pass
