"""
Munin plugin for individual interrupt counters.

Usage: irqstats [autoconf|config|fetch]

Exit codes:
    0: Success
    1: Report unreadable, no interrupts found, malformed report or usage error
"""

import argparse
import sys

from irqstats.core.config import ConfigError, load_settings
from irqstats.core.context import Context
from irqstats.core.errors import IrqStatsError
from irqstats.core.logging import PluginLogger
from irqstats.core.munin import autoconf, render_config, render_fetch
from irqstats.core.output import Output
from irqstats.core.parser import read_interrupts


MODES = ("autoconf", "config", "fetch")

DEFAULT_MODE = "fetch"


class UsageError(Exception):
    """Bad command-line arguments."""

    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = _ArgumentParser(
        prog="irqstats",
        description="Munin plugin for individual interrupt counters",
        add_help=False,
    )
    parser.add_argument(
        "mode",
        nargs="?",
        default=DEFAULT_MODE,
        help="One of autoconf, config, fetch (default: fetch)",
    )
    return parser


def run(args: list[str], output: Output, context: Context) -> int:
    """
    Main entry point.

    Args:
        args: Command-line arguments
        output: Output helper
        context: Execution context

    Returns:
        0 = success, 1 = failure
    """
    try:
        opts = create_parser().parse_args(args)
    except UsageError as e:
        output.error(f"invalid parameters: {e}")
        return 1

    # argparse swallows a '--' terminator; only a bare mode keyword is valid
    if args and args != [opts.mode]:
        output.error(f"invalid parameters: {' '.join(args)}")
        return 1

    if opts.mode not in MODES:
        output.error(f"invalid mode '{opts.mode}'")
        return 1

    try:
        settings = load_settings(context)
    except ConfigError as e:
        output.error(f"error: {e}")
        return 1

    logger = PluginLogger.for_dir(settings.log_dir)
    try:
        logger.open()
    except OSError as e:
        output.error(f"warning: logging disabled: {e}")
        logger = PluginLogger.for_dir(None)

    with logger:
        logger.debug("start", mode=opts.mode, architecture=settings.architecture)

        if opts.mode == "autoconf":
            readable = autoconf(settings.interrupts_path, output, context)
            output.set_summary(f"mode=autoconf, readable={readable}")
            logger.info(output.summary, readable=readable, path=settings.interrupts_path)
            return 0 if readable else 1

        try:
            records = read_interrupts(
                include_description=opts.mode == "config",
                context=context,
                path=settings.interrupts_path,
                rules=settings.rules(),
                max_irqs=settings.max_irqs,
            )
        except IrqStatsError as e:
            logger.error(str(e), mode=opts.mode, error=type(e).__name__)
            output.error(f"error: {e}")
            records = []

        if not records:
            logger.warning("no interrupts found", mode=opts.mode)
            output.error("no interrupts found")
            return 1

        if opts.mode == "config":
            render_config(records, output)
        else:
            render_fetch(records, output)

        output.set_summary(f"mode={opts.mode}, interrupts={len(records)}")
        logger.info(output.summary, mode=opts.mode, interrupts=len(records))

    return 0


def main(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    output = Output()
    result = run(sys.argv[1:] if argv is None else argv, output, Context())
    output.render()
    return result


if __name__ == "__main__":
    sys.exit(main())
