#!/usr/bin/env python3
"""
Monitoring plugin counting open files reported by fstat(1).

Runs fstat, optionally keeps only the open files matching one key:value
filter, and compares the count against warning and critical ranges.

Exit codes:
    0: OK
    1: WARNING threshold exceeded
    2: CRITICAL threshold exceeded
    3: UNKNOWN - bad options, fstat unavailable or failing, timeout
"""

import argparse
import sys

from fstatcheck import __version__
from fstatcheck.core.config import load_config
from fstatcheck.core.context import Context
from fstatcheck.core.errors import CheckError, UsageError
from fstatcheck.core.filters import FilterExpression, count_matches, matching_records, validate_filter
from fstatcheck.core.logging import ScriptLogger
from fstatcheck.core.output import MAX_DETAIL_LINES, Output
from fstatcheck.core.registry import FSTAT_FIELDS, FilterRegistry
from fstatcheck.core.report import StatusResult, build_report, unknown_result
from fstatcheck.core.table import OpenFileRecord, parse_table
from fstatcheck.core.thresholds import Thresholds
from fstatcheck.lib.process import DEFAULT_COMMAND, DEFAULT_TIMEOUT, take_snapshot

SCRIPT_NAME = "check_fstat"


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser reporting usage errors as UNKNOWN instead of exiting 2."""

    def error(self, message: str):
        raise UsageError(message)


def create_parser(registry: FilterRegistry = FSTAT_FIELDS) -> ArgumentParser:
    """Create the argument parser."""
    parser = ArgumentParser(
        prog=SCRIPT_NAME,
        description="Count open files reported by fstat and check them against thresholds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -w 800 -c 1000                 All open files
  %(prog)s -w 50 -c 100 -f user:www       Open files held by user www
  %(prog)s -w 10 -c 20 -f mode:w          Files open for writing only
  %(prog)s -w 1: -c 0: -f process:nginx   Warn if nginx holds no files

Exit codes:
  0 - OK
  1 - WARNING
  2 - CRITICAL
  3 - UNKNOWN
""",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{SCRIPT_NAME} {__version__}",
    )
    parser.add_argument(
        "-w",
        "--warning",
        metavar="RANGE",
        help="Warning threshold range for the open file count",
    )
    parser.add_argument(
        "-c",
        "--critical",
        metavar="RANGE",
        help="Critical threshold range for the open file count",
    )
    parser.add_argument(
        "-f",
        "--filter",
        metavar="KEY:VALUE",
        help=f"Only count open files matching KEY:VALUE. Available filters: {registry.describe_available()}",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=int,
        metavar="SECONDS",
        help=f"Seconds before fstat is killed (default: {DEFAULT_TIMEOUT})",
    )
    parser.add_argument(
        "-C",
        "--command",
        metavar="PATH",
        help=f"Path of the fstat binary (default: {DEFAULT_COMMAND})",
    )
    parser.add_argument(
        "--format",
        choices=["plain", "json"],
        default="plain",
        help="Output format (default: plain)",
    )
    parser.add_argument(
        "--log-dir",
        metavar="DIR",
        help="Append a JSONL run log under DIR",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show match totals; repeat to list matching open files",
    )
    return parser


def resolve_options(opts: argparse.Namespace, config: dict) -> argparse.Namespace:
    """
    Fill unset options from config and defaults, then validate them.

    Raises:
        UsageError: If thresholds are missing or the timeout is invalid
    """
    for key in ("warning", "critical", "command", "timeout", "log_dir"):
        if getattr(opts, key) is None and key in config:
            setattr(opts, key, config[key])

    if opts.command is None:
        opts.command = DEFAULT_COMMAND
    if opts.timeout is None:
        opts.timeout = DEFAULT_TIMEOUT

    if opts.warning is None:
        raise UsageError("Warning threshold (-w) is required")
    if opts.critical is None:
        raise UsageError("Critical threshold (-c) is required")
    opts.warning = str(opts.warning)
    opts.critical = str(opts.critical)

    try:
        opts.timeout = int(opts.timeout)
    except (TypeError, ValueError):
        raise UsageError(f"Invalid timeout: {opts.timeout}")
    if opts.timeout <= 0:
        raise UsageError("Timeout must be a positive number of seconds")

    return opts


def format_record(record: OpenFileRecord) -> str:
    """One open file as label=value pairs, skipping empty columns."""
    return " ".join(f"{label}={value}" for label, value in record.items() if value)


def describe_matches(
    records: list[OpenFileRecord],
    expression: FilterExpression | None,
    count: int,
    verbose: int,
) -> list[str]:
    """Long output lines for the requested verbosity."""
    details = []
    if verbose >= 1:
        details.append(f"Matched {count} of {len(records)} open files")
    if verbose >= 2:
        matches = matching_records(records, expression)
        details.extend(format_record(record) for record in matches[:MAX_DETAIL_LINES])
    return details


def evaluate(
    opts: argparse.Namespace,
    context: Context,
    logger: ScriptLogger,
    registry: FilterRegistry = FSTAT_FIELDS,
) -> StatusResult:
    """
    Run the check pipeline: validate, snapshot, parse, count, classify.

    Raises:
        CheckError: On any condition that makes the result UNKNOWN
    """
    thresholds = Thresholds.parse(opts.warning, opts.critical)
    expression = validate_filter(opts.filter, registry)

    logger.debug("Running snapshot command", command=opts.command, timeout=opts.timeout)
    raw_text = take_snapshot(opts.command, context, opts.timeout)
    records = parse_table(raw_text)

    count = count_matches(records, expression)
    result = build_report(count, thresholds, expression)
    result.details = describe_matches(records, expression, count, opts.verbose)

    logger.info(
        "Check finished",
        status=result.status.name,
        records=len(records),
        matches=count,
        filter=opts.filter,
    )
    return result


def run(args: list[str], output: Output, context: Context) -> int:
    """
    Main entry point.

    Args:
        args: Command-line arguments
        output: Output helper
        context: Execution context

    Returns:
        Plugin exit code: 0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN
    """
    logger = ScriptLogger(SCRIPT_NAME)
    fmt = "plain"

    try:
        opts = create_parser().parse_args(args)
        fmt = opts.format
        opts = resolve_options(opts, load_config())
        logger = ScriptLogger.for_dir(SCRIPT_NAME, opts.log_dir)
        result = evaluate(opts, context, logger)
    except CheckError as e:
        output.error(str(e))
        logger.error(str(e), error=type(e).__name__)
        result = unknown_result(str(e))
    finally:
        logger.close()

    output.emit(result)
    output.render(fmt)
    return result.exit_code


def main() -> None:
    sys.exit(run(sys.argv[1:], Output(), Context()))


if __name__ == "__main__":
    main()
