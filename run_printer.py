#!/usr/bin/env python3
# run_printer.py
# This file is part of Redprint - Erlang trace message printing
#
# Command-line interface for printing recorded tracer messages

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from printing import FormatOptions, print_with_opts
from utils.trace_reader import read_trace, validate_trace_file, TraceFormatError
from utils.logger import configure_logging, get_logger


def print_trace(trace_path: str, options: FormatOptions) -> int:
    """Print every message of a trace file.

    Args:
        trace_path: Path to trace file
        options: Formatting options

    Returns:
        Number of messages printed
    """
    count = 0
    for message in read_trace(trace_path):
        print_with_opts(message, options)
        count += 1
    return count


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Redprint: readable reports for recorded Erlang trace messages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_printer.py -t trace.terms
  python run_printer.py -t trace.terms --msec
  python run_printer.py -t trace.terms --validate-only -v

Trace file format:
  One Erlang term per message, each terminated by '.', e.g.:

  trace.terms:
    {call,{{'Elixir.Foo',bar,[1,2]},<<>>},{<0.150.0>,{erlang,apply,2}},{12,4,59,120}}.
        """,
    )

    parser.add_argument(
        "-t", "--trace", required=True, type=Path, help="Path to trace term file"
    )

    parser.add_argument(
        "--msec", action="store_true", help="Show milliseconds in timestamps"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--validate-only", action="store_true", help="Only validate trace file format"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the trace printer.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.validate_only:
            count = validate_trace_file(str(args.trace))
            logger.info(f"✅ Trace validation successful: {count} message(s)")
            return 0

        options = FormatOptions(print_msec=args.msec)
        count = print_trace(str(args.trace), options)
        logger.trace_summary(str(args.trace), count)
        return 0

    except TraceFormatError as e:
        logger.error(f"Trace file error: {e}")
        return 1

    except KeyboardInterrupt:
        logger.error("Printing interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
