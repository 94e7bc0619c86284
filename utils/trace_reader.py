# utils/trace_reader.py
# This file is part of Redprint - Erlang trace message printing
#
# Reader for recorded tracer messages stored as Erlang term text

from pathlib import Path
from typing import Any, List

from parser import ParseError, parse_terms
from utils.logger import get_logger


class TraceFormatError(Exception):
    """Exception raised when trace files contain invalid format or data."""

    pass


def read_trace(filepath: str) -> List[Any]:
    """Read recorded tracer messages from a term file.

    Each message is one dot-terminated Erlang term, as written by
    ``io:format("~p.~n", [Msg])`` and read back by ``file:consult/1``.
    Lines starting with ``%`` are comments.

    Expected format:
        % recorded with redbug
        {call,{{'Elixir.Foo',bar,[1,2]},<<>>},{<0.150.0>,{erlang,apply,2}},{12,4,59,120}}.
        {retn,{{'Elixir.Foo',bar,2},3},{<0.150.0>,{erlang,apply,2}},{12,4,59,130}}.

    Args:
        filepath: Path to the trace file

    Returns:
        Raw messages in file order; the whole file is parsed up front

    Raises:
        TraceFormatError: If the file is missing or its terms cannot be parsed
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise TraceFormatError(f"Trace file not found: {filepath}")

    logger.debug(f"Reading trace file: {filepath}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TraceFormatError(f"Cannot read trace file {filepath}: {e}") from e

    try:
        messages = parse_terms(text)
    except ParseError as e:
        raise TraceFormatError(f"Error parsing {filepath}: {e}") from e

    logger.debug(f"Parsed {len(messages)} message(s) from {filepath}")
    return messages


def validate_trace_file(filepath: str) -> int:
    """Validate trace file format by parsing every message in it.

    Args:
        filepath: Path to the trace file to validate

    Returns:
        Number of messages in the file

    Raises:
        TraceFormatError: If validation fails
    """
    logger = get_logger()
    logger.debug(f"Validating trace file: {filepath}")

    try:
        count = len(read_trace(filepath))
    except TraceFormatError as e:
        logger.debug(f"Trace validation failed: {e}")
        raise

    logger.debug(f"Trace validation successful: {count} messages")
    return count
