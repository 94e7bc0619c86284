# printing/__init__.py
# This file is part of Redprint - Erlang trace message printing
#
# Public API for formatting and printing trace messages

"""Formatting of Erlang tracer messages into readable text blocks.

The printing pipeline normalizes a raw tracer tuple into a typed event
record and renders that record as a short ``#``-prefixed report:

    # 12:04:59 #PID<0.150.0> :proc_lib.init_p_do_apply/3
    # Foo.bar(1, 2)

Rendering is free of side effects; only `print_event` and
`print_with_opts` write to a stream.

Core Functions:
    format_event: Normalize and render a raw message
    print_event: Write a formatted message to stdout
    print_with_opts: Write a formatted message with explicit options
    from_raw: Translate a raw message into a typed event
    represent: Render a typed event
    extract_stack: Decode the call stack of a call event's dump

Example:
    >>> from printing import format_event
    >>> text = format_event(
    ...     ("retn", (("Elixir.Foo", "bar", 2), 3), "shell", (9, 5, 0, 0))
    ... )
    >>> # Header "# 09:05:00 nil ..." followed by "# Foo.bar/2 -> 3"
"""

import sys
from typing import Any, Optional, TextIO

from .normalizer import from_raw
from .options import FormatOptions, OptionsLike, coerce_options
from .representers import represent
from .signature import represent_signature
from .stack import extract_stack
from .timestamp import represent_timestamp
from .inspector import inspect_term


def format_event(message: Any, options: OptionsLike = None) -> str:
    """Normalize and render a raw tracer message.

    Args:
        message: Raw message as emitted by the tracer
        options: FormatOptions, a mapping of option names, or None

    Returns:
        Text block without a trailing newline
    """
    return represent(from_raw(message), coerce_options(options))


def print_with_opts(
    message: Any, options: OptionsLike, stream: Optional[TextIO] = None
) -> None:
    """Write a formatted message, preceded by a blank line, to `stream`."""
    out = stream if stream is not None else sys.stdout
    print("\n" + format_event(message, options), file=out)


def print_event(message: Any, stream: Optional[TextIO] = None) -> None:
    """Write a formatted message using default options."""
    print_with_opts(message, None, stream)


__all__ = [
    "format_event",
    "print_event",
    "print_with_opts",
    "from_raw",
    "represent",
    "represent_signature",
    "represent_timestamp",
    "extract_stack",
    "inspect_term",
    "FormatOptions",
]
