# printing/stack.py
# This file is part of Redprint - Erlang trace message printing
#
# Call stack extraction from raw process dumps

"""Decode call stacks from the process dump attached to call events.

The dump is only populated when the trace pattern asked for the stack; it
is the raw text of the process' stack, one entry per line. Only the lines
carrying a return address or the continuation pointer name a function:

    0x00007f3c1b2c3d48 Return addr 0x00007f3c1a2b3c40 (lists:foldl/3 + 64)
    CP: 0x00007f3c1a2b3c40 ('Elixir.Enum':'-map/2-lists^map/1-0-'/2 + 104)

Each such line is decoded into ``module.function/arity`` using the same
module display rule as signatures. Lines that do not fit the frame pattern
are dropped.
"""

import re
from typing import List, Optional

from utils.logger import get_logger
from .signature import translate_module

# Frame lines are recognised by a literal marker anywhere in the line.
_FRAME_MARKER = re.compile(r"Return addr 0x|CP: 0x")

# Last parenthesised group: (module:function/arity[suffix]) at end of line.
# The arity is a whole digit run; any suffix (usually " + offset") must
# start with a non-digit.
_FRAME = re.compile(r"^.+\((.+):(.+)/(\d+)(?:\D.*)?\)$")


def extract_stack(dump: Optional[str]) -> List[str]:
    """Extract simplified function signatures from a raw stack dump.

    Args:
        dump: Raw dump text, or None when no stack was captured

    Returns:
        Decoded frames in dump order; empty for an empty or absent dump

    Example:
        >>> extract_stack("0x01 Return addr 0x02 (foo:bar/1 + 16)")
        [':foo.bar/1']
    """
    if not dump:
        return []

    frames = []
    for line in dump.split("\n"):
        if not _FRAME_MARKER.search(line):
            continue
        frame = extract_function(line)
        if frame is None:
            get_logger().stack_line_dropped(line)
            continue
        frames.append(frame)
    return frames


def extract_function(line: str) -> Optional[str]:
    """Decode one frame line, or return None if it does not match."""
    match = _FRAME.match(line)
    if match is None:
        return None

    module, function, arity = match.groups()
    module = translate_module(_strip_single_quotes(module))
    function = _strip_single_quotes(function)
    return f"{module}.{function}/{arity}"


def _strip_single_quotes(text: str) -> str:
    return text.strip("'")
