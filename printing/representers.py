# printing/representers.py
# This file is part of Redprint - Erlang trace message printing
#
# Text representation of typed trace events

"""Render typed trace events as ``#``-prefixed text blocks.

Every block starts with a header line carrying the timestamp and the
process the event is attributed to, followed by a line describing the
event itself. Call events may add one indented line per stack frame.
Blocks never end with a newline.
"""

from typing import Any, Callable, Dict

from model.events import CallEvent, ReceiveEvent, ReturnEvent, SendEvent
from .inspector import inspect_term
from .options import FormatOptions
from .signature import represent_signature
from .stack import extract_stack
from .timestamp import represent_timestamp


def represent_call(event: CallEvent, options: FormatOptions) -> str:
    ts = represent_timestamp(event.time, options)
    pid = inspect_term(event.from_pid)
    from_signature = represent_signature(event.from_signature, options)
    signature = represent_signature(event.signature, options)
    stack = "".join(f"\n#   {frame}" for frame in extract_stack(event.dump))

    return f"# {ts} {pid} {from_signature}\n# {signature}{stack}"


def represent_return(event: ReturnEvent, options: FormatOptions) -> str:
    ts = represent_timestamp(event.time, options)
    pid = inspect_term(event.from_pid)
    from_signature = represent_signature(event.from_signature, options)
    signature = represent_signature(event.signature, options)
    return_value = inspect_term(event.return_value)

    return f"# {ts} {pid} {from_signature}\n# {signature} -> {return_value}"


def represent_send(event: SendEvent, options: FormatOptions) -> str:
    ts = represent_timestamp(event.time, options)
    to_pid = inspect_term(event.to_pid)
    to_signature = represent_signature(event.to_signature, options)
    from_pid = inspect_term(event.from_pid)
    from_signature = represent_signature(event.from_signature, options)
    message = inspect_term(event.message)

    return (
        f"# {ts} {from_pid} {from_signature}\n"
        f"# {to_pid} {to_signature} <<< {message}"
    )


def represent_receive(event: ReceiveEvent, options: FormatOptions) -> str:
    ts = represent_timestamp(event.time, options)
    to_pid = inspect_term(event.to_pid)
    to_signature = represent_signature(event.to_signature, options)
    message = inspect_term(event.message)

    return f"# {ts} {to_pid} {to_signature}\n# <<< {message}"


_REPRESENTERS: Dict[type, Callable[[Any, FormatOptions], str]] = {
    CallEvent: represent_call,
    ReturnEvent: represent_return,
    SendEvent: represent_send,
    ReceiveEvent: represent_receive,
}


def represent(event: Any, options: FormatOptions) -> str:
    """Render a typed trace event.

    Values that are not trace events (such as messages the normalizer
    passed through) are rendered as a single inspected line.

    Args:
        event: Record produced by `from_raw`, or any pass-through value
        options: Formatting options

    Returns:
        Text block without a trailing newline
    """
    representer = _REPRESENTERS.get(type(event))
    if representer is None:
        return f"# {inspect_term(event)}"
    return representer(event, options)
