# printing/normalizer.py
# This file is part of Redprint - Erlang trace message printing
#
# Conversion of raw tracer tuples into typed trace events

"""Translate raw tracer messages into typed event records.

The tracer reports every event as a 4-tuple ``(tag, payload, origin, time)``:

    ("call", ((m, f, args), dump), origin, (h, m, s, us))
    ("retn", ((m, f, arity), return_value), origin, time)
    ("send", (message, target), origin, time)
    ("recv", message, target, time)

`origin` and `target` are either a ``(pid, signature)`` pair or a bare atom
or list standing in for the signature when the process is unknown.

Anything that does not have one of these shapes is returned unchanged, so
the normalizer can be fed every message the tracer produces.
"""

from typing import Any, Callable, Dict, Optional, Tuple

from model.events import CallEvent, ReceiveEvent, ReturnEvent, SendEvent
from model.signature import Signature
from model.timestamp import Timestamp
from utils.logger import get_logger


def from_raw(message: Any) -> Any:
    """Translate a raw tracer message into a typed event record.

    Args:
        message: Raw message as emitted by the tracer

    Returns:
        CallEvent, ReturnEvent, SendEvent or ReceiveEvent; `message` itself
        when it is not a recognised trace message

    Example:
        >>> event = from_raw(("recv", "ping", "server", (1, 2, 3, 0)))
        >>> # ReceiveEvent with to_pid None and to_signature "server"
    """
    event = None
    if isinstance(message, tuple) and len(message) == 4:
        tag, payload, origin, raw_time = message
        builder = _BUILDERS.get(tag) if isinstance(tag, str) else None
        time = Timestamp.from_raw(raw_time)
        if builder is not None and time is not None:
            event = builder(payload, origin, time)

    if event is None:
        get_logger().message_passed_through(message)
        return message
    return event


def split_pid_signature(value: Any) -> Tuple[Any, Any]:
    """Split an origin/target into ``(pid, signature)``.

    A 2-tuple is a ``(pid, signature)`` pair; any other value is a bare
    signature with no known pid.
    """
    if isinstance(value, tuple) and len(value) == 2:
        pid, signature = value
        return pid, Signature.from_raw(signature)
    return None, Signature.from_raw(value)


def _payload_pair(payload: Any) -> Optional[Tuple[Any, Any]]:
    if isinstance(payload, tuple) and len(payload) == 2:
        return payload
    return None


def _decode_dump(dump: Any) -> Optional[str]:
    if isinstance(dump, (bytes, bytearray)):
        return bytes(dump).decode("utf-8", errors="replace")
    if isinstance(dump, str):
        return dump
    # anything else carries no stack text
    return None


def _call(payload: Any, origin: Any, time: Timestamp) -> Optional[CallEvent]:
    pair = _payload_pair(payload)
    if pair is None:
        return None
    mfa, dump = pair
    from_pid, from_signature = split_pid_signature(origin)
    return CallEvent(
        signature=Signature.from_raw(mfa),
        dump=_decode_dump(dump),
        from_pid=from_pid,
        from_signature=from_signature,
        time=time,
    )


def _retn(payload: Any, origin: Any, time: Timestamp) -> Optional[ReturnEvent]:
    pair = _payload_pair(payload)
    if pair is None:
        return None
    mfa, return_value = pair
    from_pid, from_signature = split_pid_signature(origin)
    return ReturnEvent(
        signature=Signature.from_raw(mfa),
        return_value=return_value,
        from_pid=from_pid,
        from_signature=from_signature,
        time=time,
    )


def _send(payload: Any, origin: Any, time: Timestamp) -> Optional[SendEvent]:
    pair = _payload_pair(payload)
    if pair is None:
        return None
    message, target = pair
    to_pid, to_signature = split_pid_signature(target)
    from_pid, from_signature = split_pid_signature(origin)
    return SendEvent(
        message=message,
        to_pid=to_pid,
        to_signature=to_signature,
        from_pid=from_pid,
        from_signature=from_signature,
        time=time,
    )


def _recv(message: Any, target: Any, time: Timestamp) -> ReceiveEvent:
    to_pid, to_signature = split_pid_signature(target)
    return ReceiveEvent(
        message=message, to_pid=to_pid, to_signature=to_signature, time=time
    )


_BUILDERS: Dict[str, Callable[[Any, Any, Timestamp], Any]] = {
    "call": _call,
    "retn": _retn,
    "send": _send,
    "recv": _recv,
}
