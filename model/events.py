# model/events.py

"""
Trace events
============

Typed records for the four message kinds the tracer emits. Each record is
built once from a raw message by the normalizer and consumed once by a
representer. Signature fields hold either a `Signature` or the opaque atom
or list the tracer reported in its place.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Union

from .signature import Signature
from .timestamp import Timestamp

SignatureLike = Union[Signature, Any]


@dataclass(frozen=True, slots=True)
class CallEvent:
    signature: SignatureLike
    dump: Optional[str]
    from_pid: Any
    from_signature: SignatureLike
    time: Timestamp


@dataclass(frozen=True, slots=True)
class ReturnEvent:
    signature: SignatureLike
    return_value: Any
    from_pid: Any
    from_signature: SignatureLike
    time: Timestamp


@dataclass(frozen=True, slots=True)
class SendEvent:
    message: Any
    to_pid: Any
    to_signature: SignatureLike
    from_pid: Any
    from_signature: SignatureLike
    time: Timestamp


@dataclass(frozen=True, slots=True)
class ReceiveEvent:
    message: Any
    to_pid: Any
    to_signature: SignatureLike
    time: Timestamp
