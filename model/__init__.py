# model/__init__.py

"""
Domain objects for tracer messages: Erlang term stand-ins, call
signatures, timestamps and the four typed trace events. These types carry
no rendering logic.
"""

from .terms import Atom, Pid
from .signature import Signature
from .timestamp import Timestamp
from .events import (
    CallEvent,
    ReturnEvent,
    SendEvent,
    ReceiveEvent,
)

__all__ = [
    "Atom",
    "Pid",
    "Signature",
    "Timestamp",
    "CallEvent",
    "ReturnEvent",
    "SendEvent",
    "ReceiveEvent",
]
