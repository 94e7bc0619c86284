# model/signature.py

"""
Signature
=========

A call site as reported by the tracer: ``{Module, Function, ArgsOrArity}``.
`ArgsOrArity` is the argument list when the tracer captured the call's
arguments and an integer arity otherwise.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Sequence, Union


@dataclass(frozen=True, slots=True)
class Signature:
    module: str
    function: str
    args_or_arity: Union[Sequence[Any], int]

    @classmethod
    def from_raw(cls, raw: Any) -> Any:
        """
        Convert a raw ``(module, function, args_or_arity)`` tuple.
        Bare atoms, lists and any other shape are returned as-is.
        """
        if isinstance(raw, tuple) and len(raw) == 3:
            module, function, args_or_arity = raw
            return cls(module, function, args_or_arity)
        return raw

    @property
    def has_args(self) -> bool:
        return isinstance(self.args_or_arity, (list, tuple))
