# model/terms.py

"""
Erlang terms
============

Python stand-ins for the Erlang values that have no native counterpart.
Tuples, lists, integers, floats, binaries (``bytes``) and maps (``dict``)
are carried as the matching Python types; only atoms and process
identifiers need their own classes so that they render distinctly.
"""

from __future__ import annotations
from dataclasses import dataclass


class Atom(str):
    """Erlang atom. Compares and hashes like its name."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Atom({str.__repr__(self)})"


@dataclass(frozen=True, slots=True)
class Pid:
    node: int
    number: int
    serial: int

    @classmethod
    def parse(cls, text: str) -> Pid:
        """Build a Pid from its ``<A.B.C>`` text form."""
        node, number, serial = text.strip().lstrip("<").rstrip(">").split(".")
        return cls(int(node), int(number), int(serial))

    def __str__(self) -> str:
        return f"<{self.node}.{self.number}.{self.serial}>"
