# model/timestamp.py

"""
Timestamp
=========

Wall-clock time of day attached to every trace message, without a date.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class Timestamp:
    hours: int
    minutes: int
    seconds: int
    microseconds: int = 0

    @classmethod
    def from_raw(cls, raw: Any) -> Optional[Timestamp]:
        """
        Convert a raw ``(h, m, s, us)`` tuple.
        Returns None when `raw` is not four non-negative integers.
        """
        if not isinstance(raw, tuple) or len(raw) != 4:
            return None
        if not all(
            isinstance(part, int) and not isinstance(part, bool) and part >= 0
            for part in raw
        ):
            return None
        return cls(*raw)

    @property
    def milliseconds(self) -> int:
        return self.microseconds // 1000
