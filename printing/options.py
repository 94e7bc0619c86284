# printing/options.py
# This file is part of Redprint - Erlang trace message printing
#
# Formatting options shared by every representer

"""Formatting options for trace message representation.

Callers may hand options over as a ready `FormatOptions`, as any mapping of
option names to values, or not at all. Names the options do not recognise
are ignored so that callers can pass extra settings through untouched.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Mapping, Union

from utils.logger import get_logger


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Recognised formatting options.

    Attributes:
        print_msec: Append milliseconds (``.mmm``) to timestamps. Default False.
    """

    print_msec: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> FormatOptions:
        """Build options from a mapping, ignoring unrecognised names.

        Flag values are read as booleans; the strings "false", "no", "off",
        "0" and "" (in any case) count as False.
        """
        known = {f.name for f in fields(cls)}
        unknown = [key for key in options if key not in known]
        if unknown:
            get_logger().options_ignored(unknown)
        return cls(**{name: as_flag(options[name]) for name in known if name in options})


_FALSE_WORDS = {"false", "no", "off", "0", ""}


def as_flag(value: Any) -> bool:
    """Read an option value as a boolean."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_WORDS
    return bool(value)


OptionsLike = Union[FormatOptions, Mapping[str, Any], None]


def coerce_options(options: OptionsLike = None) -> FormatOptions:
    """Return `options` as a FormatOptions instance."""
    if options is None:
        return FormatOptions()
    if isinstance(options, FormatOptions):
        return options
    return FormatOptions.from_mapping(options)
