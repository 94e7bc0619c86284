# printing/timestamp.py
# This file is part of Redprint - Erlang trace message printing
#
# Timestamp rendering

from model.timestamp import Timestamp
from .options import FormatOptions


def represent_timestamp(time: Timestamp, options: FormatOptions) -> str:
    """Render `time` as ``HH:MM:SS``, or ``HH:MM:SS.mmm`` with `print_msec`."""
    clock = f"{time.hours:02d}:{time.minutes:02d}:{time.seconds:02d}"
    if options.print_msec:
        return f"{clock}.{time.milliseconds:03d}"
    return clock
