"""Small general-purpose helpers: byte order, time strings, whitespace and pausing."""

from __future__ import annotations

import sys
import time

PAUSE_MESSAGE = "Press any key to continue . . ."

# Status codes used by the lower-level helpers when describing failures.
RT_OK = 0
RT_EB = -1
RT_EP = -2
RT_EM = -3
RT_EC = -4
RT_EF = -5


def is_big_endian() -> bool:
    """Return True when the running machine stores integers big-endian."""
    return sys.byteorder == "big"


def current_times() -> str:
    """Return the local time formatted as ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


def is_space(char: str) -> bool:
    """Return True for a space or any character from tab to carriage return."""
    return char == " " or "\t" <= char <= "\r"


def pause(message: str = PAUSE_MESSAGE) -> str:
    """Print ``message`` and wait for a line of input; return what was read."""
    sys.stdout.write(message)
    sys.stdout.flush()
    return sys.stdin.readline()