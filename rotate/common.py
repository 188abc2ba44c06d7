"""Shared constants, diagnostics logging and small bit utilities."""

from __future__ import annotations

import sys
import time

VERSION = "0.0.1"

UINT_MAX = 2**32 - 1
UINT_MIN = 0
EXTRA_NULL_TERMINATORS = 3

NEWLINE = "\n\r" if sys.platform.startswith("win") else "\n"

DEBUG = False

# Terminal colours
RESET = "\x1b[0m"
BOLD = "\x1b[1m"
FAINT = "\x1b[2m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
PINK = "\x1b[35m"
CYAN = "\x1b[36m"
BLACK = "\x1b[30m"
WHITE = "\x1b[37m"
DEFAULT = "\x1b[39m"
LGRAY = "\x1b[90m"
LRED = "\x1b[91m"
LGREEN = "\x1b[92m"
LYELLOW = "\x1b[93m"
LBLUE = "\x1b[94m"
LMAGENTA = "\x1b[95m"
LCYAN = "\x1b[96m"
LWHITE = "\x1b[97m"

_BYTE_MASK = 0xFF


def _log_message(level: str, color: str, message: str) -> None:
    stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    sys.stderr.write(f"[{color}{level}{RESET}] [{stamp}]: {message}\n")


def log_stage(message: str) -> None:
    """Report the compilation stage at which a failure happened."""
    _log_message("STAGE", LRED + BOLD, message)


def log_error(message: str) -> None:
    """Write an error line to standard error."""
    _log_message("ERROR", LRED + BOLD, message)


def log_warn(message: str) -> None:
    """Write a warning line to standard error."""
    _log_message("WARN", LYELLOW + BOLD, message)


def log_info(message: str) -> None:
    """Write an informational line to standard error."""
    _log_message("INFO", LGREEN + BOLD, message)


def log_debug(message: str) -> None:
    """Write a debug line to standard error when debugging is enabled."""
    if DEBUG:
        _log_message("DEBUG", LYELLOW + BOLD, message)


def log_unknown_flag(flag: str) -> None:
    """Warn that a command-line flag was not recognised and is ignored."""
    sys.stderr.write(f"[{LYELLOW}WARN{RESET}] : Ignored flag: `{flag}`\n")


def digits_from_number(num: int) -> int:
    """Return the number of decimal digits of a non-negative integer."""
    if num < 0:
        raise ValueError("number must not be negative")
    return len(str(num))


def bit_set(field: int, n: int) -> int:
    """Set bit ``n`` of an 8-bit field; positions past the byte are ignored."""
    return (field | ((1 << n) & _BYTE_MASK)) & _BYTE_MASK


def bit_clear(field: int, n: int) -> int:
    """Clear bit ``n`` of an 8-bit field; positions past the byte are ignored."""
    return (field & ~((1 << n) & _BYTE_MASK)) & _BYTE_MASK


def bit_is_set(field: int, n: int) -> int:
    """Return 1 when bit ``n`` of the field is set, otherwise 0."""
    return (field >> n) & 1