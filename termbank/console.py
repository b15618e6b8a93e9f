"""Terminal input and output helpers."""

from __future__ import annotations

import re
import sys

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def clear_screen() -> None:
    """Clear the terminal and move the cursor to the top left."""
    sys.stdout.write("\x1b[2J\x1b[1;1H")
    sys.stdout.flush()


def get_input_string(prompt: str) -> str:
    """Show ``prompt`` and return the next input line, trimmed.

    Raises EOFError when input is exhausted.
    """
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no more input")
    return line.strip()


def get_input_int(prompt: str) -> int | None:
    """Read an unsigned 32-bit integer, or None if the input is not one."""
    text = get_input_string(prompt)
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def get_input_float(prompt: str) -> float | None:
    """Read a floating-point number, or None if the input is not one."""
    text = get_input_string(prompt)
    if not text or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def press_enter_to_continue() -> None:
    """Wait until the user presses Enter."""
    print("Press Enter to continue ...")
    sys.stdin.readline()