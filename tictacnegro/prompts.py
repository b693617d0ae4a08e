"""Console helpers: tolerant integer prompts and coloured glyphs."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional, TextIO

INVALID_NUMBER = "INGRESA UN NUMERO ENTERO CORRECTO"

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")

_RED = "\033[1;31m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"


def read_number(
    prompt: str = "",
    input_fn: Optional[Callable[[], str]] = None,
    output: Optional[TextIO] = None,
) -> int:
    """Prompt until a line starting with an integer is read and return it.

    Text after the integer is discarded. Blank lines are skipped silently;
    any other line without a leading integer is reported and the prompt is
    shown again. EOFError from ``input_fn`` propagates.
    """
    read = input if input_fn is None else input_fn
    out = sys.stdout if output is None else output
    out.write(prompt)
    out.flush()
    while True:
        line = read()
        if not line.strip():
            continue
        match = _LEADING_INTEGER.match(line)
        if match:
            return int(match.group(1))
        out.write(INVALID_NUMBER + "\n")
        out.write(prompt)
        out.flush()


def paint_red(char: str) -> str:
    """Return ``char`` wrapped in bold red terminal escapes."""
    return f"{_RED}{char}{_RESET}"


def paint_blue(char: str) -> str:
    """Return ``char`` wrapped in bold blue terminal escapes."""
    return f"{_BLUE}{char}{_RESET}"