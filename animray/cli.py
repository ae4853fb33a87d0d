"""Command line switches shared by the rendering programs."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Any, Sequence

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, or 0 if there is none."""
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    """Parse the number at the start of ``text``, or 0.0 if there is none."""
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


class Arguments:
    """Switches given as ``-x value`` pairs, plus the common image settings.

    ``argv`` holds the arguments after the program name; when ``None`` they
    are taken from ``sys.argv``. Only the first character after ``-`` names
    a switch. An argument starting with ``-`` followed by a digit is a value.
    ``-o``, ``-w`` and ``-h`` set the output file name, width and height.
    """

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        output_filename: str | Path = "out.tga",
        width: int = 0,
        height: int = 0,
    ) -> None:
        if argv is None:
            argv = sys.argv[1:]
        self.output_filename = Path(output_filename)
        self.width = width
        self.height = height
        self.switches: dict[str, str | None] = {}

        option: str | None = None
        for arg in argv:
            if arg.startswith("-") and not arg[1:2].isdigit():
                if len(arg) < 2:
                    raise ValueError("No option specified after switch character")
                option = arg[1]
                self.switches[option] = None
            elif option is not None:
                self.switches[option] = arg
                option = None
            else:
                raise ValueError("All arguments are switches")

        if "o" in self.switches:
            self.output_filename = Path(self._value("o"))
        if "w" in self.switches:
            self.width = _leading_int(self._value("w"))
        if "h" in self.switches:
            self.height = _leading_int(self._value("h"))

    def _value(self, option: str) -> str:
        value = self.switches[option]
        if value is None:
            raise ValueError(f"Switch -{option} needs a value")
        return value

    def switch_value(self, option: str, default: Any) -> Any:
        """Return the switch's value parsed like ``default``, else ``default``."""
        if option not in self.switches:
            return default
        text = self._value(option)
        if isinstance(default, float):
            return _leading_float(text)
        return _leading_int(text)