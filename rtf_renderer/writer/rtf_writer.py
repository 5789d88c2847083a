"""Serialise control words and text into RTF markup."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

ControlArgument = Union[str, int]


@dataclass(frozen=True, slots=True)
class ControlWord:
    """A single control word command as issued by a renderer."""

    name: str
    argument: Optional[ControlArgument] = None
    emphasize: bool = False

    def to_rtf(self) -> str:
        prefix = "\\*" if self.emphasize else ""
        argument = "" if self.argument is None else str(self.argument)
        return f"{prefix}\\{self.name}{argument}"


class RtfWriter:
    """Accumulates RTF output in call order.

    Besides the serialised text, every control word is kept as a
    :class:`ControlWord` so callers can inspect what was issued.
    """

    def __init__(self) -> None:
        self._parts: List[str] = []
        self._commands: List[ControlWord] = []
        self._last_was_control = False

    @property
    def commands(self) -> List[ControlWord]:
        return list(self._commands)

    def write_control(
        self, name: str, argument: Optional[ControlArgument] = None, with_star: bool = False
    ) -> None:
        command = ControlWord(name, argument, with_star)
        self._commands.append(command)
        self._parts.append(command.to_rtf())
        self._last_was_control = True

    def write_text(self, text: str) -> None:
        """Write escaped text, separated from a preceding control word."""
        if not text:
            return
        if self._last_was_control:
            self._parts.append(" ")
        self._parts.append(escape_text(text))
        self._last_was_control = False

    def write_raw(self, markup: str) -> None:
        """Write pre-formatted markup without escaping."""
        self._parts.append(markup)
        self._last_was_control = False

    def start_content(self) -> None:
        self._parts.append("{")
        self._last_was_control = False

    def end_content(self) -> None:
        self._parts.append("}")
        self._last_was_control = False

    def getvalue(self) -> str:
        return "".join(self._parts)


def escape_text(text: str) -> str:
    """Escape RTF special characters; non-ASCII becomes ``\\uN?``."""
    escaped: List[str] = []
    for char in text:
        code = ord(char)
        if char in "\\{}":
            escaped.append("\\" + char)
        elif char == "\n":
            escaped.append("\\line ")
        elif char == "\t":
            escaped.append("\\tab ")
        elif code > 127:
            if code > 0xFFFF:
                # Astral characters are written as a UTF-16 surrogate pair.
                code -= 0x10000
                units = (0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF))
            else:
                units = (code,)
            for unit in units:
                signed = unit - 0x10000 if unit > 0x7FFF else unit
                escaped.append(f"\\u{signed}?")
        else:
            escaped.append(char)
    return "".join(escaped)
