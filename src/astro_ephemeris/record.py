"""Fixed-width table rows: fields joined by single blanks, trailing blanks dropped."""

from __future__ import annotations

from typing import TextIO


class Record:
    """Row buffer for ephemeris tables.

    Fields are appended one at a time and separated by a single blank. Text
    beyond ``max_length`` characters is cut off.
    """

    def __init__(self, max_length: int = 4096) -> None:
        self._fields: list[str] = []
        self._max_length = max_length

    def __len__(self) -> int:
        if not self._fields:
            return 0
        return sum(len(f) for f in self._fields) + len(self._fields) - 1

    def clear(self) -> None:
        """Drop all fields."""
        self._fields = []

    def append(self, text: str) -> None:
        """Append one field; it is truncated to fit within ``max_length``."""
        used = len(self) + (1 if self._fields else 0)
        room = self._max_length - used
        if room <= 0:
            return
        self._fields.append(text[:room])

    def line(self) -> str:
        """Return the current row without its trailing blanks."""
        return ' '.join(self._fields).rstrip()

    def write(self, stream: TextIO) -> None:
        """Write the row (if not blank) followed by a newline, then clear it."""
        text = self.line()
        if text:
            stream.write(text + '\n')
        self.clear()
