# SPDX-License-Identifier: MPL-2.0
"""Line comments: every line of the header gets the same prefix."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..utils import fill


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    # A trailing newline terminates the last line rather than opening a new one.
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


@dataclass(frozen=True)
class LineComment:
    """Prefix each line with ``character`` (``#``, ``//``, ``;;;`` ...)."""

    character: str
    trailing_lines: int = 0

    def set_trailing_lines(self, num_lines: int) -> "LineComment":
        return LineComment(self.character, num_lines)

    def skip_trailing_lines(self) -> "LineComment":
        return LineComment(self.character, 0)

    def comment_width(self) -> int:
        return len(self.character) + 1

    def comment(self, text: str, columns: Optional[int] = None) -> str:
        if columns is not None:
            # Leave room for the comment character and its separating space.
            width = self.comment_width()
            text = fill(text, columns - width if columns > width else columns)

        parts = []
        for line in _split_lines(text):
            if line:
                parts.append(f"{self.character} {line}\n")
            else:
                parts.append(f"{self.character}\n")

        parts.append("\n" * self.trailing_lines)
        return "".join(parts)
