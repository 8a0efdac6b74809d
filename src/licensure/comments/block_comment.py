# SPDX-License-Identifier: MPL-2.0
"""Block comments delimited by start and end markers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..utils import fill
from .line_comment import LineComment


@dataclass(frozen=True)
class BlockComment:
    """Wrap the header between ``start`` and ``end``.

    When ``per_line`` is set each line inside the block is additionally
    prefixed, e.g. the `` * `` column of a C style comment.
    """

    start: str
    end: str
    per_line: Optional[LineComment] = None
    trailing_lines: int = 0

    def set_trailing_lines(self, num_lines: int) -> "BlockComment":
        return BlockComment(self.start, self.end, self.per_line, num_lines)

    def with_per_line(self, per_line: str) -> "BlockComment":
        return BlockComment(
            self.start,
            self.end,
            LineComment(per_line).skip_trailing_lines(),
            self.trailing_lines,
        )

    def comment_width(self) -> int:
        if self.per_line is not None:
            return self.per_line.comment_width()
        return 0

    def comment(self, text: str, columns: Optional[int] = None) -> str:
        if self.per_line is not None:
            body = self.per_line.comment(text, columns)
        elif columns is not None:
            body = fill(text, columns)
        else:
            body = text

        return f"{self.start}{body}{self.end}" + "\n" * self.trailing_lines
