# SPDX-License-Identifier: MPL-2.0
"""Comment formatters turning plain header text into language comments."""
from __future__ import annotations

from typing import Optional, Protocol

from .block_comment import BlockComment
from .line_comment import LineComment

__all__ = ["BlockComment", "Commenter", "LineComment"]


class Commenter(Protocol):
    """Anything able to comment a block of text for a file type."""

    def comment(self, text: str, columns: Optional[int] = None) -> str:
        ...

    def comment_width(self) -> int:
        ...
