# SPDX-License-Identifier: MPL-2.0
"""Text helpers used when rendering and commenting license headers."""
from __future__ import annotations

import re
import textwrap

_WRAPPED_NEWLINE_RE = re.compile(r"(.)\n")


def remove_column_wrapping(text: str) -> str:
    """Undo hard column wrapping while keeping blank lines.

    A newline preceded by any other character becomes a space. A blank line
    leaves ``" \\n"`` behind, which is turned back into a paragraph break.
    """
    return _WRAPPED_NEWLINE_RE.sub(r"\1 ", text).replace(" \n", "\n\n")


def fill(text: str, width: int) -> str:
    """Wrap every line of ``text`` to ``width`` columns independently.

    Unlike :func:`textwrap.fill` existing line breaks are kept, so blank
    lines between paragraphs survive wrapping.
    """
    wrapper = textwrap.TextWrapper(width=max(width, 1))
    return "\n".join(wrapper.fill(line) for line in text.split("\n"))
