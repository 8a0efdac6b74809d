# SPDX-License-Identifier: MPL-2.0
"""License templates: placeholder substitution and outdated-header patterns."""
from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass, field, replace
from typing import List, Optional, Pattern, Tuple

from pydantic import BaseModel, Field

from .comments import Commenter
from .errors import TemplateError
from .utils import remove_column_wrapping

logger = logging.getLogger(__name__)

# Stands in for the year while rendering an outdated-header pattern. It has
# the width of a real year so wrapping is identical, and is swapped for
# YEAR_RE once the rendered header has been escaped.
INTERMEDIATE_YEAR_TOKEN = "@YR@"

# Any 4-digit year or "start, end" range.
YEAR_RE = "[0-9]{4}(, [0-9]{4})?"

DEFAULT_TOKENS = ("[year]", "[name of author]", "[ident]")
APACHE_SPDX_TOKENS = ("[yyyy]", "[name of copyright owner]", "[ident]")


class CopyrightHolder(BaseModel):
    """A single copyright holder."""

    name: str = Field(..., description="Full name or company name")
    email: Optional[str] = Field(None, description="Contact email")

    def __str__(self) -> str:
        if self.email:
            return f"{self.name} <{self.email}>"
        return self.name


@dataclass(frozen=True)
class Authors:
    """Ordered copyright holders rendered as a comma separated list."""

    holders: Tuple[CopyrightHolder, ...] = ()

    @classmethod
    def from_list(cls, holders: List[CopyrightHolder]) -> "Authors":
        return cls(tuple(holders))

    def __str__(self) -> str:
        return ", ".join(str(holder) for holder in self.holders)


def current_year() -> str:
    return str(datetime.date.today().year)


@dataclass
class Context:
    """Values substituted into a template."""

    ident: str
    authors: Authors = field(default_factory=Authors)
    end_year: Optional[str] = None
    start_year: Optional[str] = None
    unwrap_text: bool = True

    def get_authors(self) -> str:
        return str(self.authors)

    def get_year(self) -> str:
        end_year = self.end_year if self.end_year is not None else current_year()
        if self.start_year is not None and self.start_year != end_year:
            return f"{self.start_year}, {end_year}"
        return end_year


class Template:
    """A license header template bound to its rendering context."""

    def __init__(self, content: str, context: Context, spdx_template: bool = False) -> None:
        self._content = content
        self._context = context
        self._spdx_template = spdx_template

    @property
    def content(self) -> str:
        return self._content

    @property
    def context(self) -> Context:
        return self._context

    @property
    def spdx_template(self) -> bool:
        return self._spdx_template

    def set_spdx_template(self, yes_or_no: bool) -> "Template":
        return Template(self._content, self._context, yes_or_no)

    def render(self) -> str:
        return self._interpolate(self._context)

    def outdated_license_pattern(
        self, commenter: Commenter, columns: Optional[int] = None
    ) -> Pattern[str]:
        """Pattern matching this header, commented, with any year in it."""
        return self._build_year_varying_regex(commenter, columns, trim_trailing=False)

    def outdated_license_trimmed_pattern(
        self, commenter: Commenter, columns: Optional[int] = None
    ) -> Pattern[str]:
        """Like :meth:`outdated_license_pattern` without trailing whitespace."""
        return self._build_year_varying_regex(commenter, columns, trim_trailing=True)

    def replacement_tokens(self) -> Tuple[str, str, str]:
        """Return the (year, author, ident) placeholders used by this template."""
        if not self._spdx_template:
            return DEFAULT_TOKENS

        # The Apache license header has its own placeholder format.
        if "[name of copyright owner]" in self._content:
            return APACHE_SPDX_TOKENS

        if "<copyright holders>" in self._content:
            author = "<copyright holders>"
        elif "<owner>" in self._content:
            author = "<owner>"
        else:
            author = "<name of author>"
        return ("<year>", author, "<ident>")

    def _interpolate(self, context: Context) -> str:
        year_token, author_token, ident_token = self.replacement_tokens()
        if context.unwrap_text:
            # Some license headers come pre-wrapped to a column width.
            templ = remove_column_wrapping(self._content)
        else:
            templ = self._content

        return (
            templ.replace(year_token, context.get_year())
            .replace(author_token, context.get_authors())
            .replace(ident_token, context.ident)
        )

    def _build_year_varying_regex(
        self, commenter: Commenter, columns: Optional[int], trim_trailing: bool
    ) -> Pattern[str]:
        # YEAR_RE already covers ranges, so start_year is dropped here.
        context = replace(
            self._context, end_year=INTERMEDIATE_YEAR_TOKEN, start_year=None
        )
        rendered = commenter.comment(self._interpolate(context), columns)
        if trim_trailing:
            rendered = rendered.rstrip()

        fragments = rendered.split(INTERMEDIATE_YEAR_TOKEN)
        source = YEAR_RE.join(re.escape(fragment) for fragment in fragments)
        logger.debug("Year varying pattern (trimmed=%s): %r", trim_trailing, source)
        try:
            return re.compile(source)
        except re.error as exc:
            raise TemplateError(
                f"failed to compile outdated header pattern for {self._context.ident}: {exc}"
            ) from exc
