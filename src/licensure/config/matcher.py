# SPDX-License-Identifier: MPL-2.0
"""Path matching with user supplied regular expressions."""
from __future__ import annotations

import re
from typing import Any, List, Pattern, Sequence, Union

from pydantic import Field, PrivateAttr, RootModel, field_validator

from ..errors import ConfigError


def compile_patterns(patterns: Sequence[str]) -> List[Pattern[str]]:
    """Compile ``patterns``, raising ``ValueError`` naming the bad one."""
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise ValueError(f"invalid regex {pattern!r}: {exc}") from exc
    return compiled


class FileMatcher:
    """``"any"``, a single regex or a list of regexes matched against paths."""

    def __init__(self, patterns: List[Pattern[str]], match_any: bool = False) -> None:
        self.patterns = patterns
        self.match_any = match_any

    @classmethod
    def parse(cls, value: Union[str, Sequence[str]]) -> "FileMatcher":
        if isinstance(value, str):
            if value == "any":
                return cls([], match_any=True)
            return cls(compile_patterns([value]))
        return cls(compile_patterns(value))

    def is_match(self, path: str) -> bool:
        return self.match_any or any(p.search(path) for p in self.patterns)


class RegexList(RootModel[List[str]]):
    """A list of regexes matching a path when any of them matches."""

    root: List[str] = Field(default_factory=list)
    _compiled: List[Pattern[str]] = PrivateAttr(default_factory=list)

    @field_validator("root", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("root")
    @classmethod
    def _check_patterns(cls, value: List[str]) -> List[str]:
        compile_patterns(value)
        return value

    def model_post_init(self, __context: Any) -> None:
        self._compiled = compile_patterns(self.root)

    @property
    def patterns(self) -> List[str]:
        return list(self.root)

    def is_match(self, path: str) -> bool:
        return any(p.search(path) for p in self._compiled)

    def add_exclude(self, pattern: str) -> None:
        """Put ``pattern`` in front of the existing patterns."""
        try:
            compiled = compile_patterns([pattern])
        except ValueError as exc:
            raise ConfigError(f"Failed to compile exclude pattern: {exc}") from exc
        self.root.insert(0, pattern)
        self._compiled[:0] = compiled
