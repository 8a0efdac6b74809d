# SPDX-License-Identifier: MPL-2.0
"""Comment configuration: which commenter applies to which files."""
from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    PrivateAttr,
    RootModel,
    field_validator,
    model_validator,
)

from ..comments import BlockComment, Commenter, LineComment
from .matcher import FileMatcher


def get_filetype(filename: str) -> str:
    """Return the text after the last ``.`` of ``filename``."""
    return filename.rsplit(".", 1)[-1]


class LineCommenterSpec(BaseModel):
    """``type: line`` commenter settings."""

    type: Literal["line"] = "line"
    comment_char: str = Field(..., description="Prefix put in front of every line")
    trailing_lines: int = Field(0, ge=0, description="Blank lines after the header")

    def build(self) -> LineComment:
        """Create the configured line commenter."""
        return LineComment(self.comment_char).set_trailing_lines(self.trailing_lines)


class BlockCommenterSpec(BaseModel):
    """``type: block`` commenter settings."""

    type: Literal["block"] = "block"
    start_block_char: str = Field(..., description="Opening delimiter")
    end_block_char: str = Field(..., description="Closing delimiter")
    per_line_char: Optional[str] = Field(None, description="Prefix for lines inside the block")
    trailing_lines: int = Field(0, ge=0, description="Blank lines after the header")

    def build(self) -> BlockComment:
        """Create the configured block commenter, per-line prefix included."""
        commenter = BlockComment(self.start_block_char, self.end_block_char).set_trailing_lines(
            self.trailing_lines
        )
        if self.per_line_char is not None:
            commenter = commenter.with_per_line(self.per_line_char)
        return commenter


CommenterSpec = Annotated[
    Union[LineCommenterSpec, BlockCommenterSpec], Field(discriminator="type")
]


class CommentConfig(BaseModel):
    """One entry of the ``comments`` section."""

    extension: Optional[Union[str, List[str]]] = Field(
        None, validation_alias=AliasChoices("extension", "extensions")
    )
    files: Optional[Union[str, List[str]]] = Field(
        None, description="Path regex(es) selecting files regardless of extension"
    )
    columns: Optional[int] = Field(None, gt=0, description="Wrap headers to this width")
    commenter: CommenterSpec

    @field_validator("commenter", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> Any:
        # Commenter types are accepted in any case ("line", "Line").
        if isinstance(value, dict) and isinstance(value.get("type"), str):
            value = dict(value, type=value["type"].lower())
        return value

    _matcher: Optional[FileMatcher] = PrivateAttr(None)

    @field_validator("files")
    @classmethod
    def _check_files(cls, value: Optional[Union[str, List[str]]]) -> Optional[Union[str, List[str]]]:
        if value is not None:
            FileMatcher.parse(value)
        return value

    @model_validator(mode="after")
    def _require_selector(self) -> "CommentConfig":
        if self.extension is None and self.files is None:
            raise ValueError("comment config needs an extension, extensions or files entry")
        return self

    def model_post_init(self, __context: Any) -> None:
        if self.files is not None:
            self._matcher = FileMatcher.parse(self.files)

    def matches(self, file_type: str, filename: str) -> bool:
        """Check whether this config applies to a file.

        Args:
            file_type: Extension of the file, see :func:`get_filetype`.
            filename: Full path, matched against ``files`` when set.

        Returns:
            True when the path regex matches, ``extension`` is ``"any"`` or
            equals ``file_type``, or ``file_type`` is in the extension list.
        """
        if self._matcher is not None and self._matcher.is_match(filename):
            return True
        if isinstance(self.extension, str):
            return self.extension in ("any", file_type)
        if self.extension is not None:
            return file_type in self.extension
        return False

    def commenter_for(self) -> Tuple[Optional[int], Commenter]:
        """Return the wrap width and a freshly built commenter."""
        return self.columns, self.commenter.build()


class CommentConfigList(RootModel[List[CommentConfig]]):
    """Comment configs, checked in declaration order."""

    root: List[CommentConfig] = Field(default_factory=list)

    @field_validator("root", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def get_commenter(self, filename: str) -> Optional[Tuple[Optional[int], Commenter]]:
        """Return ``(columns, commenter)`` of the first matching config, if any."""
        file_type = get_filetype(filename)
        for cfg in self.root:
            if cfg.matches(file_type, filename):
                return cfg.commenter_for()
        return None
