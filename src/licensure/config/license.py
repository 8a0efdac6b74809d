# SPDX-License-Identifier: MPL-2.0
"""License configuration: which template applies to which files."""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Pattern, Tuple, Union

from pydantic import AliasChoices, BaseModel, Field, PrivateAttr, RootModel, field_validator

from .. import git, spdx
from ..errors import ConfigError
from ..template import Authors, Context, CopyrightHolder, Template
from .matcher import FileMatcher, compile_patterns

logger = logging.getLogger(__name__)


class LicenseConfig(BaseModel):
    """One entry of the ``licenses`` section."""

    files: Union[str, List[str]] = Field(..., description='"any", a regex or a list of regexes')
    ident: str = Field(..., description="License identifier, e.g. an SPDX id")
    authors: List[CopyrightHolder] = Field(default_factory=list)
    end_year: Optional[str] = Field(None, validation_alias=AliasChoices("end_year", "year"))
    start_year: Optional[str] = None
    use_dynamic_year_ranges: bool = False
    template: Optional[str] = None
    auto_template: Optional[bool] = None
    replaces: Optional[List[str]] = Field(None, description="Regexes matching outdated headers")
    unwrap_text: bool = True

    _matcher: Optional[FileMatcher] = PrivateAttr(None)
    _replaces: Optional[List[Pattern[str]]] = PrivateAttr(None)

    @field_validator("end_year", "start_year", mode="before")
    @classmethod
    def _year_as_text(cls, value: Any) -> Any:
        # YAML reads an unquoted year as an integer.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("files")
    @classmethod
    def _check_files(cls, value: Union[str, List[str]]) -> Union[str, List[str]]:
        FileMatcher.parse(value)
        return value

    @field_validator("replaces")
    @classmethod
    def _check_replaces(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is not None:
            compile_patterns(value)
        return value

    def model_post_init(self, __context: Any) -> None:
        self._matcher = FileMatcher.parse(self.files)
        if self.replaces is not None:
            self._replaces = compile_patterns(self.replaces)

    def file_is_match(self, filename: str) -> bool:
        return self._matcher is not None and self._matcher.is_match(filename)

    def get_replaces(self) -> Optional[List[Pattern[str]]]:
        return self._replaces

    def get_template(self, filename: str) -> Template:
        """Build the template for ``filename``.

        Args:
            filename: Path whose git history supplies the years when
                ``use_dynamic_year_ranges`` is set.

        Returns:
            A template bound to this config's ident, authors and years.

        Raises:
            ConfigError: neither ``template`` nor ``auto_template`` is set.
            SPDXError: the auto template could not be fetched.
        """
        if self.template is None:
            if not self.auto_template:
                raise ConfigError(
                    "auto_template not enabled and no template provided, please add a "
                    f"template option to the license definition for {self.ident}"
                )
            # Fetched once per run, later files reuse the text.
            self.template = spdx.fetch_template(self.ident)

        end_year, start_year = self._years_for(filename)
        context = Context(
            ident=self.ident,
            authors=Authors.from_list(self.authors),
            end_year=end_year,
            start_year=start_year,
            unwrap_text=self.unwrap_text,
        )
        return Template(self.template, context, spdx_template=bool(self.auto_template))

    def _years_for(self, filename: str) -> Tuple[Optional[str], Optional[str]]:
        if not self.use_dynamic_year_ranges:
            return self.end_year, self.start_year

        years = git.get_git_years_for_file(filename)
        logger.debug("git years for %s: %s", filename, years)
        newest, oldest = years[0], years[-1]
        end_year = self.end_year if self.end_year is not None else newest
        if self.start_year is not None:
            start_year: Optional[str] = self.start_year
        elif oldest != end_year:
            start_year = oldest
        else:
            start_year = None
        return end_year, start_year


class LicenseConfigList(RootModel[List[LicenseConfig]]):
    """License configs, the first one matching a path wins."""

    root: List[LicenseConfig] = Field(default_factory=list)

    @field_validator("root", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def _config_for(self, filename: str) -> Optional[LicenseConfig]:
        for cfg in self.root:
            if cfg.file_is_match(filename):
                return cfg
        return None

    def get_template(self, filename: str) -> Optional[Template]:
        cfg = self._config_for(filename)
        if cfg is None:
            return None
        return cfg.get_template(filename)

    def get_replaces(self, filename: str) -> Optional[List[Pattern[str]]]:
        cfg = self._config_for(filename)
        if cfg is None:
            return None
        return cfg.get_replaces()
