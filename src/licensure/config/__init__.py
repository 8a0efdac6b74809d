# SPDX-License-Identifier: MPL-2.0
"""Loading and querying the ``.licensure.yml`` configuration."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..errors import ConfigError
from .comment import CommentConfig, CommentConfigList, get_filetype
from .default import DEFAULT_CONFIG
from .license import LicenseConfig, LicenseConfigList
from .matcher import FileMatcher, RegexList

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".licensure.yml"

__all__ = [
    "CONFIG_FILE_NAME",
    "CommentConfig",
    "CommentConfigList",
    "Config",
    "DEFAULT_CONFIG",
    "FileMatcher",
    "LicenseConfig",
    "LicenseConfigList",
    "RegexList",
    "find_config_file",
    "get_filetype",
    "load_config",
    "xdg_config_dir",
]


class Config(BaseModel):
    """Resolved configuration consumed by the licensing engine."""

    change_in_place: bool = Field(False, description="Rewrite files instead of printing them")
    excludes: RegexList = Field(default_factory=RegexList)
    licenses: LicenseConfigList = Field(default_factory=LicenseConfigList)
    comments: CommentConfigList = Field(default_factory=CommentConfigList)

    @classmethod
    def from_yaml(cls, text: str, source: str = "<string>") -> "Config":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {source}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid config in {source}: expected a mapping at the top level")
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config in {source}: {exc}") from exc

    @classmethod
    def default(cls) -> "Config":
        return cls.from_yaml(DEFAULT_CONFIG, source="the default config")

    def add_exclude(self, pattern: str) -> None:
        self.excludes.add_exclude(pattern)


def xdg_config_dir() -> Optional[Path]:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    home = os.environ.get("HOME")
    if home:
        return Path(home) / ".config"
    return None


def find_config_file(start: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Walk up from ``start`` looking for ``.licensure.yml``.

    Falls back to the global ``licensure/config.yml`` in the XDG config
    directory.
    """
    cwd = Path(start) if start is not None else Path.cwd()
    for directory in (cwd, *cwd.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate

    global_dir = xdg_config_dir()
    if global_dir is not None:
        candidate = global_dir / "licensure" / "config.yml"
        if candidate.exists():
            return candidate
    return None


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """Load ``path`` or the first config found by :func:`find_config_file`."""
    config_path = Path(path) if path is not None else find_config_file()
    if config_path is None:
        raise ConfigError("Config file not found", not_found=True)

    logger.info("Loading config from %s", config_path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {config_path}", not_found=True) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read {config_path}: {exc}") from exc
    return Config.from_yaml(text, source=str(config_path))
