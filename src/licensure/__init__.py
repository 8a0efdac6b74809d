# SPDX-License-Identifier: MPL-2.0
"""licensure - keep copyright and license headers in source files current."""

__version__ = "0.1.0"

# Import key components for easier access
from .comments import BlockComment, Commenter, LineComment
from .config import Config, load_config
from .engine import (
    AlreadyLicensed,
    LicenseStats,
    LicenseStatus,
    Licensure,
    NeedsUpdate,
    NoCommenterMatched,
    NoConfigMatched,
)
from .errors import ConfigError, GitError, LicensureBaseError, LicensureError, SPDXError, TemplateError
from .template import Authors, Context, CopyrightHolder, Template

__all__ = [
    "AlreadyLicensed",
    "Authors",
    "BlockComment",
    "Commenter",
    "Config",
    "ConfigError",
    "Context",
    "CopyrightHolder",
    "GitError",
    "LicenseStats",
    "LicenseStatus",
    "Licensure",
    "LicensureBaseError",
    "LicensureError",
    "LineComment",
    "NeedsUpdate",
    "NoCommenterMatched",
    "NoConfigMatched",
    "SPDXError",
    "Template",
    "TemplateError",
    "load_config",
]
