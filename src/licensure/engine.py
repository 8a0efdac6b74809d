# SPDX-License-Identifier: MPL-2.0
"""Decide per file whether its license header is current and fix it if not."""
from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Pattern, Sequence, TextIO, Tuple, Union

from .comments import Commenter
from .config import Config
from .errors import LicensureError
from .template import Template

logger = logging.getLogger(__name__)

SHEBANG_RE = re.compile(r"^#!.*\n")


@dataclass(frozen=True)
class AlreadyLicensed:
    """The current header is present."""


@dataclass(frozen=True)
class NeedsUpdate:
    """The file must be rewritten with ``content``."""

    content: str


@dataclass(frozen=True)
class NoConfigMatched:
    """No license config applies to the path."""


@dataclass(frozen=True)
class NoCommenterMatched:
    """A license applies but no commenter knows the file type."""


LicenseStatus = Union[AlreadyLicensed, NeedsUpdate, NoConfigMatched, NoCommenterMatched]


@dataclass
class LicenseStats:
    """Outcome of one :meth:`Licensure.license_files` batch."""

    files_not_licensed: List[str] = field(default_factory=list)
    files_needing_license_update: List[str] = field(default_factory=list)
    files_needing_commenter: List[str] = field(default_factory=list)


def strip_shebang(content: str) -> Tuple[Optional[str], str]:
    """Split a leading ``#!`` line off ``content``."""
    match = SHEBANG_RE.match(content)
    if match is None:
        return None, content
    return match.group(0), content[match.end():]


def add_header(header: str, content: str) -> str:
    """Prepend ``header``, keeping any shebang line first."""
    shebang, body = strip_shebang(content)
    if shebang is not None:
        return shebang + header + body
    return header + body


def _replace_first(pattern: Pattern[str], content: str, header: str) -> Optional[str]:
    # The header is inserted verbatim, backslashes in it are not group references.
    if pattern.search(content) is None:
        return None
    return pattern.sub(lambda _: header, content, count=1)


def get_outdated_replacement(
    template: Template,
    commenter: Commenter,
    columns: Optional[int],
    content: str,
    header: str,
) -> Optional[str]:
    """Swap a header differing only in its year (or trailing whitespace)."""
    outdated_re = template.outdated_license_pattern(commenter, columns)
    logger.debug("Outdated regex: %r", outdated_re.pattern)
    updated = _replace_first(outdated_re, content, header)
    if updated is not None:
        return updated

    # Account for possible whitespace changes. The trailing whitespace that
    # followed the old header is left in place, so the header goes in trimmed.
    trimmed_re = template.outdated_license_trimmed_pattern(commenter, columns)
    logger.debug("Trimmed outdated regex: %r", trimmed_re.pattern)
    return _replace_first(trimmed_re, content, header.rstrip())


def get_replaces_replacement(
    replaces: Iterable[Pattern[str]], content: str, header: str
) -> Optional[str]:
    """Swap the first configured legacy header found in ``content``."""
    for old in replaces:
        updated = _replace_first(old, content, header)
        if updated is not None:
            return updated
    return None


class Licensure:
    """Apply the configured license headers to a batch of files."""

    def __init__(
        self,
        config: Config,
        check_mode: bool = False,
        output: Optional[TextIO] = None,
    ) -> None:
        self.config = config
        self.check_mode = check_mode
        self.stats = LicenseStats()
        self._output = output

    def with_check_mode(self, check_mode: bool) -> "Licensure":
        """Toggle check mode and return ``self`` for chaining."""
        self.check_mode = check_mode
        return self

    def license_files(self, files: Sequence[str]) -> LicenseStats:
        """Classify and update ``files`` in order.

        Args:
            files: Paths to check. Excluded paths are skipped.

        Returns:
            The stats of this batch; earlier batches are discarded.

        Raises:
            LicensureError: a file could not be read or written. Files handled
                before the failure keep their changes.
        """
        self.stats = LicenseStats()

        for file in files:
            if self.config.excludes.is_match(file):
                logger.info("skipping %s because it is excluded.", file)
                continue

            logger.debug("Working on file: %s", file)
            content = self._read(file)
            status = self.add_license_header(file, content)

            if isinstance(status, NeedsUpdate):
                self.handle_update(file, status.content)
            elif isinstance(status, NoConfigMatched):
                self.stats.files_not_licensed.append(file)
            elif isinstance(status, NoCommenterMatched):
                self.stats.files_not_licensed.append(file)
                self.stats.files_needing_commenter.append(file)

        return self.stats

    def add_license_header(self, file: str, content: str) -> LicenseStatus:
        """Classify ``content`` of ``file`` and compute its new content.

        Args:
            file: Path used to select the license and comment configs.
            content: Current file content.

        Returns:
            The first matching status. ``NeedsUpdate`` carries the content
            to write and is also recorded in :attr:`stats`.
        """
        template = self.config.licenses.get_template(file)
        if template is None:
            logger.info("skipping %s because no license config matched.", file)
            return NoConfigMatched()

        found = self.config.comments.get_commenter(file)
        if found is None:
            logger.info("skipping %s because no comment config matched.", file)
            return NoCommenterMatched()
        columns, commenter = found

        header = commenter.comment(template.render(), columns)
        logger.debug("Header: %r", header)
        if header in content or header.rstrip() in content:
            logger.info("%s already licensed", file)
            return AlreadyLicensed()

        update = get_outdated_replacement(template, commenter, columns, content, header)
        if update is not None:
            logger.info("%s licensed, but year is outdated", file)
            self.stats.files_needing_license_update.append(file)
            return NeedsUpdate(update)

        replaces = self.config.licenses.get_replaces(file)
        if replaces:
            update = get_replaces_replacement(replaces, content, header)
            if update is not None:
                logger.info("%s licensed, but license is outdated", file)
                self.stats.files_needing_license_update.append(file)
                return NeedsUpdate(update)

        self.stats.files_needing_license_update.append(file)
        return NeedsUpdate(add_header(header, content))

    def handle_update(self, file: str, content: str) -> None:
        """Apply the new content of ``file``.

        Nothing happens in check mode. With ``change_in_place`` the file is
        overwritten, otherwise the content is written unchanged to the
        output stream (stdout by default).

        Args:
            file: Path the content belongs to.
            content: Full file content with the current header.

        Raises:
            LicensureError: the file could not be created or written.
        """
        if self.check_mode:
            return

        if self.config.change_in_place:
            self._write(file, content)
            return

        out = self._output if self._output is not None else sys.stdout
        out.write(content)

    @staticmethod
    def _read(file: str) -> str:
        try:
            f = open(file, encoding="utf-8", newline="")
        except OSError as exc:
            raise LicensureError(f"failed to open file {file}", exc) from exc
        with f:
            try:
                return f.read()
            except (OSError, UnicodeDecodeError) as exc:
                raise LicensureError(f"failed to read file {file}", exc) from exc

    @staticmethod
    def _write(file: str, content: str) -> None:
        try:
            f = open(file, "w", encoding="utf-8", newline="")
        except OSError as exc:
            raise LicensureError(f"failed to create file {file}", exc) from exc
        with f:
            try:
                f.write(content)
            except OSError as exc:
                raise LicensureError(f"failed to write to file {file}", exc) from exc
