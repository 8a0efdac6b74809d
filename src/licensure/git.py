# SPDX-License-Identifier: MPL-2.0
"""Git helpers: project file listing and per-file copyright years."""
from __future__ import annotations

import logging
import os
import subprocess
from typing import List, Sequence

from .errors import GitError
from .template import current_year

logger = logging.getLogger(__name__)


def _run_git(args: Sequence[str]) -> str:
    try:
        proc = subprocess.run(
            ["git", *args],
            capture_output=True,
            check=False,
            text=True,
            encoding="utf-8",
        )
    except (OSError, UnicodeDecodeError) as exc:
        raise GitError(
            f"Failed to run git {' '.join(args)}. Make sure you're in a git repo: {exc}"
        ) from exc
    if proc.returncode != 0:
        raise GitError(
            f"git {' '.join(args)} exited with status {proc.returncode}: {proc.stderr.strip()}"
        )
    return proc.stdout


def git_ls_files(extra_args: Sequence[str] = ()) -> List[str]:
    # ls-files still lists deleted but uncommitted files, drop those.
    output = _run_git(["ls-files", *extra_args])
    return [line for line in output.split("\n") if line and os.path.exists(line)]


def get_project_files() -> List[str]:
    """Tracked files plus new, non-ignored ones.

    Symlinks are dropped: links out of the project should not be modified,
    and links inside it are licensed through their target.
    """
    files = git_ls_files()
    files.extend(git_ls_files(["--others", "--exclude-standard"]))
    return [f for f in files if not os.path.islink(f)]


def get_git_years_for_file(filename: str) -> List[str]:
    """Commit years touching ``filename``, newest first.

    A path without history, such as a file not committed yet, yields the
    current year. Running outside a work tree raises ``GitError``.
    """
    output = _run_git(["log", "--follow", "--format=%ad", "--date", "default", "--", filename])
    years = []
    for date in output.split("\n"):
        if not date:
            continue
        # Dates look like "Wed May 29 04:54:58 2024 +0100".
        fields = date.split(" ")
        if len(fields) < 5:
            raise GitError(f"Unable to determine year from git date {date!r}")
        years.append(fields[4])

    if not years:
        logger.debug("Did not get any dates from git for file: %s", filename)
        return [current_year()]
    return years
