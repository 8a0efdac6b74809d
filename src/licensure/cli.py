# SPDX-License-Identifier: MPL-2.0
"""Command line interface for licensure."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from . import __version__, git
from .config import CONFIG_FILE_NAME, DEFAULT_CONFIG, load_config
from .engine import Licensure
from .errors import ConfigError, LicensureBaseError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_FILES = 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="licensure",
        description="Add or update license headers in source files.",
    )
    parser.add_argument("files", nargs="*", help="Files to license, ignored if --project is supplied")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    parser.add_argument("-i", "--in-place", action="store_true", help="Rewrite files in place")
    parser.add_argument(
        "-c", "--check", action="store_true", help="Only report files needing a license update"
    )
    parser.add_argument(
        "-e", "--exclude", help="A regex which will be used to determine what files to ignore."
    )
    parser.add_argument(
        "-p",
        "--project",
        action="store_true",
        help="When specified will license the current project files as returned by git ls-files",
    )
    parser.add_argument(
        "-g", "--generate-config", action="store_true", help="Generate a default licensure config file"
    )
    return parser


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def print_files(files: List[str], message: str) -> bool:
    """Report ``files`` on stderr under ``message``; True if any were printed."""
    if not files:
        return False
    print(f"{message} {len(files)} ", file=sys.stderr)
    for file in files:
        print(file, file=sys.stderr)
    return True


def generate_config() -> int:
    try:
        with open(CONFIG_FILE_NAME, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG)
    except OSError as exc:
        print(f"Unable to write to {CONFIG_FILE_NAME}: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.generate_config:
        return generate_config()

    try:
        if args.project:
            files = git.get_project_files()
        elif args.files:
            files = list(args.files)
        else:
            print(
                "ERROR: Must provide files to license either as arguments or via --project",
                file=sys.stderr,
            )
            return EXIT_NO_FILES

        try:
            config = load_config()
        except ConfigError as exc:
            if exc.not_found:
                print(
                    "No config file found, generate one with licensure --generate-config",
                    file=sys.stderr,
                )
            else:
                print(f"Error loading config file: {exc}", file=sys.stderr)
            return EXIT_FAILURE

        if args.exclude:
            config.add_exclude(args.exclude)
        if args.in_place:
            config.change_in_place = True

        stats = Licensure(config, check_mode=args.check).license_files(files)
    except LicensureBaseError as exc:
        logger.debug("Licensing failed", exc_info=True)
        print(f"Failed to license files: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if args.check and (stats.files_not_licensed or stats.files_needing_license_update):
        print_files(
            stats.files_needing_license_update,
            "The following files' licenses need to be updated",
        )
        print_files(
            stats.files_not_licensed,
            "The following files were not licensed with the given config.",
        )
        print_files(
            stats.files_needing_commenter,
            "The following files did not have a commenter with the given config.",
        )
        return EXIT_FAILURE

    if print_files(
        stats.files_needing_commenter,
        "The following files did not have a commenter with the given config.",
    ):
        return EXIT_FAILURE
    return EXIT_OK
