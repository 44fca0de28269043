from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from . import __version__
from .pruner import LOGGER, RepositoryPruner


TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_LEVELS = {
    "OFF": logging.CRITICAL + 10,
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "TRACE": TRACE,
}

LOG_FORMAT = "%(levelname)-5s %(message)s"


def parse_log_level(value: str) -> int:
    normalized = str(value or "").strip().upper()
    if normalized not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"Invalid log level '{value}'. Allowed values: {sorted(LOG_LEVELS)}"
        )
    return LOG_LEVELS[normalized]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="maven-repo-cleaner", description="Clean Maven Repository")
    parser.add_argument(
        "path",
        help="Root of the local Maven repository to clean. Symlinked subdirectories are not followed or cleaned.",
    )
    parser.add_argument(
        "--level",
        type=parse_log_level,
        default=str(os.getenv("MAVEN_CLEANER_LOG_LEVEL", "INFO")),
        help="Log level: TRACE, DEBUG, INFO, WARN, ERROR or OFF. Resolution: CLI -> MAVEN_CLEANER_LOG_LEVEL -> INFO",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def validate_repo_path(raw_path: str) -> Path | None:
    path = Path(raw_path).expanduser()
    if not path.exists():
        LOGGER.error("[CLEANUP]: file or directory does not exist: %s", raw_path)
        return None
    if path.is_file():
        LOGGER.error("[CLEANUP]: Maven repo must be a directory, got a file: %s", raw_path)
        return None
    return path.resolve()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.level, format=LOG_FORMAT)

    repo_path = validate_repo_path(args.path)
    if repo_path is None:
        return 1

    LOGGER.info("[CLEANUP]: Cleaning up: %s", repo_path)
    RepositoryPruner().clean(repo_path)
    return 0
