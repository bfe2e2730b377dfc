"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .config import DEFAULT_CONFIG_PATH, ConfigError, read_config, save_config
from .session import RenameSession, ValidationError

APP_NAME = "AutoRename"
APP_VERSION = "v1.0.0"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog="autorename",
        description=(
            "Empty a working folder, create subfolders in it and rename the "
            "images that appear in each subfolder to the given names, in order."
        ),
    )
    parser.add_argument("root", nargs="?", help="working folder holding the subfolders")
    parser.add_argument(
        "-d", "--dir", dest="dirs", action="append", default=None,
        help="subfolder to create and watch; may be repeated",
    )
    parser.add_argument(
        "-n", "--name", dest="names", action="append", default=None,
        help="name for the next image; may be repeated (default: saved order)",
    )
    parser.add_argument(
        "-c", "--config", default=DEFAULT_CONFIG_PATH,
        help="file holding the saved naming order (default: %(default)s)",
    )
    parser.add_argument("--about", action="store_true", help="show program information")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {APP_VERSION}"
    )
    return parser


def _about() -> str:
    return f"{APP_NAME}\nversion: {APP_VERSION}"


def _load_names(config_path: str) -> list[str]:
    try:
        return read_config(config_path)
    except FileNotFoundError:
        print(
            "notice: no configuration file found; set a naming order and it will be saved",
            file=sys.stderr,
        )
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
    return []


def main(argv: Sequence[str] | None = None) -> int:
    """Run one renaming round; return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.about:
        print(_about())
        return 0
    if args.root is None:
        parser.error("the working folder is required")

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    names = args.names if args.names is not None else _load_names(args.config)
    session = RenameSession(args.root, args.dirs or [], names)
    try:
        session.validate()
    except ValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        save_config(names, args.config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)

    session.start()
    print("renaming...")
    try:
        while not session.wait(0.5):
            pass
    except KeyboardInterrupt:
        session.stop()
        print("stopped")
        return 130
    print("done")
    return 0