"""Command line interface for the lile service generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import Project
from .errors import LileError
from .paths import PathResolver
from .scaffold import ProjectWriter
from .settings import Settings
from .template import TemplateRegistry

NEXT_STEPS = """
Now run `make proto` in {directory} to generate the gRPC code, then
`make test` to check everything builds.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate gRPC service boilerplate")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every step to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="create a new service")
    new_parser.add_argument(
        "path",
        nargs="?",
        default="",
        help="Project path: name, account/name, domain/account/name or an absolute path",
    )
    new_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        help="Base directory for bare names instead of the working directory",
    )
    new_parser.add_argument(
        "--templates",
        type=Path,
        help="Directory holding replacements for the built-in templates",
    )
    new_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be written without touching the disk",
    )

    return parser


def _handle_new(args: argparse.Namespace) -> int:
    settings = Settings.from_env()
    resolver = PathResolver(settings, cwd=args.directory)
    project = Project.from_path(args.path, resolver)

    if args.dry_run:
        for path in project.folder.file_paths():
            print(path)
        return 0

    print(f"Creating project in {project.project_dir}")
    writer = ProjectWriter(registry=TemplateRegistry(args.templates))
    writer.write(project)
    print(NEXT_STEPS.format(directory=project.project_dir), end="")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "new":
            return _handle_new(args)
    except LileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
