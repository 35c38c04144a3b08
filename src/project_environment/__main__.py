"""
Print the project root or environment as seen from a directory.

Usage:
    python -m project_environment
    python -m project_environment --start src/myapp --show all
    project-environment --default development --marker manage.py
"""
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence
from pydantic import ValidationError
from .environment import ProjectEnvironment
from .errors import ProjectEnvironmentError
from .get_env import DEFAULT_ENVIRONMENT_FILENAME, DEFAULT_ENVIRONMENT_VARIABLE
from .settings import get_settings

logger = logging.getLogger(__name__)


class CommandLineEnvironment(ProjectEnvironment):
    """Descriptor for the command line, always started from an explicit directory."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="project-environment",
        description="Detect the project root and the environment the project runs under.")
    parser.add_argument("--start", type=Path, default=None,
                        help="directory to search upward from (default: current directory)")
    parser.add_argument("--root", type=Path, default=None,
                        help="use this project root instead of searching")
    parser.add_argument("--file", default=DEFAULT_ENVIRONMENT_FILENAME,
                        help="environment file name (default: %(default)s)")
    parser.add_argument("--var", default=DEFAULT_ENVIRONMENT_VARIABLE,
                        help="environment variable name (default: %(default)s)")
    parser.add_argument("--default", default=None,
                        help="environment to use when nothing else is found")
    parser.add_argument("--marker", action="append", default=[],
                        help="extra root marker, checked before the defaults (repeatable)")
    parser.add_argument("--show", choices=("env", "root", "path", "all"), default="env")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Invalid PROJECT_ENVIRONMENT_* setting:\n{exc}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    env = CommandLineEnvironment(
        start_dir=args.start or Path.cwd(),
        root_dir=args.root,
        environment_filename=args.file,
        environment_variable=args.var,
        default_environment=args.default,
        extra_root_files=tuple(args.marker),
    )
    try:
        if args.show == "root":
            lines = [str(env.project_root)]
        elif args.show == "path":
            lines = [str(env.environment_path)]
        elif args.show == "env":
            lines = [str(env)]
        else:
            lines = [f"root:\t{env.project_root}",
                     f"path:\t{env.environment_path}",
                     f"env:\t{env}"]
    except ProjectEnvironmentError as exc:
        logger.debug("lookup failed", exc_info=True)
        print(str(exc), file=sys.stderr)
        return 1
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
