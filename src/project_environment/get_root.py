from __future__ import annotations
import logging
from pathlib import Path
from typing import Final, Iterable, Sequence
from .errors import RootNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_ROOT_FILES: Final[tuple[str, ...]] = (
    "requirements.txt",
    ".git",
    ".gitmodules",
    "pyproject.toml",
    "setup.py",
)

def find_root(start: Path, markers: Sequence[str] = DEFAULT_ROOT_FILES) -> Path | None:
    """
    Find the nearest directory upward from `start` that contains any of `markers`.
    Existence is enough, files and directories both count. Returns None at the
    filesystem root.
    """
    start = Path(start).resolve()
    for d in (start, *start.parents):
        if any((d / marker).exists() for marker in markers):
            return d
    return None

def locate_root(
    start: Path,
    markers: Sequence[str] = DEFAULT_ROOT_FILES,
    *,
    fallback_to_cwd: bool = True,
) -> Path:
    """
    Like `find_root`, but retries from the current directory (unless
    `fallback_to_cwd` is off) and raises RootNotFoundError if both fail.
    """
    tried: list[Path] = [Path(start).resolve()]
    if fallback_to_cwd:
        cwd = Path.cwd().resolve()
        if cwd != tried[0]:
            tried.append(cwd)

    for origin in tried:
        root = find_root(origin, markers)
        if root is not None:
            logger.debug("project root %s found from %s", root, origin)
            return root

    raise RootNotFoundError(
        f"Cannot determine project root, searched up from {_join(tried)}. "
        f"Please set the project root by hand or create one of "
        f"{_join(markers)} in the root of the project.")

def _join(items: Iterable[object]) -> str:
    return ", ".join(str(i) for i in items)

__all__ = ["DEFAULT_ROOT_FILES", "find_root", "locate_root"]
