"""Directory scanning — find Git repositories below a root directory."""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

GIT_MARKER = ".git"


def is_repository(path: Path) -> bool:
    """True when *path* holds a ``.git`` entry (directory or gitfile)."""
    return (path / GIT_MARKER).exists()


def _child_dirs(path: Path) -> list[Path]:
    return [entry for entry in path.iterdir() if entry.is_dir()]


def scan(root: Union[str, Path]) -> list[Path]:
    """Return every repository below *root*, without nested repositories.

    Descent stops at the first directory carrying a ``.git`` marker.
    Symlinked directories are followed, but each real directory is only
    expanded once so link cycles terminate.  A *root* that is not a
    directory yields an empty list; a directory that cannot be listed
    raises the underlying ``OSError``.
    """
    root = Path(root)
    if not root.is_dir():
        return []

    found: list[Path] = []
    visited = {root.resolve()}
    # Children are pushed reversed so they pop in listing order (depth-first)
    stack = list(reversed(_child_dirs(root)))
    while stack:
        entry = stack.pop()
        if is_repository(entry):
            logger.debug("Found repository %s", entry)
            found.append(entry)
            continue
        real = entry.resolve()
        if real in visited:
            continue
        visited.add(real)
        stack.extend(reversed(_child_dirs(entry)))

    logger.info("Found %d repositories under %s", len(found), root)
    return found
