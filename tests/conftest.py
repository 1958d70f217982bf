"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Optional, Sequence

import git
import pytest


def build_repo(
    path: Path,
    authors: Sequence[str] = (),
    origin: Optional[str] = None,
) -> Path:
    """Create a real repository at *path* with one commit per author name."""
    path.mkdir(parents=True, exist_ok=True)
    repo = git.Repo.init(path)
    with repo:
        for i, name in enumerate(authors):
            (path / "notes.txt").write_text(f"change {i}\n")
            repo.index.add(["notes.txt"])
            actor = git.Actor(name, "dev@example.com")
            repo.index.commit(f"change {i}", author=actor, committer=actor)
        if origin is not None:
            repo.create_remote("origin", origin)
    return path


@pytest.fixture
def make_repo():
    """Factory fixture: make_repo(path, authors=[...], origin=...)."""
    return build_repo


@pytest.fixture
def scenario_tree(tmp_path):
    """Two repositories: A without origin, B with one."""
    root = tmp_path / "work"
    build_repo(root / "a", authors=["alice@x.com", "alice@x.com", "Bob Lee"])
    build_repo(root / "nested" / "b", authors=["bob lee"] * 3, origin="git@host:repo.git")
    return root
