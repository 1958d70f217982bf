"""Repository aggregation — per-author commit counts and origins, in parallel.

Each repository is opened, walked and looked up on its own worker thread.
Results are built locally and merged into a shared ``CommitTally`` under a
lock, so the lock is only held for the short merge and never during I/O.
"""

import configparser
import logging
import threading
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional, Sequence, Union

import git  # GitPython

from commit_tally.identity import normalize_author
from commit_tally.models import RepositoryResult, TallyReport
from commit_tally.scanner import scan

logger = logging.getLogger(__name__)


# ── Single repository ─────────────────────────────────────────────────────

def count_commits(repo: git.Repo) -> dict[str, int]:
    """Count commits reachable from HEAD, keyed by normalized author.

    Commits without an author name are skipped.  Raises ``ValueError`` or
    a ``git.exc.GitError`` when HEAD cannot be resolved or walked.
    """
    if not repo.head.is_valid():
        raise ValueError("HEAD does not point at a commit")

    counts: dict[str, int] = defaultdict(int)
    for commit in repo.iter_commits("HEAD"):
        name = commit.author.name
        if not name:
            continue
        key = normalize_author(name)
        counts[key] += 1
    return dict(counts)


def remote_origin_url(repo: git.Repo) -> Optional[str]:
    """URL of the remote named ``origin``, or None if there is none."""
    if "origin" not in repo.remotes:
        return None
    try:
        url = repo.remotes.origin.url
    except AttributeError:
        # Remote section present but no url configured
        return None
    return url or None


def process_repository(path: Path) -> Optional[RepositoryResult]:
    """Open *path* and collect its commit counts and origin URL.

    Returns None when the repository cannot be opened.  The commit walk and
    the origin lookup fail independently: losing one keeps the other.
    """
    try:
        repo = git.Repo(path)
    except (git.exc.GitError, OSError) as e:
        logger.warning("Skipping %s: cannot open repository (%s)", path, e)
        return None

    with repo:
        try:
            counts = count_commits(repo)
        except (ValueError, OSError, git.exc.GitError) as e:
            logger.info("No commits counted for %s: %s", path, e)
            counts = {}

        try:
            origin = remote_origin_url(repo)
        except (configparser.Error, OSError) as e:
            logger.warning("Cannot read origin of %s: %s", path, e)
            origin = None

    return RepositoryResult(path=path, commit_counts=counts, origin=origin)


# ── Shared accumulator ────────────────────────────────────────────────────

class CommitTally:
    """Thread-safe running totals shared by all repository workers."""

    def __init__(self, repositories_scanned: int = 0) -> None:
        self.repositories_scanned = repositories_scanned
        self._lock = threading.Lock()
        self._totals: dict[str, int] = {}
        self._origins: list[str] = []
        self._processed = 0

    def merge(self, result: RepositoryResult) -> None:
        """Fold one repository's local counts and origin into the totals."""
        with self._lock:
            for identity, count in result.commit_counts.items():
                self._totals[identity] = self._totals.get(identity, 0) + count
            if result.origin is not None:
                self._origins.append(result.origin)
            self._processed += 1

    def snapshot(self) -> TallyReport:
        with self._lock:
            return TallyReport(
                commit_totals=dict(self._totals),
                origins=list(self._origins),
                repositories_scanned=self.repositories_scanned,
                repositories_processed=self._processed,
            )


# ── Fan-out ───────────────────────────────────────────────────────────────

def _process_and_merge(tally: CommitTally, path: Path) -> None:
    result = process_repository(path)
    if result is not None:
        logger.debug("Counted %d commits in %s", result.commit_total, path)
        tally.merge(result)


def aggregate(paths: Sequence[Path]) -> TallyReport:
    """Process every repository in parallel, one worker per repository."""
    tally = CommitTally(repositories_scanned=len(paths))
    if not paths:
        return tally.snapshot()

    with ThreadPoolExecutor(max_workers=len(paths)) as pool:
        futures = {pool.submit(_process_and_merge, tally, p): p for p in paths}
        for future in as_completed(futures):
            try:
                future.result()
            except Exception:
                logger.exception("Unexpected failure while processing %s", futures[future])

    report = tally.snapshot()
    logger.info(
        "Tallied %d of %d repositories",
        report.repositories_processed,
        report.repositories_scanned,
    )
    return report


def tally_directory(root: Union[str, Path]) -> TallyReport:
    """Scan *root* for repositories and aggregate them."""
    return aggregate(scan(root))
