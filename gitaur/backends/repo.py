# gitaur/backends/repo.py

import logging

from datetime import datetime, timezone
from pathlib import Path

import pygit2
from pygit2.enums import RepositoryOpenFlag, SortMode

logger = logging.getLogger("gitaur.backends.repo")


def _open(path: Path):
    try:
        return pygit2.Repository(str(path), RepositoryOpenFlag.NO_SEARCH)
    except pygit2.GitError as e:
        logger.debug("cannot open %s: %s", path, e)
        return None


def head_summary(path: Path) -> str | None:
    """'<short id> <subject>' of HEAD, or None for an unreadable/empty clone."""
    repo = _open(path)
    if repo is None or repo.head_is_unborn:
        return None
    commit = repo.head.peel(pygit2.Commit)
    return f"{commit.short_id} {commit.message.splitlines()[0] if commit.message else ''}".rstrip()


def recent_commits(path: Path, limit: int = 10) -> list[dict]:
    repo = _open(path)
    if repo is None or repo.head_is_unborn:
        return []

    commits = []
    for commit in repo.walk(repo.head.target, SortMode.TIME):
        commits.append({
            "id": commit.short_id,
            "author": commit.author.name,
            "date": datetime.fromtimestamp(commit.commit_time, timezone.utc)
                            .strftime("%Y-%m-%d"),
            "summary": commit.message.splitlines()[0] if commit.message else "",
        })
        if len(commits) >= limit:
            break
    return commits
