# gitaur/backends/aur.py

import logging

from pathlib import Path

import requests

from gitaur.utils.errors import CloneError, NetworkError, PullError

logger = logging.getLogger("gitaur.backends.aur")

HEADS_PREFIX = "refs/heads/"


def list_branches(url: str, runner) -> tuple[str, ...]:
    """
    Return every branch name of the AUR mirror at `url`, sorted
    case-insensitively. One `git ls-remote` call; raises NetworkError on failure.
    """
    res = runner.run(["git", "ls-remote", "--heads", url], capture=True)
    if not res.ok:
        raise NetworkError(
            f"could not list branches of {url}: {res.stderr.strip() or res.returncode}"
        )

    names = []
    for line in res.stdout.splitlines():
        # Format: <sha>\trefs/heads/<name>
        _, _, ref = line.partition("\t")
        if ref.startswith(HEADS_PREFIX):
            names.append(ref[len(HEADS_PREFIX):])
    logger.debug("fetched %d branches from %s", len(names), url)
    return tuple(sorted(names, key=str.lower))


def match(branches, term: str) -> list[str]:
    needle = term.casefold()
    return [b for b in branches if needle in b.casefold()]


def clone_path(package: str, clone_dir: Path) -> Path:
    return Path(clone_dir) / package


def is_cloned(path: Path) -> bool:
    return (path / ".git").is_dir()


def materialize(package: str, clone_dir: Path, url: str, runner) -> Path:
    """
    Make sure `clone_dir/package` holds a working copy of the `package` branch.
    An existing clone is reused untouched; otherwise a shallow single-branch
    clone is made. Raises CloneError when git fails.
    """
    dest = clone_path(package, clone_dir)
    if is_cloned(dest):
        logger.info("Exists: %s (using existing)", dest)
        return dest

    Path(clone_dir).mkdir(parents=True, exist_ok=True)
    logger.info("Cloning %s -> %s", package, dest)
    res = runner.run(
        ["git", "clone", "--quiet", "--depth", "1", "--branch", package,
         "--single-branch", url, str(dest)],
        capture=True,
    )
    if not res.ok:
        raise CloneError(f"clone of {package} failed: {res.stderr.strip() or res.returncode}")
    return dest


def pull(path: Path, runner):
    """Fast-forward-only update; diverged history is reported, never merged."""
    res = runner.run(["git", "pull", "--ff-only"], cwd=path)
    if not res.ok:
        raise PullError(f"git pull --ff-only failed in {path} (exit {res.returncode})")


def info(name: str, rpc_url: str) -> dict:
    """
    Fetch package metadata from the AUR RPC interface.
    Returns {} when the package is unknown there (e.g. a mirror-only branch).
    """
    try:
        r = requests.get(rpc_url, params={"arg[]": name}, timeout=10)
        r.raise_for_status()
        results = r.json().get("results") or []
    except (requests.RequestException, ValueError) as e:
        raise NetworkError(f"AUR RPC lookup for {name} failed: {e}") from e

    if not results:
        return {}
    d = results[0]
    return {
        "name": d.get("Name", name),
        "version": d.get("Version", "-"),
        "summary": d.get("Description") or "-",
        "maintainer": d.get("Maintainer") or "orphan",
        "votes": d.get("NumVotes", 0),
        "depends": d.get("Depends", []),
        "makedepends": d.get("MakeDepends", []),
        "url": d.get("URL") or "-",
    }
