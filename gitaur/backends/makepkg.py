# gitaur/backends/makepkg.py

import logging
import os
import re
import shutil
import stat
import tempfile

from pathlib import Path

from gitaur.utils.errors import BuildToolError, InvalidSelectionError

logger = logging.getLogger("gitaur.backends.makepkg")

RECIPE = "PKGBUILD"
SRCINFO = ".SRCINFO"
RE_VARIANT = re.compile(r"^PKGBUILD(\..+)?$")
RE_INDEX = re.compile(r"^[0-9]+$")

ARTIFACT_DIRS = ("src", "pkg")
ARTIFACT_GLOBS = ("*.pkg.tar.*", "*.log")


def list_variants(path: Path) -> list[str]:
    """PKGBUILD and PKGBUILD.<suffix> files in `path`, in file-name order."""
    return sorted(
        p.name for p in Path(path).iterdir()
        if p.is_file() and RE_VARIANT.match(p.name)
    )


def use_variant(path: Path, variants: list[str], choice: str) -> str | None:
    """
    Copy the variant numbered `choice` (1-based) over PKGBUILD.
    Returns the chosen name, or None when it already is PKGBUILD.
    """
    if not variants:
        raise InvalidSelectionError("No PKGBUILD variants found.")
    choice = choice.strip()
    if not RE_INDEX.match(choice):
        raise InvalidSelectionError("Invalid choice.")
    n = int(choice)
    if not 1 <= n <= len(variants):
        raise InvalidSelectionError("Out of range.")

    chosen = variants[n - 1]
    if chosen == RECIPE:
        return None
    shutil.copyfile(Path(path) / chosen, Path(path) / RECIPE)
    logger.debug("copied %s over %s in %s", chosen, RECIPE, path)
    return chosen


def _file_mode(target: Path) -> int:
    """Mode for a rewritten file: keep the old one, else what `>` would create."""
    if target.exists():
        return stat.S_IMODE(target.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def generate_srcinfo(path: Path, runner) -> Path:
    """
    Write `makepkg --printsrcinfo` to .SRCINFO. The old file is replaced only
    once makepkg succeeded.
    """
    res = runner.run(["makepkg", "--printsrcinfo"], cwd=path, capture=True)
    if not res.ok:
        raise BuildToolError(
            f"makepkg --printsrcinfo failed (exit {res.returncode})\n{res.stderr.rstrip()}"
        )

    target = Path(path) / SRCINFO
    fd, tmp = tempfile.mkstemp(prefix=".SRCINFO.", dir=path)
    try:
        with os.fdopen(fd, "w") as fh:
            fh.write(res.stdout)
        os.chmod(tmp, _file_mode(target))
        os.replace(tmp, target)
    except OSError:
        Path(tmp).unlink(missing_ok=True)
        raise
    return target


def build(path: Path, runner):
    res = runner.run(["makepkg", "-sf"], cwd=path)
    if not res.ok:
        raise BuildToolError(f"makepkg -sf failed (exit {res.returncode})")


def install(path: Path, runner):
    res = runner.run(["makepkg", "-si"], cwd=path)
    if not res.ok:
        raise BuildToolError(f"makepkg -si failed (exit {res.returncode})")


def clean(path: Path) -> list[str]:
    """
    Delete build leftovers (src/, pkg/, built packages, logs).
    PKGBUILD*, .SRCINFO and .git are never touched.
    """
    path = Path(path)
    removed = []
    for d in ARTIFACT_DIRS:
        target = path / d
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
            removed.append(d)
        elif target.exists() or target.is_symlink():
            target.unlink()
            removed.append(d)
    for pattern in ARTIFACT_GLOBS:
        for target in sorted(path.glob(pattern)):
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
            removed.append(target.name)
    logger.debug("cleaned %s: %s", path, removed)
    return removed
