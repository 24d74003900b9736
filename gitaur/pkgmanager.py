# gitaur/pkgmanager.py

import logging
import re

from rich.console import Console
from rich.markup import escape

from gitaur.backends import aur
from gitaur.menu import PackageContext, run_menu
from gitaur.utils.config import Settings, load_settings
from gitaur.utils.errors import (
    GitaurError,
    MissingToolError,
    UsageError,
    handle_errors,
)
from gitaur.utils.osdetect import is_arch_based
from gitaur.utils.runner import ToolRunner

logger = logging.getLogger("gitaur")
console = Console()

REQUIRED_TOOLS = {
    "git": "git not found",
    "makepkg": "makepkg not found (install base-devel)",
}
ALL_TOKENS = ("a", "all")
YES_TOKENS = ("y", "yes")
RE_SPLIT = re.compile(r"[\s,]+")
RE_INDEX = re.compile(r"^[0-9]+$")


def check_tools(runner):
    for tool, msg in REQUIRED_TOOLS.items():
        if not runner.which(tool):
            raise MissingToolError(msg)


def parse_selection(answer: str, count: int):
    """
    Parse a free-form answer to the numbered match list.

    Returns (indices, invalid): 0-based indices in the order typed and the
    tokens that were not ASCII numbers in [1, count]. "a"/"all" selects
    everything; an empty answer selects nothing.
    """
    answer = answer.strip()
    if not answer:
        return [], []
    if answer.lower() in ALL_TOKENS:
        return list(range(count)), []

    indices, invalid = [], []
    for tok in RE_SPLIT.split(answer):
        if not tok:
            continue
        if RE_INDEX.match(tok) and 1 <= int(tok) <= count:
            indices.append(int(tok) - 1)
        else:
            invalid.append(tok)
    return indices, invalid


def _ask(prompt: str) -> str:
    try:
        return console.input(prompt)
    except EOFError:
        return ""


def prompt_selection(matches: list[str]) -> list[str]:
    count = len(matches)
    if count == 0:
        console.print("No matches.")
        return []

    if count == 1:
        console.print(f"1 match: {matches[0]}", markup=False, highlight=False)
        yn = _ask("Clone/use and open menu? \\[y/N] ")
        return list(matches) if yn.strip().lower() in YES_TOKENS else []

    console.print(f"Found {count} matches:")
    for i, name in enumerate(matches, 1):
        console.print(f"{i:3d}) {name}", markup=False, highlight=False)
    console.print()
    answer = _ask("Choose numbers (e.g. 1 4 7), 'a' for all, or Enter to skip: ")

    indices, invalid = parse_selection(answer, count)
    for tok in invalid:
        console.print(f"Invalid selection: {tok}", markup=False, highlight=False)
    return [matches[i] for i in indices]


def open_package(pkg: str, settings: Settings, runner):
    """Clone (or reuse) `pkg` and run its menu. Failures stay with this package."""
    dest = aur.clone_path(pkg, settings.clone_dir)
    if aur.is_cloned(dest):
        console.print(f"Exists: {dest} (using existing)", markup=False, highlight=False)
    else:
        console.print(f"[cyan]Cloning {pkg} -> {dest}[/cyan]", highlight=False)
    try:
        dest = aur.materialize(pkg, settings.clone_dir, settings.aur_url, runner)
    except (GitaurError, OSError) as e:
        logger.debug("materialize %s failed: %s", pkg, e)
        return console.print(f"[red]❌ {escape(str(e))}[/red]")
    run_menu(PackageContext(pkg, dest, settings, runner))


def search_term(term: str, branches, settings: Settings, runner):
    console.print(f"[bold cyan]🔍 Searching for [green]{escape(term)}[/green]…[/]", highlight=False)
    for pkg in prompt_selection(aur.match(branches, term)):
        open_package(pkg, settings, runner)


@handle_errors
def run(terms: list[str], settings: Settings | None = None, runner=None):
    if not terms:
        raise UsageError("at least one search term is required")
    settings = settings or load_settings()
    runner = runner or ToolRunner()

    check_tools(runner)
    if not is_arch_based():
        console.print("[yellow]⚠️ Not an Arch-based system; makepkg builds may fail[/yellow]")

    settings.clone_dir.mkdir(parents=True, exist_ok=True)
    branches = aur.list_branches(settings.aur_url, runner)
    logger.debug("%d branches, clone dir %s", len(branches), settings.clone_dir)

    for term in terms:
        search_term(term, branches, settings, runner)
