# gitaur/menu.py

import logging

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from gitaur.backends import aur, makepkg, repo
from gitaur.backends.makepkg import RECIPE, SRCINFO
from gitaur.utils.config import Settings
from gitaur.utils.errors import GitaurError, ToolError

logger = logging.getLogger("gitaur.menu")
console = Console()

MENU_LINE = (
    "Choose: [v]iew PKGBUILD  [s].SRCINFO  [e]dit  [p]ick PKGBUILD  [u]pdate  "
    "[g]en .SRCINFO  [b]uild  [i]nstall  [c]lean  [l]og  [a]ur info  [q]uit"
)
QUIT = ("q", "")


@dataclass
class PackageContext:
    name: str
    path: Path
    settings: Settings
    runner: object


def ask(prompt: str) -> str:
    try:
        return console.input(prompt)
    except EOFError:
        return ""


def _open_with(ctx: PackageContext, command, target: Path):
    res = ctx.runner.run([*command, str(target)], cwd=ctx.path)
    if not res.ok:
        detail = res.stderr.strip()
        raise ToolError(
            f"{command[0]} failed (exit {res.returncode})" + (f": {detail}" if detail else "")
        )


def view_recipe(ctx: PackageContext):
    recipe = ctx.path / RECIPE
    if not recipe.is_file():
        return console.print("No PKGBUILD found. Try [p]ick to choose a variant.", markup=False)
    _open_with(ctx, ctx.settings.pager, recipe)


def view_srcinfo(ctx: PackageContext):
    srcinfo = ctx.path / SRCINFO
    if not srcinfo.is_file():
        return console.print("No .SRCINFO found. Use [g] to generate one.", markup=False)
    _open_with(ctx, ctx.settings.pager, srcinfo)


def edit_recipe(ctx: PackageContext):
    recipe = ctx.path / RECIPE
    if not recipe.is_file():
        return console.print("No PKGBUILD to edit. Try [p]ick.", markup=False)
    _open_with(ctx, ctx.settings.editor, recipe)


def pick_variant(ctx: PackageContext):
    variants = makepkg.list_variants(ctx.path)
    if variants:
        console.print("Available PKGBUILD variants:")
        for i, name in enumerate(variants, 1):
            console.print(f"{i:3d}) {name}", markup=False, highlight=False)
        choice = ask("Pick a number to use as PKGBUILD (copy/overwrite): ")
    else:
        choice = ""
    chosen = makepkg.use_variant(ctx.path, variants, choice)
    if chosen is None:
        console.print("PKGBUILD is already the active recipe.")
    else:
        console.print(f"[green]PKGBUILD set to {chosen}.[/green]")


def update(ctx: PackageContext):
    aur.pull(ctx.path, ctx.runner)
    console.print("[green]✔️ Up to date[/green]")


def gen_srcinfo(ctx: PackageContext):
    makepkg.generate_srcinfo(ctx.path, ctx.runner)
    console.print("[green]Generated .SRCINFO[/green]")


def build(ctx: PackageContext):
    makepkg.build(ctx.path, ctx.runner)
    console.print(f"[green]✔️ Built {ctx.name}[/green]")


def install(ctx: PackageContext):
    makepkg.install(ctx.path, ctx.runner)
    console.print(f"[green]✔️ Installed {ctx.name}[/green]")


def clean(ctx: PackageContext):
    removed = makepkg.clean(ctx.path)
    if removed:
        logger.debug("removed %s", ", ".join(removed))
    console.print("Cleaned build artifacts.")


def show_log(ctx: PackageContext):
    commits = repo.recent_commits(ctx.path)
    if not commits:
        return console.print("[yellow]No commits to show[/yellow]")

    table = Table(title=f"[magenta]{ctx.name} history[/magenta]")
    table.add_column("Commit", style="yellow", no_wrap=True)
    table.add_column("Date", style="green")
    table.add_column("Author", style="cyan")
    table.add_column("Summary", style="white")
    for c in commits:
        table.add_row(c["id"], c["date"], c["author"], c["summary"])
    console.print(table)


def aur_info(ctx: PackageContext):
    meta = aur.info(ctx.name, ctx.settings.rpc_url)
    if not meta:
        return console.print(f"[yellow]{ctx.name} is not known to the AUR RPC[/yellow]")

    console.print(Panel.fit(
        "\n".join([
            f"[bold]Package[/bold]: {meta['name']}",
            f"[bold]Version[/bold]: {meta['version']}",
            f"[bold]Maintainer[/bold]: {meta['maintainer']}",
            f"[bold]Votes[/bold]: {meta['votes']}",
            f"[bold]Depends[/bold]: {', '.join(meta['depends']) or '-'}",
            f"[bold]Make depends[/bold]: {', '.join(meta['makedepends']) or '-'}",
            f"[bold]URL[/bold]: {meta['url']}",
            f"[bold]Summary[/bold]: {meta['summary']}",
        ]),
        title="[cyan]AUR info[/cyan]",
        border_style="cyan"
    ))


def unknown(ctx: PackageContext):
    console.print("Unknown choice.")


ACTIONS = {
    "v": view_recipe,
    "s": view_srcinfo,
    "e": edit_recipe,
    "p": pick_variant,
    "u": update,
    "g": gen_srcinfo,
    "b": build,
    "i": install,
    "c": clean,
    "l": show_log,
    "a": aur_info,
}


def dispatch(ctx: PackageContext, choice: str) -> bool:
    """
    Run the action for `choice`. Returns False when the menu should close.
    Errors from the action are reported here and never propagate.
    """
    token = choice.strip().lower()
    if token in QUIT:
        return False
    try:
        ACTIONS.get(token, unknown)(ctx)
    except GitaurError as e:
        logger.debug("%s on %s: %s", token, ctx.name, e)
        console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
    except OSError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
    return True


def run_menu(ctx: PackageContext):
    console.print()
    console.print(f"[bold]=== {ctx.name} ===[/bold]")
    console.print(str(ctx.path), markup=False)
    head = repo.head_summary(ctx.path)
    if head:
        console.print(f"HEAD {head}", markup=False, highlight=False)
    console.print("[dim]Building runs the PKGBUILD as you; only build packages you trust.[/dim]")

    while True:
        console.print(MENU_LINE, markup=False, highlight=False)
        if not dispatch(ctx, ask("> ")):
            break
