#!/usr/bin/env python3
import sys
import argparse

from rich.console import Console

from gitaur.pkgmanager import run
from gitaur.utils.config import load_settings
from gitaur.utils.errors import configure_logging, handle_errors

console = Console()


class RichParser(argparse.ArgumentParser):
    def error(self, message):
        console.print(f"[bold red]Error:[/] {message}\n")
        self.print_help()
        sys.exit(2)


def parse_args(argv=None):
    parser = RichParser(
        prog="gitaur",
        description="Search, clone and build AUR packages from the AUR git mirror",
        epilog="Env: AUR_CLONE_DIR, AUR_GIT_URL, PAGER, EDITOR. "
               "Building runs PKGBUILD code as you: only build packages you trust.",
        allow_abbrev=False,
    )

    parser.add_argument(
        "terms", nargs="+", metavar="TERM", help="Search term (case-insensitive substring)"
    )
    parser.add_argument(
        "--out", type=str, default=None, help="Clone directory (default: $AUR_CLONE_DIR or ~/src/aur)"
    )
    parser.add_argument(
        "--url", type=str, default=None, help="AUR git repository (default: $AUR_GIT_URL)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    return parser.parse_args(argv)


@handle_errors
def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    settings = load_settings(clone_dir=args.out, aur_url=args.url)
    run(args.terms, settings)


if __name__ == "__main__":
    main()
