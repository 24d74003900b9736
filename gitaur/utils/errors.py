import functools
import logging
import sys

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


class GitaurError(Exception):
    """Base class for everything gitaur reports to the user."""


class MissingToolError(GitaurError):
    pass


class UsageError(GitaurError):
    pass


class NetworkError(GitaurError):
    pass


class CloneError(NetworkError):
    pass


class PullError(NetworkError):
    pass


class InvalidSelectionError(GitaurError):
    pass


class BuildToolError(GitaurError):
    pass


class ToolError(GitaurError):
    """Pager or editor exited non-zero or could not be started."""


class ConfigError(GitaurError):
    pass


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except KeyboardInterrupt:
            console.print("\n[yellow]Interrupted.[/yellow]")
            sys.exit(130)
        except Exception as e:
            logging.getLogger("gitaur").error(f"{func.__name__} ▶ {e}")
            console.print(f"[bold red]\\[!] {func.__name__} failed:[/] {escape(str(e))}")
            sys.exit(1)

    return wrapper
