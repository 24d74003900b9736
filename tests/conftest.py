import pytest

from gitaur.utils.config import Settings
from gitaur.utils.runner import ToolResult


class FakeRunner:
    """Records every tool call and answers from canned results keyed by argv prefix."""

    def __init__(self, results=None, tools=("git", "makepkg")):
        self.results = dict(results or {})
        self.tools = set(tools)
        self.calls = []

    def run(self, args, cwd=None, capture=False):
        self.calls.append((tuple(args), cwd))
        for prefix, res in self.results.items():
            if tuple(args[:len(prefix)]) == prefix:
                if callable(res):
                    res = res(args, cwd)
                return ToolResult(tuple(args), *res)
        return ToolResult(tuple(args), 0)

    def which(self, name):
        return f"/usr/bin/{name}" if name in self.tools else None

    def commands(self):
        return [args for args, _ in self.calls]


def answers(*values):
    """console.input replacement returning `values` in order, then EOF."""
    it = iter(values)

    def _input(prompt="", **kwargs):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return _input


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        aur_url="https://example.invalid/aur.git",
        clone_dir=tmp_path / "aur",
        pager=("less", "-R"),
        editor=("nano",),
        rpc_url="https://example.invalid/rpc/v5/info",
    )
