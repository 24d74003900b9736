# gitaur/utils/runner.py

import logging
import shutil
import subprocess

from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("gitaur.runner")


@dataclass(frozen=True)
class ToolResult:
    args: tuple
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ToolRunner:
    """
    Runs external tools (git, makepkg, pager, editor) as subprocesses.

    With capture=True stdout/stderr are collected as text; otherwise the
    child shares the terminal so interactive tools and build logs behave
    exactly as when run by hand. A tool that cannot be started is reported
    as returncode 127 with the OS error in stderr.
    """

    def run(self, args: list[str], cwd: Path | None = None,
            capture: bool = False) -> ToolResult:
        logger.debug("run %s (cwd=%s)", " ".join(args), cwd)
        try:
            if capture:
                proc = subprocess.run(args, cwd=cwd, capture_output=True, text=True)
                return ToolResult(tuple(args), proc.returncode,
                                  proc.stdout, proc.stderr)
            proc = subprocess.run(args, cwd=cwd)
            return ToolResult(tuple(args), proc.returncode)
        except OSError as e:
            logger.debug("could not start %s: %s", args[0], e)
            return ToolResult(tuple(args), 127, "", str(e))

    def which(self, name: str) -> str | None:
        return shutil.which(name)
