# gitaur/utils/config.py

import os
import shlex

from dataclasses import dataclass, field
from pathlib import Path

from gitaur.utils.errors import ConfigError

AUR_GIT_URL = "https://github.com/archlinux/aur.git"
AUR_RPC_URL = "https://aur.archlinux.org/rpc/v5/info"
DEFAULT_CLONE_DIR = "~/src/aur"
DEFAULT_PAGER = "less -R"
DEFAULT_EDITOR = "nano"


@dataclass(frozen=True)
class Settings:
    aur_url: str = AUR_GIT_URL
    clone_dir: Path = field(default_factory=lambda: Path(DEFAULT_CLONE_DIR).expanduser())
    pager: tuple = tuple(shlex.split(DEFAULT_PAGER))
    editor: tuple = tuple(shlex.split(DEFAULT_EDITOR))
    rpc_url: str = AUR_RPC_URL


def _command(name, value) -> tuple:
    try:
        return tuple(shlex.split(value))
    except ValueError as e:
        raise ConfigError(f"cannot parse ${name} ({value!r}): {e}") from e


def load_settings(env=None, clone_dir=None, aur_url=None) -> Settings:
    """
    Build Settings from the environment (AUR_CLONE_DIR, AUR_GIT_URL, PAGER,
    EDITOR, AUR_RPC_URL). Explicit arguments win over the environment and
    empty variables count as unset.
    """
    env = os.environ if env is None else env

    out = clone_dir or env.get("AUR_CLONE_DIR") or DEFAULT_CLONE_DIR
    pager = env.get("PAGER") or DEFAULT_PAGER
    editor = env.get("EDITOR") or DEFAULT_EDITOR

    return Settings(
        aur_url=aur_url or env.get("AUR_GIT_URL") or AUR_GIT_URL,
        clone_dir=Path(out).expanduser(),
        pager=_command("PAGER", pager),
        editor=_command("EDITOR", editor),
        rpc_url=env.get("AUR_RPC_URL") or AUR_RPC_URL,
    )
