from pathlib import Path

import pytest

from gitaur.utils.config import AUR_GIT_URL, AUR_RPC_URL, load_settings
from gitaur.utils.errors import ConfigError
from gitaur.utils.osdetect import is_arch_based


def test_defaults(monkeypatch):
    monkeypatch.setenv("HOME", "/home/tester")
    s = load_settings(env={})
    assert s.aur_url == AUR_GIT_URL
    assert s.rpc_url == AUR_RPC_URL
    assert s.clone_dir == Path("/home/tester/src/aur")
    assert s.pager == ("less", "-R")
    assert s.editor == ("nano",)


def test_environment_overrides():
    s = load_settings(env={
        "AUR_CLONE_DIR": "/srv/aur",
        "AUR_GIT_URL": "file:///mirror/aur.git",
        "PAGER": "bat --paging=always",
        "EDITOR": "code --wait",
        "AUR_RPC_URL": "http://localhost/rpc",
    })
    assert s.clone_dir == Path("/srv/aur")
    assert s.aur_url == "file:///mirror/aur.git"
    assert s.pager == ("bat", "--paging=always")
    assert s.editor == ("code", "--wait")
    assert s.rpc_url == "http://localhost/rpc"


def test_arguments_win_and_empty_env_is_unset():
    s = load_settings(
        env={"AUR_CLONE_DIR": "/srv/aur", "PAGER": "", "EDITOR": ""},
        clone_dir="/tmp/out",
        aur_url="https://example.invalid/aur.git",
    )
    assert s.clone_dir == Path("/tmp/out")
    assert s.aur_url == "https://example.invalid/aur.git"
    assert s.pager == ("less", "-R")
    assert s.editor == ("nano",)


def test_is_arch_based(tmp_path):
    release = tmp_path / "os-release"
    release.write_text('NAME="Arch Linux"\nID=arch\n')
    assert is_arch_based(release)

    release.write_text('ID=cachyos\nID_LIKE="arch"\n')
    assert is_arch_based(release)

    release.write_text('ID=ubuntu\nID_LIKE=debian\n')
    assert not is_arch_based(release)

    assert not is_arch_based(tmp_path / "missing")


def test_unbalanced_quote_is_config_error():
    with pytest.raises(ConfigError, match="EDITOR"):
        load_settings(env={"EDITOR": "vim '"})
