from pathlib import Path

import pytest

from gitaur import cli


def test_no_terms_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.parse_args([])
    assert exc.value.code == 2
    assert "usage: gitaur" in capsys.readouterr().out


def test_main_passes_terms_and_overrides(monkeypatch):
    seen = {}
    monkeypatch.setattr(cli, "run", lambda terms, settings: seen.update(terms=terms, settings=settings))
    monkeypatch.delenv("AUR_CLONE_DIR", raising=False)

    cli.main(["--out", "/tmp/aur", "--url", "file:///mirror.git", "yay", "paru-bin"])

    assert seen["terms"] == ["yay", "paru-bin"]
    assert seen["settings"].clone_dir == Path("/tmp/aur")
    assert seen["settings"].aur_url == "file:///mirror.git"


def test_bad_pager_is_reported_not_raised(monkeypatch, capsys):
    monkeypatch.setattr(cli, "run", lambda terms, settings: None)
    monkeypatch.setenv("PAGER", 'less "-R')

    with pytest.raises(SystemExit) as exc:
        cli.main(["yay"])

    assert exc.value.code == 1
    assert "cannot parse $PAGER" in capsys.readouterr().err


def test_interrupt_exits_130(monkeypatch, capsys):
    def interrupted(terms, settings):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run", interrupted)

    with pytest.raises(SystemExit) as exc:
        cli.main(["yay"])

    assert exc.value.code == 130
    assert "Interrupted." in capsys.readouterr().err
