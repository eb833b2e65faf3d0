"""Tests for the showcase command line."""

import json
from pathlib import Path

from showcase import __version__
from showcase.cli import apply_args_to_settings, main, parse_args
from showcase.config import Settings


def test_version(capsys):
    assert main(["--version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_plain_listing(public_dir, capsys):
    assert main(["--plain", "-p", str(public_dir)]) == 0
    out = capsys.readouterr().out

    assert "my cool app (my-cool-app)" in out
    assert "Acme Corp (1 images)" in out


def test_projects_only(public_dir, capsys):
    assert main(["--plain", "--projects", "-p", str(public_dir)]) == 0
    out = capsys.readouterr().out

    assert "Projects:" in out
    assert "Experience:" not in out


def test_stats(public_dir, capsys):
    assert main(["--plain", "--stats", "-p", str(public_dir)]) == 0
    out = capsys.readouterr().out

    assert "Content Overview:" in out
    assert "Projects:            2" in out


def test_missing_public_dir_shows_placeholders(tmp_path, capsys):
    assert main(["--plain", "-p", str(tmp_path / "missing")]) == 0
    out = capsys.readouterr().out

    assert "No projects found" in out
    assert "No experience entries found" in out


def test_json_output(public_dir, capsys):
    assert main(["--json", "--sort", "-p", str(public_dir)]) == 0
    data = json.loads(capsys.readouterr().out)

    assert [p["slug"] for p in data["projects"]] == ["empty-project", "my-cool-app"]
    assert data["experiences"][0]["title"] == "Acme Corp"


def test_export(public_dir, tmp_path, capsys):
    target = tmp_path / "dist" / "content.json"

    assert main(["--export", str(target), "-p", str(public_dir)]) == 0

    assert "Exported content snapshot" in capsys.readouterr().out
    assert json.loads(target.read_text(encoding="utf-8"))["stats"]["projects"] == 2


def test_unreadable_public_dir_returns_error(public_dir, monkeypatch, capsys):
    def denied(self):
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "iterdir", denied)

    assert main(["--plain", "-p", str(public_dir)]) == 1
    assert "Error reading content" in capsys.readouterr().err


def test_init_and_config(capsys):
    assert main(["--init"]) == 0
    assert (Path.cwd() / ".showcase" / "showcase.yaml").exists()

    assert main(["--config", "--plain"]) == 0
    out = capsys.readouterr().out
    assert "Configuration Paths:" in out
    assert str(Path.cwd() / ".showcase") in out


def test_apply_args_to_settings(tmp_path):
    args = parse_args(["-p", str(tmp_path / "site"), "--sort", "-v"])
    settings = apply_args_to_settings(args, Settings())

    assert settings.public_dir == (tmp_path / "site").resolve()
    assert settings.sort_entries is True
    assert settings.verbose is True


def test_logging_level_follows_settings(monkeypatch, capsys):
    levels = []
    monkeypatch.setattr("showcase.cli.load_settings", lambda: Settings(verbose=True))
    monkeypatch.setattr("showcase.cli.configure_logging", lambda verbose: levels.append(verbose))

    assert main(["--config", "--plain"]) == 0
    assert levels == [True]
