"""Shared fixtures: isolated config environment and content tree builders."""

import os
from pathlib import Path
from typing import Union

import pytest

from showcase.config import reset_settings
from showcase.display import reset_console, reset_theme


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from an empty cwd with no user config or SHOWCASE_* vars."""
    for key in list(os.environ):
        if key.startswith("SHOWCASE_"):
            monkeypatch.delenv(key, raising=False)

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    reset_settings()
    reset_theme()
    reset_console()
    yield
    reset_settings()
    reset_theme()
    reset_console()


@pytest.fixture
def make_entry():
    """Create an entry directory with the given files.

    Usage: ``make_entry(root, "my-app", {"shot.png": b"...", "description.md": "text"})``
    """

    def _make(root: Path, name: str, files: dict[str, Union[str, bytes]]) -> Path:
        entry_dir = root / name
        entry_dir.mkdir(parents=True, exist_ok=True)
        for filename, content in files.items():
            path = entry_dir / filename
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return entry_dir

    return _make


@pytest.fixture
def public_dir(tmp_path, make_entry):
    """A public directory with two projects and one experience entry."""
    public = tmp_path / "public"

    make_entry(
        public / "Projects",
        "my-cool-app",
        {
            "description.md": "A small app.\nGitHub: https://github.com/me/app\n",
            "preview.mp4": b"\x00",
            "preview_pic.jpg": b"\xff\xd8",
            "shot1.png": b"\x89PNG",
            "shot1.full.png": b"\x89PNG",
            "demo.pdf": b"%PDF-1.4",
        },
    )
    make_entry(public / "Projects", "empty-project", {})
    make_entry(
        public / "Experience",
        "Acme-Corp",
        {
            "description.txt": "Built things.\n",
            "office.jpg": b"\xff\xd8",
        },
    )
    return public
