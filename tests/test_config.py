"""Tests for configuration loading behavior."""

from pathlib import Path

from showcase.config import get_settings, reset_settings
from showcase.config.loader import DEFAULTS_DIR, get_config_paths, init_local_config
from showcase.config.settings import load_settings


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults_without_any_config():
    settings = load_settings()

    assert settings.public_dir == Path.cwd() / "public"
    assert settings.projects_root == "Projects"
    assert settings.experience_root == "Experience"
    assert settings.sort_entries is False
    assert settings.color_theme == "default"
    assert settings.projects_dir == Path.cwd() / "public" / "Projects"


def test_package_defaults_are_discovered():
    paths = get_config_paths()

    assert paths.local_dir is None
    assert paths.user_dir is None
    assert paths.config_file == DEFAULTS_DIR / "showcase.yaml"


def test_local_config_prefers_local_over_user(tmp_path):
    """Local .showcase/showcase.yaml should override user-level configuration."""
    _write(tmp_path / "home" / ".config" / "showcase" / "showcase.yaml", "public_dir: user_site\n")
    local = _write(Path.cwd() / ".showcase" / "showcase.yaml", "public_dir: local_site\n")

    paths = get_config_paths()
    assert paths.config_file == local

    settings = load_settings()
    assert settings.public_dir == Path.cwd() / "local_site"


def test_user_config_is_used_without_local(tmp_path):
    _write(
        tmp_path / "home" / ".config" / "showcase" / "showcase.yaml",
        "roots:\n  projects: Work\n  experience: Jobs\nsort_entries: true\ntheme: minimal\n",
    )

    settings = load_settings()

    assert settings.projects_root == "Work"
    assert settings.experience_root == "Jobs"
    assert settings.sort_entries is True
    assert settings.color_theme == "minimal"


def test_environment_overrides_config_file(monkeypatch):
    _write(Path.cwd() / ".showcase" / "showcase.yaml", "public_dir: from_yaml\nsort_entries: true\n")
    monkeypatch.setenv("SHOWCASE_PUBLIC_DIR", "from_env")
    monkeypatch.setenv("SHOWCASE_SORT", "off")

    settings = load_settings()

    assert settings.public_dir == Path.cwd() / "from_env"
    assert settings.sort_entries is False


def test_env_file_is_loaded(monkeypatch):
    # Registered with monkeypatch so the value written by the .env file is undone
    monkeypatch.setenv("SHOWCASE_PROJECTS_ROOT", "placeholder")
    _write(Path.cwd() / ".showcase" / ".env", "SHOWCASE_PROJECTS_ROOT=Portfolio\n")

    settings = load_settings()

    assert settings.projects_root == "Portfolio"


def test_absolute_public_dir_is_kept(tmp_path, monkeypatch):
    monkeypatch.setenv("SHOWCASE_PUBLIC_DIR", str(tmp_path / "elsewhere"))

    assert load_settings().public_dir == tmp_path / "elsewhere"


def test_invalid_yaml_is_ignored(caplog):
    _write(Path.cwd() / ".showcase" / "showcase.yaml", "public_dir: [unclosed\n")

    settings = load_settings()

    assert settings.public_dir == Path.cwd() / "public"
    assert "Ignoring invalid config file" in caplog.text


def test_non_mapping_yaml_is_ignored():
    _write(Path.cwd() / ".showcase" / "showcase.yaml", "- just\n- a list\n")

    assert load_settings().projects_root == "Projects"


def test_invalid_sort_value_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("SHOWCASE_SORT", "sometimes")

    assert load_settings().sort_entries is False


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("SHOWCASE_THEME", "light")
    reset_settings()

    assert get_settings().color_theme == "light"


def test_init_local_config_creates_templates(capsys):
    assert init_local_config() is True

    config_dir = Path.cwd() / ".showcase"
    assert (config_dir / ".env").exists()
    assert (config_dir / "showcase.yaml").exists()

    # The generated template loads cleanly
    settings = load_settings()
    assert settings.public_dir == Path.cwd() / "public"
    assert settings.projects_root == "Projects"

    assert init_local_config() is False
    assert "already exists" in capsys.readouterr().out
