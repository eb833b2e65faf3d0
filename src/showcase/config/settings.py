"""Settings management for showcase."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from .loader import ConfigPaths, get_config_paths

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "y", "on"}
FALSE_VALUES = {"0", "false", "no", "n", "off"}


@dataclass
class Settings:
    """Application settings loaded from environment and config files."""

    # Paths
    base_dir: Path = field(default_factory=Path.cwd)
    public_dir: Path = field(default_factory=lambda: Path.cwd() / "public")
    config_paths: Optional[ConfigPaths] = None

    # Content roots (directory names inside public_dir)
    projects_root: str = "Projects"
    experience_root: str = "Experience"

    # Scan behavior
    sort_entries: bool = False

    # Display
    color_theme: str = "default"

    # Runtime
    verbose: bool = False

    @property
    def projects_dir(self) -> Path:
        return self.public_dir / self.projects_root

    @property
    def experience_dir(self) -> Path:
        return self.public_dir / self.experience_root


def load_config_file(config_file: Optional[Path]) -> dict[str, Any]:
    """Load showcase.yaml. Missing or invalid files yield an empty dict."""
    if not config_file or not config_file.exists():
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring invalid config file %s: %s", config_file, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a mapping", config_file)
        return {}
    return data


def _parse_bool(raw: Any, default: bool) -> bool:
    """Parse a boolean from YAML or environment values."""
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return default
    value = str(raw).strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return default


def _resolve_dir(raw: str, base_dir: Path) -> Path:
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path


def load_settings() -> Settings:
    """
    Load settings from all configuration sources.

    Priority (highest to lowest):
    1. Environment variables (including from .env files)
    2. Local .showcase/ directory
    3. User ~/.config/showcase/ directory
    4. Package defaults
    """
    paths = get_config_paths()

    # Load .env file (local takes priority)
    if paths.env_file:
        load_dotenv(paths.env_file, override=True)

    config = load_config_file(paths.config_file)
    roots = config.get("roots") or {}
    if not isinstance(roots, dict):
        roots = {}

    base_dir = Path.cwd()

    public_raw = os.getenv("SHOWCASE_PUBLIC_DIR") or config.get("public_dir") or "public"
    projects_root = (
        os.getenv("SHOWCASE_PROJECTS_ROOT") or roots.get("projects") or "Projects"
    )
    experience_root = (
        os.getenv("SHOWCASE_EXPERIENCE_ROOT") or roots.get("experience") or "Experience"
    )

    sort_raw = os.getenv("SHOWCASE_SORT")
    if sort_raw is None or not sort_raw.strip():
        sort_raw = config.get("sort_entries")

    return Settings(
        base_dir=base_dir,
        public_dir=_resolve_dir(str(public_raw), base_dir),
        config_paths=paths,
        projects_root=str(projects_root).strip("/"),
        experience_root=str(experience_root).strip("/"),
        sort_entries=_parse_bool(sort_raw, default=False),
        color_theme=os.getenv("SHOWCASE_THEME") or config.get("theme") or "default",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Reset global settings (useful for testing or directory change)."""
    global _settings
    _settings = None
