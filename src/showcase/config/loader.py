"""Configuration file discovery and initialization."""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Package defaults directory
PACKAGE_DIR = Path(__file__).parent.parent
DEFAULTS_DIR = PACKAGE_DIR / "defaults"

LOCAL_CONFIG_DIRNAME = ".showcase"
CONFIG_FILENAME = "showcase.yaml"


@dataclass
class ConfigPaths:
    """Discovered configuration paths."""

    # Directories
    local_dir: Optional[Path] = None  # .showcase/ in current directory
    user_dir: Optional[Path] = None  # ~/.config/showcase/
    package_dir: Path = DEFAULTS_DIR  # Package defaults

    # Specific files (resolved from directories)
    env_file: Optional[Path] = None
    config_file: Optional[Path] = None

    def __post_init__(self):
        """Resolve file paths from directories."""
        # Priority: local > user > package
        self.env_file = self._find_file(".env")
        self.config_file = self._find_file(CONFIG_FILENAME)

    def _find_file(self, filename: str) -> Optional[Path]:
        """Find a config file in priority order."""
        for directory in (self.local_dir, self.user_dir, self.package_dir):
            if directory:
                candidate = directory / filename
                if candidate.exists():
                    return candidate
        return None


def get_config_paths() -> ConfigPaths:
    """
    Discover configuration paths.

    Priority order (highest to lowest):
    1. .showcase/ in current directory
    2. ~/.config/showcase/
    3. Package defaults

    Returns:
        ConfigPaths with discovered locations
    """
    local_dir = Path.cwd() / LOCAL_CONFIG_DIRNAME
    local_dir = local_dir if local_dir.exists() else None

    user_dir = Path.home() / ".config" / "showcase"
    user_dir = user_dir if user_dir.exists() else None

    return ConfigPaths(
        local_dir=local_dir,
        user_dir=user_dir,
        package_dir=DEFAULTS_DIR,
    )


def init_local_config(target_dir: Optional[Path] = None) -> bool:
    """
    Initialize local configuration in the specified or current directory.

    Creates .showcase/ directory with template configuration files.

    Args:
        target_dir: Directory to initialize (default: current directory)

    Returns:
        True if successful
    """
    if target_dir is None:
        target_dir = Path.cwd()

    config_dir = target_dir / LOCAL_CONFIG_DIRNAME

    if config_dir.exists():
        print(f"Configuration already exists at {config_dir}")
        print("Delete it first if you want to reinitialize.")
        return False

    print(f"Initializing showcase configuration in {config_dir}")

    try:
        config_dir.mkdir(parents=True)

        # Values are commented out so they don't override user-level config
        env_content = """\
# showcase local configuration
# Uncomment and set values if not already configured elsewhere
# (e.g., in ~/.config/showcase/.env or environment variables)

# Directory served as static assets (holds the content roots)
# SHOWCASE_PUBLIC_DIR=public

# Content root names inside the public directory
# SHOWCASE_PROJECTS_ROOT=Projects
# SHOWCASE_EXPERIENCE_ROOT=Experience

# Sort entries and files by name for deterministic output
# SHOWCASE_SORT=true

# Console theme: default, light, minimal
# SHOWCASE_THEME=default
"""
        (config_dir / ".env").write_text(env_content)

        config_content = """\
# showcase content configuration
# Environment variables (SHOWCASE_*) take precedence over this file.

public_dir: public

roots:
  projects: Projects
  experience: Experience

# Keep filesystem enumeration order (false) or sort by name (true)
sort_entries: false

theme: default
"""
        (config_dir / CONFIG_FILENAME).write_text(config_content)

        print(f"\nCreated configuration files:")
        print(f"  {config_dir}/.env           - Environment overrides")
        print(f"  {config_dir}/{CONFIG_FILENAME} - Content roots and ordering")
        print(f"\nNext steps:")
        print(f"  1. Add one folder per project under public/Projects")
        print(f"  2. Run 'showcase' to list the discovered content")

        return True

    except OSError as e:
        print(f"Error creating configuration: {e}")
        if config_dir.exists():
            shutil.rmtree(config_dir)
        return False
