"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from simpleui.utils.constants import ENV_PREFIX
from simpleui.utils.exceptions import ConfigurationError


def get_simpleui_dir() -> Path:
    """Get the simpleui data directory (XDG-compliant)."""
    if env_dir := os.environ.get("SIMPLEUI_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "simpleui"


class Config:
    """Application configuration."""

    # Toggleable settings with descriptions (attr_name -> description)
    TOGGLES: dict[str, str] = {
        "debug": "Log to ~/.config/simpleui/debug.log",
        "clear_screen": "Clear the terminal between menu screens",
        "color": "Colour menu output",
    }

    def __init__(self, simpleui_dir: Optional[Path] = None):
        """Load config from directory."""
        self.simpleui_dir = simpleui_dir or get_simpleui_dir()
        self._config_file = self.simpleui_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        # Set defaults
        self.debug = False
        self.clear_screen = True
        self.color = True
        # Env var overrides persisted in the config file
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                if isinstance(data, dict):
                    self.debug = bool(data.get("debug", False))
                    self.clear_screen = bool(data.get("clear_screen", True))
                    self.color = bool(data.get("color", True))
                    env = data.get("env", {})
                    if isinstance(env, dict):
                        self.env = env
            except (json.JSONDecodeError, UnicodeDecodeError, OSError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell SIMPLEUI_* vars."""

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both SIMPLEUI_FOO and FOO formats in config.env
                if key.startswith(ENV_PREFIX):
                    attr_name = key[len(ENV_PREFIX) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name not in self.TOGGLES:
                    continue
                enabled = str(value).lower() in ("true", "1", "yes", "on")
                setattr(self, attr_name, enabled)

        apply_env_dict(self.env)

        shell_env = {k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}
        apply_env_dict(shell_env)

    @property
    def config_file(self) -> Path:
        """Path to config.json."""
        return self._config_file

    @property
    def log_file(self) -> Path:
        """Path to debug log."""
        return self.simpleui_dir / "debug.log"

    def save(self):
        """Save config to file."""
        self.simpleui_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "debug": self.debug,
            "clear_screen": self.clear_screen,
            "color": self.color,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    def get_toggles(self) -> list[tuple[str, str, bool]]:
        """Get all toggleable settings with current values.

        Returns list of (attr_name, description, is_enabled).
        """
        result = []
        for attr, desc in self.TOGGLES.items():
            value = getattr(self, attr, False)
            result.append((attr, desc, bool(value)))
        return result

    def set_toggle(self, attr: str, enabled: bool):
        """Set a toggle value and persist it."""
        if attr not in self.TOGGLES:
            raise ConfigurationError(f"Unknown setting: {attr}")
        setattr(self, attr, enabled)
        self.save()

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.set_toggle("debug", enabled)
