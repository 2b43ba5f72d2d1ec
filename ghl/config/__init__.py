"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional


@dataclass
class Config:
    """User configuration with sensible defaults."""
    editor: Optional[str] = None  # falls back to $VISUAL / $EDITOR / vim
    remote: str = "origin"
    base_branch: Optional[str] = None  # None: the repository's default branch
    assign_self: bool = True
    use_default_description: bool = True

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.remote, str) or not self.remote.strip():
            warnings.append(f"Invalid remote '{self.remote}', using '{defaults.remote}'")
            self.remote = defaults.remote

        if self.base_branch is not None and (not isinstance(self.base_branch, str) or not self.base_branch.strip()):
            warnings.append(f"Invalid base_branch '{self.base_branch}', using the repository default")
            self.base_branch = defaults.base_branch

        if self.editor is not None and (not isinstance(self.editor, str) or not self.editor.strip()):
            warnings.append(f"Invalid editor '{self.editor}', using $EDITOR")
            self.editor = defaults.editor

        for key in ("assign_self", "use_default_description"):
            if not isinstance(getattr(self, key), bool):
                warnings.append(f"Invalid {key} '{getattr(self, key)}', using {str(getattr(defaults, key)).lower()}")
                setattr(self, key, getattr(defaults, key))

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config

    def resolved_editor(self) -> Optional[str]:
        """GHL_EDITOR overrides the configured editor."""
        return os.environ.get('GHL_EDITOR') or self.editor


class ConfigManager:
    """Manages loading and saving configuration.

    Lookup order: .ghlrc in the current directory, .ghlrc in the home
    directory, then defaults.
    """

    CONFIG_FILENAME = ".ghlrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
            return self._config

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
            return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def save(self, config: Config, global_config: bool = True) -> Path:
        path = Path.home() / self.CONFIG_FILENAME if global_config else Path.cwd() / self.CONFIG_FILENAME
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
        self._config = config
        self._config_path = path
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def save_config(config: Config, global_config: bool = True) -> Path:
    return _manager.save(config, global_config)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "save_config",
    "get_config_path",
]
