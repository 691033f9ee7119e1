"""Configuration Management Package"""

import json
import os
import re
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from pfcli import DEFAULT_TYPE_NAME, TYPE_NAME_PATTERN

# Valid configuration values
VALID_PROVIDERS = {"openai", "claude"}


@dataclass
class Config:
    """User configuration with sensible defaults."""
    provider: str = "openai"
    model: Optional[str] = None
    default_type_name: str = DEFAULT_TYPE_NAME
    max_diff_chars: int = 3000  # Diff prefix sent to the LLM
    remote: str = "origin"
    editor: str = "code"  # Launcher offered after type generation
    timeout: int = 30  # Seconds, for the sample JSON fetch

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        if self.provider not in VALID_PROVIDERS:
            warnings.append(f"Invalid provider '{self.provider}', using '{defaults.provider}'")
            self.provider = defaults.provider

        if not isinstance(self.default_type_name, str) or not re.match(TYPE_NAME_PATTERN, self.default_type_name):
            warnings.append(f"Invalid default_type_name '{self.default_type_name}', using '{defaults.default_type_name}'")
            self.default_type_name = defaults.default_type_name

        for key in ('max_diff_chars', 'timeout'):
            value = getattr(self, key)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                warnings.append(f"Invalid {key} '{value}', using {getattr(defaults, key)}")
                setattr(self, key, getattr(defaults, key))

        for key in ('remote', 'editor'):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                warnings.append(f"Invalid {key} '{value}', using '{getattr(defaults, key)}'")
                setattr(self, key, getattr(defaults, key))

        return warnings

    def apply_env(self, environ: dict) -> None:
        """Environment overrides: PF_PROVIDER, PF_MODEL."""
        provider = environ.get('PF_PROVIDER')
        if provider:
            if provider in VALID_PROVIDERS:
                self.provider = provider
            else:
                print(f"Config warning: Invalid PF_PROVIDER '{provider}', using '{self.provider}'", file=sys.stderr)
        model = environ.get('PF_MODEL')
        if model:
            self.model = model

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        # Validate and print warnings to stderr
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading configuration from .pfclirc files."""

    CONFIG_FILENAME = ".pfclirc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
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
        except (json.JSONDecodeError, ValueError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


def load_config(environ: dict | None = None) -> tuple[Config, Optional[Path]]:
    """Load the effective config and the file it came from, if any."""
    manager = ConfigManager()
    config = manager.load()
    config.apply_env(os.environ if environ is None else environ)
    return config, manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "VALID_PROVIDERS",
]
