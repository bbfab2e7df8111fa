"""Rendering configuration for stopwatches."""

import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import yaml

from .formatter import DEFAULT_PRECISION


CONFIG_ENV_VAR = "PRETTY_STOPWATCH_CONFIG"
DEFAULT_CONFIG_FILE = Path.home() / ".pretty_stopwatch.yaml"


@dataclass
class FormatConfig:
    """How a stopwatch is rendered as text."""
    precision: int = DEFAULT_PRECISION
    named_template: str = "'{name}' elapsed: {value}"

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "FormatConfig":
        """Load a config file, falling back to defaults when there is none.

        Lookup order: `path`, then $PRETTY_STOPWATCH_CONFIG, then
        ~/.pretty_stopwatch.yaml.
        """
        config_file = path or get_config_path()

        if config_file.exists():
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"{config_file}: expected a mapping, got {type(data).__name__}")
            return cls(**data)

        return cls()

    def render(self, name: Optional[str], value: str) -> str:
        """Combine an optional stopwatch name with a scaled duration."""
        if name is None:
            return value
        return self.named_template.format(name=name, value=value)


def get_config_path() -> Path:
    """Resolve the config file location from the environment."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE
