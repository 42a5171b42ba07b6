"""Configuration management for the CLI."""

import os
from pathlib import Path
from typing import Any

import yaml

OUTPUT_FORMATS = ("table", "json")

DEFAULTS: dict[str, Any] = {
    "format": "table",
    "no_color": False,
}


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}")

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        paths = []

        # User config
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "bookscan" / "config.yaml")

        # Project config
        paths.append(Path(".bookscan.yaml"))
        paths.append(Path("bookscan.yaml"))

        return paths


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from defaults, files and environment variables.

    An explicit path replaces the default locations. Later files win for
    conflicting keys, and the environment wins over every file.
    """
    config = dict(DEFAULTS)

    paths = [path] if path else Config.get_config_paths()
    for config_path in paths:
        if config_path.exists():
            config.update(Config.from_file(config_path))

    if output_format := os.environ.get("BOOKSCAN_FORMAT"):
        config["format"] = output_format

    if config["format"] not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output format '{config['format']}', "
            f"expected one of: {', '.join(OUTPUT_FORMATS)}"
        )

    return config
