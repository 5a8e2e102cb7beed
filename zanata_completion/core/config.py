"""Configuration management"""
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from .logger import Logger

DEFAULT_HEADER_FILE = Path(".") / "COPYING-header.txt"
CONFIG_FILE = Path(".") / "zanata-completion.yaml"
FUNCTION_NAME = "_zanata"

FILE_TOKEN = "file"
DIR_TOKEN = "dir"
URL_TOKEN = "url"


def default_output_path(command_name: str) -> Path:
    return Path(".") / f"{command_name}-completion"


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for a generator run"""
    subtract_generic_options: bool = False
    create_parent_dirs: bool = True
    function_name: str = FUNCTION_NAME
    verbose: bool = False
    no_color: bool = False

    @classmethod
    def load(cls, filepath: Path = CONFIG_FILE) -> "GeneratorConfig":
        """
        Load settings from a YAML file

        A missing file means defaults. A file that cannot be read or parsed
        is reported and defaults are used.
        """
        if not filepath.exists():
            return cls()

        try:
            data = yaml.safe_load(filepath.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            Logger.error(f"Failed to load {filepath}: {e}")
            return cls()

        if not isinstance(data, dict):
            Logger.error(f"Failed to load {filepath}: expected a mapping")
            return cls()

        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                Logger.warn(f"Ignoring unknown setting '{key}' in {filepath}")

        return cls(**{k: v for k, v in data.items() if k in known})
