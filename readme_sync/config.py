"""Configuration defaults and YAML loading."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_HEADER = "# 🛠 Script Hub\n"
DEFAULT_SECTION_HEADER = "## 📂 Available Scripts"
DEFAULT_TABLE_HEADER = "| Script | Description |"

MODES = ("overwrite", "section", "table")
TITLE_STYLES = ("as-is", "titlecase")
FALLBACK_TITLES = ("filename", "humanized")


class ConfigError(Exception):
    """Raised for an invalid configuration file or value."""


@dataclass
class SyncConfig:
    directory: Path = Path(".")
    output: str = "README.md"
    mode: str = "overwrite"
    header: str = DEFAULT_HEADER
    section_header: str = DEFAULT_SECTION_HEADER
    table_header: str = DEFAULT_TABLE_HEADER
    extension: str = ".md"
    sort: bool = True
    escape: bool = True
    case_sensitive: bool = False
    title_style: str = "as-is"
    fallback_title: str = "filename"
    fail_fast: bool = False

    def __post_init__(self) -> None:
        self.directory = Path(self.directory)
        self.validate()

    def validate(self) -> None:
        _check_choice("mode", self.mode, MODES)
        _check_choice("title_style", self.title_style, TITLE_STYLES)
        _check_choice("fallback_title", self.fallback_title, FALLBACK_TITLES)
        if not self.extension:
            raise ConfigError("extension must not be empty")

    @property
    def target_path(self) -> Path:
        return self.directory / self.output


def _check_choice(name: str, value: str, choices: tuple) -> None:
    if value not in choices:
        raise ConfigError(f"Invalid {name} {value!r}, expected one of: {', '.join(choices)}")


def load_config(path: Path, **overrides: Any) -> SyncConfig:
    """Load a SyncConfig from a YAML mapping.

    Keys match SyncConfig fields. A relative ``directory`` is resolved against
    the config file's own directory. Overrides that are not None win over the
    file's values.

    Raises:
        ConfigError: If the file cannot be read, is not a mapping of known keys,
            or holds invalid values
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e.strerror or e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {path.name}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping")

    known = {f.name for f in fields(SyncConfig)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path.name}: {', '.join(unknown)}")

    values: Dict[str, Any] = dict(data)
    if "directory" in values:
        directory = Path(values["directory"])
        values["directory"] = directory if directory.is_absolute() else path.parent / directory
    values.update({k: v for k, v in overrides.items() if v is not None})
    return SyncConfig(**values)
