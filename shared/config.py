"""
Configuration Management
=========================

Settings for the hillplayfair tool, held in dataclasses and read from a
TOML file. Each TOML table maps to one dataclass:

    [global]    -> GlobalConfig
    [pipeline]  -> PipelineConfig

Keys a dataclass does not declare are ignored; missing keys keep their
defaults.

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# config.toml next to the shared/ package
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


@dataclass(slots=True)
class GlobalConfig:
    """Logging settings shared by every command."""

    log_level: str = "INFO"
    log_file: str = ""  # empty disables file logging
    log_json: bool = False


@dataclass(slots=True)
class PipelineConfig:
    """Parameters of the Hill -> Playfair pipeline.

    ``filler`` pads the Hill plaintext to a whole number of blocks and
    splits doubled or unpaired letters in the Playfair stage.
    """

    filler: str = "X"
    wrap_width: int = 80
    max_key_dimension: int = 32
    matrix_indent: int = 3


@dataclass(slots=True)
class ToolConfig:
    """All settings sections.

    Usage:
        >>> ToolConfig.load().pipeline.wrap_width
        80
        >>> ToolConfig.load("custom.toml").global_settings.log_level
        'DEBUG'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> ToolConfig:
        """Read settings from *path*, or from the project ``config.toml``.

        The project file is optional: when it is absent the defaults are
        returned. An explicit *path* must exist.

        Raises:
            FileNotFoundError: *path* was given and does not exist.
            TypeError: A value has the wrong type for its setting.
        """
        if path is None:
            if not _DEFAULT_CONFIG_PATH.is_file():
                return cls()
            source = _DEFAULT_CONFIG_PATH
        else:
            source = Path(path)
            if not source.is_file():
                raise FileNotFoundError(f"Configuration file not found: {source}")

        raw = tomllib.loads(source.read_text(encoding="utf-8"))
        return cls(
            global_settings=_from_table(GlobalConfig, raw.get("global", {})),
            pipeline=_from_table(PipelineConfig, raw.get("pipeline", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _from_table(section: type, table: dict[str, Any]) -> Any:
    values = {}
    for setting in fields(section):
        if setting.name not in table:
            continue
        value = table[setting.name]
        expected = type(setting.default)
        # bool is an int subclass; reject it for int settings
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise TypeError(
                f"Setting {setting.name!r} must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )
        values[setting.name] = value
    return section(**values)
