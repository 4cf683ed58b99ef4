"""
Configuration for the dmark command line tool.

Settings are read from ``dmark.toml``; every key is optional.
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

CONFIG_FILENAME = "dmark.toml"

OUTPUT_FORMATS = ("tree", "json")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class OutputConfig:
    """How parsed documents are printed."""

    format: str = "tree"  # "tree" | "json"
    color: bool = True
    indent: int = 2  # JSON indent


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass
class DMarkConfig:
    """Complete tool configuration."""

    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source: Path | None = None


def load_config(path: Path | None = None) -> DMarkConfig:
    """
    Load configuration.

    Args:
        path: Explicit config file. When omitted, ``dmark.toml`` in the
            current directory is used if it exists.

    Returns:
        DMarkConfig; defaults if no file was found

    Raises:
        ConfigError: If the file is missing (explicit path), malformed,
            or holds invalid values
    """
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME
        if not path.exists():
            return DMarkConfig()
    elif not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    output_data = data.get("output", {})
    logging_data = data.get("logging", {})

    output_config = OutputConfig(
        format=output_data.get("format", "tree"),
        color=output_data.get("color", True),
        indent=output_data.get("indent", 2),
    )
    logging_config = LoggingConfig(
        level=str(logging_data.get("level", "WARNING")).upper(),
    )

    if output_config.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Unknown output format {output_config.format!r} in {path} "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
        )
    if not isinstance(output_config.color, bool):
        raise ConfigError(f"output.color must be true or false in {path}")
    # bool is an int subclass
    indent = output_config.indent
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ConfigError(f"output.indent must be a non-negative integer in {path}")
    if logging_config.level not in LOG_LEVELS:
        raise ConfigError(f"Unknown logging level {logging_config.level!r} in {path}")

    return DMarkConfig(output=output_config, logging=logging_config, source=path)
