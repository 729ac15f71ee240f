# Cmdopts Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loader for option declaration files.

A declaration file lists the options an application supports, so they can be
kept next to the application instead of in code. Only declarations are read;
option values always come from the command line.

YAML example:
    options:
      - name: BufferSize
        default: "1000"
        short: b
        help: Size of the read buffer
      - name: OutputFile
        default: output.txt
        short: o

TOML example:
    [[options]]
    name = "BufferSize"
    default = "1000"
    short = "b"
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from cmdopts.exceptions import ConfigError
from cmdopts.logger import logger
from cmdopts.parser import CmdParse, Option


def find_config() -> Path | None:
    """Return the first declaration file found in the usual locations."""
    candidates = [
        Path.cwd() / "cmdopts.yaml",
        Path.cwd() / "cmdopts.toml",
        Path.cwd() / ".cmdopts.yaml",
        Path.cwd() / ".cmdopts.toml",
        Path(os.environ.get("CMDOPTS_CONFIG", "cmdopts.yaml")),
        Path.home() / ".config" / "cmdopts" / "cmdopts.yaml",
        Path.home() / ".config" / "cmdopts" / "cmdopts.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


class RawOption(BaseModel):
    """Raw option declaration as found in a declaration file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    long_name: str = Field(validation_alias=AliasChoices("long_name", "name"))
    default_value: str = Field(
        default="", validation_alias=AliasChoices("default_value", "default")
    )
    short_name: str = Field(
        default="", validation_alias=AliasChoices("short_name", "short")
    )
    help: str = ""

    @field_validator("default_value", mode="before")
    @classmethod
    def validate_default_value(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float, str)):
            return str(value)
        raise ValueError("default must be a string, number or boolean.")

    @field_validator("long_name")
    @classmethod
    def validate_long_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty.")
        if value.startswith("-"):
            raise ValueError("name must not start with '-'.")
        return value

    def to_option(self) -> Option:
        return Option(
            long_name=self.long_name,
            default_value=self.default_value,
            short_name=self.short_name.strip(),
            help=self.help,
        )


class OptionsConfig(BaseModel):
    """Option declaration file model."""

    options: list[RawOption] = Field(default_factory=list)

    def to_parser(self) -> CmdParse:
        return CmdParse(raw_option.to_option() for raw_option in self.options)


def loader(file_path: Path | str) -> CmdParse:
    """
    Load option declarations from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the declaration file.

    Returns:
        CmdParse: A parser with every declared option added. Duplicate names
        are recorded in its error list like any other duplicate declaration.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the format is unsupported or the content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse '{path}': {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of options.\n"
            "Example:\n"
            "options:\n"
            "  - name: 'BufferSize'\n"
            "    default: '1000'\n"
            "    short: 'b'"
        )

    try:
        config = OptionsConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid option declarations in '{path}':\n{error}") from error

    logger.debug("Loaded %d option declaration(s) from '%s'", len(config.options), path)
    return config.to_parser()
