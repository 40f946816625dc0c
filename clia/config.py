# Clia Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declaration loader for clia option and parameter surfaces.

A program can keep its command-line surface in a YAML or TOML file instead of
building it in code:

    title: search
    author: Jane Doe
    description: Search files for a string
    options:
      - kind: list
        short_flag: -f
        long_flag: --filter
        name: extensions
        description: Comma separated list of extensions
      - short_flag: -r
        long_flag: --recursive
        description: Search through subdirectories
    parameters:
      - name: path
        description: Path to file/folder to search

Entries are validated with pydantic before any option is built. A flag that
breaks the flag rules still raises `FlagFormatError`, exactly as it would when
declared in code.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from clia.exceptions import ConfigError
from clia.logger import logger
from clia.option_args import ClOption, FlagInfo, new_option
from clia.option_kind import OptionKind
from clia.parameter_args import Parameter
from clia.parser import Parser


class RawOption(BaseModel):
    """Raw option entry of a declaration file."""

    kind: OptionKind = OptionKind.FLAG
    short_flag: str = ""
    long_flag: str = ""
    description: str = ""
    name: str = ""

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> OptionKind:
        if isinstance(value, OptionKind):
            return value
        return OptionKind(value)

    @model_validator(mode="after")
    def validate_name(self) -> RawOption:
        if self.kind is not OptionKind.FLAG and not self.name:
            raise ValueError(f"A {self.kind} option needs a 'name' for its value")
        return self

    def to_option(self) -> ClOption:
        info = FlagInfo(self.short_flag, self.long_flag, self.description)
        return new_option(self.kind, info, self.name)


class RawParameter(BaseModel):
    """Raw parameter entry of a declaration file."""

    name: str
    description: str = ""

    def to_parameter(self) -> Parameter:
        return Parameter(name=self.name, description=self.description)


class ClConfig(BaseModel):
    """Top level model of a declaration file."""

    title: str = ""
    author: str = ""
    description: str = ""
    options: list[RawOption] = Field(default_factory=list)
    parameters: list[RawParameter] = Field(default_factory=list)

    def to_declarations(self) -> Declarations:
        return Declarations(
            title=self.title,
            author=self.author,
            description=self.description,
            options=[raw_option.to_option() for raw_option in self.options],
            parameters=[
                raw_parameter.to_parameter() for raw_parameter in self.parameters
            ],
        )


@dataclass
class Declarations:
    """A program's description together with its option and parameter templates."""

    title: str = ""
    author: str = ""
    description: str = ""
    options: list[ClOption] = field(default_factory=list)
    parameters: list[Parameter] = field(default_factory=list)

    def parse(self, args: Sequence[str]) -> Parser:
        """Scan `args` against these declarations."""
        return Parser(args, self.options, self.parameters)

    def help(self) -> str:
        return Parser.help(
            self.title, self.author, self.description, self.options, self.parameters
        )

    def render_help(self) -> None:
        Parser.render_help(
            self.title, self.author, self.description, self.options, self.parameters
        )


def _read_raw_config(path: Path) -> Any:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(config_file)
        elif suffix == ".toml":
            return toml.load(config_file)
    raise ConfigError(f"Unsupported config format: {suffix}")


def load_declarations(file_path: Path | str) -> Declarations:
    """
    Load option and parameter declarations from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the declaration file.

    Returns:
        Declarations: The program description with its option and parameter templates.

    Raises:
        ConfigError: If the file is missing, has an unsupported format, cannot be
            parsed, or does not match the expected structure.
        FlagFormatError: If an option's flags are improperly formatted.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)

    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    try:
        raw_config = _read_raw_config(path)
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse {path}: {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary of declarations.\n"
            "Example:\n"
            "title: 'search'\n"
            "options:\n"
            "  - short_flag: '-r'\n"
            "    long_flag: '--recursive'\n"
            "    description: 'Search through subdirectories'"
        )

    try:
        config = ClConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid declarations in {path}:\n{error}") from error

    declarations = config.to_declarations()
    logger.debug(
        "Loaded %d option(s) and %d parameter(s) from %s",
        len(declarations.options),
        len(declarations.parameters),
        path,
    )
    return declarations
