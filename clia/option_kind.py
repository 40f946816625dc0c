# Clia Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionKind`, an enum naming the three shapes an option can take.

It is used wherever an option's shape has to be spelled out as data rather
than picked by calling a constructor, most notably in YAML/TOML declaration
files loaded by `clia.config`.

Supports alias coercion for shorthand or config-friendly values.

Example:
    OptionKind("flag_list") → OptionKind.FLAG_LIST
    OptionKind("list")      → OptionKind.FLAG_LIST (via alias)
    OptionKind("Data")      → OptionKind.FLAG_DATA (via alias)
"""
from __future__ import annotations

from enum import Enum


class OptionKind(Enum):
    """
    The shape of a declared option.

    Members:
        FLAG: Boolean presence only (e.g. `-r`, `--recursive`).
        FLAG_LIST: Flag followed by a comma or space separated list.
        FLAG_DATA: Flag followed by a single value.

    Aliases:
        - "bool" → "flag"
        - "list" → "flag_list"
        - "data" → "flag_data"
    """

    FLAG = "flag"
    FLAG_LIST = "flag_list"
    FLAG_DATA = "flag_data"

    @classmethod
    def choices(cls) -> list[OptionKind]:
        """Return a list of all option kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "flag",
            "list": "flag_list",
            "data": "flag_data",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the option kind."""
        return self.value
