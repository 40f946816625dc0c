# Clia Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the option side of a program's command-line surface.

As far as clia is concerned there are four types of arguments in two groups.

Options:
- flags (e.g. `-r`)
- flags with lists (e.g. `-f a,b,c`)
- flags with data (e.g. `--format NUMERIC`)

Parameters:
- positional values (a file path, a search string, ...), see `parameter_args`.

Each option carries a validated `FlagInfo` and a `present` marker. The three
option shapes are separate dataclasses joined in the `ClOption` union; code that
needs to tell them apart dispatches with `isinstance`.

Options built here are declaration templates: `present` is False and the
payload is empty. `option_parser.parse_for_options` returns populated copies
and never touches the templates.

Example:
    info = FlagInfo("-f", "--filter", "Comma separated list of extensions")
    option = new_flag_list(info, "extensions")

    option.gen_help_line()
    # '    -f, --filter <EXTENSIONS>...      Comma separated list of extensions'
"""
from __future__ import annotations

import string
from dataclasses import dataclass, field

from clia.exceptions import FlagFormatError
from clia.option_kind import OptionKind

ASCII_LETTERS = frozenset(string.ascii_letters)

HELP_INDENT = "    "
HELP_FLAG_COLUMN = 8
HELP_DESCRIPTION_COLUMN = 38


@dataclass(frozen=True)
class FlagInfo:
    """
    Stores the short flag, long flag, and description of an option.

    Rules:
    - `short_flag` must be empty, or `-` followed by one ASCII letter.
    - `long_flag` must be empty, or `--` followed by ASCII letters, with
      words separated by additional `-`.
    - At least one of the two flags must be given.

    Raises:
        FlagFormatError: If either flag is improperly formatted.
    """

    short_flag: str
    long_flag: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.is_valid(self.short_flag, self.long_flag):
            raise FlagFormatError(self.short_flag, self.long_flag)

    @staticmethod
    def is_valid_short_flag(flag: str) -> bool:
        """Return True if `flag` is empty or a well formed short flag."""
        if not flag:
            return True
        return len(flag) == 2 and flag[0] == "-" and flag[1] in ASCII_LETTERS

    @staticmethod
    def is_valid_long_flag(flag: str) -> bool:
        """Return True if `flag` is empty or a well formed long flag."""
        if not flag:
            return True
        return flag.startswith("--") and all(
            char in ASCII_LETTERS or char == "-" for char in flag[2:]
        )

    @classmethod
    def is_valid(cls, short_flag: str, long_flag: str) -> bool:
        """Check a short/long flag pair without raising."""
        if not short_flag and not long_flag:
            return False
        return cls.is_valid_short_flag(short_flag) and cls.is_valid_long_flag(
            long_flag
        )

    @property
    def flags(self) -> tuple[str, ...]:
        """The non-empty flags, short flag first."""
        return tuple(flag for flag in (self.short_flag, self.long_flag) if flag)


def _pad_to(output: str, column: int) -> str:
    """Spacing that moves `output` to `column`, or onto a new line indented to it."""
    if len(output) > column:
        return "\n" + " " * column
    return " " * (column - len(output))


class _OptionFields:
    """Accessors shared by every option shape."""

    info: FlagInfo
    present: bool

    @property
    def short_flag(self) -> str:
        return self.info.short_flag

    @property
    def long_flag(self) -> str:
        return self.info.long_flag

    @property
    def description(self) -> str:
        return self.info.description

    @property
    def flags(self) -> tuple[str, ...]:
        return self.info.flags

    def get_list(self) -> list[str] | None:
        """The list payload, or None if this is not a `FlagList`."""
        return None

    def get_data(self) -> str | None:
        """The data payload, or None if this is not a `FlagData`."""
        return None

    def _placeholder(self) -> str:
        return ""

    def gen_help_line(self) -> str:
        """
        Create the help line for this option.

        The long flag starts at column 8 and the description at column 38. If the
        text before either column is already too long, that part moves to a new
        line indented to the column.

        Example:
            '    -r, --recursive                   Search through subdirectories'
        """
        output = f"{HELP_INDENT}{self.short_flag}{',' if self.short_flag else ' '}"
        output += _pad_to(output, HELP_FLAG_COLUMN)
        output += self.long_flag + self._placeholder()
        output += _pad_to(output, HELP_DESCRIPTION_COLUMN) + self.description
        return output


@dataclass
class Flag(_OptionFields):
    """An option like `-r` or `--recursive`."""

    info: FlagInfo
    present: bool = False

    @property
    def kind(self) -> OptionKind:
        return OptionKind.FLAG


@dataclass
class FlagList(_OptionFields):
    """
    An option like `-f <EXTENSIONS>...` or `--filter <EXTENSIONS>...`.

    Attributes:
        info (FlagInfo): The option's flags and description.
        list_name (str): Name of the list shown in help messages, upper-cased.
        list (list[str]): The list found after the flag.
        present (bool): Whether the flag was given.
    """

    info: FlagInfo
    list_name: str
    list: list[str] = field(default_factory=list)
    present: bool = False

    def __post_init__(self) -> None:
        self.list_name = self.list_name.upper()

    @property
    def kind(self) -> OptionKind:
        return OptionKind.FLAG_LIST

    def get_list(self) -> list[str] | None:
        return self.list

    def _placeholder(self) -> str:
        return f" <{self.list_name}>..."


@dataclass
class FlagData(_OptionFields):
    """
    An option like `--format <FORMAT>`.

    Attributes:
        info (FlagInfo): The option's flags and description.
        data_name (str): Name of the value shown in help messages, upper-cased.
        data (str): The value found after the flag.
        present (bool): Whether the flag was given.
    """

    info: FlagInfo
    data_name: str
    data: str = ""
    present: bool = False

    def __post_init__(self) -> None:
        self.data_name = self.data_name.upper()

    @property
    def kind(self) -> OptionKind:
        return OptionKind.FLAG_DATA

    def get_data(self) -> str | None:
        return self.data

    def _placeholder(self) -> str:
        return f" <{self.data_name}>"


ClOption = Flag | FlagList | FlagData


def new_flag(info: FlagInfo) -> Flag:
    """Create a `Flag` template for `info`."""
    return Flag(info=info)


def new_flag_list(info: FlagInfo, list_name: str) -> FlagList:
    """Create a `FlagList` template for `info`, labelled `list_name` in help."""
    return FlagList(info=info, list_name=list_name)


def new_flag_data(info: FlagInfo, data_name: str) -> FlagData:
    """Create a `FlagData` template for `info`, labelled `data_name` in help."""
    return FlagData(info=info, data_name=data_name)


def new_option(
    kind: OptionKind | str, info: FlagInfo, name: str = ""
) -> ClOption:
    """
    Create an option template from an `OptionKind`.

    Args:
        kind (OptionKind | str): The option shape, or one of its names/aliases.
        info (FlagInfo): The validated flags and description.
        name (str): The list/data label. Ignored for plain flags.

    Raises:
        ValueError: If `kind` is unknown or a list/data option has no name.
    """
    if not isinstance(kind, OptionKind):
        kind = OptionKind(kind)
    if kind is OptionKind.FLAG:
        return new_flag(info)
    if not name:
        raise ValueError(f"A {kind} option needs a name for its value")
    if kind is OptionKind.FLAG_LIST:
        return new_flag_list(info, name)
    return new_flag_data(info, name)
