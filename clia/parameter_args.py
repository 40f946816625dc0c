# Clia Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Parameter`, a required positional argument.

Parameters are declared in the order they must appear at the end of the
command line; `parameter_parser.parse_for_parameters` binds them by position.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Parameter:
    """
    A named positional argument (e.g. a file path or a search string).

    Attributes:
        name (str): Name shown in usage and help, upper-cased.
        description (str): Help text for the parameter.
        data (str): The value bound by the scanner; empty until then.
    """

    name: str
    description: str = ""
    data: str = ""

    def __post_init__(self) -> None:
        self.name = self.name.upper()

    def gen_help_line(self) -> str:
        """Create the help entry for this parameter."""
        return f"    {self.name}:\n        {self.description}"

    def set_name(self, name: str) -> None:
        self.name = name.upper()

    def set_description(self, description: str) -> None:
        self.description = description

    def set_data(self, data: str) -> None:
        self.data = data
