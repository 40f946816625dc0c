# Clia Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Parser`, the entry point most programs use.

A program declares its options (`option_args`) and parameters
(`parameter_args`), hands them to `Parser` along with its command-line tokens,
and reads back what was found. `Parser` runs both scanners up front, so a
constructed `Parser` always holds a complete, valid result.

Public Interface:
- `Parser(args, valid_options, expected_parameters)`: Scan `args`.
- `get_option_arguments_found()`: Populated copies of the option declarations.
- `get_parameter_arguments_found()`: Populated copies of the parameter declarations.
- `get_option(flag)` / `is_present(flag)` / `get_parameter(name)`: Lookups.
- `Parser.help(...)`: Build the help text for a set of declarations.
- `Parser.render_help(...)`: Print that help text with Rich.

Example Usage:
    options = [new_flag(FlagInfo("-r", "--recursive", "Search subdirectories"))]
    parameters = [Parameter("path", "Path to search")]

    parser = Parser(sys.argv, options, parameters)
    if parser.is_present("-r"):
        ...
    path = parser.get_parameter("PATH").data
"""
from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape

from clia.console import console
from clia.logger import logger
from clia.option_args import ClOption
from clia.option_parser import parse_for_options
from clia.parameter_args import Parameter
from clia.parameter_parser import parse_for_parameters


class Parser:
    """
    Scans command-line tokens against declared options and parameters.

    Both scans run in `__init__`. Any `ArgumentScanError` they raise is
    propagated unchanged and no `Parser` is created. The declarations passed in
    are never modified.
    """

    def __init__(
        self,
        args: Sequence[str],
        valid_options: Sequence[ClOption],
        expected_parameters: Sequence[Parameter],
    ) -> None:
        self.args: list[str] = list(args)
        self._options: list[ClOption] = parse_for_options(self.args, valid_options)
        self._parameters: list[Parameter] = parse_for_parameters(
            self.args, expected_parameters
        )
        logger.debug("Parsed args %s: %s", self.args, self)

    def get_option_arguments_found(self) -> list[ClOption]:
        return self._options

    def get_parameter_arguments_found(self) -> list[Parameter]:
        return self._parameters

    def get_option(self, flag: str) -> ClOption | None:
        """
        Return the scanned option declared with `flag`.

        Args:
            flag (str): The option's short or long flag.

        Returns:
            ClOption or None: The populated option, if one was declared with `flag`.
        """
        return next(
            (option for option in self._options if flag in option.flags), None
        )

    def is_present(self, flag: str) -> bool:
        """Return True if the option declared with `flag` was given."""
        option = self.get_option(flag)
        return option is not None and option.present

    def get_parameter(self, name: str) -> Parameter | None:
        """Return the bound parameter called `name` (case-insensitive)."""
        name = name.upper()
        return next(
            (parameter for parameter in self._parameters if parameter.name == name),
            None,
        )

    @staticmethod
    def get_usage(title: str, expected_parameters: Sequence[Parameter]) -> str:
        """Return the usage line, e.g. `USAGE: foo [OPTIONS]... [PATH] [QUERY]`."""
        usage = f"USAGE: {title} [OPTIONS]..."
        for parameter in expected_parameters:
            usage += f" [{parameter.name}]"
        return usage

    @staticmethod
    def help(
        title: str,
        author: str,
        description: str,
        valid_options: Sequence[ClOption],
        expected_parameters: Sequence[Parameter],
    ) -> str:
        """
        Build the help text for a program.

        Args:
            title (str): Program name, also used in the usage line.
            author (str): Program author.
            description (str): What the program does.
            valid_options (Sequence[ClOption]): The option declarations.
            expected_parameters (Sequence[Parameter]): The parameter declarations.

        Returns:
            str: The help text, without a trailing newline.
        """
        option_lines = "\n".join(option.gen_help_line() for option in valid_options)
        parameter_lines = "\n".join(
            parameter.gen_help_line() for parameter in expected_parameters
        )
        return (
            f"{title}\n"
            f"{author}\n"
            "\n"
            f"{description}\n"
            "\n"
            f"{Parser.get_usage(title, expected_parameters)}\n"
            "\n"
            "OPTIONS:\n"
            f"{option_lines}\n"
            "\n"
            "PARAMETER ARGUMENTS:\n"
            f"{parameter_lines}"
        )

    @staticmethod
    def render_help(
        title: str,
        author: str,
        description: str,
        valid_options: Sequence[ClOption],
        expected_parameters: Sequence[Parameter],
        output: Console | None = None,
    ) -> None:
        """
        Print the help text using Rich output.

        Section headings are bold; the text itself is identical to `Parser.help`.
        """
        output = output or console
        text = Parser.help(
            title, author, description, valid_options, expected_parameters
        )
        headings = ("OPTIONS:", "PARAMETER ARGUMENTS:")
        for line in text.splitlines():
            if line.startswith("USAGE:") or line in headings:
                output.print(f"[bold]{escape(line)}[/bold]", soft_wrap=True)
            else:
                output.print(escape(line), soft_wrap=True)

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        present = sum(option.present for option in self._options)
        return (
            f"Parser(args={len(self.args)}, options={len(self._options)}, "
            f"present={present}, parameters={len(self._parameters)})"
        )

    def __repr__(self) -> str:
        return str(self)
