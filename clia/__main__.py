"""
Clia Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Example program: `python -m clia [OPTIONS]... PATH QUERY`.

Declarations come from a `clia.yaml` / `clia.toml` in the current directory, or
the file named by `CLIA_CONFIG`, and fall back to a built-in search-tool demo.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from clia.config import Declarations, load_declarations
from clia.console import console
from clia.exceptions import ArgumentScanError
from clia.logger import logger
from clia.option_args import FlagInfo, new_flag, new_flag_data, new_flag_list
from clia.option_parser import parse_for_options
from clia.parameter_args import Parameter
from clia.utils import get_program_invocation, setup_logging


def find_clia_config() -> Path | None:
    candidates = [
        Path(os.environ["CLIA_CONFIG"]) if os.environ.get("CLIA_CONFIG") else None,
        Path.cwd() / "clia.yaml",
        Path.cwd() / "clia.toml",
    ]
    return next((path for path in candidates if path and path.is_file()), None)


def demo_declarations() -> Declarations:
    """The options and parameters of a small file search tool."""
    return Declarations(
        title=get_program_invocation(),
        author="rtj.dev LLC",
        description="Just here as an example of things you can do",
        options=[
            new_flag_list(
                FlagInfo(
                    "-f",
                    "--filter",
                    "Comma separated list of extensions, will only count lines "
                    "of files with these extensions",
                ),
                "EXTENSIONS",
            ),
            new_flag_data(
                FlagInfo(
                    "-F",
                    "--format",
                    "Format the output in a list, valid formats are: DEFAULT, "
                    "BULLET, MARKDOWN, and NUMERIC",
                ),
                "FORMAT",
            ),
            new_flag(FlagInfo("-r", "--recursive", "Search through subdirectories")),
            new_flag(FlagInfo("-h", "--help", "Prints help information")),
        ],
        parameters=[
            Parameter("PATH", "Path to file/folder to search"),
            Parameter(
                "QUERY",
                'String to search for, wrap in "\'s if it contains spaces',
            ),
        ],
    )


def help_requested(args: Sequence[str], declarations: Declarations) -> bool:
    """Return True if a declared `-h` or `--help` flag was given."""
    found = parse_for_options(args, declarations.options)
    return any(
        option.present
        for option in found
        if "-h" in option.flags or "--help" in option.flags
    )


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging()
    args = list(sys.argv if argv is None else argv)

    config_path = find_clia_config()
    declarations = (
        load_declarations(config_path) if config_path else demo_declarations()
    )

    try:
        if help_requested(args, declarations):
            declarations.render_help()
            return 0
        parser = declarations.parse(args)
    except ArgumentScanError as error:
        logger.warning("%s", error)
        declarations.render_help()
        return 2

    for option in parser.get_option_arguments_found():
        if not option.present:
            continue
        label = ", ".join(option.flags)
        value: list[str] | str | None = option.get_list()
        if value is None:
            value = option.get_data()
        console.print(escape(f"{label}: {value}" if value is not None else label))
    for parameter in parser.get_parameter_arguments_found():
        console.print(escape(f"{parameter.name}: {parameter.data}"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
