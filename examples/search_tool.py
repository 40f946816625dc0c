"""search_tool.py"""
import sys

from clia import (
    ArgumentScanError,
    FlagInfo,
    Parameter,
    Parser,
    new_flag,
    new_flag_data,
    new_flag_list,
)

options = [
    new_flag_list(
        FlagInfo("-f", "--filter", "Only search files with these extensions"),
        "extensions",
    ),
    new_flag_data(
        FlagInfo("-F", "--format", "Output format: DEFAULT, BULLET, or NUMERIC"),
        "format",
    ),
    new_flag(FlagInfo("-r", "--recursive", "Search through subdirectories")),
    new_flag(FlagInfo("-h", "--help", "Prints help information")),
]
parameters = [
    Parameter("path", "Path to file/folder to search"),
    Parameter("query", "String to search for"),
]


def main() -> int:
    try:
        parser = Parser(sys.argv, options, parameters)
    except ArgumentScanError as error:
        print(error)
        Parser.render_help("search_tool", "rtj.dev", "Search files", options, parameters)
        return 2

    if parser.is_present("--help"):
        Parser.render_help("search_tool", "rtj.dev", "Search files", options, parameters)
        return 0

    extensions = parser.get_option("--filter").list or ["*"]
    output_format = parser.get_option("--format").data or "DEFAULT"
    print(
        f"Searching {parser.get_parameter('path').data} "
        f"for {parser.get_parameter('query').data!r} "
        f"in {', '.join(extensions)} files "
        f"({'recursive' if parser.is_present('-r') else 'top level'}, {output_format})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
