# Clia Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Scans command-line tokens for the options declared with `option_args`.

`parse_for_options` works in two passes:

1. Every token after the program name that starts with `-` is collected and
   checked against the declared short and long flags. A single unknown flag
   aborts the scan with `UnrecognizedFlagError`.
2. Each declaration is copied, in declaration order, and the copy is marked
   present and given its payload. A short flag wins over the long flag of the
   same option.

Payloads are the token directly after the flag. A list payload is split on
spaces if it contains one, otherwise on commas; empty pieces are dropped. No
quoting or escaping is applied beyond what the shell already did.

Example:
    options = [
        new_flag(FlagInfo("-r", "--recursive", "Search subdirectories")),
        new_flag_list(FlagInfo("-f", "--filter", "Extensions"), "EXTENSIONS"),
    ]
    found = parse_for_options(["prog", "-r", "--filter", "rs,py"], options)
    # found[0].present is True, found[1].list == ["rs", "py"]
"""
from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from clia.exceptions import (
    FlagNotFoundError,
    NoArgumentsAfterFlagError,
    NoPayloadAfterFlagError,
    UnrecognizedFlagError,
)
from clia.logger import logger
from clia.option_args import ClOption, Flag, FlagData, FlagList


def get_valid_flags(valid_options: Sequence[ClOption]) -> set[str]:
    """Return every short and long flag declared by `valid_options`."""
    valid_flags: set[str] = set()
    for option in valid_options:
        valid_flags.update(option.flags)
    return valid_flags


def get_flags_in_args(args: Sequence[str]) -> list[str]:
    """Return the tokens after the program name that look like flags."""
    return [arg for arg in args[1:] if arg.startswith("-")]


def split_list(value: str) -> list[str]:
    """
    Split a list payload into its items.

    Space separated if `value` contains a space, comma separated otherwise.
    Empty items are removed.
    """
    separator = " " if " " in value else ","
    return [item for item in value.split(separator) if item]


def _arg_after_flag(args: Sequence[str], flag: str) -> str:
    """Return the token following the first occurrence of `flag`, if it is a payload."""
    try:
        position = list(args).index(flag)
    except ValueError:
        raise FlagNotFoundError(flag, args) from None

    if position + 1 >= len(args):
        raise NoArgumentsAfterFlagError(flag, args)

    arg_after_flag = args[position + 1]
    if arg_after_flag.startswith("-"):
        raise NoPayloadAfterFlagError(flag, args)
    return arg_after_flag


def extract_after(
    args: Sequence[str], flag: str, as_list: bool = True
) -> list[str] | str:
    """
    Extract the payload that follows the first occurrence of `flag` in `args`.

    Args:
        args (Sequence[str]): The command-line tokens.
        flag (str): The flag whose payload is wanted.
        as_list (bool): Split the payload into a list. Pass False for the raw value.

    Returns:
        list[str] | str: The split list, or the raw value.

    Raises:
        FlagNotFoundError: `flag` is not in `args`.
        NoArgumentsAfterFlagError: `flag` is the last token.
        NoPayloadAfterFlagError: The token after `flag` is another flag.
    """
    if as_list:
        return get_list_after_flag(args, flag)
    return get_data_after_flag(args, flag)


def get_list_after_flag(args: Sequence[str], flag: str) -> list[str]:
    """Return the list following `flag`. See `extract_after`."""
    return split_list(_arg_after_flag(args, flag))


def get_data_after_flag(args: Sequence[str], flag: str) -> str:
    """Return the value following `flag`. See `extract_after`."""
    return _arg_after_flag(args, flag)


def _find_given_flag(option: ClOption, flags_in_args: Sequence[str]) -> str | None:
    """The flag `option` was given with, preferring the short flag."""
    for flag in option.flags:
        if flag in flags_in_args:
            return flag
    return None


def parse_for_options(
    args: Sequence[str], valid_options: Sequence[ClOption]
) -> list[ClOption]:
    """
    Find which of `valid_options` are present in `args`, with their payloads.

    `args[0]` is taken to be the program name and is never treated as a flag.

    Args:
        args (Sequence[str]): The command-line tokens.
        valid_options (Sequence[ClOption]): The declaration templates.

    Returns:
        list[ClOption]: Populated copies of `valid_options`, in the same order.

    Raises:
        UnrecognizedFlagError: A flag in `args` was not declared.
        MissingPayloadError: A list/data flag has no payload after it.
    """
    valid_flags = get_valid_flags(valid_options)
    flags_in_args = get_flags_in_args(args)

    invalid_flags = [flag for flag in flags_in_args if flag not in valid_flags]
    if invalid_flags:
        raise UnrecognizedFlagError(invalid_flags, args)

    results: list[ClOption] = []
    for option in valid_options:
        given_flag = _find_given_flag(option, flags_in_args)
        if isinstance(option, Flag):
            results.append(replace(option, present=given_flag is not None))
        elif isinstance(option, FlagList):
            if given_flag is None:
                results.append(replace(option, present=False, list=[]))
            else:
                items = get_list_after_flag(args, given_flag)
                results.append(replace(option, present=True, list=items))
        elif isinstance(option, FlagData):
            if given_flag is None:
                results.append(replace(option, present=False, data=""))
            else:
                data = get_data_after_flag(args, given_flag)
                results.append(replace(option, present=True, data=data))
        else:
            raise TypeError(f"Unsupported option type: {type(option).__name__}")

    logger.debug(
        "Found options %s in args %s",
        [option.flags for option in results if option.present],
        list(args),
    )
    return results
