# Clia Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by clia.

Declaration problems (a malformed flag, an unreadable declaration file) are
programmer errors and surface as soon as the option surface is built. Scan
problems are user errors: they carry the offending flag(s) and the token list
so the calling program can report them and print help.

All exceptions inherit from `CliaError`, the base exception for the library.

Exception Hierarchy:
- CliaError
    ├── FlagFormatError
    ├── ConfigError
    └── ArgumentScanError
        ├── UnrecognizedFlagError
        ├── MissingPayloadError
        │   ├── FlagNotFoundError
        │   ├── NoArgumentsAfterFlagError
        │   └── NoPayloadAfterFlagError
        └── InsufficientParametersError

A scan never returns a partial result: if any of the `ArgumentScanError`
subclasses is raised, nothing was populated.
"""
from __future__ import annotations

from typing import Sequence


class CliaError(Exception):
    """Base exception for clia."""


class FlagFormatError(CliaError, ValueError):
    """Exception raised when a short and/or long flag is improperly formatted."""

    def __init__(self, short_flag: str, long_flag: str):
        self.short_flag = short_flag
        self.long_flag = long_flag
        super().__init__(
            f"short_flag ({short_flag!r}) and/or long_flag ({long_flag!r}) "
            "improperly formatted"
        )


class ConfigError(CliaError):
    """Exception raised when a declaration file cannot be loaded."""


class ArgumentScanError(CliaError):
    """Base class for errors caused by the user's command-line tokens."""

    def __init__(self, message: str, tokens: Sequence[str] = ()):
        self.tokens: list[str] = list(tokens)
        super().__init__(message)


class UnrecognizedFlagError(ArgumentScanError):
    """Exception raised when one or more given flags were never declared."""

    def __init__(self, flags: Sequence[str], tokens: Sequence[str] = ()):
        self.flags: list[str] = list(flags)
        super().__init__(
            f"Unrecognized flag(s) {', '.join(self.flags)} in args {list(tokens)}",
            tokens,
        )


class MissingPayloadError(ArgumentScanError):
    """Exception raised when a list or data flag has no usable value after it."""

    def __init__(self, message: str, flag: str, tokens: Sequence[str] = ()):
        self.flag = flag
        super().__init__(message, tokens)


class FlagNotFoundError(MissingPayloadError):
    """Exception raised when the flag to extract a payload for is not in the tokens."""

    def __init__(self, flag: str, tokens: Sequence[str] = ()):
        super().__init__(
            f"Could not find flag ({flag}) in args {list(tokens)}", flag, tokens
        )


class NoArgumentsAfterFlagError(MissingPayloadError):
    """Exception raised when the flag is the last token."""

    def __init__(self, flag: str, tokens: Sequence[str] = ()):
        super().__init__(
            f"No arguments after flag ({flag}) in args {list(tokens)}", flag, tokens
        )


class NoPayloadAfterFlagError(MissingPayloadError):
    """Exception raised when the token after the flag is another flag."""

    def __init__(self, flag: str, tokens: Sequence[str] = ()):
        super().__init__(
            f"No list/data found after flag ({flag}) in args {list(tokens)}",
            flag,
            tokens,
        )


class InsufficientParametersError(ArgumentScanError):
    """Exception raised when there are fewer tokens than declared parameters."""

    def __init__(self, expected: int, tokens: Sequence[str] = ()):
        self.expected = expected
        super().__init__(
            f"Too few arguments: expected {expected} parameter(s) "
            f"after the program name, got args {list(tokens)}",
            tokens,
        )
