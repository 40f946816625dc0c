"""
Clia Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgumentScanError,
    CliaError,
    ConfigError,
    FlagFormatError,
    FlagNotFoundError,
    InsufficientParametersError,
    MissingPayloadError,
    NoArgumentsAfterFlagError,
    NoPayloadAfterFlagError,
    UnrecognizedFlagError,
)
from .option_args import (
    ClOption,
    Flag,
    FlagData,
    FlagInfo,
    FlagList,
    new_flag,
    new_flag_data,
    new_flag_list,
    new_option,
)
from .option_kind import OptionKind
from .option_parser import (
    extract_after,
    get_data_after_flag,
    get_list_after_flag,
    parse_for_options,
)
from .parameter_args import Parameter
from .parameter_parser import parse_for_parameters
from .parser import Parser

logger = logging.getLogger("clia")

__all__ = [
    "ArgumentScanError",
    "CliaError",
    "ClOption",
    "ConfigError",
    "extract_after",
    "Flag",
    "FlagData",
    "FlagFormatError",
    "FlagInfo",
    "FlagList",
    "FlagNotFoundError",
    "get_data_after_flag",
    "get_list_after_flag",
    "InsufficientParametersError",
    "MissingPayloadError",
    "new_flag",
    "new_flag_data",
    "new_flag_list",
    "new_option",
    "NoArgumentsAfterFlagError",
    "NoPayloadAfterFlagError",
    "OptionKind",
    "Parameter",
    "parse_for_options",
    "parse_for_parameters",
    "Parser",
    "UnrecognizedFlagError",
]
