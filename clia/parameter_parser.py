# Clia Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Scans command-line tokens for the parameters declared with `parameter_args`.

Parameters are the last N tokens, N being the number of declared parameters,
and are bound in declaration order. The scanner knows nothing about flags: if
a flag's payload falls inside that trailing window it is bound to a parameter
as well, so programs should put every option before the parameters.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from clia.exceptions import InsufficientParametersError
from clia.logger import logger
from clia.parameter_args import Parameter


def parse_for_parameters(
    args: Sequence[str], expected_parameters: Sequence[Parameter]
) -> list[Parameter]:
    """
    Bind the trailing tokens of `args` to `expected_parameters`.

    `args[0]` is taken to be the program name and can never be bound.

    Args:
        args (Sequence[str]): The command-line tokens.
        expected_parameters (Sequence[Parameter]): The declaration templates, in order.

    Returns:
        list[Parameter]: Copies of `expected_parameters` with `data` set.

    Raises:
        InsufficientParametersError: There are fewer than N tokens after the
            program name.
    """
    expected = len(expected_parameters)
    if len(args) - 1 < expected:
        raise InsufficientParametersError(expected, args)

    window = list(args[len(args) - expected :])
    results = [
        replace(parameter, data=value)
        for parameter, value in zip(expected_parameters, window)
    ]
    logger.debug(
        "Bound parameters %s",
        {parameter.name: parameter.data for parameter in results},
    )
    return results
