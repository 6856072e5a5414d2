"""
Aligned name = value tables for build variables

Usage:
    tabulate_variables("TITLE", "CMake Variables:",
                       "CMAKE_VERSION", "CMAKE_BUILD_TYPE", "CMAKE_GENERATOR",
                       scope={"CMAKE_VERSION": "3.25.2",
                              "CMAKE_BUILD_TYPE": "Release",
                              "CMAKE_GENERATOR": "Unix Makefiles"})

produces:
    CMake Variables:
                     CMAKE_VERSION = 3.25.2
                  CMAKE_BUILD_TYPE = Release
                   CMAKE_GENERATOR = Unix Makefiles
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple

from .exceptions import TabulationError
from .utils import Logger

TITLE_MARKER = "TITLE"

MIN_WIDTH = 30

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TabulationRequest:
    """Names to tabulate, in output order, and an optional title"""
    names: Tuple[str, ...]
    title: Optional[str] = None


def parse_tabulation_args(args: Sequence[str]) -> TabulationRequest:
    """
    Split ``[TITLE title] NAME...`` into a request

    Only a leading TITLE marker is recognized; anywhere else it is an
    ordinary variable name.

    Raises:
        TabulationError: TITLE is given without a title after it
    """
    args = list(args)
    if args and args[0] == TITLE_MARKER:
        if len(args) < 2:
            raise TabulationError("TITLE must be followed by a title string")
        return TabulationRequest(names=tuple(args[2:]), title=args[1])
    return TabulationRequest(names=tuple(args))


def column_width(names: Sequence[str], min_width: int = MIN_WIDTH) -> int:
    """Width of the name column: the longest name, but at least min_width"""
    return max([min_width] + [len(name) for name in names])


def _resolve(scope: Mapping[str, Any], name: str) -> str:
    value = scope.get(name)
    if value is None:
        return ""
    return str(value)


def format_table(request: TabulationRequest,
                 scope: Optional[Mapping[str, Any]] = None,
                 min_width: int = MIN_WIDTH,
                 indent: int = 0) -> str:
    """
    Build the table text for a request

    Args:
        request: Names and optional title
        scope: Name to value mapping; missing names render as empty values
        min_width: Minimum width of the name column
        indent: Extra spaces in front of every row

    Returns:
        Title line (if any) followed by one newline-terminated row per name
    """
    scope = scope or {}
    width = column_width(request.names, min_width)
    prefix = " " * indent

    lines = []
    if request.title is not None:
        lines.append(f"{request.title}\n")
    for name in request.names:
        lines.append(f"{prefix}{name:>{width}} = {_resolve(scope, name)}\n")
    return "".join(lines)


def tabulate_variables(*args: str,
                       scope: Optional[Mapping[str, Any]] = None,
                       logger: Optional[Logger] = None,
                       min_width: int = MIN_WIDTH,
                       indent: int = 0) -> str:
    """
    Tabulate variables and write the table to the status channel

    Args:
        *args: ``[TITLE title] NAME...``
        scope: Name to value mapping the names are resolved against
        logger: Status channel; the ``tabvars.tabulator`` logger if None
        min_width: Minimum width of the name column
        indent: Extra spaces in front of every row

    Returns:
        The table text, exactly as emitted
    """
    request = parse_tabulation_args(args)
    output = format_table(request, scope, min_width=min_width, indent=indent)

    if logger is not None:
        logger.status(output)
    else:
        _log.info(output)
    return output
