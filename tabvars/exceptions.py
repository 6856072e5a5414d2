"""Exceptions raised by tabvars"""


class TabvarsError(Exception):
    """Base class for tabvars errors"""


class TabulationError(TabvarsError, ValueError):
    """Raised when tabulate_variables is called with malformed arguments"""


class ConfigError(TabvarsError):
    """Raised when the configuration file is missing or malformed"""
