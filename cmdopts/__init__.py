"""
Cmdopts Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .errors import ErrorKind, OptionError
from .exceptions import (
    CmdOptsError,
    ConfigError,
    OptionNotFoundError,
    ValueConversionError,
)
from .parser import CmdParse, ConversionResult, Option, OptionRegistry
from .version import __version__

logger = logging.getLogger("cmdopts")


__all__ = [
    "CmdParse",
    "Option",
    "OptionRegistry",
    "ConversionResult",
    "ErrorKind",
    "OptionError",
    "CmdOptsError",
    "ConfigError",
    "OptionNotFoundError",
    "ValueConversionError",
    "__version__",
]
