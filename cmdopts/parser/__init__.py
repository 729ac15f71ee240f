"""
Cmdopts Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .cmd_parse import CmdParse
from .option import ConversionResult, Option
from .registry import OptionRegistry
from .tokenizer import OptionToken, tokenize

__all__ = [
    "CmdParse",
    "ConversionResult",
    "Option",
    "OptionRegistry",
    "OptionToken",
    "tokenize",
]
