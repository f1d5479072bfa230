"""
zarg - a small, declarative command-line argument parser.

This package turns a list of command-line tokens and a mapping of flag names to
type descriptors (or to other flag names, as aliases) into a dict of typed
option values plus the list of positional arguments under ``"_"``.
"""

from .descriptors import Boolean, Descriptor, Kind, Number, String, array_of, describe
from .errors import (
    ArgError,
    InvalidAliasError,
    InvalidDescriptorError,
    InvalidOptionNameError,
    MissingArgumentError,
    UnknownOptionError,
)
from .options import OptionSpec
from .parser import Parser, default_argv, parse, safe_parse

__version__ = "1.0.0"
__all__ = [
    "ArgError",
    "Boolean",
    "Descriptor",
    "InvalidAliasError",
    "InvalidDescriptorError",
    "InvalidOptionNameError",
    "Kind",
    "MissingArgumentError",
    "Number",
    "OptionSpec",
    "Parser",
    "String",
    "UnknownOptionError",
    "array_of",
    "default_argv",
    "describe",
    "parse",
    "safe_parse",
]
