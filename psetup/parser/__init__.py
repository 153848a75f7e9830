"""psetup command-line argument parser.

Turns raw tokens such as ``-lng=py`` or ``-dcs=license,readme`` into validated
option values.

Usage::

    from psetup.parser import ArgumentSpec, process_arguments

    specs = [ArgumentSpec(name="-lng", default_values=("go",), allowed_values={"go", "py"})]
    result = process_arguments(sys.argv[1:], specs, "-", "=", 3)
    print(result.first("-lng"))
    print(result.ignored)
"""

from psetup.parser.extractor import (
    MisplacedSeparatorError,
    MissingPrefixError,
    ParseFailure,
    TooShortError,
    extract_argument,
    split_values,
)
from psetup.parser.models import WILDCARD, ArgumentSpec, IgnoredToken, ProcessResult
from psetup.parser.processor import process_arguments
from psetup.parser.validator import validate_value, validate_values

__all__ = [
    "WILDCARD",
    "ArgumentSpec",
    "IgnoredToken",
    "ProcessResult",
    "ParseFailure",
    "TooShortError",
    "MissingPrefixError",
    "MisplacedSeparatorError",
    "extract_argument",
    "split_values",
    "validate_value",
    "validate_values",
    "process_arguments",
]
