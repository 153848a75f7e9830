"""Token extraction for psetup command-line options.

Options have the shape ``<prefix><name><sign><value>`` where the name has a
fixed length, e.g. ``-lng=py``.  The value may hold several sub-values joined
by a multi-value separator (``-dcs=license,readme``); :func:`split_values`
breaks those apart.
"""

from __future__ import annotations

from .models import DEFAULT_MULTI_SEPARATOR


# ---------------------------------------------------------------------------
# Parse failures
# ---------------------------------------------------------------------------

class ParseFailure(ValueError):
    """Raised when a token does not follow the option grammar."""

    reason = "invalid argument format"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"invalid argument format {token!r}: {self.reason}")


class TooShortError(ParseFailure):
    reason = "insufficient argument length"


class MissingPrefixError(ParseFailure):
    reason = "missing required prefix"


class MisplacedSeparatorError(ParseFailure):
    reason = "separator in incorrect position"


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def extract_argument(
    token: str,
    prefix: str,
    separator: str,
    name_size: int,
) -> tuple[str, str]:
    """Split *token* into its option name and raw value.

    Args:
        token: The full command-line token, e.g. ``"-lng=py"``.
        prefix: Expected option prefix, e.g. ``"-"``.
        separator: Sign between the name and its value, e.g. ``"="``.
        name_size: Length of the option name, prefix excluded.

    Returns:
        A ``(name, raw_value)`` tuple.  The name keeps its prefix and the raw
        value is everything after the first separator, untouched.

    Raises:
        TooShortError: The token cannot hold the prefix and a full name.
        MissingPrefixError: The token does not start with *prefix*.
        MisplacedSeparatorError: The first *separator* is missing or not
            right after the name.
    """
    expected_index = len(prefix) + name_size
    if len(token) < expected_index:
        raise TooShortError(token)
    if not token.startswith(prefix):
        raise MissingPrefixError(token)
    if token.find(separator) != expected_index:
        raise MisplacedSeparatorError(token)
    return token[:expected_index], token[expected_index + len(separator):]


def split_values(raw_value: str, separator: str = DEFAULT_MULTI_SEPARATOR) -> list[str]:
    """Split a raw option value into its sub-values.

    Empty segments are kept so that ``"a,,b"`` gives ``["a", "", "b"]``;
    validation is responsible for discarding meaningless entries.  A single
    trailing separator is tolerated: ``"a,b,"`` gives ``["a", "b"]``.
    """
    if not raw_value:
        return []
    separator = separator or DEFAULT_MULTI_SEPARATOR
    if not raw_value.endswith(separator):
        raw_value += separator
    return raw_value.split(separator)[:-1]
