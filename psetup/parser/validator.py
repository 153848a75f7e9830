"""Allow-list validation of option values."""

from __future__ import annotations

from collections.abc import Sequence

from .models import ArgumentSpec


def validate_value(value: str, spec: ArgumentSpec) -> str:
    """Return *value* if *spec* accepts it, else the spec's first default."""
    if spec.accepts_any or value in spec.allowed_values:
        return value
    return spec.default_values[0]


def validate_values(values: Sequence[str], spec: ArgumentSpec) -> list[str]:
    """Validate several values at once.

    With the wildcard the values come back as given, duplicates and empty
    strings included, even when there are none.  Otherwise unknown values are
    dropped and the rest are collapsed into a set; only membership of the
    result is meaningful, not its order.  When no allowed value survives, the
    spec defaults are returned.
    """
    if spec.accepts_any:
        return list(values)
    accepted = list(dict.fromkeys(v for v in values if v in spec.allowed_values))
    return accepted or list(spec.default_values)
