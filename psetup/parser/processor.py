"""Resolve a batch of command-line tokens against option specs.

Malformed and unknown tokens never abort a run: they are recorded in
``ProcessResult.ignored`` and every option keeps a valid value, falling back
to its defaults.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .extractor import ParseFailure, extract_argument, split_values
from .models import ArgumentSpec, IgnoredToken, ProcessResult
from .validator import validate_values


def process_arguments(
    tokens: Iterable[str],
    specs: Sequence[ArgumentSpec],
    prefix: str,
    separator: str,
    name_size: int,
) -> ProcessResult:
    """Resolve every spec's values from *tokens*.

    Tokens are applied in order, so a repeated option keeps its last value.

    Args:
        tokens: Raw command-line tokens (``sys.argv[1:]``).
        specs: Option definitions.  Names must be unique.
        prefix: Option prefix, e.g. ``"-"``.
        separator: Name/value sign, e.g. ``"="``.
        name_size: Option name length without the prefix.

    Returns:
        A :class:`ProcessResult` with one entry per spec, in spec order.

    Raises:
        ValueError: If two specs share a name.
    """
    by_name: dict[str, ArgumentSpec] = {}
    for spec in specs:
        if spec.name in by_name:
            raise ValueError(f"Duplicate option spec: {spec.name}")
        by_name[spec.name] = spec

    result = ProcessResult(
        values={spec.name: list(spec.default_values) for spec in specs}
    )

    for token in tokens:
        try:
            name, raw_value = extract_argument(token, prefix, separator, name_size)
        except ParseFailure as exc:
            result.ignored.append(IgnoredToken(token=token, reason=exc.reason))
            continue

        spec = by_name.get(name)
        if spec is None:
            result.ignored.append(
                IgnoredToken(token=token, reason=f"unknown argument {name}")
            )
            continue

        raw_values = split_values(raw_value, spec.multi_separator)
        # An empty value (e.g. "-nme=") leaves the option at its defaults.
        result.values[name] = validate_values(raw_values, spec) or list(spec.default_values)

    return result
