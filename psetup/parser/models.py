"""Pydantic v2 models for the psetup argument parser.

Defines the option definitions the processor resolves tokens against and the
result object it hands back to the caller.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


WILDCARD = "any"
DEFAULT_MULTI_SEPARATOR = ","


# ---------------------------------------------------------------------------
# Option definitions
# ---------------------------------------------------------------------------

class ArgumentSpec(BaseModel):
    """A named command-line option with its defaults and allow-list.

    ``name`` is the full option name as typed on the command line, prefix
    included (e.g. ``-lng``).  An allow-list containing :data:`WILDCARD`
    accepts any value.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Full option name, e.g. '-lng'")
    default_values: tuple[str, ...] = Field(..., description="Values used when none are given")
    allowed_values: frozenset[str] = Field(
        default_factory=lambda: frozenset({WILDCARD}),
        description="Accepted values; 'any' disables membership checks",
    )
    separator: str = Field(
        default="", description="Multi-value separator; empty means ','"
    )
    description: str = Field(default="", description="Help text shown by --help")

    @field_validator("default_values")
    @classmethod
    def _defaults_not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("default_values must contain at least one value")
        return value

    @property
    def accepts_any(self) -> bool:
        """Whether the allow-list contains the wildcard."""
        return WILDCARD in self.allowed_values

    @property
    def multi_separator(self) -> str:
        return self.separator or DEFAULT_MULTI_SEPARATOR


# ---------------------------------------------------------------------------
# Processing results
# ---------------------------------------------------------------------------

class IgnoredToken(BaseModel):
    """A command-line token the processor skipped, with the reason why."""
    token: str
    reason: str


class ProcessResult(BaseModel):
    """Resolved option values plus the tokens that were ignored."""

    values: dict[str, list[str]] = Field(
        default_factory=dict, description="Option name -> resolved values"
    )
    ignored: list[IgnoredToken] = Field(
        default_factory=list, description="Malformed or unknown tokens, in input order"
    )

    def first(self, name: str) -> str:
        """Return the first resolved value of option *name*.

        Raises:
            KeyError: If no option called *name* was processed.
        """
        return self.values[name][0]
