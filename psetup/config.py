"""psetup configuration.

Typed configuration for a scaffolding run. Settings use Pydantic v2 models so
they are validated at construction time and can be read from environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from psetup.parser.models import WILDCARD, ArgumentSpec


# ---------------------------------------------------------------------------
# Option names (prefix excluded)
# ---------------------------------------------------------------------------

NAME_OPTION = "nme"
ROUTE_OPTION = "rte"
LANGUAGE_OPTION = "lng"
LICENSE_OPTION = "lic"
DOCUMENTS_OPTION = "dcs"

LANGUAGES = ("py", "c", "java", "go", "cpp", "lua", "js", "r", "txt")
LICENSES = ("mit", "apache")
DOCUMENT_SELECTORS = ("all", "license", "ignore", "readme")

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Settings for one ``psetup`` invocation.

    The option grammar is ``<option_prefix><name><option_sign><value>`` with
    names of exactly ``option_size`` characters, e.g. ``-lng=py``.
    """

    option_prefix: str = Field(default="-", min_length=1)
    option_size: int = Field(default=3, ge=1, description="Option name length")
    option_sign: str = Field(default="=", min_length=1)
    multi_separator: str = Field(default=",", min_length=1)
    template_dir: Optional[Path] = Field(
        default=None, description="Override for the bundled template directory"
    )
    author: str = Field(default="", description="Copyright holder written into licenses")
    verbose: bool = Field(default=False)

    # ------------------------------------------------------------------
    # Option definitions
    # ------------------------------------------------------------------

    def option_name(self, short: str) -> str:
        """Return the full option name for *short*, e.g. ``lng`` -> ``-lng``."""
        return f"{self.option_prefix}{short}"

    def option_specs(self) -> list[ArgumentSpec]:
        """Build the option definitions understood by the CLI."""
        sep = self.multi_separator
        return [
            ArgumentSpec(
                name=self.option_name(NAME_OPTION),
                default_values=("new-project",),
                allowed_values={WILDCARD},
                separator=sep,
                description="Project name",
            ),
            ArgumentSpec(
                name=self.option_name(ROUTE_OPTION),
                default_values=("./",),
                allowed_values={WILDCARD},
                separator=sep,
                description="Directory the project is created in",
            ),
            ArgumentSpec(
                name=self.option_name(LANGUAGE_OPTION),
                default_values=("go",),
                allowed_values=set(LANGUAGES),
                separator=sep,
                description="Extension of the src/main stub",
            ),
            ArgumentSpec(
                name=self.option_name(LICENSE_OPTION),
                default_values=("mit",),
                allowed_values=set(LICENSES),
                separator=sep,
                description="License written to LICENSE",
            ),
            ArgumentSpec(
                name=self.option_name(DOCUMENTS_OPTION),
                default_values=("all",),
                allowed_values=set(DOCUMENT_SELECTORS),
                separator=sep,
                description="Documents to include",
            ),
        ]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PSETUP_TEMPLATE_DIR, PSETUP_AUTHOR, PSETUP_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("PSETUP_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["PSETUP_TEMPLATE_DIR"])
        if os.environ.get("PSETUP_AUTHOR"):
            kwargs["author"] = os.environ["PSETUP_AUTHOR"]
        if os.environ.get("PSETUP_VERBOSE"):
            kwargs["verbose"] = os.environ["PSETUP_VERBOSE"].strip().lower() in _TRUTHY
        return cls(**kwargs)
