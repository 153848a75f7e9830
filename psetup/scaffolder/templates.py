"""Jinja2-backed content store for scaffolded documents.

Provides the TemplateStore class which serves content from the bundled
``psetup/scaffolder/templates/`` directory (or an in-memory mapping).  Only
``.j2`` references are Jinja2 templates and are rendered with
project-specific context; every other reference is returned byte for byte.
References are paths relative to the template root, e.g.
``"license/mit.txt.j2"`` or ``"ignore.txt"``.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import DictLoader, Environment, FileSystemLoader, StrictUndefined, TemplateNotFound
from jinja2.loaders import split_template_path


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# TemplateStore
# ---------------------------------------------------------------------------


class TemplateStore:
    """Looks up content by reference.

    ``.j2`` templates are rendered with a context dictionary holding project
    metadata (``project_name``, ``year``, ``author``).  A missing reference
    raises :class:`jinja2.TemplateNotFound`.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        context: Mapping[str, Any] | None = None,
        *,
        templates: Mapping[str, str | bytes] | None = None,
    ) -> None:
        self.template_dir: Path | None = None
        self._contents: dict[str, bytes] | None = None
        if templates is not None:
            self._contents = {
                ref: data if isinstance(data, bytes) else data.encode("utf-8")
                for ref, data in templates.items()
            }
            loader = DictLoader(
                {
                    ref: data.decode("utf-8")
                    for ref, data in self._contents.items()
                    if ref.endswith(TEMPLATE_SUFFIX)
                }
            )
        else:
            self.template_dir = Path(template_dir or _DEFAULT_TEMPLATE_DIR)
            loader = FileSystemLoader(str(self.template_dir))
        self.env = Environment(
            loader=loader,
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.context: dict[str, Any] = {
            "project_name": "",
            "year": datetime.date.today().year,
            "author": "",
        }
        if context:
            self.context.update(context)

    @classmethod
    def from_mapping(
        cls,
        templates: Mapping[str, str | bytes],
        context: Mapping[str, Any] | None = None,
    ) -> "TemplateStore":
        """Build an in-memory store from ``{reference: content}``."""
        return cls(context=context, templates=templates)

    # -- Lookup ------------------------------------------------------------

    def lookup(self, reference: str) -> bytes:
        """Return the content stored at *reference*.

        ``.j2`` references are rendered and encoded as UTF-8; anything else
        comes back exactly as stored.

        Raises:
            jinja2.TemplateNotFound: If nothing is stored at *reference*.
            jinja2.TemplateError: If a ``.j2`` template cannot be rendered.
        """
        if reference.endswith(TEMPLATE_SUFFIX):
            template = self.env.get_template(reference)
            return template.render(**self.context).encode("utf-8")
        return self._read_raw(reference)

    def list_templates(self) -> list[str]:
        """Return a sorted list of every available reference."""
        if self._contents is not None:
            return sorted(self._contents)
        return sorted(self.env.list_templates())

    # -- Internal helpers --------------------------------------------------

    def _read_raw(self, reference: str) -> bytes:
        if self._contents is not None:
            try:
                return self._contents[reference]
            except KeyError:
                raise TemplateNotFound(reference) from None
        assert self.template_dir is not None
        path = self.template_dir.joinpath(*split_template_path(reference))
        if not path.is_file():
            raise TemplateNotFound(reference)
        return path.read_bytes()
