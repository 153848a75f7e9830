"""Materialize item descriptions on the filesystem.

The generator creates directories and files one at a time, resolving file
content from inline bytes or the content store.  Batches never stop at the
first failure: every item is attempted and failures are collected in order.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import jinja2

from .errors import CreationError, GenerationError, InvalidKindError, TemplateError
from .models import GenerationResult, ItemDescription, ItemKind
from .templates import TemplateStore


def full_file_path(creation_path: str | Path, name: str, extension: str | None) -> Path:
    """Join *creation_path* and *name* plus a dot-prefixed *extension*.

    Examples::

        full_file_path("src", "main", "py")   -> src/main.py
        full_file_path("src", "main", ".py")  -> src/main.py
        full_file_path(".", "LICENSE", None)  -> LICENSE
    """
    if not extension:
        return Path(creation_path) / name
    if not extension.startswith("."):
        extension = f".{extension}"
    return Path(creation_path) / f"{name}{extension}"


class ItemGenerator:
    """Creates files and directories from :class:`ItemDescription` objects."""

    def __init__(self, store: TemplateStore | None = None) -> None:
        self.store = store if store is not None else TemplateStore()

    # -- Public API --------------------------------------------------------

    def create_items(self, items: Iterable[ItemDescription]) -> GenerationResult:
        """Create every item, collecting failures in item order."""
        result = GenerationResult()
        for item in items:
            try:
                self.create_item(item)
            except GenerationError as exc:
                result.failures.append(exc)
        return result

    def create_item(self, item: ItemDescription) -> Path:
        """Create a single item according to its kind.

        Returns:
            The path of the created file or directory.

        Raises:
            InvalidKindError: If the kind is neither file nor directory.
            TemplateError: If the content store lookup fails.
            CreationError: If the filesystem operation fails.
        """
        if item.kind == ItemKind.DIRECTORY:
            return self.create_directory(item)
        if item.kind == ItemKind.FILE:
            return self.create_file(item)
        raise InvalidKindError(item.kind)

    # -- Directories -------------------------------------------------------

    def create_directory(self, item: ItemDescription) -> Path:
        """Create the directory and any missing parents."""
        if item.kind != ItemKind.DIRECTORY:
            raise InvalidKindError(item.kind)
        path = Path(item.creation_path) / item.name
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CreationError(item.name, path, exc) from exc
        return path

    # -- Files -------------------------------------------------------------

    def create_file(self, item: ItemDescription) -> Path:
        """Write the file, overwriting any existing one.

        Content comes from the inline bytes if set, else from the content
        store, else the file is left empty.  The parent directory must
        already exist.
        """
        if item.kind != ItemKind.FILE:
            raise InvalidKindError(item.kind)
        path = full_file_path(item.creation_path, item.name, item.extension)
        content = self._resolve_content(item)
        try:
            path.write_bytes(content)
        except OSError as exc:
            raise CreationError(item.name, path, exc) from exc
        return path

    def _resolve_content(self, item: ItemDescription) -> bytes:
        if item.content is not None:
            return item.content
        if item.template_reference is None:
            return b""
        try:
            return self.store.lookup(item.template_reference)
        except (jinja2.TemplateError, OSError, UnicodeError) as exc:
            raise TemplateError(item.template_reference, exc) from exc
