"""Failures raised while materializing items on the filesystem."""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Base class for every item-generation failure."""


class InvalidKindError(GenerationError):
    """The item kind is not one the requested operation can handle."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"invalid item kind: {kind}")


class TemplateError(GenerationError):
    """The content store could not provide a template."""

    def __init__(self, reference: str, cause: BaseException | None = None) -> None:
        self.reference = reference
        self.cause = cause
        message = f"failed to get content from template at {reference}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class CreationError(GenerationError):
    """A directory or file could not be written."""

    def __init__(self, name: str, path: Path, cause: BaseException | None = None) -> None:
        self.name = name
        self.path = path
        self.cause = cause
        message = f"failed to create item {name} at {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
