"""Declarative descriptions of the filesystem entries to scaffold."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional

from pydantic import BaseModel, Field, model_validator

from .errors import GenerationError


class ItemKind(str, Enum):
    """Kinds of item the generator knows how to create."""
    FILE = "file"
    DIRECTORY = "directory"


class ItemDescription(BaseModel):
    """One file or directory to create.

    ``kind`` is a plain string so that unsupported kinds can be described and
    reported by the generator instead of being rejected up front.  Directory
    items ignore ``extension``, ``content`` and ``template_reference``.
    """

    name: str = Field(..., description="File or directory name, without extension")
    kind: str = Field(..., description="'file' or 'directory'")
    creation_path: Path = Field(..., description="Directory the item is placed into")
    extension: Optional[str] = Field(default=None, description="File extension, dot optional")
    content: Optional[bytes] = Field(default=None, description="Inline file content")
    template_reference: Optional[str] = Field(
        default=None, description="Content store key for the file content"
    )

    @model_validator(mode="after")
    def _single_content_source(self) -> "ItemDescription":
        if self.content is not None and self.template_reference is not None:
            raise ValueError("content and template_reference are mutually exclusive")
        return self


@dataclass
class GenerationResult:
    """Failures collected over a batch, in item order.  Empty means success."""

    failures: list[GenerationError] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures

    def __iter__(self) -> Iterator[GenerationError]:
        return iter(self.failures)

    def __len__(self) -> int:
        return len(self.failures)
