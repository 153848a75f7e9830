"""The default project tree, expressed as item descriptions.

Directories must be created before the documents placed inside them, so the
two lists are built and generated separately.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .models import ItemDescription, ItemKind


ALL_DOCUMENTS = "all"

# Optional documents, in the order they are generated.
DOCUMENTS: tuple[str, ...] = ("license", "ignore", "readme")

PROJECT_DIRECTORIES: tuple[str, ...] = (
    "src",
    "tests",
    "assets",
    "assets/data",
    "assets/images",
)


def project_directory(route: str | Path, name: str) -> Path:
    """Return the root of the project called *name* under *route*.

    The project always nests under *route*: an absolute *name* loses its
    anchor, so ``("/work", "/etc/x")`` gives ``/work/etc/x``.
    """
    name_path = Path(name)
    if name_path.anchor:
        name_path = name_path.relative_to(name_path.anchor)
    return Path(route) / name_path


def build_directories(project_dir: str | Path) -> list[ItemDescription]:
    """Describe the fixed directory skeleton of a new project."""
    root = Path(project_dir)
    items: list[ItemDescription] = []
    for rel in PROJECT_DIRECTORIES:
        rel_path = Path(rel)
        items.append(
            ItemDescription(
                name=rel_path.name,
                kind=ItemKind.DIRECTORY,
                creation_path=root / rel_path.parent,
            )
        )
    return items


def selected_documents(documents: Sequence[str]) -> list[str]:
    """Expand a document selection into :data:`DOCUMENTS` order.

    ``"all"`` anywhere in the selection picks every document.
    """
    if ALL_DOCUMENTS in documents:
        return list(DOCUMENTS)
    return [doc for doc in DOCUMENTS if doc in documents]


def build_documents(
    project_dir: str | Path,
    language: str,
    license_id: str,
    documents: Sequence[str],
) -> list[ItemDescription]:
    """Describe the source stub and the selected documents.

    Args:
        project_dir: Root of the project.
        language: Extension of the ``src/main`` stub, e.g. ``"py"``.
        license_id: License template name, e.g. ``"mit"``.
        documents: Document selection, e.g. ``["license", "readme"]``.
    """
    root = Path(project_dir)
    catalogue = {
        "license": ItemDescription(
            name="LICENSE",
            kind=ItemKind.FILE,
            creation_path=root,
            template_reference=f"license/{license_id}.txt.j2",
        ),
        "ignore": ItemDescription(
            name=".gitignore",
            kind=ItemKind.FILE,
            creation_path=root,
            template_reference="ignore.txt",
        ),
        "readme": ItemDescription(
            name="README",
            extension="md",
            kind=ItemKind.FILE,
            creation_path=root,
            template_reference="readme.txt.j2",
        ),
    }
    items = [
        ItemDescription(
            name="main",
            extension=language,
            kind=ItemKind.FILE,
            creation_path=root / "src",
        )
    ]
    items.extend(catalogue[doc] for doc in selected_documents(documents))
    return items
