"""psetup scaffolder -- creates project trees from item descriptions.

Quick usage::

    from psetup.scaffolder import ItemGenerator, TemplateStore, build_directories

    generator = ItemGenerator(TemplateStore(context={"project_name": "demo"}))
    result = generator.create_items(build_directories("./demo"))
    for failure in result:
        print(failure)
"""

from psetup.scaffolder.errors import (
    CreationError,
    GenerationError,
    InvalidKindError,
    TemplateError,
)
from psetup.scaffolder.generator import ItemGenerator, full_file_path
from psetup.scaffolder.layout import (
    build_directories,
    build_documents,
    project_directory,
    selected_documents,
)
from psetup.scaffolder.models import GenerationResult, ItemDescription, ItemKind
from psetup.scaffolder.templates import TemplateStore

__all__ = [
    "CreationError",
    "GenerationError",
    "InvalidKindError",
    "TemplateError",
    "ItemGenerator",
    "full_file_path",
    "build_directories",
    "build_documents",
    "project_directory",
    "selected_documents",
    "GenerationResult",
    "ItemDescription",
    "ItemKind",
    "TemplateStore",
]
