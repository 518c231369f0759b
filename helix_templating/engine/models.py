"""Pydantic v2 models for the built template object tree.

A ``TemplateObject`` is one node of the in-memory model handed to the host
tool: a physical file or folder discovered under the manifest root, an
attached IDE project, the source root, or a synthetic virtual folder.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from helix_templating.manifest.models import Manifest


class TemplateObjectType(str, Enum):
    """Classification of a template object, assigned once at creation."""
    FILE = "file"
    FOLDER = "folder"
    PROJECT = "project"
    SOURCE_ROOT = "source_root"


class TemplateObject(BaseModel):
    """A node in the template object tree.

    ``child_objects`` is ``None`` for file and project leaves and a list
    (possibly empty) for folders and the source root.  An ignored file keeps
    its place in the tree but has no destination path.
    """
    type: TemplateObjectType = Field(..., description="Node classification")
    original_full_path: Optional[Path] = Field(
        default=None, description="Source-side path, None for virtual folders"
    )
    destination_full_path: Optional[Path] = Field(
        default=None, description="Target-side path, None for ignored files"
    )
    is_ignored: bool = Field(default=False, description="Matched a manifest ignore entry")
    is_project_content: bool = Field(
        default=False, description="Belongs to an attached IDE project"
    )
    child_objects: Optional[list[TemplateObject]] = Field(
        default=None, description="Ordered children, None for leaves"
    )

    @property
    def name(self) -> str:
        path = self.destination_full_path or self.original_full_path
        return path.name if path is not None else ""

    @property
    def is_virtual(self) -> bool:
        """True for synthetic folders with no physical source directory."""
        return self.original_full_path is None

    def walk(self) -> Iterator[TemplateObject]:
        """Yield this node and all of its descendants, depth first."""
        yield self
        for child in self.child_objects or []:
            yield from child.walk()


TemplateObject.model_rebuild()


class ProjectTemplate(BaseModel):
    """The finished result of a templating run."""
    manifest: Manifest
    template_objects: list[TemplateObject] = Field(default_factory=list)
    replacement_tokens: dict[str, str] = Field(default_factory=dict)

    def walk(self) -> Iterator[TemplateObject]:
        """Yield every template object in the forest, depth first."""
        for template_object in self.template_objects:
            yield from template_object.walk()

    def find_source_root(self) -> TemplateObject:
        """Return the source root node.

        Raises:
            TemplateConfigurationError: If the forest has no source root.
        """
        from .virtual_folders import find_source_root

        return find_source_root(self.template_objects)

    def project_files(self) -> list[Path]:
        """Return destination paths of every attached IDE project."""
        return [
            template_object.destination_full_path
            for template_object in self.walk()
            if template_object.type is TemplateObjectType.PROJECT
            and template_object.destination_full_path is not None
        ]
