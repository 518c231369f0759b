"""Virtual solution folder grafting.

Virtual solution folders are logical groupings declared in the manifest.
They have no physical directory; they are attached under the source root
node so the IDE can present them alongside the real tree.
"""

from __future__ import annotations

from pathlib import Path

from helix_templating.errors import TemplateConfigurationError
from helix_templating.manifest.models import VirtualSolutionFolder

from .context import TemplateContext
from .models import TemplateObject, TemplateObjectType


def find_source_root(template_objects: list[TemplateObject]) -> TemplateObject:
    """Return the single source root node in the forest.

    Raises:
        TemplateConfigurationError: If no node is of type ``SOURCE_ROOT``.
    """
    for template_object in template_objects:
        for node in template_object.walk():
            if node.type is TemplateObjectType.SOURCE_ROOT:
                return node
    raise TemplateConfigurationError(
        "Virtual solution folders are declared but the template has no source root folder"
    )


def graft_virtual_folders(
    template_objects: list[TemplateObject],
    virtual_folders: list[VirtualSolutionFolder] | None,
    context: TemplateContext,
) -> None:
    """Attach synthetic folder nodes for *virtual_folders* under the source root.

    Does nothing when no virtual folders are declared.
    """
    if not virtual_folders:
        return
    source_root = find_source_root(template_objects)
    if source_root.child_objects is None:
        source_root.child_objects = []
    source_root.child_objects.extend(
        _build_virtual_folder(folder, source_root.destination_full_path, context)
        for folder in virtual_folders
    )


def _build_virtual_folder(
    folder: VirtualSolutionFolder,
    parent_path: Path,
    context: TemplateContext,
) -> TemplateObject:
    """Build a complete virtual folder subtree before it is attached."""
    destination = parent_path / folder.name
    children = [
        TemplateObject(
            type=TemplateObjectType.FILE,
            original_full_path=file_path,
            destination_full_path=context.destination_for(file_path),
        )
        for file_path in folder.files
    ]
    children.extend(
        _build_virtual_folder(sub_folder, destination, context)
        for sub_folder in folder.sub_folders
    )
    return TemplateObject(
        type=TemplateObjectType.FOLDER,
        destination_full_path=destination,
        child_objects=children,
    )
