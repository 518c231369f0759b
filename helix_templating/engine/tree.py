"""Template object tree construction.

Walks the manifest root and classifies every file and directory into a
``TemplateObject``.  At each level files come before directories; children
are nested inside their directory node rather than flattened.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Optional

from helix_templating.errors import TemplateFileSystemError
from helix_templating.utils import same_path

from .context import TemplateContext
from .models import TemplateObject, TemplateObjectType

FileClassifier = Callable[[Path, TemplateContext], Optional[TemplateObject]]


def is_ignored(path: Path, context: TemplateContext) -> bool:
    return any(same_path(path, ignored) for ignored in context.manifest.ignore_files)


def is_project_to_attach(path: Path, context: TemplateContext) -> bool:
    return any(same_path(path, project) for project in context.manifest.projects_to_attach)


def is_source_root(path: Path, context: TemplateContext) -> bool:
    return same_path(path, context.manifest.source_folder)


def classify_file(path: Path, context: TemplateContext) -> Optional[TemplateObject]:
    """Default file classifier: always returns a node.

    Ignoring is a flag, not an omission.  Replacement classifiers may return
    ``None`` to leave a file out of the tree entirely.
    """
    ignored = is_ignored(path, context)
    return TemplateObject(
        type=(
            TemplateObjectType.PROJECT
            if is_project_to_attach(path, context)
            else TemplateObjectType.FILE
        ),
        original_full_path=path,
        is_ignored=ignored,
        destination_full_path=None if ignored else context.destination_for(path),
    )


class TemplateTreeBuilder:
    """Builds the template object forest for one templating run.

    Args:
        context: The run's manifest, destination root and tokens.
        file_classifier: Turns a file path into a node, or ``None`` to
            suppress it.  Defaults to :func:`classify_file`.
    """

    def __init__(
        self,
        context: TemplateContext,
        file_classifier: FileClassifier | None = None,
    ) -> None:
        self.context = context
        self.file_classifier = file_classifier or classify_file

    def build(self, directory_path: str | Path | None = None) -> list[TemplateObject]:
        """Return the ordered template objects directly inside *directory_path*.

        Defaults to the manifest root.

        Raises:
            TemplateFileSystemError: If the directory (or any subdirectory)
                is missing or cannot be listed.
        """
        directory = Path(directory_path or self.context.manifest.manifest_root_path)
        files, directories = _list_directory(directory)

        template_objects: list[TemplateObject] = []
        for file_path in files:
            template_object = self.file_classifier(file_path, self.context)
            if template_object is not None:
                template_objects.append(template_object)

        for sub_directory in directories:
            template_objects.append(
                TemplateObject(
                    type=(
                        TemplateObjectType.SOURCE_ROOT
                        if is_source_root(sub_directory, self.context)
                        else TemplateObjectType.FOLDER
                    ),
                    original_full_path=sub_directory,
                    destination_full_path=self.context.destination_for(sub_directory),
                    child_objects=self.build(sub_directory),
                )
            )
        return template_objects


def _list_directory(directory: Path) -> tuple[list[Path], list[Path]]:
    """Return ``(files, directories)`` directly inside *directory*, sorted by name.

    Anything that is not a directory counts as a file, so a dangling symlink
    still reaches the copy step and fails there instead of vanishing.
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        directories = [entry for entry in entries if entry.is_dir()]
        files = [entry for entry in entries if not entry.is_dir()]
    except OSError as exc:
        raise TemplateFileSystemError(
            f"Cannot read template directory {directory}: {exc}", directory
        ) from exc
    return files, directories
