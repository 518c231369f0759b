"""Materialises the template object tree on disk."""

from __future__ import annotations

import shutil
from pathlib import Path

from helix_templating.errors import TemplateFileSystemError
from helix_templating.utils import ensure_dir

from .models import TemplateObject, TemplateObjectType

_COPIED_TYPES = (TemplateObjectType.FILE, TemplateObjectType.PROJECT)


def copy_template_objects(
    template_objects: list[TemplateObject],
    overwrite: bool = False,
) -> list[Path]:
    """Copy every non-ignored file node to its destination path.

    Physical folders are created even when empty.  Existing destination
    files are skipped unless *overwrite* is set; skipped files are not part
    of the result.

    Returns:
        Destination paths of the files actually written, in tree order.

    Raises:
        TemplateFileSystemError: If a directory cannot be created or a file
            cannot be copied.
    """
    copied: list[Path] = []
    for template_object in template_objects:
        for node in template_object.walk():
            if node.is_ignored or node.destination_full_path is None or node.is_virtual:
                continue
            if node.type in _COPIED_TYPES:
                if _copy_file(node.original_full_path, node.destination_full_path, overwrite):
                    copied.append(node.destination_full_path)
            else:
                _make_dir(node.destination_full_path)
    return copied


def _copy_file(source: Path, destination: Path, overwrite: bool) -> bool:
    if destination.exists() and not overwrite:
        return False
    try:
        ensure_dir(destination.parent)
        shutil.copy2(source, destination)
    except OSError as exc:
        raise TemplateFileSystemError(
            f"Failed to copy {source} to {destination}: {exc}", destination
        ) from exc
    return True


def _make_dir(path: Path) -> None:
    try:
        ensure_dir(path)
    except OSError as exc:
        raise TemplateFileSystemError(f"Failed to create directory {path}: {exc}", path) from exc
