"""Project content propagation.

Wherever an attached IDE project sits in the tree, every other node at the
same level and everything below those nodes belongs to that project.
Project nodes themselves are never project content.
"""

from __future__ import annotations

from .models import TemplateObject, TemplateObjectType


def mark_project_content(template_objects: list[TemplateObject]) -> None:
    """Set ``is_project_content`` in place, independently at every level."""
    if any(obj.type is TemplateObjectType.PROJECT for obj in template_objects):
        _mark_as_content(template_objects)

    for template_object in template_objects:
        if template_object.child_objects:
            mark_project_content(template_object.child_objects)


def _mark_as_content(template_objects: list[TemplateObject]) -> None:
    for template_object in template_objects:
        if template_object.type is TemplateObjectType.PROJECT:
            continue
        template_object.is_project_content = True
        if template_object.child_objects:
            _mark_as_content(template_object.child_objects)
