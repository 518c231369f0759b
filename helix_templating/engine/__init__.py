"""Helix templating engine -- materialises template directories.

Quick usage::

    from helix_templating.engine import TemplateEngine
    from helix_templating.manifest import load_manifest

    manifest = load_manifest("templates/feature/manifest.yaml")
    result = TemplateEngine().run(manifest, "/src/MySolution", {"Name": "Acme"})
    for template_object in result.walk():
        print(template_object.type, template_object.destination_full_path)
"""

from helix_templating.engine.content import mark_project_content
from helix_templating.engine.context import TemplateContext
from helix_templating.engine.copier import copy_template_objects
from helix_templating.engine.engine import TemplateEngine
from helix_templating.engine.models import (
    ProjectTemplate,
    TemplateObject,
    TemplateObjectType,
)
from helix_templating.engine.paths import DestinationPathBuilder
from helix_templating.engine.tokens import TokenReplacer, replace_tokens_in_files
from helix_templating.engine.tree import TemplateTreeBuilder, classify_file
from helix_templating.engine.virtual_folders import find_source_root, graft_virtual_folders

__all__ = [
    "DestinationPathBuilder",
    "ProjectTemplate",
    "TemplateContext",
    "TemplateEngine",
    "TemplateObject",
    "TemplateObjectType",
    "TemplateTreeBuilder",
    "TokenReplacer",
    "classify_file",
    "copy_template_objects",
    "find_source_root",
    "graft_virtual_folders",
    "mark_project_content",
    "replace_tokens_in_files",
]
