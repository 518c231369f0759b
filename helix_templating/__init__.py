"""Helix templating -- turns a manifest-described template directory into a
token-substituted project tree, plus an in-memory model of that tree.

Quick usage::

    from helix_templating import TemplateEngine, load_manifest

    manifest = load_manifest("templates/feature/manifest.yaml")
    result = TemplateEngine().run(manifest, "/src/MySolution", {"Name": "Acme"})
"""

from helix_templating.config import EngineConfig
from helix_templating.engine import ProjectTemplate, TemplateEngine, TemplateObject, TemplateObjectType
from helix_templating.errors import (
    TemplateConfigurationError,
    TemplateEngineError,
    TemplateFileSystemError,
)
from helix_templating.manifest import Manifest, VirtualSolutionFolder, load_manifest

__all__ = [
    "EngineConfig",
    "Manifest",
    "ProjectTemplate",
    "TemplateConfigurationError",
    "TemplateEngine",
    "TemplateEngineError",
    "TemplateFileSystemError",
    "TemplateObject",
    "TemplateObjectType",
    "VirtualSolutionFolder",
    "load_manifest",
]
