"""Helix template manifests.

Usage::

    from helix_templating.manifest import load_manifest

    manifest = load_manifest("templates/feature/manifest.yaml")
    print(manifest.source_folder)
    print(manifest.default_tokens())
"""

from helix_templating.manifest.loader import load_manifest
from helix_templating.manifest.models import (
    Manifest,
    TokenDefinition,
    VirtualSolutionFolder,
)

__all__ = [
    "load_manifest",
    "Manifest",
    "TokenDefinition",
    "VirtualSolutionFolder",
]
