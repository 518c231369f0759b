"""Pydantic v2 models for Helix template manifests.

A manifest describes a directory of template files: where the template
lives, which subdirectory is the IDE source root, which files are ignored or
attached as IDE projects, the replacement tokens it expects, and the
virtual solution folders that group files independently of the physical
tree.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Token declarations
# ---------------------------------------------------------------------------

class TokenDefinition(BaseModel):
    """A replacement token the template expects the caller to supply."""
    key: str = Field(..., min_length=1, description="Token key, e.g. 'Name'")
    display_name: str = Field(default="", description="Human-readable label")
    default: Optional[str] = Field(default=None, description="Value used when none is given")


# ---------------------------------------------------------------------------
# Virtual solution folders
# ---------------------------------------------------------------------------

class VirtualSolutionFolder(BaseModel):
    """A logical grouping of files shown to the IDE, not present on disk."""
    name: str = Field(..., min_length=1, description="Folder name")
    files: list[Path] = Field(default_factory=list, description="Explicit template file paths")
    sub_folders: list[VirtualSolutionFolder] = Field(
        default_factory=list, description="Nested virtual folders"
    )

    def resolve_paths(self, root: Path) -> None:
        """Make every file path absolute relative to *root*, recursively."""
        self.files = [_absolute(path, root) for path in self.files]
        for sub_folder in self.sub_folders:
            sub_folder.resolve_paths(root)


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------

class Manifest(BaseModel):
    """Parsed and validated template manifest.

    Relative paths are interpreted against ``manifest_root_path`` so that
    manifests can be written without knowing where the template is checked
    out.
    """
    name: str = Field(default="", description="Template name")
    description: str = Field(default="", description="What the template creates")
    manifest_root_path: Path = Field(..., description="Root directory of the template files")
    source_folder: Optional[Path] = Field(
        default=None, description="Directory the IDE treats as the source root"
    )
    ignore_files: list[Path] = Field(
        default_factory=list, description="Files kept in the model but never copied"
    )
    projects_to_attach: list[Path] = Field(
        default_factory=list, description="IDE project files to attach to the solution"
    )
    virtual_solution_folders: list[VirtualSolutionFolder] = Field(
        default_factory=list, description="Logical folder groupings"
    )
    tokens: list[TokenDefinition] = Field(
        default_factory=list, description="Replacement tokens declared by the template"
    )

    @model_validator(mode="after")
    def _resolve_relative_paths(self) -> "Manifest":
        root = _normalise(self.manifest_root_path.absolute())
        self.manifest_root_path = root
        if self.source_folder is not None:
            self.source_folder = _absolute(self.source_folder, root)
        self.ignore_files = [_absolute(path, root) for path in self.ignore_files]
        self.projects_to_attach = [_absolute(path, root) for path in self.projects_to_attach]
        for folder in self.virtual_solution_folders:
            folder.resolve_paths(root)
        return self

    def default_tokens(self) -> dict[str, str]:
        """Return ``{key: default}`` for every declared token with a default."""
        return {
            token.key: token.default
            for token in self.tokens
            if token.default is not None
        }


def _absolute(path: Path, root: Path) -> Path:
    return _normalise(path if path.is_absolute() else root / path)


def _normalise(path: Path) -> Path:
    return Path(os.path.normpath(path))
