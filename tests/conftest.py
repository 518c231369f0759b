"""Shared pytest fixtures for the Helix templating test suite.

Provides reusable fixtures for:
- A sample template directory on disk
- A manifest describing it
- Destination directories and per-run contexts
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from helix_templating.config import EngineConfig
from helix_templating.engine.context import TemplateContext
from helix_templating.manifest.models import Manifest, VirtualSolutionFolder


# ---------------------------------------------------------------------------
# Template on disk
# ---------------------------------------------------------------------------

def write(path: Path, content: str = "") -> Path:
    """Create *path* (and parents) with *content*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A small Helix feature template.

    Layout::

        tmpl/
          README.md
          notes.ignore
          docs/
            guide.txt
          src/                              <- source folder
            {{Name}}.Feature/
              {{Name}}.Feature.csproj       <- attached project
              Class1.cs
              Properties/
                AssemblyInfo.cs
    """
    root = tmp_path / "tmpl"
    write(root / "README.md", "# {{Name}} feature\n")
    write(root / "notes.ignore", "never copied {{Name}}\n")
    write(root / "docs" / "guide.txt", "Guide for {{Name}}\n")
    feature = root / "src" / "{{Name}}.Feature"
    write(feature / "{{Name}}.Feature.csproj", "<Project><Name>{{Name}}</Name></Project>\n")
    write(feature / "Class1.cs", "namespace {{Name}}.Feature\n{\n}\n")
    write(feature / "Properties" / "AssemblyInfo.cs", '[assembly: AssemblyTitle("{{Name}}")]\n')
    return root


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """Destination root (not created up front)."""
    return tmp_path / "out"


@pytest.fixture
def manifest(template_root: Path) -> Manifest:
    """Manifest for ``template_root`` with relative paths."""
    return Manifest(
        name="Feature",
        manifest_root_path=template_root,
        source_folder=Path("src"),
        ignore_files=[Path("notes.ignore")],
        projects_to_attach=[Path("src/{{Name}}.Feature/{{Name}}.Feature.csproj")],
        virtual_solution_folders=[
            VirtualSolutionFolder(
                name="Solution Items",
                files=[Path("README.md")],
                sub_folders=[
                    VirtualSolutionFolder(name="Docs", files=[Path("docs/guide.txt")]),
                ],
            ),
        ],
    )


@pytest.fixture
def tokens() -> dict[str, str]:
    return {"Name": "Acme"}


@pytest.fixture
def context(manifest: Manifest, destination: Path, tokens: dict[str, str]) -> TemplateContext:
    return TemplateContext.create(manifest, destination, tokens, EngineConfig())


@pytest.fixture
def manifest_yaml(template_root: Path) -> Path:
    """A YAML manifest file inside ``template_root``."""
    return write(
        template_root / "manifest.yaml",
        textwrap.dedent("""\
            name: Feature
            description: Helix feature module
            source_folder: src
            ignore_files:
              - notes.ignore
            projects_to_attach:
              - src/{{Name}}.Feature/{{Name}}.Feature.csproj
            tokens:
              - key: Name
                display_name: Module name
                default: Sample
            virtual_solution_folders:
              - name: Solution Items
                files:
                  - README.md
        """),
    )


@pytest.fixture
def write_file():
    """Return the ``write(path, content)`` helper for ad-hoc template files."""
    return write
