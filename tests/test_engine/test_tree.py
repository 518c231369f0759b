"""Unit tests for the template object tree builder (helix_templating.engine.tree).

Tests cover:
- Files listed before directories at every level
- File, project, folder and source root classification
- Ignore flags and destination path token substitution
- Pluggable file classifier able to suppress nodes
- Dangling symlinks listed as files
- Filesystem errors for missing directories
"""

from __future__ import annotations

from pathlib import Path

import pytest

from helix_templating.engine.context import TemplateContext
from helix_templating.engine.models import TemplateObject, TemplateObjectType
from helix_templating.engine.tree import (
    TemplateTreeBuilder,
    classify_file,
    is_ignored,
    is_project_to_attach,
    is_source_root,
)
from helix_templating.errors import TemplateFileSystemError
from helix_templating.manifest.models import Manifest

pytestmark = pytest.mark.unit


def _by_name(template_objects: list[TemplateObject]) -> dict[str, TemplateObject]:
    return {obj.original_full_path.name: obj for obj in template_objects}


# ---------------------------------------------------------------------------
# Classification helpers
# ---------------------------------------------------------------------------


class TestClassificationHelpers:
    def test_is_ignored_case_insensitive(self, context: TemplateContext, template_root: Path):
        assert is_ignored(template_root / "NOTES.IGNORE", context)
        assert not is_ignored(template_root / "README.md", context)

    def test_is_project_to_attach(self, context: TemplateContext, template_root: Path):
        project = template_root / "src" / "{{Name}}.Feature" / "{{name}}.feature.CSPROJ"
        assert is_project_to_attach(project, context)
        assert not is_project_to_attach(template_root / "README.md", context)

    def test_is_source_root_full_path_only(self, context: TemplateContext, template_root: Path):
        assert is_source_root(template_root / "SRC", context)
        assert not is_source_root(template_root / "docs" / "src", context)

    def test_no_source_folder_never_matches(self, template_root: Path, destination: Path):
        ctx = TemplateContext.create(Manifest(manifest_root_path=template_root), destination, {})
        assert not is_source_root(template_root / "src", ctx)

    def test_classify_file_computes_destination(self, context: TemplateContext, template_root: Path, destination: Path):
        node = classify_file(template_root / "README.md", context)
        assert node.type is TemplateObjectType.FILE
        assert node.child_objects is None
        assert node.is_ignored is False
        assert node.destination_full_path == destination / "README.md"

    def test_classify_ignored_file_has_no_destination(self, context: TemplateContext, template_root: Path):
        node = classify_file(template_root / "notes.ignore", context)
        assert node.is_ignored is True
        assert node.destination_full_path is None


# ---------------------------------------------------------------------------
# TemplateTreeBuilder
# ---------------------------------------------------------------------------


class TestTemplateTreeBuilder:
    def test_top_level_files_before_directories(self, context: TemplateContext):
        forest = TemplateTreeBuilder(context).build()
        names = [obj.original_full_path.name for obj in forest]
        assert names == ["README.md", "notes.ignore", "docs", "src"]

    def test_defaults_to_manifest_root(self, context: TemplateContext, template_root: Path):
        assert TemplateTreeBuilder(context).build() == TemplateTreeBuilder(context).build(template_root)

    def test_source_root_classified(self, context: TemplateContext):
        forest = _by_name(TemplateTreeBuilder(context).build())
        assert forest["src"].type is TemplateObjectType.SOURCE_ROOT
        assert forest["docs"].type is TemplateObjectType.FOLDER
        source_roots = [
            node for obj in forest.values() for node in obj.walk()
            if node.type is TemplateObjectType.SOURCE_ROOT
        ]
        assert len(source_roots) == 1

    def test_folders_have_child_lists(self, context: TemplateContext):
        forest = _by_name(TemplateTreeBuilder(context).build())
        docs = forest["docs"]
        assert [c.original_full_path.name for c in docs.child_objects] == ["guide.txt"]

    def test_project_and_nested_structure(self, context: TemplateContext, destination: Path):
        forest = _by_name(TemplateTreeBuilder(context).build())
        feature = forest["src"].child_objects[0]
        assert feature.type is TemplateObjectType.FOLDER
        assert feature.destination_full_path == destination / "src" / "Acme.Feature"

        children = feature.child_objects
        assert [c.original_full_path.name for c in children] == [
            "Class1.cs",
            "{{Name}}.Feature.csproj",
            "Properties",
        ]
        project = children[1]
        assert project.type is TemplateObjectType.PROJECT
        assert project.child_objects is None
        assert project.destination_full_path == destination / "src" / "Acme.Feature" / "Acme.Feature.csproj"

    def test_source_paths_untouched(self, context: TemplateContext, template_root: Path):
        forest = _by_name(TemplateTreeBuilder(context).build())
        feature = forest["src"].child_objects[0]
        assert feature.original_full_path == template_root / "src" / "{{Name}}.Feature"

    def test_ignored_file_kept_in_tree(self, context: TemplateContext):
        forest = _by_name(TemplateTreeBuilder(context).build())
        ignored = forest["notes.ignore"]
        assert ignored.is_ignored is True
        assert ignored.destination_full_path is None

    def test_every_non_ignored_file_has_destination(self, context: TemplateContext, template_root: Path):
        forest = TemplateTreeBuilder(context).build()
        nodes = [node for obj in forest for node in obj.walk()]
        on_disk = sorted(p for p in template_root.rglob("*") if p.is_file())
        file_nodes = sorted(
            node.original_full_path for node in nodes
            if node.type in (TemplateObjectType.FILE, TemplateObjectType.PROJECT)
        )
        assert file_nodes == on_disk
        for node in nodes:
            assert node.is_ignored != (node.destination_full_path is not None)

    def test_deterministic(self, context: TemplateContext):
        assert TemplateTreeBuilder(context).build() == TemplateTreeBuilder(context).build()

    def test_empty_directory(self, context: TemplateContext, template_root: Path):
        (template_root / "empty").mkdir()
        forest = _by_name(TemplateTreeBuilder(context).build())
        assert forest["empty"].child_objects == []

    def test_dangling_symlink_kept_as_file(self, context: TemplateContext, template_root: Path, destination: Path):
        (template_root / "stale.txt").symlink_to(template_root / "gone.txt")
        forest = _by_name(TemplateTreeBuilder(context).build())

        stale = forest["stale.txt"]
        assert stale.type is TemplateObjectType.FILE
        assert stale.destination_full_path == destination / "stale.txt"

    def test_classifier_can_suppress_files(self, context: TemplateContext):
        def _skip_markdown(path: Path, ctx: TemplateContext):
            if path.suffix == ".md":
                return None
            return classify_file(path, ctx)

        forest = TemplateTreeBuilder(context, file_classifier=_skip_markdown).build()
        assert "README.md" not in _by_name(forest)

    def test_missing_root_raises(self, template_root: Path, destination: Path):
        manifest = Manifest(manifest_root_path=template_root / "missing")
        ctx = TemplateContext.create(manifest, destination, {})
        with pytest.raises(TemplateFileSystemError) as exc_info:
            TemplateTreeBuilder(ctx).build()
        assert exc_info.value.path == template_root / "missing"
