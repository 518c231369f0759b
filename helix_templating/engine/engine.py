"""Main templating orchestrator.

Takes a ``Manifest``, a destination root and a token map, and materialises
the template on disk while building the ``ProjectTemplate`` model consumed
by the host tool.  One call performs exactly one pass: scan, copy, replace
tokens, then post-process the tree.
"""

from __future__ import annotations

from pathlib import Path

from helix_templating.config import EngineConfig
from helix_templating.manifest.models import Manifest

from .content import mark_project_content
from .context import TemplateContext
from .copier import copy_template_objects
from .models import ProjectTemplate
from .tokens import replace_tokens_in_files
from .tree import FileClassifier, TemplateTreeBuilder
from .virtual_folders import graft_virtual_folders


class TemplateEngine:
    """Runs a Helix template against a destination directory.

    The engine holds configuration only; every run builds its own context
    and tree, so one engine can be reused for many runs.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        file_classifier: FileClassifier | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.file_classifier = file_classifier

    def run(
        self,
        manifest: Manifest,
        destination_root: str | Path,
        replacement_tokens: dict[str, str],
    ) -> ProjectTemplate:
        """Materialise *manifest* under *destination_root*.

        Args:
            manifest: The parsed template manifest.
            destination_root: Directory the template is copied into.
            replacement_tokens: ``{key: value}`` substituted in destination
                paths and copied file contents.

        Returns:
            The ``ProjectTemplate`` holding the manifest, the template
            object tree and the tokens.  When no file was copied the tree is
            returned as scanned, without project content marks or virtual
            folders.
        """
        context = TemplateContext.create(
            manifest, destination_root, replacement_tokens, self.config
        )

        # 1. Scan the template into a tree
        builder = TemplateTreeBuilder(context, self.file_classifier)
        template_objects = builder.build(manifest.manifest_root_path)
        result = ProjectTemplate(
            manifest=manifest,
            template_objects=template_objects,
            replacement_tokens=dict(replacement_tokens),
        )

        # 2. Copy files
        copied_paths = copy_template_objects(
            template_objects, overwrite=self.config.overwrite_existing
        )
        if not copied_paths:
            return result

        # 3. Replace tokens inside the copied files
        replace_tokens_in_files(copied_paths, context.replacer, self.config)

        # 4. Post-process the tree
        mark_project_content(template_objects)
        graft_virtual_folders(template_objects, manifest.virtual_solution_folders, context)

        return result
