"""Command line entry point for the Helix templating engine.

Usage::

    helix-template templates/feature/manifest.yaml --output ./MySolution --token Name=Acme
    python -m helix_templating manifest.yaml -o ./out -t Name=Acme -t Company=Laub --overwrite
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel
from rich.tree import Tree

from helix_templating.config import EngineConfig
from helix_templating.engine import ProjectTemplate, TemplateEngine, TemplateObject, TemplateObjectType
from helix_templating.errors import TemplateEngineError
from helix_templating.manifest import load_manifest
from helix_templating.utils import (
    console,
    parse_token_assignments,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

_TYPE_STYLES: dict[TemplateObjectType, str] = {
    TemplateObjectType.FILE: "white",
    TemplateObjectType.FOLDER: "bright_blue",
    TemplateObjectType.PROJECT: "bright_magenta",
    TemplateObjectType.SOURCE_ROOT: "bright_green",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="helix-template",
        description="Helix templating -- materialise a template directory from its manifest",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  helix-template manifest.yaml -o ./MySolution -t Name=Acme\n"
            "  helix-template manifest.json -o ./out --overwrite --quiet\n"
        ),
    )
    parser.add_argument("manifest", help="Path to the template manifest (.yaml, .yml or .json)")
    parser.add_argument(
        "--output", "-o",
        required=True,
        help="Destination root directory",
    )
    parser.add_argument(
        "--token", "-t",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Replacement token (repeatable); overrides manifest defaults",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Engine configuration JSON file (default: environment variables)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite destination files that already exist",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not print the template object tree",
    )
    return parser


def render_tree(result: ProjectTemplate) -> Tree:
    """Render the template object forest as a Rich tree."""
    title = result.manifest.name or str(result.manifest.manifest_root_path)
    root = Tree(f"[bold]{escape(title)}[/bold]")
    for template_object in result.template_objects:
        _add_node(root, template_object)
    return root


def _add_node(parent: Tree, template_object: TemplateObject) -> None:
    style = _TYPE_STYLES[template_object.type]
    label = f"[{style}]{escape(template_object.name)}[/{style}]"
    markers = []
    if template_object.type is not TemplateObjectType.FILE:
        markers.append(template_object.type.value)
    if template_object.is_virtual:
        markers.append("virtual")
    if template_object.is_ignored:
        markers.append("ignored")
    if template_object.is_project_content:
        markers.append("content")
    if markers:
        label += f" [dim]({', '.join(markers)})[/dim]"
    branch = parent.add(label)
    for child in template_object.child_objects or []:
        _add_node(branch, child)


def summarise(result: ProjectTemplate) -> dict[str, str]:
    """Count the node kinds in *result* for the summary table."""
    nodes = list(result.walk())
    physical = list(_walk_physical(result.template_objects))
    files = [
        node for node in physical
        if node.type in (TemplateObjectType.FILE, TemplateObjectType.PROJECT)
        and not node.is_ignored
    ]
    return {
        "Files": str(len(files)),
        "Ignored files": str(sum(1 for node in nodes if node.is_ignored)),
        "Projects": str(len(result.project_files())),
        "Project content": str(sum(1 for node in nodes if node.is_project_content)),
        "Virtual folders": str(sum(1 for node in nodes if node.is_virtual)),
        "Tokens": ", ".join(sorted(result.replacement_tokens)) or "(none)",
    }


def _walk_physical(template_objects: list[TemplateObject]):
    for template_object in template_objects:
        if template_object.is_virtual:
            continue
        yield template_object
        yield from _walk_physical(template_object.child_objects or [])


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``helix-template`` and ``python -m helix_templating``."""
    args = build_parser().parse_args(argv)

    try:
        config = EngineConfig.load(Path(args.config)) if args.config else EngineConfig.from_env()
        if args.overwrite:
            config.overwrite_existing = True
        overrides = parse_token_assignments(args.token)
        manifest = load_manifest(args.manifest)
    except (OSError, ValueError, TemplateEngineError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    tokens = {**manifest.default_tokens(), **overrides}
    missing = [token.key for token in manifest.tokens if token.key not in tokens]
    if missing:
        print_warning(f"No value given for token(s): {', '.join(missing)}")

    destination = Path(args.output).absolute()
    console.print(
        Panel(
            f"Template : {manifest.name or manifest.manifest_root_path}\n"
            f"Source   : {manifest.manifest_root_path}\n"
            f"Output   : {destination}",
            title="[bold]Helix Template[/bold]",
            border_style="bright_cyan",
        )
    )

    try:
        result = TemplateEngine(config).run(manifest, destination, tokens)
    except (TemplateEngineError, ValueError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if not args.quiet:
        console.print(render_tree(result))
        console.print()
    print_summary_table(summarise(result), title="Template Summary")
    print_success("Template applied successfully!")
