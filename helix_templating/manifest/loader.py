"""Manifest loading from YAML or JSON files.

The manifest file normally sits in the template root, so the root defaults
to the directory containing the manifest and the manifest itself is added
to the ignore list.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from helix_templating.errors import TemplateConfigurationError
from helix_templating.utils import same_path

from .models import Manifest

_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}


def load_manifest(path: str | Path) -> Manifest:
    """Load and validate a manifest file.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` manifest.

    Returns:
        A validated ``Manifest`` with every path absolute.

    Raises:
        TemplateConfigurationError: If the file is missing, has an
            unsupported suffix, or does not contain a mapping.
        pydantic.ValidationError: If the mapping does not describe a
            valid manifest.
    """
    manifest_path = Path(path).absolute()
    if not manifest_path.is_file():
        raise TemplateConfigurationError(f"Manifest file not found: {manifest_path}")

    data = _read_mapping(manifest_path)

    root = Path(data.get("manifest_root_path") or manifest_path.parent)
    if not root.is_absolute():
        root = manifest_path.parent / root
    data["manifest_root_path"] = root

    manifest = Manifest.model_validate(data)
    if _is_under(manifest_path, manifest.manifest_root_path) and not any(
        same_path(manifest_path, ignored) for ignored in manifest.ignore_files
    ):
        manifest.ignore_files.append(manifest_path)
    return manifest


def _read_mapping(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    raw = path.read_text(encoding="utf-8")
    try:
        if suffix in _YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        elif suffix in _JSON_SUFFIXES:
            data = json.loads(raw)
        else:
            raise TemplateConfigurationError(
                f"Unsupported manifest format '{suffix}' (expected .yaml, .yml or .json)"
            )
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise TemplateConfigurationError(f"Malformed manifest {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise TemplateConfigurationError(f"Manifest {path} must contain a mapping at the top level")
    return data


def _is_under(path: Path, root: Path) -> bool:
    return any(same_path(parent, root) for parent in path.parents)
