"""Destination path computation.

Maps an absolute path under the manifest root to the same relative location
under the destination root.  Token substitution is applied separately by
the caller.
"""

from __future__ import annotations

import os
from pathlib import Path


class DestinationPathBuilder:
    """Re-roots source paths from the manifest root onto a destination root."""

    def __init__(self, manifest_root: str | Path, destination_root: str | Path) -> None:
        self.manifest_root = Path(os.path.normpath(manifest_root))
        self.destination_root = Path(destination_root)
        self._root_parts = [part.casefold() for part in self.manifest_root.parts]

    def build(self, source_path: str | Path) -> Path:
        """Return the destination path for *source_path*.

        Every segment below the manifest root is kept unchanged, including
        the final file or directory name.  The root prefix is matched
        case-insensitively.  ``..`` segments are collapsed before the
        root check, so a path cannot climb out of the manifest root.

        Raises:
            ValueError: If *source_path* is not absolute or does not lie
                under the manifest root.
        """
        source = Path(source_path)
        if not source.is_absolute():
            raise ValueError(f"Source path must be absolute: {source}")
        source = Path(os.path.normpath(source))

        parts = source.parts
        depth = len(self._root_parts)
        if [part.casefold() for part in parts[:depth]] != self._root_parts:
            raise ValueError(
                f"Source path {source} is not under manifest root {self.manifest_root}"
            )
        return self.destination_root.joinpath(*parts[depth:])
