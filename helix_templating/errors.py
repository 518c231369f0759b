"""Exceptions raised by the Helix templating engine.

Every failure aborts the whole run: the engine performs a single pass and
never retries.  Ignored files and an empty copy result are successful
outcomes, not errors.
"""

from __future__ import annotations

from pathlib import Path


class TemplateEngineError(Exception):
    """Base class for all templating failures."""


class TemplateConfigurationError(TemplateEngineError):
    """Raised when the manifest describes a template that cannot be built.

    Examples are virtual solution folders declared without a discoverable
    source root, or a manifest file that cannot be parsed.
    """


class TemplateFileSystemError(TemplateEngineError):
    """Raised when a directory cannot be listed or a file cannot be written."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)
