"""Helix templating engine configuration.

Typed settings for the copy and token replacement steps.  All settings use
Pydantic v2 models so they can be validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


DEFAULT_BINARY_EXTENSIONS: list[str] = [
    ".dll",
    ".exe",
    ".pdb",
    ".snk",
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".ico",
    ".bmp",
    ".zip",
    ".nupkg",
    ".pdf",
    ".woff",
    ".woff2",
    ".ttf",
    ".eot",
]


class EngineConfig(BaseModel):
    """Global templating configuration.

    Instances are typically created once by the CLI entry point and then
    passed to ``TemplateEngine``.
    """

    token_prefix: str = Field(default="{{", min_length=1)
    token_suffix: str = Field(default="}}", min_length=1)
    overwrite_existing: bool = Field(
        default=False,
        description="Overwrite destination files that already exist",
    )
    encoding: str = Field(default="utf-8", description="Encoding of text template files")
    binary_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BINARY_EXTENSIONS),
        description="File suffixes never subjected to in-file token replacement",
    )

    @field_validator("binary_extensions")
    @classmethod
    def _normalise_extensions(cls, value: list[str]) -> list[str]:
        normalised = []
        for ext in value:
            ext = ext.strip().lower()
            if ext and not ext.startswith("."):
                ext = f".{ext}"
            if ext:
                normalised.append(ext)
        return normalised

    def is_binary_name(self, path: str | Path) -> bool:
        """Return ``True`` if *path* has one of the configured binary suffixes."""
        return Path(path).suffix.lower() in self.binary_extensions

    # ------------------------------------------------------------------
    # Loading helpers
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "EngineConfig":
        """Load a configuration from a JSON file (as used by ``--config``)."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build an ``EngineConfig`` from environment variables.

        Recognised variables (all optional):
            HELIX_TOKEN_PREFIX, HELIX_TOKEN_SUFFIX, HELIX_OVERWRITE,
            HELIX_ENCODING.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("HELIX_TOKEN_PREFIX"):
            kwargs["token_prefix"] = os.environ["HELIX_TOKEN_PREFIX"]
        if os.environ.get("HELIX_TOKEN_SUFFIX"):
            kwargs["token_suffix"] = os.environ["HELIX_TOKEN_SUFFIX"]
        if os.environ.get("HELIX_OVERWRITE"):
            kwargs["overwrite_existing"] = os.environ["HELIX_OVERWRITE"].strip().lower() in (
                "1",
                "true",
                "yes",
                "on",
            )
        if os.environ.get("HELIX_ENCODING"):
            kwargs["encoding"] = os.environ["HELIX_ENCODING"]
        return cls(**kwargs)
