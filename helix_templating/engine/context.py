"""Per-run state threaded explicitly through the build steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from helix_templating.config import EngineConfig
from helix_templating.manifest.models import Manifest

from .paths import DestinationPathBuilder
from .tokens import TokenReplacer


@dataclass
class TemplateContext:
    """Everything a single templating run needs besides the tree itself."""

    manifest: Manifest
    destination_root: Path
    replacer: TokenReplacer
    config: EngineConfig = field(default_factory=EngineConfig)
    path_builder: DestinationPathBuilder = field(init=False)

    def __post_init__(self) -> None:
        self.destination_root = Path(self.destination_root)
        self.path_builder = DestinationPathBuilder(
            self.manifest.manifest_root_path, self.destination_root
        )

    @classmethod
    def create(
        cls,
        manifest: Manifest,
        destination_root: str | Path,
        replacement_tokens: dict[str, str],
        config: EngineConfig | None = None,
    ) -> "TemplateContext":
        config = config or EngineConfig()
        return cls(
            manifest=manifest,
            destination_root=Path(destination_root),
            replacer=TokenReplacer.from_config(replacement_tokens, config),
            config=config,
        )

    def destination_for(self, source_path: Path) -> Path:
        """Compute the token-substituted destination path of *source_path*."""
        return self.replacer.replace_path(self.path_builder.build(source_path))
