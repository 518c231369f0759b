"""Token substitution for destination paths and copied file contents.

Tokens are replaced as literal substrings: a key ``Name`` with the default
markers matches ``{{Name}}`` wherever it appears.  There is no escaping and
no expression syntax.
"""

from __future__ import annotations

from pathlib import Path

from helix_templating.config import EngineConfig
from helix_templating.errors import TemplateFileSystemError

# Bytes inspected when sniffing for binary content.
_SNIFF_SIZE = 8192


class TokenReplacer:
    """Replaces token markers in strings and paths."""

    def __init__(
        self,
        tokens: dict[str, str],
        prefix: str = "{{",
        suffix: str = "}}",
    ) -> None:
        self.tokens = dict(tokens)
        self.prefix = prefix
        self.suffix = suffix
        self._markers = [(self.marker(key), value) for key, value in self.tokens.items()]

    @classmethod
    def from_config(cls, tokens: dict[str, str], config: EngineConfig) -> "TokenReplacer":
        return cls(tokens, prefix=config.token_prefix, suffix=config.token_suffix)

    def marker(self, key: str) -> str:
        """Return the literal text matched for *key*.

        A key that already carries both markers is used verbatim.
        """
        if key.startswith(self.prefix) and key.endswith(self.suffix):
            return key
        return f"{self.prefix}{key}{self.suffix}"

    def replace(self, text: str) -> str:
        """Return *text* with every known token marker replaced."""
        for marker, value in self._markers:
            text = text.replace(marker, value)
        return text

    def replace_path(self, path: Path) -> Path:
        return Path(self.replace(str(path)))


def replace_tokens_in_files(
    paths: list[Path],
    replacer: TokenReplacer,
    config: EngineConfig | None = None,
) -> list[Path]:
    """Rewrite each text file in *paths* with its tokens replaced.

    Files with a binary suffix or with a NUL byte near the start are left
    alone, as are files whose content does not change.  Bytes that are not
    valid in the configured encoding are written back unchanged.

    Returns:
        The paths whose content was rewritten.

    Raises:
        TemplateFileSystemError: If a file cannot be read, decoded, or
            written.
    """
    config = config or EngineConfig()
    rewritten: list[Path] = []

    for path in paths:
        path = Path(path)
        if config.is_binary_name(path):
            continue
        try:
            if _looks_binary(path):
                continue
            with path.open(
                encoding=config.encoding, errors="surrogateescape", newline=""
            ) as handle:
                original = handle.read()
            replaced = replacer.replace(original)
            if replaced == original:
                continue
            with path.open(
                "w", encoding=config.encoding, errors="surrogateescape", newline=""
            ) as handle:
                handle.write(replaced)
        except (OSError, UnicodeError) as exc:
            raise TemplateFileSystemError(
                f"Failed to replace tokens in {path}: {exc}", path
            ) from exc
        rewritten.append(path)

    return rewritten


def _looks_binary(path: Path) -> bool:
    with path.open("rb") as handle:
        return b"\0" in handle.read(_SNIFF_SIZE)
