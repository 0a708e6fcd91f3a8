"""RSN document format.

Documents may name their structs (``Document { ... }``,
``Topic { ... }``) or use anonymous maps; both decode identically.
Encoding always writes anonymous maps.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from reqdoc.core.loader import LoadError, LoadErrorKind
from reqdoc.formats import rsn


class RSNFormat:
    """RSN reader/writer."""

    name = "rsn"
    suffixes = (".rsn", ".ron")

    def decode(self, text: str) -> Any:
        try:
            return rsn.loads(text)
        except rsn.RSNError as e:
            kind = LoadErrorKind.DUPLICATE_ID if e.duplicate_key else LoadErrorKind.SYNTAX
            message = e.message if e.duplicate_key else f"invalid RSN: {e.message}"
            raise LoadError(kind, message, line=e.line, column=e.column, format=self.name) from e

    def encode(self, data: dict[str, Any]) -> str:
        return rsn.dumps(data)

    def can_parse(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.suffixes


def create_format() -> RSNFormat:
    """Factory function to create an RSNFormat."""
    return RSNFormat()
