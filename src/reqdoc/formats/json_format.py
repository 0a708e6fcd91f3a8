"""JSON document format."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from reqdoc.core.loader import LoadError, LoadErrorKind


def _unique_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise LoadError(LoadErrorKind.DUPLICATE_ID, f"duplicate key {key!r}", format="json")
        result[key] = value
    return result


class JSONFormat:
    """JSON reader/writer; duplicate object keys are rejected."""

    name = "json"
    suffixes = (".json",)

    def decode(self, text: str) -> Any:
        try:
            return json.loads(text, object_pairs_hook=_unique_pairs)
        except json.JSONDecodeError as e:
            raise LoadError(
                LoadErrorKind.SYNTAX,
                f"invalid JSON: {e.msg}",
                line=e.lineno,
                column=e.colno,
                format=self.name,
            ) from e

    def encode(self, data: dict[str, Any]) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    def can_parse(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.suffixes


def create_format() -> JSONFormat:
    """Factory function to create a JSONFormat."""
    return JSONFormat()
