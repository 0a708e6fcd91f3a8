"""TOML document format.

Reading and writing go through tomlkit, the same library used for the
``.reqdoc.toml`` configuration file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import KeyAlreadyPresent, TOMLKitError

from reqdoc.core.loader import LoadError, LoadErrorKind


class TOMLFormat:
    """TOML reader/writer."""

    name = "toml"
    suffixes = (".toml",)

    def decode(self, text: str) -> Any:
        try:
            return tomlkit.parse(text).unwrap()
        except TOMLKitError as e:
            # The parser re-raises KeyAlreadyPresent as a ParseError.
            if isinstance(e, KeyAlreadyPresent) or isinstance(e.__context__, KeyAlreadyPresent):
                raise LoadError(LoadErrorKind.DUPLICATE_ID, str(e), format=self.name) from e
            # ParseError messages already name the line and column.
            raise LoadError(LoadErrorKind.SYNTAX, f"invalid TOML: {e}", format=self.name) from e

    def encode(self, data: dict[str, Any]) -> str:
        return tomlkit.dumps(data)

    def can_parse(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.suffixes


def create_format() -> TOMLFormat:
    """Factory function to create a TOMLFormat."""
    return TOMLFormat()
