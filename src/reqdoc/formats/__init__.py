"""Serialized document formats.

This module provides the DocumentFormat protocol and a format registry.
Each format turns text into plain Python data (dicts, lists, strings)
and back; building the canonical Document from that data is shared code
in ``reqdoc.core.loader``.

Built-in formats:
- yaml: YAML (PyYAML safe loader)
- json: JSON
- rsn: Rust-style record notation
- toml: TOML (tomlkit)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DocumentFormat(Protocol):
    """Protocol for all document formats.

    Decoders raise ``LoadError`` with kind SYNTAX for malformed input
    and DUPLICATE_ID for a key repeated within one mapping.
    """

    name: str
    suffixes: tuple[str, ...]

    def decode(self, text: str) -> Any:
        """Decode text into plain data.

        Args:
            text: Serialized content.

        Returns:
            Decoded data (a mapping for valid documents).
        """
        ...

    def encode(self, data: dict[str, Any]) -> str:
        """Encode plain data as text.

        Args:
            data: Mapping produced by ``document_to_dict``.

        Returns:
            Serialized content.
        """
        ...

    def can_parse(self, file_path: Path) -> bool:
        """Check if this format handles the given file.

        Args:
            file_path: Path to the file.

        Returns:
            True if the file suffix belongs to this format.
        """
        ...


class FormatRegistry:
    """Registry of known document formats, in registration order."""

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._formats: dict[str, DocumentFormat] = {}

    def register(self, document_format: DocumentFormat) -> None:
        """Register a format under its name.

        Args:
            document_format: Format instance.
        """
        self._formats[document_format.name] = document_format

    def get(self, name: str) -> DocumentFormat | None:
        """Get a format by name.

        Args:
            name: Format tag (e.g., "yaml").

        Returns:
            Format instance, or None if not registered.
        """
        return self._formats.get(name.lower())

    def for_path(self, file_path: Path) -> DocumentFormat | None:
        """Find the format that handles a file, based on its suffix."""
        for document_format in self._formats.values():
            if document_format.can_parse(file_path):
                return document_format
        return None

    def list_formats(self) -> list[str]:
        """List registered format names in registration order."""
        return list(self._formats)


# Global registry instance
_registry = FormatRegistry()


def get_registry() -> FormatRegistry:
    """Get the global format registry, registering built-ins on first use."""
    if not _registry.list_formats():
        register_builtin_formats()
    return _registry


def register_builtin_formats() -> None:
    """Register all built-in formats with the global registry."""
    from reqdoc.formats import json_format, rsn_format, toml_format, yaml_format

    for module in (yaml_format, json_format, rsn_format, toml_format):
        _registry.register(module.create_format())


def get_format(name: str) -> DocumentFormat | None:
    """Get a format by name."""
    return get_registry().get(name)


def format_for_path(file_path: Path) -> DocumentFormat | None:
    """Get the format for a file path, or None if the suffix is unknown."""
    return get_registry().for_path(file_path)


def list_formats() -> list[str]:
    """List the names of all available formats."""
    return get_registry().list_formats()
