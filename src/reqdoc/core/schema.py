"""
reqdoc.core.schema - JSON Schema for serialized requirements documents.

The schema is derived from the model dataclasses rather than written by
hand, so every format shares one definition of the document shape:

- fields without a default are required
- ``Tuple[str, ...]`` becomes an array of strings
- ``Tuple[Model, ...]`` marked ``keyed`` becomes an object keyed by ID
- ``Optional[...]`` fields accept null
"""

from __future__ import annotations

import typing
from dataclasses import MISSING, Field, fields, is_dataclass
from typing import Any

from reqdoc.core.models import Document, Requirement, Topic, Version
from reqdoc.core.patterns import PatternConfig, PatternValidator

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
VERSION_PATTERN = r"^\d+\.\d+\.\d+$"


def build_schema(patterns: PatternConfig | None = None) -> dict[str, Any]:
    """Build the JSON Schema for a serialized Document.

    Args:
        patterns: ID patterns to embed; defaults to the standard grammar.

    Returns:
        JSON Schema (Draft 2020-12) as a plain dict.
    """
    validator = PatternValidator(patterns or PatternConfig())
    builder = _SchemaBuilder(
        {
            Topic: validator.topic_anchored,
            Requirement: validator.requirement_anchored,
        }
    )
    root = builder.object_schema(Document)
    return {
        "$schema": SCHEMA_DIALECT,
        "title": "Document",
        **root,
        "$defs": builder.defs,
    }


def serialized_key(f: Field) -> str:
    """Return the key a dataclass field is serialized under."""
    return f.metadata.get("key", f.name)


def is_required(f: Field) -> bool:
    """Return True if a dataclass field has no default."""
    return f.default is MISSING and f.default_factory is MISSING


class _SchemaBuilder:
    def __init__(self, id_patterns: dict[type, str]) -> None:
        self.id_patterns = id_patterns
        self.defs: dict[str, Any] = {}

    def object_schema(self, cls: type) -> dict[str, Any]:
        hints = typing.get_type_hints(cls)
        properties: dict[str, Any] = {}
        required: list[str] = []
        for f in fields(cls):
            if not f.init:
                continue
            # Keyed children carry their ID as the mapping key.
            if f.name == "id" and cls in self.id_patterns:
                continue
            key = serialized_key(f)
            properties[key] = self.type_schema(hints[f.name], f)
            if is_required(f):
                required.append(key)
        schema: dict[str, Any] = {
            "type": "object",
            "properties": properties,
            "additionalProperties": False,
        }
        if required:
            schema["required"] = required
        return schema

    def type_schema(self, tp: Any, f: Field) -> dict[str, Any]:
        if tp is str:
            return {"type": "string"}
        if tp is Version:
            return {"type": "string", "pattern": VERSION_PATTERN}

        origin = typing.get_origin(tp)
        args = typing.get_args(tp)

        if origin is typing.Union:
            inner = [a for a in args if a is not type(None)]
            return {"anyOf": [self.type_schema(inner[0], f), {"type": "null"}]}

        if origin is tuple:
            item = args[0]
            if f.metadata.get("keyed"):
                return {
                    "type": "object",
                    "propertyNames": {"pattern": self.id_patterns[item]},
                    "additionalProperties": self.ref(item),
                }
            return {"type": "array", "items": self.type_schema(item, f)}

        if is_dataclass(tp):
            return self.ref(tp)

        raise TypeError(f"no JSON Schema mapping for {tp!r}")

    def ref(self, cls: type) -> dict[str, Any]:
        name = cls.__name__
        if name not in self.defs:
            self.defs[name] = {}  # placeholder for self-references
            self.defs[name] = self.object_schema(cls)
        return {"$ref": f"#/$defs/{name}"}
