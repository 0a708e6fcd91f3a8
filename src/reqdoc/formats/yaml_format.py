"""YAML document format.

Uses PyYAML's safe loader with one addition: a key repeated inside one
mapping is an error instead of silently keeping the last value.
"""

from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path
from typing import Any

import yaml

from reqdoc.core.loader import LoadError, LoadErrorKind


class _UniqueKeyLoader(yaml.SafeLoader):
    """Safe loader that rejects duplicate mapping keys."""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _value_node in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                mark = key_node.start_mark
                raise LoadError(
                    LoadErrorKind.DUPLICATE_ID,
                    f"duplicate key {key!r}",
                    line=mark.line + 1,
                    column=mark.column + 1,
                    format="yaml",
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


class _LiteralDumper(yaml.SafeDumper):
    """Safe dumper writing multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, value: str):
    style = "|" if "\n" in value else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", value, style=style)


_LiteralDumper.add_representer(str, _represent_str)


class YAMLFormat:
    """YAML reader/writer."""

    name = "yaml"
    suffixes = (".yml", ".yaml")

    def decode(self, text: str) -> Any:
        try:
            return yaml.load(text, Loader=_UniqueKeyLoader)
        except yaml.MarkedYAMLError as e:
            mark = e.problem_mark or e.context_mark
            raise LoadError(
                LoadErrorKind.SYNTAX,
                f"invalid YAML: {e.problem or e.context}",
                line=mark.line + 1 if mark else None,
                column=mark.column + 1 if mark else None,
                format=self.name,
            ) from e
        except yaml.YAMLError as e:
            raise LoadError(LoadErrorKind.SYNTAX, f"invalid YAML: {e}", format=self.name) from e

    def encode(self, data: dict[str, Any]) -> str:
        return yaml.dump(
            data,
            Dumper=_LiteralDumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )

    def can_parse(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.suffixes


def create_format() -> YAMLFormat:
    """Factory function to create a YAMLFormat.

    Returns:
        New YAMLFormat instance.
    """
    return YAMLFormat()
