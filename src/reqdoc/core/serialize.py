"""Document serialization to plain data.

Inverse of ``reqdoc.core.loader.document_from_mapping``: produces the
mapping every format can encode. Empty optional collections and unset
optional values are left out.
"""

from __future__ import annotations

from typing import Any

from reqdoc.core.models import ConfigDefault, Definition, Document, Requirement, Topic


def document_to_dict(document: Document) -> dict[str, Any]:
    """Convert a Document to a JSON-compatible dict in declaration order."""
    data: dict[str, Any] = {
        "name": document.name,
        "version": str(document.version),
        "description": document.description,
    }
    if document.root_topics:
        data["topics"] = {t.id: topic_to_dict(t) for t in document.root_topics}
    if document.definitions:
        data["definitions"] = [definition_to_dict(d) for d in document.definitions]
    if document.config_defaults:
        data["config_defaults"] = [config_default_to_dict(c) for c in document.config_defaults]
    return data


def topic_to_dict(topic: Topic) -> dict[str, Any]:
    data: dict[str, Any] = {"name": topic.name}
    if topic.requirements:
        data["requirements"] = {r.id: requirement_to_dict(r) for r in topic.requirements}
    if topic.subtopics:
        data["subtopics"] = {t.id: topic_to_dict(t) for t in topic.subtopics}
    return data


def requirement_to_dict(requirement: Requirement) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": requirement.name,
        "description": requirement.description,
    }
    if requirement.additional_info:
        data["additional_info"] = list(requirement.additional_info)
    return data


def definition_to_dict(definition: Definition) -> dict[str, Any]:
    data: dict[str, Any] = {"name": definition.name, "value": definition.value}
    if definition.additional_info:
        data["additional_info"] = list(definition.additional_info)
    return data


def config_default_to_dict(config_default: ConfigDefault) -> dict[str, Any]:
    data: dict[str, Any] = {"name": config_default.name, "type": config_default.type}
    if config_default.valid_values is not None:
        data["valid_values"] = list(config_default.valid_values)
    for key in ("unit", "default_value", "hint"):
        value = getattr(config_default, key)
        if value is not None:
            data[key] = value
    return data
