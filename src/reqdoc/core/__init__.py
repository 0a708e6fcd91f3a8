"""
reqdoc.core - Document model, ID patterns, schema and loading.
"""

from reqdoc.core.loader import LoadError, LoadErrorKind, document_from_mapping, load_document, load_file
from reqdoc.core.models import ConfigDefault, Definition, Document, Requirement, Topic, Version
from reqdoc.core.patterns import PatternConfig, PatternValidator
from reqdoc.core.schema import build_schema
from reqdoc.core.serialize import document_to_dict

__all__ = [
    "ConfigDefault",
    "Definition",
    "Document",
    "LoadError",
    "LoadErrorKind",
    "PatternConfig",
    "PatternValidator",
    "Requirement",
    "Topic",
    "Version",
    "build_schema",
    "document_from_mapping",
    "document_to_dict",
    "load_document",
    "load_file",
]
