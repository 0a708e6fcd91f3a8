"""
reqdoc - Portable hierarchical requirements documents

reqdoc reads a requirements document written in YAML, JSON, RSN or TOML,
emits its JSON Schema, renders it to Markdown or HTML, and checks test
logs for ``REQ-<n>.<m>: passed|failed`` tokens to report the test status
of every requirement and topic.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("reqdoc")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from reqdoc.core.loader import LoadError, LoadErrorKind, load_document, load_file
from reqdoc.core.models import Document, Requirement, Topic, Version
from reqdoc.testing.engine import StatusEngine, check_document
from reqdoc.testing.status import StatusReport, TestStatus

__all__ = [
    "__version__",
    "Document",
    "LoadError",
    "LoadErrorKind",
    "Requirement",
    "StatusEngine",
    "StatusReport",
    "TestStatus",
    "Topic",
    "Version",
    "check_document",
    "load_document",
    "load_file",
]
