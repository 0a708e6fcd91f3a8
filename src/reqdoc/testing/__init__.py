"""
reqdoc.testing - Requirement status from test-log text.

Scans logs for ``REQ-<n>.<m>: passed|failed`` tokens and builds a
hierarchical StatusReport for a Document.
"""

from reqdoc.testing.config import CheckConfig
from reqdoc.testing.engine import StatusEngine, check_document
from reqdoc.testing.scanner import StatusToken, TokenScanner, scan_tokens
from reqdoc.testing.status import (
    RequirementResult,
    StatusReport,
    TestStatus,
    merge,
    rollup,
)

__all__ = [
    "CheckConfig",
    "RequirementResult",
    "StatusEngine",
    "StatusReport",
    "StatusToken",
    "TestStatus",
    "TokenScanner",
    "check_document",
    "merge",
    "rollup",
    "scan_tokens",
]
