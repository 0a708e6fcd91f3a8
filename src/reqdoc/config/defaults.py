"""
reqdoc.config.defaults - Default configuration values.
"""

from reqdoc.core.patterns import DEFAULT_REQUIREMENT_PATTERN, DEFAULT_TOPIC_PATTERN

CONFIG_FILE_NAME = ".reqdoc.toml"

DEFAULT_CONFIG = {
    "patterns": {
        "requirement": DEFAULT_REQUIREMENT_PATTERN,
        "topic": DEFAULT_TOPIC_PATTERN,
    },
    "check": {
        "passed": "passed",
        "failed": "failed",
        "case_sensitive": True,
        "allowed_requirements": ["REQ-.*"],
    },
    "render": {
        "toc": True,
        "highlight_keywords": True,
    },
}
