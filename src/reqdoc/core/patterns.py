"""
reqdoc.core.patterns - Configurable requirement and topic ID grammar.

Default formats:
- Requirements: REQ-<n>.<m> (e.g., REQ-1.1, REQ-12.3)
- Topics: TOPIC-<n> with optional dotted suffixes (e.g., TOPIC-1, TOPIC-1.2)
"""

import re
from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_REQUIREMENT_PATTERN = r"REQ-\d+\.\d+"
DEFAULT_TOPIC_PATTERN = r"TOPIC-\d+(?:\.\d+)*"


@dataclass(frozen=True)
class PatternConfig:
    """
    Configuration for ID patterns.

    Attributes:
        requirement: Unanchored regex for requirement IDs
        topic: Unanchored regex for topic IDs
    """

    requirement: str = DEFAULT_REQUIREMENT_PATTERN
    topic: str = DEFAULT_TOPIC_PATTERN

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PatternConfig":
        """Create PatternConfig from the [patterns] configuration section."""
        return cls(
            requirement=data.get("requirement", DEFAULT_REQUIREMENT_PATTERN),
            topic=data.get("topic", DEFAULT_TOPIC_PATTERN),
        )


class PatternValidator:
    """
    Validates requirement and topic IDs against configured patterns.
    """

    def __init__(self, config: PatternConfig = PatternConfig()):
        """
        Initialize pattern validator.

        Args:
            config: Pattern configuration

        Raises:
            ValueError: If a configured pattern is not a valid regex
        """
        self.config = config
        self._requirement_re = _compile_anchored(config.requirement, "patterns.requirement")
        self._topic_re = _compile_anchored(config.topic, "patterns.topic")

    def is_valid_requirement_id(self, id_string: str) -> bool:
        """Check if a string is a well-formed requirement ID."""
        return self._requirement_re.match(id_string) is not None

    def is_valid_topic_id(self, id_string: str) -> bool:
        """Check if a string is a well-formed topic ID."""
        return self._topic_re.match(id_string) is not None

    @property
    def requirement_anchored(self) -> str:
        """Anchored requirement pattern, for JSON Schema ``propertyNames``."""
        return self._requirement_re.pattern

    @property
    def topic_anchored(self) -> str:
        """Anchored topic pattern, for JSON Schema ``propertyNames``."""
        return self._topic_re.pattern


def _compile_anchored(pattern: str, key: str) -> "re.Pattern[str]":
    try:
        return re.compile(f"^(?:{pattern})$")
    except re.error as e:
        raise ValueError(f"invalid regular expression for {key}: {e}") from e
