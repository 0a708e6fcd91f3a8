"""
reqdoc.core.models - Canonical requirements document model.

Provides frozen dataclasses for documents, topics, requirements and the
supporting definition/config-default records. Children are stored as
tuples so a loaded document cannot be modified.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, Optional, Tuple

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


@dataclass(frozen=True)
class Version:
    """
    Semantic version of a requirements document.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
    """

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        Parse a ``major.minor.patch`` string.

        Raises:
            ValueError: If the text is not exactly three dot-separated integers
        """
        match = _VERSION_RE.match(text.strip())
        if not match:
            raise ValueError(
                f"invalid version {text!r}: expected 'major.minor.patch'"
            )
        return cls(*(int(part) for part in match.groups()))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class Requirement:
    """
    A single testable requirement.

    Attributes:
        id: Globally unique requirement identifier (e.g., "REQ-1.1")
        name: Short requirement title
        description: Requirement text, may span several lines
        additional_info: Extra bullet points shown below the description
    """

    id: str
    name: str
    description: str
    additional_info: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.id}: {self.name}"


@dataclass(frozen=True)
class Topic:
    """
    A named group of requirements.

    Attributes:
        id: Globally unique topic identifier (e.g., "TOPIC-1")
        name: Topic title
        requirements: Requirements in declaration order
        subtopics: Nested topics in declaration order
    """

    id: str
    name: str
    requirements: Tuple[Requirement, ...] = field(default=(), metadata={"keyed": True})
    subtopics: Tuple["Topic", ...] = field(default=(), metadata={"keyed": True})

    def __str__(self) -> str:
        return f"{self.id}: {self.name}"


@dataclass(frozen=True)
class Definition:
    """A glossary entry rendered in the definitions section."""

    name: str
    value: str
    additional_info: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ConfigDefault:
    """
    A documented configuration parameter of the described system.

    A missing ``default_value`` means the parameter must be supplied
    at start-up.
    """

    name: str
    type: str
    valid_values: Optional[Tuple[str, ...]] = None
    unit: Optional[str] = None
    default_value: Optional[str] = None
    hint: Optional[str] = None


@dataclass(frozen=True)
class Document:
    """
    Root of a requirements document.

    Attributes:
        name: Project name
        version: Document version
        description: Free-text project description
        root_topics: Top-level topics in declaration order
        definitions: Glossary entries
        config_defaults: Documented configuration parameters
    """

    name: str
    version: Version
    description: str
    root_topics: Tuple[Topic, ...] = field(
        default=(), metadata={"key": "topics", "keyed": True}
    )
    definitions: Tuple[Definition, ...] = ()
    config_defaults: Tuple[ConfigDefault, ...] = ()

    _requirements: Dict[str, Requirement] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )
    _topics: Dict[str, Topic] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )
    _owners: Dict[str, Topic] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        # Flat lookup tables; also the single place uniqueness is enforced.
        for topic, _depth in _walk(self.root_topics, 0):
            if topic.id in self._topics:
                raise ValueError(f"duplicate topic ID {topic.id!r}")
            self._topics[topic.id] = topic
            for req in topic.requirements:
                if req.id in self._requirements:
                    raise ValueError(f"duplicate requirement ID {req.id!r}")
                self._requirements[req.id] = req
                self._owners[req.id] = topic

    def topics(self) -> Tuple[Topic, ...]:
        """Return the top-level topics in declaration order."""
        return self.root_topics

    def requirements_of(self, topic: Topic) -> Tuple[Requirement, ...]:
        """Return the requirements declared directly in ``topic``."""
        return topic.requirements

    def find_requirement(self, req_id: str) -> Optional[Requirement]:
        """Look up a requirement anywhere in the document."""
        return self._requirements.get(req_id)

    def find_topic(self, topic_id: str) -> Optional[Topic]:
        """Look up a topic or subtopic anywhere in the document."""
        return self._topics.get(topic_id)

    def topic_of(self, req_id: str) -> Optional[Topic]:
        """Return the topic that declares the given requirement."""
        return self._owners.get(req_id)

    def all_requirement_ids(self) -> FrozenSet[str]:
        """Return the IDs of every requirement in the document."""
        return frozenset(self._requirements)

    def all_requirements(self) -> Iterator[Requirement]:
        """Yield every requirement in document order."""
        for topic, _depth in self.walk_topics():
            yield from topic.requirements

    def walk_topics(self) -> Iterator[Tuple[Topic, int]]:
        """
        Walk all topics depth-first in declaration order.

        Yields:
            (topic, depth) tuples, depth 0 for top-level topics
        """
        return _walk(self.root_topics, 0)


def _walk(topics: Tuple[Topic, ...], depth: int) -> Iterator[Tuple[Topic, int]]:
    for topic in topics:
        yield topic, depth
        yield from _walk(topic.subtopics, depth + 1)
