"""
Requirements document loading.

Single source of truth for turning serialized text into a Document:
a format-specific decoder produces plain data, and the shared
``document_from_mapping`` validates it and builds the canonical model.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Mapping

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError, best_match

from reqdoc.core.models import ConfigDefault, Definition, Document, Requirement, Topic, Version
from reqdoc.core.patterns import PatternConfig
from reqdoc.core.schema import build_schema


class LoadErrorKind(Enum):
    """Category of a load failure."""

    SYNTAX = "syntax"
    MISSING_FIELD = "missing-field"
    INVALID_VALUE = "invalid-value"
    DUPLICATE_ID = "duplicate-id"
    INVALID_ID = "invalid-id"
    UNKNOWN_FORMAT = "unknown-format"


class LoadError(ValueError):
    """A requirements document could not be loaded.

    Attributes:
        kind: Failure category.
        message: Human-readable description.
        location: Dotted path to the offending entry (may be empty).
        line: 1-based line number, when the decoder reports one.
        column: 1-based column number, when the decoder reports one.
        format: Format tag of the decoder that failed.
        source: Name of the input (usually a file path).
    """

    def __init__(
        self,
        kind: LoadErrorKind,
        message: str,
        location: str = "",
        line: int | None = None,
        column: int | None = None,
        format: str | None = None,
        source: str | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.location = location
        self.line = line
        self.column = column
        self.format = format
        self.source = source
        super().__init__(str(self))

    def __str__(self) -> str:
        where = []
        if self.source:
            where.append(self.source)
        if self.line is not None:
            where.append(f"line {self.line}" + (f", column {self.column}" if self.column else ""))
        if self.location:
            where.append(self.location)
        prefix = f"{': '.join(where)}: " if where else ""
        return f"{prefix}{self.message}"


# Order used when the format must be guessed from the content.
SNIFF_ORDER = ("yaml", "json", "rsn", "toml")


def load_document(
    text: str,
    fmt: str | None = None,
    source: str | Path | None = None,
    patterns: PatternConfig | None = None,
) -> Document:
    """Parse serialized text into a Document.

    Args:
        text: Serialized document.
        fmt: Format tag; inferred from ``source`` or the content when omitted.
        source: Input name, used for suffix detection and error messages.
        patterns: ID patterns; defaults to the standard grammar.

    Returns:
        The loaded Document.

    Raises:
        LoadError: On any syntax, structure or ID problem.
    """
    from reqdoc.formats import format_for_path, get_format

    source_name = str(source) if source is not None else None

    if fmt is None and source is not None:
        detected = format_for_path(Path(source))
        fmt = detected.name if detected else None

    try:
        if fmt is not None:
            document_format = get_format(fmt)
            if document_format is None:
                raise LoadError(LoadErrorKind.UNKNOWN_FORMAT, f"unknown format {fmt!r}")
            data = document_format.decode(text)
        else:
            fmt, data = _sniff(text)
        return document_from_mapping(data, patterns)
    except LoadError as e:
        e.format = e.format or fmt
        e.source = e.source or source_name
        raise


def load_file(
    path: Path,
    fmt: str | None = None,
    patterns: PatternConfig | None = None,
) -> Document:
    """Read and load a requirements file."""
    text = path.read_text(encoding="utf-8")
    return load_document(text, fmt=fmt, source=path, patterns=patterns)


def _sniff(text: str) -> tuple[str, Any]:
    """Decode with each known format in turn; first mapping wins."""
    from reqdoc.formats import get_format

    first_error: LoadError | None = None
    for name in SNIFF_ORDER:
        document_format = get_format(name)
        if document_format is None:
            continue
        try:
            data = document_format.decode(text)
        except LoadError as e:
            # Duplicate keys are a real finding, not a format mismatch.
            if e.kind is LoadErrorKind.DUPLICATE_ID:
                e.format = name
                raise
            first_error = first_error or e
            continue
        if isinstance(data, Mapping):
            return name, data
    if first_error is not None:
        raise LoadError(
            LoadErrorKind.SYNTAX,
            f"input is not a document in any supported format ({', '.join(SNIFF_ORDER)})",
        )
    raise LoadError(LoadErrorKind.SYNTAX, "input does not contain a mapping")


def document_from_mapping(data: Any, patterns: PatternConfig | None = None) -> Document:
    """Validate decoded data and build the canonical Document.

    Every format funnels through this function; no format builds model
    objects itself.

    Raises:
        LoadError: If the data does not describe a valid document.
    """
    if not isinstance(data, Mapping):
        raise LoadError(LoadErrorKind.SYNTAX, "document root must be a mapping")

    validator = Draft202012Validator(build_schema(patterns))
    error = best_match(validator.iter_errors(data))
    if error is not None:
        raise _schema_error(error)

    builder = _DocumentBuilder()
    return builder.build(data)


def _schema_error(error: ValidationError) -> LoadError:
    location = ".".join(str(p) for p in error.absolute_path)
    if "propertyNames" in error.schema_path:
        return LoadError(
            LoadErrorKind.INVALID_ID,
            f"invalid ID {error.instance!r}",
            location=location,
        )
    if error.validator == "required":
        return LoadError(LoadErrorKind.MISSING_FIELD, error.message, location=location)
    if error.validator == "pattern" and location == "version":
        return LoadError(
            LoadErrorKind.INVALID_VALUE,
            f"invalid version {error.instance!r}: expected 'major.minor.patch'",
            location=location,
        )
    return LoadError(LoadErrorKind.INVALID_VALUE, error.message, location=location)


class _DocumentBuilder:
    """Builds model objects from schema-valid data.

    Keeps one flat table per ID space so collisions across topics are
    reported with the location of both entries.
    """

    def __init__(self) -> None:
        self.requirement_ids: dict[str, str] = {}
        self.topic_ids: dict[str, str] = {}

    def build(self, data: Mapping[str, Any]) -> Document:
        return Document(
            name=_text(data["name"]),
            version=Version.parse(data["version"]),
            description=_text(data["description"]),
            root_topics=self._topics(data.get("topics", {}), "topics"),
            definitions=tuple(
                Definition(
                    name=_text(d["name"]),
                    value=_text(d["value"]),
                    additional_info=_texts(d.get("additional_info")),
                )
                for d in data.get("definitions", ())
            ),
            config_defaults=tuple(
                ConfigDefault(
                    name=_text(c["name"]),
                    type=_text(c["type"]),
                    valid_values=_optional_texts(c.get("valid_values")),
                    unit=_optional_text(c.get("unit")),
                    default_value=_optional_text(c.get("default_value")),
                    hint=_optional_text(c.get("hint")),
                )
                for c in data.get("config_defaults", ())
            ),
        )

    def _topics(self, items: Mapping[str, Any], path: str) -> tuple[Topic, ...]:
        topics = []
        for raw_id, body in items.items():
            topic_id = _text(raw_id)
            location = f"{path}.{topic_id}"
            self._claim(self.topic_ids, topic_id, location, "topic")
            topics.append(
                Topic(
                    id=topic_id,
                    name=_text(body["name"]),
                    requirements=self._requirements(
                        body.get("requirements", {}), f"{location}.requirements"
                    ),
                    subtopics=self._topics(body.get("subtopics", {}), f"{location}.subtopics"),
                )
            )
        return tuple(topics)

    def _requirements(self, items: Mapping[str, Any], path: str) -> tuple[Requirement, ...]:
        requirements = []
        for raw_id, body in items.items():
            req_id = _text(raw_id)
            self._claim(self.requirement_ids, req_id, f"{path}.{req_id}", "requirement")
            requirements.append(
                Requirement(
                    id=req_id,
                    name=_text(body["name"]),
                    description=_text(body["description"]),
                    additional_info=_texts(body.get("additional_info")),
                )
            )
        return tuple(requirements)

    @staticmethod
    def _claim(table: dict[str, str], item_id: str, location: str, what: str) -> None:
        if item_id in table:
            raise LoadError(
                LoadErrorKind.DUPLICATE_ID,
                f"duplicate {what} ID {item_id!r} (first declared at {table[item_id]})",
                location=location,
            )
        table[item_id] = location


def _text(value: str) -> str:
    return value.strip()


def _texts(values: Iterable[str] | None) -> tuple[str, ...]:
    return tuple(v.strip() for v in values or ())


def _optional_text(value: str | None) -> str | None:
    return value.strip() if value is not None else None


def _optional_texts(values: Iterable[str] | None) -> tuple[str, ...] | None:
    return _texts(values) if values is not None else None
