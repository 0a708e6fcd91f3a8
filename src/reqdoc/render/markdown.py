"""Markdown rendering of Documents and StatusReports.

Documents render as a requirements page:

    # Requirements for <name>
    [[_TOC_]]
    <RFC 2119 notice>
    **VERSION: x.y.z**
    ## Description
    ## Requirements        (topics from ###, subtopics one level deeper)
    ## Definitions
    ## Config Defaults

Reports render as ``# Test Results - <name>`` with one heading per
reported topic and one line per requirement carrying a status icon.
"""

from __future__ import annotations

import re

from reqdoc.core.models import ConfigDefault, Document, Requirement, Topic
from reqdoc.render.config import RenderConfig
from reqdoc.testing.status import StatusReport, TestStatus

KEYWORD_NOTICE = (
    'The key words "MUST", "MUST NOT", "REQUIRED", "SHALL", "SHALL NOT", '
    '"SHOULD", "SHOULD NOT", "RECOMMENDED",\n'
    '"MAY", and "OPTIONAL" in this document are to be interpreted as described in\n'
    "[RFC 2119](https://datatracker.ietf.org/doc/html/rfc2119)."
)

# Longer phrases first so "must not" wins over "must".
HIGHLIGHTED_WORDS = (
    "must not",
    "must",
    "required",
    "shall not",
    "shall",
    "should not",
    "should",
    "recommended",
    "may",
    "optional",
)

_KEYWORD_RE = re.compile(
    r"(?<!\w)(" + "|".join(re.escape(w) for w in HIGHLIGHTED_WORDS) + r")(?!\w)"
)

STATUS_ICONS = {
    TestStatus.PASSED: ":white_check_mark:",
    TestStatus.FAILED: ":x:",
    TestStatus.NOT_TESTED: ":warning:",
    TestStatus.CONFLICTING: ":bangbang:",
}

REQUIRED_NOTICE = "**Required**: This value **_MUST_** be provided as a start parameter."


def highlight_keywords(text: str) -> str:
    """Emphasise lower-case RFC 2119 key words (``must`` -> ``**_MUST_**``)."""
    return _KEYWORD_RE.sub(lambda m: f"**_{m.group(1).upper()}_**", text)


def _indent(text: str, prefix: str = "  ") -> str:
    """Indent continuation lines so multi-line text stays in its list item."""
    return text.rstrip("\n").replace("\n", "\n" + prefix)


def _requirement_lines(requirement: Requirement) -> list[str]:
    lines = [
        f"- **_{requirement.id}_ - {requirement.name}:** "
        f"{_indent(requirement.description)}"
    ]
    lines.extend(f"  - {_indent(info, '    ')}" for info in requirement.additional_info)
    return lines


def _topic_lines(topic: Topic, level: int) -> list[str]:
    lines = [f"{'#' * level} _{topic.id}_ - {topic.name}"]
    if topic.requirements:
        for requirement in topic.requirements:
            lines.extend(_requirement_lines(requirement))
        lines.append("")
    for subtopic in topic.subtopics:
        lines.extend(_topic_lines(subtopic, level + 1))
    return lines


def _config_default_lines(default: ConfigDefault) -> list[str]:
    hint = f" {default.hint}" if default.hint else ""
    lines = [f"- **{default.name}**", f"  - Type: {default.type}"]
    if default.unit is not None:
        lines.append(f"  - Unit: {default.unit}")
    if default.valid_values is not None:
        lines.append(f"  - Valid Values: _{', '.join(default.valid_values)}_")
    if default.default_value is not None:
        lines.append(f"  - Default Value: _{default.default_value}_{hint}")
    else:
        lines.append(f"  - {REQUIRED_NOTICE}{hint}")
    return lines


def render_document(document: Document, config: RenderConfig | None = None) -> str:
    """Render a Document as Markdown.

    Args:
        document: The Document to render.
        config: Rendering options (TOC marker, key-word highlighting).

    Returns:
        Markdown text ending with a newline.
    """
    config = config or RenderConfig()
    lines = [f"# Requirements for {document.name}", ""]
    if config.toc:
        lines.extend(["[[_TOC_]]", ""])
    lines.extend(
        [
            KEYWORD_NOTICE,
            "",
            f"**VERSION: {document.version}**",
            "",
            "## Description",
            document.description.rstrip("\n"),
            "",
        ]
    )

    if document.root_topics:
        lines.append("## Requirements")
        for topic in document.root_topics:
            lines.extend(_topic_lines(topic, 3))

    if document.definitions:
        lines.append("## Definitions")
        for definition in document.definitions:
            lines.append(f"- {definition.name}: {_indent(definition.value)}")
            lines.extend(f"  - {info}" for info in definition.additional_info)
        lines.append("")

    if document.config_defaults:
        lines.append("## Config Defaults")
        for default in document.config_defaults:
            lines.extend(_config_default_lines(default))
            lines.append("")

    output = "\n".join(lines).rstrip("\n") + "\n"
    if config.highlight_keywords:
        output = highlight_keywords(output)
    return output


def summary_line(report: StatusReport) -> str:
    """One-line status counts, e.g. ``Passed: 1 | Failed: 1 | ...``."""
    return " | ".join(f"{status.label}: {count}" for status, count in report.counts().items())


def render_report(report: StatusReport) -> str:
    """Render a StatusReport as Markdown.

    Topics appear in declaration order as headings (top-level topics at
    ``##``) with their rolled-up icon; each selected requirement is
    listed with its icon and any failure details.
    """
    document = report.document
    lines = [f"# Test Results - {document.name}", "", summary_line(report), ""]

    for topic, depth in document.walk_topics():
        status = report.topic_status(topic.id)
        if status is None:
            continue
        lines.append(f"{'#' * (depth + 2)} _{topic.id}_ - {topic.name} {STATUS_ICONS[status]}")
        listed = False
        for requirement in topic.requirements:
            result = report.requirements.get(requirement.id)
            if result is None:
                continue
            lines.append(
                f"- _{requirement.id}_ - {requirement.name}: {STATUS_ICONS[result.status]}"
            )
            lines.extend(f"  - {detail}" for detail in result.details)
            listed = True
        if listed:
            lines.append("")

    if report.unmatched:
        lines.append("## Unmatched Tokens")
        lines.extend(f"- `{token}`" for token in report.unmatched)
        lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"
