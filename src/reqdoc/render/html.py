"""HTML rendering of Documents and StatusReports.

Pages are rendered from the Jinja2 templates shipped in
``reqdoc/render/templates``. Free-text fields (descriptions, additional
info, definition values, hints) go through the ``markdown`` filter, which
escapes the text first so authored HTML is shown, not interpreted.
"""

from __future__ import annotations

import markdown
from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup, escape

from reqdoc.core.models import Document
from reqdoc.render.config import RenderConfig
from reqdoc.render.markdown import KEYWORD_NOTICE, REQUIRED_NOTICE, highlight_keywords
from reqdoc.testing.status import StatusReport, TestStatus


class HTMLRenderer:
    """Renders standalone HTML pages.

    Args:
        config: Rendering options; ``highlight_keywords`` applies to free
            text, ``toc`` adds a topic index to document pages.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()
        self.env = Environment(
            loader=PackageLoader("reqdoc.render", "templates"),
            autoescape=select_autoescape(["html", "xml", "html.j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["markdown"] = self._markdown
        self.env.filters["css_class"] = _css_class

    def _markdown(self, text: str, inline: bool = False) -> Markup:
        source = str(escape(text))
        if self.config.highlight_keywords:
            source = highlight_keywords(source)
        html = markdown.markdown(source, output_format="html")
        if inline and html.startswith("<p>") and html.endswith("</p>") and html.count("<p>") == 1:
            html = html[3:-4]
        return Markup(html)

    def render_document(self, document: Document) -> str:
        """Render a Document as a complete HTML page."""
        template = self.env.get_template("document.html.j2")
        return template.render(
            document=document,
            toc=self.config.toc,
            notice=KEYWORD_NOTICE,
            required_notice=REQUIRED_NOTICE,
        )

    def render_report(self, report: StatusReport) -> str:
        """Render a StatusReport as a complete HTML page."""
        template = self.env.get_template("report.html.j2")
        rows = []
        for topic, depth in report.document.walk_topics():
            status = report.topic_status(topic.id)
            if status is None:
                continue
            requirements = [
                (req, report.requirements[req.id])
                for req in topic.requirements
                if req.id in report.requirements
            ]
            rows.append(
                {"topic": topic, "depth": depth, "status": status, "requirements": requirements}
            )
        return template.render(
            report=report,
            document=report.document,
            counts=report.counts(),
            rows=rows,
        )


def _css_class(status: TestStatus) -> str:
    return "status-" + status.name.lower().replace("_", "-")


def render_document_html(document: Document, config: RenderConfig | None = None) -> str:
    """Render a Document as an HTML page."""
    return HTMLRenderer(config).render_document(document)


def render_report_html(report: StatusReport, config: RenderConfig | None = None) -> str:
    """Render a StatusReport as an HTML page."""
    return HTMLRenderer(config).render_report(report)
