"""
reqdoc.render - Markdown and HTML output for Documents and StatusReports.
"""

from reqdoc.render.config import RenderConfig
from reqdoc.render.html import HTMLRenderer, render_document_html, render_report_html
from reqdoc.render.markdown import (
    STATUS_ICONS,
    highlight_keywords,
    render_document,
    render_report,
)

__all__ = [
    "HTMLRenderer",
    "RenderConfig",
    "STATUS_ICONS",
    "highlight_keywords",
    "render_document",
    "render_document_html",
    "render_report",
    "render_report_html",
]
