"""
reqdoc.commands.render_cmd - Render a document to Markdown or HTML.
"""

import argparse

from reqdoc.commands.common import load_requirements, resolve_config, write_output
from reqdoc.render.config import RenderConfig
from reqdoc.render.html import render_document_html
from reqdoc.render.markdown import render_document


def _render_config(args: argparse.Namespace, config: dict) -> RenderConfig:
    render_config = RenderConfig.from_dict(config.get("render", {}))
    if getattr(args, "no_toc", False):
        render_config.toc = False
    return render_config


def run_markdown(args: argparse.Namespace) -> int:
    """Run the markdown command."""
    config = resolve_config(args)
    document = load_requirements(args, config)
    write_output(args, render_document(document, _render_config(args, config)))
    return 0


def run_html(args: argparse.Namespace) -> int:
    """Run the html command."""
    config = resolve_config(args)
    document = load_requirements(args, config)
    write_output(args, render_document_html(document, _render_config(args, config)))
    return 0
