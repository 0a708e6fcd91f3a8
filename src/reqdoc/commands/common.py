"""
reqdoc.commands.common - Helpers shared by the command handlers.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from reqdoc.config import get_config
from reqdoc.core.loader import load_document
from reqdoc.core.models import Document
from reqdoc.core.patterns import PatternConfig

STDIN = "-"


def resolve_config(args: argparse.Namespace) -> dict[str, Any]:
    """Effective configuration for a command (explicit --config or discovery)."""
    return get_config(config_path=getattr(args, "config", None))


def read_input(name: str, errors: str = "strict") -> str:
    """
    Read a named input; ``-`` reads standard input.

    Args:
        name: File path or ``-``
        errors: Decoding error handler for files (``"replace"`` for logs)

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if name == STDIN:
        return sys.stdin.read()
    path = Path(name)
    if not path.is_file():
        raise FileNotFoundError(f"{name}: no such file")
    return path.read_text(encoding="utf-8", errors=errors)


def load_requirements(args: argparse.Namespace, config: dict[str, Any]) -> Document:
    """Load the REQS argument of a command into a Document."""
    source = args.requirements
    return load_document(
        read_input(source),
        fmt=getattr(args, "input_format", None),
        source="<stdin>" if source == STDIN else source,
        patterns=PatternConfig.from_dict(config.get("patterns", {})),
    )


def write_output(args: argparse.Namespace, text: str) -> None:
    """Write to --output when given, otherwise to stdout."""
    if not text.endswith("\n"):
        text += "\n"
    output = getattr(args, "output", None)
    if output:
        output.write_text(text, encoding="utf-8")
        if not getattr(args, "quiet", False):
            print(f"Generated: {output}", file=sys.stderr)
    else:
        sys.stdout.write(text)


def warn(args: argparse.Namespace, message: str) -> None:
    """Print a warning to stderr unless --quiet."""
    if not getattr(args, "quiet", False):
        print(f"Warning: {message}", file=sys.stderr)
