"""
reqdoc.commands.demo_cmd - Print the bundled demo document.

The demo is a valid requirements document (reqdoc's own requirements)
meant as a starting point for a new project.
"""

import argparse
import sys

from reqdoc.commands.common import write_output
from reqdoc.core.serialize import document_to_dict
from reqdoc.data import demo_document
from reqdoc.formats import get_format, list_formats


def run(args: argparse.Namespace) -> int:
    """Run the demo command."""
    document_format = get_format(args.format)
    if document_format is None:
        print(
            f"Error: unknown format '{args.format}' (choose from {', '.join(list_formats())})",
            file=sys.stderr,
        )
        return 1
    write_output(args, document_format.encode(document_to_dict(demo_document())))
    return 0
