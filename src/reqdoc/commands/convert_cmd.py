"""
reqdoc.commands.convert_cmd - Re-encode a document in another format.
"""

import argparse
import sys

from reqdoc.commands.common import load_requirements, resolve_config, write_output
from reqdoc.core.serialize import document_to_dict
from reqdoc.formats import get_format, list_formats


def run(args: argparse.Namespace) -> int:
    """Run the convert command."""
    target = get_format(args.to)
    if target is None:
        print(
            f"Error: unknown format '{args.to}' (choose from {', '.join(list_formats())})",
            file=sys.stderr,
        )
        return 1
    config = resolve_config(args)
    document = load_requirements(args, config)
    write_output(args, target.encode(document_to_dict(document)))
    return 0
