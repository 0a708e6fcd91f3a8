"""
reqdoc.commands.schema_cmd - Print the JSON Schema of the document format.
"""

import argparse
import json

from reqdoc.commands.common import resolve_config, write_output
from reqdoc.core.patterns import PatternConfig
from reqdoc.core.schema import build_schema


def run(args: argparse.Namespace) -> int:
    """Run the schema command."""
    config = resolve_config(args)
    schema = build_schema(PatternConfig.from_dict(config.get("patterns", {})))
    write_output(args, json.dumps(schema, indent=2))
    return 0
