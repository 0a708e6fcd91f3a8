"""
reqdoc.commands - CLI command implementations
"""

__all__ = [
    "check_cmd",
    "completion",
    "convert_cmd",
    "demo_cmd",
    "render_cmd",
    "schema_cmd",
]
