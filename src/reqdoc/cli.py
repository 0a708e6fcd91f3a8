"""
reqdoc.cli - Command-line interface.

Main entry point for the reqdoc CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from reqdoc import __version__
from reqdoc.commands import (
    check_cmd,
    completion,
    convert_cmd,
    demo_cmd,
    render_cmd,
    schema_cmd,
)
from reqdoc.formats import list_formats


def _add_output_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write to file instead of stdout",
        metavar="PATH",
    )


def _add_requirements_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "requirements",
        help="Requirements document (YAML, JSON, RSN or TOML; '-' for stdin)",
        metavar="REQS",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    formats = list_formats()
    parser = argparse.ArgumentParser(
        prog="reqdoc",
        description="Portable hierarchical requirements documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  reqdoc demo > requirements.yml             # Start from the demo document
  reqdoc schema                              # JSON Schema of the format
  reqdoc markdown requirements.yml           # Render to Markdown
  reqdoc html requirements.yml -o req.html   # Render to HTML
  reqdoc check requirements.yml test.log     # Requirement test status
  reqdoc convert requirements.yml --to toml  # Change document format

Configuration:
  reqdoc looks for .reqdoc.toml in the current directory or its parents.
  Settings can be overridden with REQDOC_<SECTION>_<KEY> variables,
  e.g. REQDOC_CHECK_CASE_SENSITIVE=false.

For detailed command help: reqdoc <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"reqdoc {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "--input-format",
        choices=formats,
        help="Format of the requirements document (default: detect)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output (show tracebacks)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress warnings and informational output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # schema command
    schema_parser = subparsers.add_parser(
        "schema",
        help="Print the JSON Schema of the requirements format",
    )
    _add_output_argument(schema_parser)

    # demo command
    demo_parser = subparsers.add_parser(
        "demo",
        help="Print a demo requirements document",
    )
    demo_parser.add_argument(
        "--format",
        choices=formats,
        default="yaml",
        help="Output format (default: yaml)",
    )
    _add_output_argument(demo_parser)

    # markdown command
    markdown_parser = subparsers.add_parser(
        "markdown",
        aliases=["md"],
        help="Render requirements as Markdown",
    )
    _add_requirements_argument(markdown_parser)
    markdown_parser.add_argument(
        "--no-toc",
        action="store_true",
        help="Omit the [[_TOC_]] marker",
    )
    _add_output_argument(markdown_parser)

    # html command
    html_parser = subparsers.add_parser(
        "html",
        help="Render requirements as an HTML page",
    )
    _add_requirements_argument(html_parser)
    _add_output_argument(html_parser)

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Report requirement test status from test logs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Test logs are scanned for tokens like:
  REQ-1.1: passed
  REQ-1.2: failed - timeout after 30s

Text after '- ' following 'failed' is shown as a failure detail.
        """,
    )
    _add_requirements_argument(check_parser)
    check_parser.add_argument(
        "results",
        nargs="+",
        help="Test log files ('-' for stdin)",
        metavar="RESULTS",
    )
    check_parser.add_argument(
        "-a",
        "--allowed-requirements",
        action="append",
        metavar="REGEX",
        help="Only report requirements whose ID matches (repeatable; default: REQ-.*)",
    )
    check_parser.add_argument(
        "--format",
        choices=["markdown", "html", "json"],
        default="markdown",
        help="Report format (default: markdown)",
    )
    check_parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Match status words case-insensitively",
    )
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 unless every reported requirement passed",
    )
    _add_output_argument(check_parser)

    # convert command
    convert_parser = subparsers.add_parser(
        "convert",
        help="Re-encode a requirements document in another format",
    )
    _add_requirements_argument(convert_parser)
    convert_parser.add_argument(
        "--to",
        choices=formats,
        required=True,
        help="Target format",
    )
    _add_output_argument(convert_parser)

    # completion command
    completion_parser = subparsers.add_parser(
        "completion",
        help="Shell tab-completion setup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
First, install the completion extra:
  pip install reqdoc[completion]

Without --shell, prints setup instructions for the current shell.
        """,
    )
    completion_parser.add_argument(
        "--shell",
        choices=list(completion.SHELLS),
        help="Print the completion script for this shell",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install reqdoc[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    try:
        # Dispatch to command handlers
        if args.command == "schema":
            return schema_cmd.run(args)
        elif args.command == "demo":
            return demo_cmd.run(args)
        elif args.command in ("markdown", "md"):
            return render_cmd.run_markdown(args)
        elif args.command == "html":
            return render_cmd.run_html(args)
        elif args.command == "check":
            return check_cmd.run(args)
        elif args.command == "convert":
            return convert_cmd.run(args)
        elif args.command == "completion":
            return completion.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
