"""
reqdoc.commands.check_cmd - Check test logs against a requirements document.

Scans every RESULTS input for ``<ID>: passed|failed`` tokens and prints a
status report. With --strict the exit code is 1 unless every selected
requirement passed.
"""

import argparse
import json

from reqdoc.commands.common import (
    STDIN,
    load_requirements,
    read_input,
    resolve_config,
    warn,
    write_output,
)
from reqdoc.core.patterns import PatternConfig
from reqdoc.render.config import RenderConfig
from reqdoc.render.html import render_report_html
from reqdoc.render.markdown import render_report
from reqdoc.testing.config import CheckConfig
from reqdoc.testing.engine import StatusEngine
from reqdoc.testing.status import StatusReport


def _check_config(args: argparse.Namespace, config: dict) -> CheckConfig:
    check = CheckConfig.from_dict(config.get("check", {}))
    if args.allowed_requirements:
        check.allowed_requirements = list(args.allowed_requirements)
    if args.ignore_case:
        check.case_sensitive = False
    return check


def _format_report(args: argparse.Namespace, report: StatusReport, config: dict) -> str:
    if args.format == "json":
        return json.dumps(report.to_dict(), indent=2)
    if args.format == "html":
        return render_report_html(report, RenderConfig.from_dict(config.get("render", {})))
    return render_report(report)


def run(args: argparse.Namespace) -> int:
    """Run the check command."""
    inputs = [args.requirements, *args.results]
    if inputs.count(STDIN) > 1:
        raise ValueError("standard input ('-') can only be given once")

    config = resolve_config(args)
    document = load_requirements(args, config)
    engine = StatusEngine(
        document,
        check=_check_config(args, config),
        patterns=PatternConfig.from_dict(config.get("patterns", {})),
    )
    for name in args.results:
        # Only status tokens matter; undecodable bytes elsewhere are ignored.
        engine.scan(read_input(name, errors="replace"))
    report = engine.report()

    write_output(args, _format_report(args, report, config))

    if report.unmatched:
        warn(args, f"{len(report.unmatched)} unmatched token(s)")
    if args.strict and not report.all_passed:
        return 1
    return 0
