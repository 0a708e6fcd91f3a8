"""
reqdoc.commands.completion - Shell tab-completion setup.

Prints setup instructions or a completion script generated by argcomplete.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

SHELLS = ("bash", "zsh", "fish", "tcsh")

_SNIPPETS = {
    "bash": 'eval "$(register-python-argcomplete reqdoc)"',
    "zsh": 'autoload -U bashcompinit\nbashcompinit\neval "$(register-python-argcomplete reqdoc)"',
    "fish": "register-python-argcomplete --shell fish reqdoc | source",
    "tcsh": "eval `register-python-argcomplete --shell tcsh reqdoc`",
}

_RC_FILES = {
    "bash": "~/.bashrc",
    "zsh": "~/.zshrc",
    "fish": "~/.config/fish/config.fish",
    "tcsh": "~/.tcshrc",
}


def _detect_shell() -> str:
    """Detect the current shell from environment."""
    basename = Path(os.environ.get("SHELL", "")).name
    return basename if basename in SHELLS else "bash"


def _check_argcomplete() -> bool:
    """Check if argcomplete is installed."""
    try:
        import argcomplete  # noqa: F401

        return True
    except ImportError:
        return False


def instructions(shell: str) -> str:
    """Manual setup instructions for a shell."""
    snippet = "\n".join(f"  {line}" for line in _SNIPPETS[shell].splitlines())
    return (
        f"Shell completion for {shell}:\n\n"
        f"Add the following to {_RC_FILES[shell]}:\n\n"
        f"{snippet}\n\n"
        "Or print the full script with:\n\n"
        f"  reqdoc completion --shell {shell}\n"
    )


def run(args) -> int:
    """Handle ``reqdoc completion`` command."""
    if not _check_argcomplete():
        print("Error: argcomplete is not installed.", file=sys.stderr)
        print("Install with: pip install reqdoc[completion]", file=sys.stderr)
        return 1

    shell = getattr(args, "shell", None)
    if not shell:
        print(instructions(_detect_shell()))
        return 0

    cmd = ["register-python-argcomplete"]
    if shell in ("fish", "tcsh"):
        cmd.append(f"--shell={shell}")
    cmd.append("reqdoc")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        print("Error: register-python-argcomplete not found.", file=sys.stderr)
        print("Make sure argcomplete is properly installed.", file=sys.stderr)
        return 1
    if result.returncode != 0:
        print(f"Error generating completion script: {result.stderr}", file=sys.stderr)
        return 1
    print(result.stdout)
    return 0
