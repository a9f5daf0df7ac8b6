"""
Husky hook scripts.

Every hook sources husky's helper before running its commands, and is
marked executable so git will run it.
"""

from __future__ import annotations

from nodeseed.core.models.template import GeneratedFile
from nodeseed.core.services.generators.render import render_lines

HOOKS_DIR = ".husky"
_HUSKY_HELPER = '. "$(dirname "$0")/_/husky.sh"'


def generate_hook(
    hook: str,
    commands: list[str],
    shebang: str = "#!/bin/sh",
    reason: str = "",
) -> GeneratedFile:
    """Build a git hook script run by husky.

    Args:
        hook: Git hook name (``pre-commit``, ``commit-msg``, ...).
        commands: Shell commands, one per line.
        shebang: Interpreter line.
        reason: Why this hook exists.
    """
    return GeneratedFile(
        path=f"{HOOKS_DIR}/{hook}",
        content=render_lines([shebang, _HUSKY_HELPER, "", *commands]),
        executable=True,
        reason=reason or f"Husky {hook} hook",
    )
