"""
commitlint generator — commit message rules and the commit-msg hook.
"""

from __future__ import annotations

from nodeseed.core.models.template import GeneratedFile
from nodeseed.core.services.generators.husky import generate_hook
from nodeseed.core.services.generators.render import render_js_module

COMMITLINT_CONFIG = {
    "extends": ["@commitlint/config-conventional"],
    "rules": {
        "references-empty": [2, "never"],
    },
}

COMMIT_MSG_COMMANDS = [
    'npx --no -- commitlint --edit "${1}"',
    'npx --no -- cspell --no-summary --no-progress "${1}"',
]


def generate_commitlint_config() -> GeneratedFile:
    """Conventional commits, and every commit must reference an issue."""
    return GeneratedFile(
        path="commitlint.config.js",
        content=render_js_module(COMMITLINT_CONFIG),
        reason="Commit message lint rules",
    )


def generate_commit_msg_hook() -> GeneratedFile:
    """Lint and spell-check the commit message file git passes as $1."""
    return generate_hook(
        "commit-msg",
        COMMIT_MSG_COMMANDS,
        shebang="#!/bin/sh",
        reason="Run commitlint and cSpell on every commit message",
    )
