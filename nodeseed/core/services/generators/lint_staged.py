"""
lint-staged generator — per-glob commands for staged files, and the
pre-commit hook that runs them.

Keys are matched by lint-staged in insertion order; a file matching
several globs gets every mapped command.
"""

from __future__ import annotations

from nodeseed.core.models.template import GeneratedFile
from nodeseed.core.services.generators.husky import generate_hook
from nodeseed.core.services.generators.render import render_json

LINT_STAGED_CONFIG: dict[str, str | list[str]] = {
    "*": "cspell --no-summary --no-progress",
    "*.md": "markdownlint --fix --ignore CHANGELOG.md",
    "*.{js,jsx,ts,tsx,html,css}": ["prettier --write", "eslint --fix"],
    "*.{png,jpeg,jpg,gif,svg}": "imagemin-lint-staged",
    "*.scss": ["postcss --config path/to/your/config --replace", "stylelint"],
}

PRE_COMMIT_COMMANDS = ["npx lint-staged"]


def generate_lint_staged_config() -> GeneratedFile:
    return GeneratedFile(
        path=".lintstagedrc",
        content=render_json(LINT_STAGED_CONFIG),
        reason="Lint and format staged files by glob",
    )


def generate_pre_commit_hook() -> GeneratedFile:
    return generate_hook(
        "pre-commit",
        PRE_COMMIT_COMMANDS,
        shebang="#!/usr/bin/env sh",
        reason="Run lint-staged before every commit",
    )
