"""
ESLint generator — airbnb base rules, markdown linting override,
and the ignore list.
"""

from __future__ import annotations

from nodeseed.core.models.template import GeneratedFile
from nodeseed.core.services.generators.render import render_js_module, render_lines

ESLINT_CONFIG = {
    "env": {
        "commonjs": True,
        "es2021": True,
        "jest": True,
        "node": True,
    },
    "extends": ["airbnb-base"],
    "overrides": [
        {
            "files": ["*.md"],
            "parser": "eslint-plugin-markdownlint/parser",
            "extends": ["plugin:markdownlint/recommended"],
        },
    ],
    "parserOptions": {
        "ecmaVersion": "latest",
    },
    "rules": {},
}

ESLINT_IGNORE = [
    "coverage/*",
    "node_modules/*",
    "build/*",
    ".eslintrc.js",
]


def generate_eslint_config() -> GeneratedFile:
    return GeneratedFile(
        path=".eslintrc.js",
        content=render_js_module(ESLINT_CONFIG),
        reason="ESLint rules (airbnb-base, markdownlint for *.md)",
    )


def generate_eslint_ignore() -> GeneratedFile:
    return GeneratedFile(
        path=".eslintignore",
        content=render_lines(ESLINT_IGNORE),
        reason="Paths ESLint never inspects",
    )
