"""
Prettier generator.
"""

from __future__ import annotations

from nodeseed.core.models.template import GeneratedFile
from nodeseed.core.services.generators.render import render_json, render_lines

PRETTIER_CONFIG = {
    "arrowParens": "always",
    "printWidth": 80,
    "proseWrap": "preserve",
    "semi": True,
    "singleQuote": True,
    "trailingComma": "es5",
}

PRETTIER_IGNORE = ["node_modules/**"]


def generate_prettier_config() -> GeneratedFile:
    return GeneratedFile(
        path=".prettierrc",
        content=render_json(PRETTIER_CONFIG),
        reason="Formatter style options",
    )


def generate_prettier_ignore() -> GeneratedFile:
    return GeneratedFile(
        path=".prettierignore",
        content=render_lines(PRETTIER_IGNORE),
        reason="Paths Prettier never formats",
    )
