"""
cSpell configuration generator.

The word list whitelists tool names that appear in commit messages
and config files of a freshly bootstrapped project.
"""

from __future__ import annotations

from nodeseed.core.models.template import GeneratedFile
from nodeseed.core.services.generators.render import render_json

CSPELL_CONFIG = {
    "ignorePaths": ["node_modules"],
    "words": [
        "commitlint",
        "imagemin",
        "markdownlint",
        "parens",
        "postcss",
        "stylelint",
    ],
}


def generate_cspell_config() -> GeneratedFile:
    return GeneratedFile(
        path="cspell.json",
        content=render_json(CSPELL_CONFIG),
        reason="Spell checker ignored paths and project dictionary",
    )
