"""
.gitignore generator.
"""

from __future__ import annotations

from nodeseed.core.models.template import GeneratedFile
from nodeseed.core.services.generators.render import render_lines

GITIGNORE = ["node_modules"]


def generate_gitignore() -> GeneratedFile:
    """Keep installed packages out of version control."""
    return GeneratedFile(
        path=".gitignore",
        content=render_lines(GITIGNORE),
        reason="Ignore installed packages",
    )
