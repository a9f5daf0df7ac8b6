"""
semantic-release generator — release configuration and npm scripts.

The plugin order is the pipeline order: analyze commits, write notes,
update CHANGELOG.md, then commit the release files back with git.
npm publishing is not part of the pipeline.
"""

from __future__ import annotations

from nodeseed.core.models.template import GeneratedFile
from nodeseed.core.services.generators.render import render_json

REPOSITORY_URL_PLACEHOLDER = "REPLACE ME"
RELEASE_COMMIT_MESSAGE = "chore(release): ${nextRelease.version}"

RELEASE_CONFIG = {
    "ci": False,
    "branches": ["master"],
    "plugins": [
        "@semantic-release/commit-analyzer",
        "@semantic-release/release-notes-generator",
        "@semantic-release/changelog",
        [
            "@semantic-release/git",
            {
                "message": RELEASE_COMMIT_MESSAGE,
            },
        ],
    ],
    "repositoryUrl": REPOSITORY_URL_PLACEHOLDER,
}

# Registered in package.json, in this order
RELEASE_SCRIPTS = {
    "release": "semantic-release",
    "release:dry": "semantic-release --dry-run",
}


def generate_release_config() -> GeneratedFile:
    return GeneratedFile(
        path=".releaserc.json",
        content=render_json(RELEASE_CONFIG),
        reason="semantic-release branches and plugin pipeline",
    )
