"""
Jest generator — test runner configuration and the npm test script.
"""

from __future__ import annotations

from nodeseed.core.models.template import GeneratedFile
from nodeseed.core.services.generators.render import render_js_module

JEST_DOCS_HEADER = (
    "For a detailed explanation regarding each configuration property, visit:\n"
    "https://jestjs.io/docs/configuration"
)

JEST_CONFIG = {
    "clearMocks": True,
    "collectCoverage": True,
    "coverageDirectory": "coverage",
    "coverageProvider": "v8",
}

TEST_SCRIPTS = {
    "test": "jest",
}


def generate_jest_config() -> GeneratedFile:
    return GeneratedFile(
        path="jest.config.js",
        content=render_js_module(JEST_CONFIG, header=JEST_DOCS_HEADER),
        reason="Jest with v8 coverage into coverage/",
    )
