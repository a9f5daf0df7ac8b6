"""
Tests for artifact generators and the renderers behind them.
"""

import json

import pytest

from nodeseed.core.services.generators.commitlint import (
    generate_commit_msg_hook,
    generate_commitlint_config,
)
from nodeseed.core.services.generators.cspell import generate_cspell_config
from nodeseed.core.services.generators.eslint import (
    generate_eslint_config,
    generate_eslint_ignore,
)
from nodeseed.core.services.generators.gitignore import generate_gitignore
from nodeseed.core.services.generators.husky import generate_hook
from nodeseed.core.services.generators.jest import TEST_SCRIPTS, generate_jest_config
from nodeseed.core.services.generators.lint_staged import (
    generate_lint_staged_config,
    generate_pre_commit_hook,
)
from nodeseed.core.services.generators.prettier import (
    generate_prettier_config,
    generate_prettier_ignore,
)
from nodeseed.core.services.generators.render import (
    js_literal,
    render_js_module,
    render_json,
    render_lines,
)
from nodeseed.core.services.generators.semantic_release import (
    RELEASE_SCRIPTS,
    generate_release_config,
)

# ── Renderers ────────────────────────────────────────────────────────


class TestRenderers:
    def test_render_json_keeps_key_order(self):
        content = render_json({"b": 1, "a": [True, None]})
        assert content == '{\n  "b": 1,\n  "a": [\n    true,\n    null\n  ]\n}\n'

    def test_render_lines(self):
        assert render_lines(["a", "b"]) == "a\nb\n"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, "true"),
            (False, "false"),
            (None, "null"),
            (80, "80"),
            ("it's", "'it\\'s'"),
            ([], "[]"),
            ({}, "{}"),
            ([2, "never"], "[2, 'never']"),
        ],
    )
    def test_js_literal_scalars(self, value, expected):
        assert js_literal(value) == expected

    def test_js_literal_quotes_non_identifier_keys(self):
        rendered = js_literal({"references-empty": [2, "never"], "plain": 1})
        assert rendered == "{\n  'references-empty': [2, 'never'],\n  plain: 1,\n}"

    def test_js_literal_nested_list_of_objects(self):
        rendered = js_literal({"overrides": [{"files": ["*.md"]}]})
        assert rendered == (
            "{\n"
            "  overrides: [\n"
            "    {\n"
            "      files: ['*.md'],\n"
            "    },\n"
            "  ],\n"
            "}"
        )

    def test_js_literal_rejects_unknown_types(self):
        with pytest.raises(TypeError):
            js_literal(object())

    def test_render_js_module_with_header(self):
        content = render_js_module({"a": 1}, header="line one\nline two")
        assert content == (
            "/*\n * line one\n * line two\n */\n\nmodule.exports = {\n  a: 1,\n};\n"
        )


# ── Generated artifacts ──────────────────────────────────────────────


class TestGitignore:
    def test_content(self):
        f = generate_gitignore()
        assert f.path == ".gitignore"
        assert f.content.split() == ["node_modules"]
        assert not f.executable


class TestSpellChecker:
    def test_cspell_config(self):
        f = generate_cspell_config()
        assert f.path == "cspell.json"
        data = json.loads(f.content)
        assert data == {
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


class TestCommitlint:
    def test_config_extends_conventional(self):
        f = generate_commitlint_config()
        assert f.path == "commitlint.config.js"
        assert f.content.startswith("module.exports = {")
        assert "extends: ['@commitlint/config-conventional']," in f.content
        assert "'references-empty': [2, 'never']," in f.content

    def test_commit_msg_hook(self):
        f = generate_commit_msg_hook()
        assert f.path == ".husky/commit-msg"
        assert f.executable
        assert f.content.splitlines() == [
            "#!/bin/sh",
            '. "$(dirname "$0")/_/husky.sh"',
            "",
            'npx --no -- commitlint --edit "${1}"',
            'npx --no -- cspell --no-summary --no-progress "${1}"',
        ]


class TestEslint:
    def test_config(self):
        content = generate_eslint_config().content
        for expected in (
            "commonjs: true,",
            "es2021: true,",
            "jest: true,",
            "node: true,",
            "extends: ['airbnb-base'],",
            "files: ['*.md'],",
            "parser: 'eslint-plugin-markdownlint/parser',",
            "extends: ['plugin:markdownlint/recommended'],",
            "ecmaVersion: 'latest',",
            "rules: {},",
        ):
            assert expected in content

    def test_ignore(self):
        f = generate_eslint_ignore()
        assert f.path == ".eslintignore"
        assert f.content.splitlines() == [
            "coverage/*",
            "node_modules/*",
            "build/*",
            ".eslintrc.js",
        ]


class TestPrettier:
    def test_config(self):
        f = generate_prettier_config()
        assert f.path == ".prettierrc"
        assert json.loads(f.content) == {
            "arrowParens": "always",
            "printWidth": 80,
            "proseWrap": "preserve",
            "semi": True,
            "singleQuote": True,
            "trailingComma": "es5",
        }

    def test_ignore(self):
        f = generate_prettier_ignore()
        assert f.path == ".prettierignore"
        assert f.content.splitlines() == ["node_modules/**"]


class TestLintStaged:
    def test_mapping(self):
        f = generate_lint_staged_config()
        assert f.path == ".lintstagedrc"
        data = json.loads(f.content)
        assert data["*.md"] == "markdownlint --fix --ignore CHANGELOG.md"
        assert data["*"] == "cspell --no-summary --no-progress"
        assert data["*.{js,jsx,ts,tsx,html,css}"] == ["prettier --write", "eslint --fix"]
        assert data["*.{png,jpeg,jpg,gif,svg}"] == "imagemin-lint-staged"
        assert data["*.scss"] == [
            "postcss --config path/to/your/config --replace",
            "stylelint",
        ]
        assert list(data) == [
            "*",
            "*.md",
            "*.{js,jsx,ts,tsx,html,css}",
            "*.{png,jpeg,jpg,gif,svg}",
            "*.scss",
        ]

    def test_pre_commit_hook(self):
        f = generate_pre_commit_hook()
        assert f.path == ".husky/pre-commit"
        assert f.executable
        lines = f.content.splitlines()
        assert lines[0] == "#!/usr/bin/env sh"
        assert lines[-1] == "npx lint-staged"


class TestHusky:
    def test_generate_hook_defaults(self):
        f = generate_hook("pre-push", ["npm test"])
        assert f.path == ".husky/pre-push"
        assert f.executable
        assert f.content.endswith("npm test\n")
        assert "pre-push" in f.reason


class TestSemanticRelease:
    def test_plugins_in_fixed_order(self):
        data = json.loads(generate_release_config().content)
        assert data["plugins"] == [
            "@semantic-release/commit-analyzer",
            "@semantic-release/release-notes-generator",
            "@semantic-release/changelog",
            [
                "@semantic-release/git",
                {"message": "chore(release): ${nextRelease.version}"},
            ],
        ]

    def test_config_fields(self):
        f = generate_release_config()
        assert f.path == ".releaserc.json"
        data = json.loads(f.content)
        assert data["ci"] is False
        assert data["branches"] == ["master"]
        assert data["repositoryUrl"] == "REPLACE ME"

    def test_scripts(self):
        assert RELEASE_SCRIPTS == {
            "release": "semantic-release",
            "release:dry": "semantic-release --dry-run",
        }


class TestJest:
    def test_config(self):
        f = generate_jest_config()
        assert f.path == "jest.config.js"
        assert f.content.startswith("/*\n")
        assert "https://jestjs.io/docs/configuration" in f.content
        for expected in (
            "clearMocks: true,",
            "collectCoverage: true,",
            "coverageDirectory: 'coverage',",
            "coverageProvider: 'v8',",
        ):
            assert expected in f.content

    def test_scripts(self):
        assert TEST_SCRIPTS == {"test": "jest"}
