"""
Tests for stage definitions — order, actions and the package list.
"""

import pytest

from nodeseed.core.models.config import BootstrapConfig
from nodeseed.core.services.stages import (
    DEV_DEPENDENCIES,
    STAGE_BUILDERS,
    install_dependencies_stage,
    prepare_commitlint_stage,
    prepare_husky_stage,
    prepare_lint_staged_stage,
    prepare_semantic_release_stage,
    prepare_stage,
    prepare_test_stage,
)

EXPECTED_STAGE_ORDER = [
    "prepare",
    "install-dependencies",
    "prepare-husky",
    "prepare-spell-checker",
    "prepare-commitlint",
    "prepare-linter",
    "prepare-formatter",
    "prepare-lint-staged",
    "prepare-semantic-release",
    "prepare-test",
]


@pytest.fixture
def cfg() -> BootstrapConfig:
    return BootstrapConfig(project_folder="demo-app")


class TestStageOrder:
    def test_ten_stages_in_fixed_order(self, cfg: BootstrapConfig):
        assert [build(cfg).name for build in STAGE_BUILDERS] == EXPECTED_STAGE_ORDER

    def test_every_stage_has_a_status_line(self, cfg: BootstrapConfig):
        for build in STAGE_BUILDERS:
            stage = build(cfg)
            assert stage.title
            assert stage.actions

    def test_action_ids_unique(self, cfg: BootstrapConfig):
        ids = [a.id for build in STAGE_BUILDERS for a in build(cfg).actions]
        assert len(ids) == len(set(ids))

    def test_actions_tagged_with_stage(self, cfg: BootstrapConfig):
        for build in STAGE_BUILDERS:
            stage = build(cfg)
            assert all(a.stage == stage.name for a in stage.actions)


class TestPrepareStage:
    def test_sequence(self, cfg: BootstrapConfig):
        stage = prepare_stage(cfg)
        assert [a.id for a in stage.actions] == [
            "prepare:remove",
            "prepare:mkdir",
            "prepare:npm-init",
            "prepare:git-init",
            "prepare:write:.gitignore",
        ]

    def test_folder_actions_run_in_workspace(self, cfg: BootstrapConfig):
        stage = prepare_stage(cfg)
        remove, mkdir = stage.actions[:2]
        assert remove.params == {"operation": "remove", "path": "demo-app"}
        assert mkdir.params == {"operation": "mkdir", "path": "demo-app"}
        assert not remove.in_project
        assert not mkdir.in_project
        assert all(a.in_project for a in stage.actions[2:])

    def test_init_adapters(self, cfg: BootstrapConfig):
        stage = prepare_stage(cfg)
        assert stage.get_action("prepare:npm-init").adapter == "node"
        assert stage.get_action("prepare:git-init").adapter == "git"
        assert stage.get_action("nope") is None


class TestInstallDependencies:
    def test_single_install_with_exact_package_list(self, cfg: BootstrapConfig):
        stage = install_dependencies_stage(cfg)
        assert stage.total_actions == 1
        action = stage.actions[0]
        assert action.adapter == "node"
        assert action.params["operation"] == "install"
        assert action.params["packages"] == DEV_DEPENDENCIES

    def test_package_list_is_fixed(self):
        assert DEV_DEPENDENCIES == [
            "@commitlint/cli",
            "@commitlint/config-conventional",
            "@semantic-release/changelog",
            "@semantic-release/git",
            "@types/jest",
            "cspell",
            "eslint-config-airbnb-base@latest",
            "eslint-config-prettier",
            "eslint-plugin-import@^2.25.2",
            "eslint-plugin-markdownlint",
            "eslint-plugin-prettier",
            "eslint@^8.2.0",
            "husky",
            "imagemin-lint-staged",
            "jest",
            "lint-staged",
            "markdownlint",
            "markdownlint-cli",
            "nodemon",
            "prettier",
            "semantic-release",
        ]

    def test_pinned_entries_preserved(self):
        pinned = [p for p in DEV_DEPENDENCIES if "@" in p.lstrip("@")]
        assert pinned == [
            "eslint-config-airbnb-base@latest",
            "eslint-plugin-import@^2.25.2",
            "eslint@^8.2.0",
        ]

    def test_plan_gets_its_own_copy(self, cfg: BootstrapConfig):
        stage = install_dependencies_stage(cfg)
        stage.actions[0].params["packages"].append("left-pad")
        assert "left-pad" not in DEV_DEPENDENCIES


class TestHookStages:
    def test_husky_install(self, cfg: BootstrapConfig):
        action = prepare_husky_stage(cfg).actions[0]
        assert action.params == {"operation": "exec", "args": ["husky", "install"]}

    def test_commit_msg_hook_chmod_follows_write(self, cfg: BootstrapConfig):
        ids = [a.id for a in prepare_commitlint_stage(cfg).actions]
        assert ids == [
            "prepare-commitlint:write:commitlint.config.js",
            "prepare-commitlint:write:.husky/commit-msg",
            "prepare-commitlint:chmod:.husky/commit-msg",
        ]

    def test_pre_commit_chmod_command(self, cfg: BootstrapConfig):
        chmod = prepare_lint_staged_stage(cfg).actions[-1]
        assert chmod.adapter == "shell"
        assert chmod.params["command"] == ["chmod", "a+x", "./.husky/pre-commit"]


class TestScriptStages:
    def test_release_scripts(self, cfg: BootstrapConfig):
        actions = prepare_semantic_release_stage(cfg).actions
        scripts = [a.params for a in actions if a.params.get("operation") == "set-script"]
        assert scripts == [
            {"operation": "set-script", "script": "release", "command": "semantic-release"},
            {
                "operation": "set-script",
                "script": "release:dry",
                "command": "semantic-release --dry-run",
            },
        ]

    def test_test_script(self, cfg: BootstrapConfig):
        actions = prepare_test_stage(cfg).actions
        assert actions[0].params["path"] == "jest.config.js"
        assert actions[1].params == {
            "operation": "set-script",
            "script": "test",
            "command": "jest",
        }
