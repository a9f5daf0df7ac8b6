"""
Bootstrap stages — the fixed, ordered pipeline.

Each builder is a pure function from the configuration to a ``Stage``:
the ordered actions that stage performs. Nothing here touches the
disk or spawns a process; the engine executes the actions later
through the adapter registry.

Order matters: every stage relies on the directory tree and the
installed packages left by the stages before it.
"""

from __future__ import annotations

from collections.abc import Callable

from nodeseed.core.models.action import Action
from nodeseed.core.models.config import BootstrapConfig
from nodeseed.core.models.stage import Stage
from nodeseed.core.models.template import GeneratedFile
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
from nodeseed.core.services.generators.jest import TEST_SCRIPTS, generate_jest_config
from nodeseed.core.services.generators.lint_staged import (
    generate_lint_staged_config,
    generate_pre_commit_hook,
)
from nodeseed.core.services.generators.prettier import (
    generate_prettier_config,
    generate_prettier_ignore,
)
from nodeseed.core.services.generators.semantic_release import (
    RELEASE_SCRIPTS,
    generate_release_config,
)

# Installed in one `npm install --save-dev` call. Some entries are
# pinned and some float; keep the list exactly as it is.
DEV_DEPENDENCIES = [
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


# ── Action helpers ──────────────────────────────────────────────


def _file_actions(stage: str, file: GeneratedFile) -> list[Action]:
    """Write a generated file; executable files are chmod'ed right after."""
    actions = [
        Action(
            id=f"{stage}:write:{file.path}",
            name=f"Write {file.path}",
            adapter="filesystem",
            stage=stage,
            params={"operation": "write", "path": file.path, "content": file.content},
        )
    ]
    if file.executable:
        actions.append(
            Action(
                id=f"{stage}:chmod:{file.path}",
                name=f"Make {file.path} executable",
                adapter="shell",
                stage=stage,
                params={"command": ["chmod", "a+x", f"./{file.path}"]},
            )
        )
    return actions


def _script_actions(stage: str, scripts: dict[str, str]) -> list[Action]:
    """Register npm run-scripts, one process per script."""
    return [
        Action(
            id=f"{stage}:set-script:{script}",
            name=f"Register npm script '{script}'",
            adapter="node",
            stage=stage,
            params={"operation": "set-script", "script": script, "command": command},
        )
        for script, command in scripts.items()
    ]


# ── Stages ──────────────────────────────────────────────────────


def prepare_stage(config: BootstrapConfig) -> Stage:
    """Recreate the project folder and initialize npm and git in it."""
    name = "prepare"
    folder = config.project_folder
    return Stage(
        name=name,
        title="Preparing ...",
        actions=[
            Action(
                id=f"{name}:remove",
                name=f"Remove ./{folder}",
                adapter="filesystem",
                stage=name,
                in_project=False,
                params={"operation": "remove", "path": folder},
            ),
            Action(
                id=f"{name}:mkdir",
                name=f"Create ./{folder}",
                adapter="filesystem",
                stage=name,
                in_project=False,
                params={"operation": "mkdir", "path": folder},
            ),
            Action(
                id=f"{name}:npm-init",
                name="npm init -y",
                adapter="node",
                stage=name,
                params={"operation": "init"},
            ),
            Action(
                id=f"{name}:git-init",
                name="git init",
                adapter="git",
                stage=name,
                params={"operation": "init"},
            ),
            *_file_actions(name, generate_gitignore()),
        ],
    )


def install_dependencies_stage(config: BootstrapConfig) -> Stage:
    name = "install-dependencies"
    return Stage(
        name=name,
        title="Installing dependencies...",
        actions=[
            Action(
                id=f"{name}:npm-install",
                name="npm install --save-dev",
                adapter="node",
                stage=name,
                params={"operation": "install", "packages": list(DEV_DEPENDENCIES)},
            ),
        ],
    )


def prepare_husky_stage(config: BootstrapConfig) -> Stage:
    name = "prepare-husky"
    return Stage(
        name=name,
        title="Setting up husky...",
        actions=[
            Action(
                id=f"{name}:husky-install",
                name="husky install",
                adapter="node",
                stage=name,
                params={"operation": "exec", "args": ["husky", "install"]},
            ),
        ],
    )


def prepare_spell_checker_stage(config: BootstrapConfig) -> Stage:
    name = "prepare-spell-checker"
    return Stage(
        name=name,
        title="Setting up cSpell ...",
        actions=_file_actions(name, generate_cspell_config()),
    )


def prepare_commitlint_stage(config: BootstrapConfig) -> Stage:
    name = "prepare-commitlint"
    return Stage(
        name=name,
        title="Setting up commitlint...",
        actions=[
            *_file_actions(name, generate_commitlint_config()),
            *_file_actions(name, generate_commit_msg_hook()),
        ],
    )


def prepare_linter_stage(config: BootstrapConfig) -> Stage:
    name = "prepare-linter"
    return Stage(
        name=name,
        title="Setting up eslint + airbnb ...",
        actions=[
            *_file_actions(name, generate_eslint_config()),
            *_file_actions(name, generate_eslint_ignore()),
        ],
    )


def prepare_formatter_stage(config: BootstrapConfig) -> Stage:
    name = "prepare-formatter"
    return Stage(
        name=name,
        title="Setting up prettier...",
        actions=[
            *_file_actions(name, generate_prettier_config()),
            *_file_actions(name, generate_prettier_ignore()),
        ],
    )


def prepare_lint_staged_stage(config: BootstrapConfig) -> Stage:
    name = "prepare-lint-staged"
    return Stage(
        name=name,
        title="Setting up lint-staged...",
        actions=[
            *_file_actions(name, generate_lint_staged_config()),
            *_file_actions(name, generate_pre_commit_hook()),
        ],
    )


def prepare_semantic_release_stage(config: BootstrapConfig) -> Stage:
    name = "prepare-semantic-release"
    return Stage(
        name=name,
        title="Setting up semantic release ...",
        actions=[
            *_file_actions(name, generate_release_config()),
            *_script_actions(name, RELEASE_SCRIPTS),
        ],
    )


def prepare_test_stage(config: BootstrapConfig) -> Stage:
    name = "prepare-test"
    return Stage(
        name=name,
        title="Setting up jest ...",
        actions=[
            *_file_actions(name, generate_jest_config()),
            *_script_actions(name, TEST_SCRIPTS),
        ],
    )


STAGE_BUILDERS: list[Callable[[BootstrapConfig], Stage]] = [
    prepare_stage,
    install_dependencies_stage,
    prepare_husky_stage,
    prepare_spell_checker_stage,
    prepare_commitlint_stage,
    prepare_linter_stage,
    prepare_formatter_stage,
    prepare_lint_staged_stage,
    prepare_semantic_release_stage,
    prepare_test_stage,
]
