"""
Bootstrap use case — create a new project end to end.

This is the top-level orchestrator: it loads the configuration, sets
up the adapter registry, plans the ten stages and executes them.
The full vertical slice from user intent to a populated project folder.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from nodeseed.adapters.registry import AdapterRegistry, default_registry
from nodeseed.core.config.loader import ConfigError, load_config
from nodeseed.core.engine.executor import (
    ExecutionPlan,
    ExecutionReport,
    build_plan,
    execute_plan,
)
from nodeseed.core.models.config import BootstrapConfig
from nodeseed.core.models.stage import Stage

logger = logging.getLogger(__name__)


@dataclass
class BootstrapResult:
    """Result of a bootstrap run."""

    report: ExecutionReport | None = None
    plan: ExecutionPlan | None = None
    config: BootstrapConfig | None = None
    project_dir: Path | None = None
    error: str | None = None

    @property
    def exit_code(self) -> int:
        if self.error:
            return 1
        return self.report.exit_code if self.report else 0

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["project_dir"] = str(self.project_dir)
        result["stages_planned"] = [s.name for s in self.plan.stages] if self.plan else []
        result["actions_planned"] = self.plan.total_actions if self.plan else 0

        if self.report:
            result["report"] = self.report.to_dict()

        return result


def run_bootstrap(
    config_path: Path | None = None,
    config: BootstrapConfig | None = None,
    dry_run: bool = False,
    mock_mode: bool = False,
    registry: AdapterRegistry | None = None,
    on_stage: Callable[[Stage], None] | None = None,
) -> BootstrapResult:
    """Run the bootstrap pipeline.

    Args:
        config_path: Optional YAML config file.
        config: Pre-built configuration (takes precedence over config_path).
        dry_run: If True, validate every action but execute none.
        mock_mode: If True, route every action to the mock adapter.
        registry: Optional pre-configured adapter registry.
        on_stage: Called with each stage right before it starts.

    Returns:
        BootstrapResult with the execution report.
    """
    result = BootstrapResult()

    # ── Load config ──────────────────────────────────────────────
    if config is None:
        try:
            config = load_config(config_path)
        except ConfigError as e:
            result.error = str(e)
            return result
    result.config = config

    workspace = Path(config.workspace).resolve()
    result.project_dir = workspace / config.project_folder

    # ── Build execution plan ─────────────────────────────────────
    plan = build_plan(config)
    result.plan = plan

    # ── Set up adapter registry ──────────────────────────────────
    if registry is None:
        registry = default_registry(mock_mode=mock_mode)

    if not (dry_run or registry.mock_mode):
        for name in registry.unavailable():
            logger.warning("Adapter '%s' has no tool on PATH; its first action will fail", name)

    # ── Execute ──────────────────────────────────────────────────
    logger.info("Bootstrapping %s (operation %s)", result.project_dir, plan.operation_id)
    result.report = execute_plan(
        plan=plan,
        registry=registry,
        project_root=str(workspace),
        dry_run=dry_run,
        timeout=config.command_timeout,
        on_stage=on_stage,
    )

    return result
