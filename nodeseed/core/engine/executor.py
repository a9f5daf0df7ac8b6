"""
Engine executor — the central orchestration loop.

The engine takes the bootstrap configuration, lays out the ten stages
in their fixed order, executes every action through the adapter
registry, and collects receipts.

Flow:
    config → build plan → for each stage: announce → execute actions → stop at first failure

There is no retry and no rollback: the first failed receipt ends the
run, and whatever was already written stays on disk.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from nodeseed.adapters.registry import AdapterRegistry
from nodeseed.core.models.action import Receipt
from nodeseed.core.models.config import BootstrapConfig
from nodeseed.core.models.stage import Stage
from nodeseed.core.services.stages import STAGE_BUILDERS

logger = logging.getLogger(__name__)


@dataclass
class ExecutionPlan:
    """The ordered stages of one bootstrap run."""

    operation_id: str = ""
    project_folder: str = ""
    stages: list[Stage] = field(default_factory=list)

    @property
    def total_actions(self) -> int:
        return sum(stage.total_actions for stage in self.stages)

    def get_stage(self, name: str) -> Stage | None:
        """Look up a stage by slug."""
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None


@dataclass
class ExecutionReport:
    """Result of executing a plan."""

    operation_id: str = ""
    project_folder: str = ""
    receipts: list[Receipt] = field(default_factory=list)
    stages_completed: list[str] = field(default_factory=list)
    failed_stage: str | None = None

    @property
    def total(self) -> int:
        return len(self.receipts)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.receipts if r.ok)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.receipts if r.failed)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.receipts if r.status == "skipped")

    @property
    def all_ok(self) -> bool:
        return self.failed == 0

    @property
    def aborted(self) -> bool:
        return self.failed_stage is not None

    @property
    def status(self) -> str:
        return "ok" if self.all_ok else "failed"

    @property
    def failure(self) -> Receipt | None:
        """The receipt that stopped the run, if any."""
        for receipt in self.receipts:
            if receipt.failed:
                return receipt
        return None

    @property
    def exit_code(self) -> int:
        """Process exit status for the whole run.

        The failing tool's own exit code when there is one (128 + N for a
        process killed by signal N), 1 for filesystem and validation
        failures, 0 on success.
        """
        failure = self.failure
        if failure is None:
            return 0
        code = failure.return_code
        if not code:
            return 1
        return 128 - code if code < 0 else code

    def to_dict(self) -> dict:
        return {
            "operation_id": self.operation_id,
            "project_folder": self.project_folder,
            "status": self.status,
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "skipped": self.skipped,
            "stages_completed": list(self.stages_completed),
            "failed_stage": self.failed_stage,
            "exit_code": self.exit_code,
            "receipts": [r.model_dump(mode="json") for r in self.receipts],
        }


def build_plan(
    config: BootstrapConfig,
    operation_id: str | None = None,
) -> ExecutionPlan:
    """Lay out every stage of the bootstrap in execution order.

    Args:
        config: Bootstrap configuration.
        operation_id: Unique operation identifier (generated if omitted).

    Returns:
        ExecutionPlan with all ten stages.
    """
    plan = ExecutionPlan(
        operation_id=operation_id or generate_operation_id(),
        project_folder=config.project_folder,
    )
    for builder in STAGE_BUILDERS:
        plan.stages.append(builder(config))

    logger.debug(
        "Planned %d stages, %d actions for ./%s",
        len(plan.stages),
        plan.total_actions,
        config.project_folder,
    )
    return plan


def execute_plan(
    plan: ExecutionPlan,
    registry: AdapterRegistry,
    project_root: str = ".",
    dry_run: bool = False,
    timeout: float | None = None,
    on_stage: Callable[[Stage], None] | None = None,
) -> ExecutionReport:
    """Execute the plan's stages in order, stopping at the first failure.

    Args:
        plan: The execution plan.
        registry: Adapter registry for dispatch.
        project_root: Workspace directory holding the project folder.
        dry_run: If True, validate but don't execute.
        timeout: Per-process timeout in seconds. None waits forever.
        on_stage: Called with each stage right before it starts.

    Returns:
        ExecutionReport with the receipts of every dispatched action.
    """
    report = ExecutionReport(
        operation_id=plan.operation_id,
        project_folder=plan.project_folder,
    )

    for stage in plan.stages:
        if on_stage is not None:
            on_stage(stage)

        for action in stage.actions:
            receipt = registry.execute_action(
                action=action,
                project_root=project_root,
                module_path=plan.project_folder if action.in_project else None,
                dry_run=dry_run,
                timeout=timeout,
            )
            report.receipts.append(receipt)

            status_marker = "✓" if receipt.ok else "✗" if receipt.failed else "⊘"
            logger.info("%s %s → %s", status_marker, action.id, receipt.status)

            if receipt.failed:
                report.failed_stage = stage.name
                logger.info(
                    "Stage '%s' failed at %s: %s",
                    stage.name,
                    action.id,
                    receipt.error,
                )
                return report

        report.stages_completed.append(stage.name)

    return report


def generate_operation_id() -> str:
    """Generate a unique operation ID."""
    now = datetime.now(UTC).strftime("%Y%m%d-%H%M%S")
    short = uuid.uuid4().hex[:6]
    return f"op-{now}-{short}"
