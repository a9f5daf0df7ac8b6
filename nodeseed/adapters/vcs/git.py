"""
Git adapter — version control operations.

Provides git operations through the adapter protocol.
Uses the git CLI — never raw API calls.
"""

from __future__ import annotations

import logging
import shutil

from nodeseed.adapters.base import Adapter, ExecutionContext
from nodeseed.adapters.shell.command import run_process
from nodeseed.core.models.action import Receipt

logger = logging.getLogger(__name__)


class GitAdapter(Adapter):
    """Git version control operations.

    Action params:
        operation (str): One of 'init'.
    """

    @property
    def name(self) -> str:
        return "git"

    def is_available(self) -> bool:
        return shutil.which("git") is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        operation = context.action.params.get("operation", "")
        if not operation:
            return False, "Missing required param: 'operation'"

        valid_ops = {"init"}
        if operation not in valid_ops:
            return False, f"Unknown operation '{operation}'. Valid: {', '.join(sorted(valid_ops))}"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        operation = context.action.params["operation"]
        if operation == "init":
            return self._init(context)
        return Receipt.failure(
            adapter=self.name,
            action_id=context.action.id,
            error=f"Unknown operation: {operation}",
        )

    # ── Operations ──────────────────────────────────────────────

    def _init(self, ctx: ExecutionContext) -> Receipt:
        return run_process(self.name, ctx, ["git", "init"])
