"""
Node.js adapter — npm/npx toolchain operations.

Runs the package manager steps of the bootstrap through the adapter
protocol: package initialization, dev-dependency installation,
local binaries via npx, and run-script registration.
"""

from __future__ import annotations

import logging
import shutil

from nodeseed.adapters.base import Adapter, ExecutionContext
from nodeseed.adapters.shell.command import run_process
from nodeseed.core.models.action import Receipt

logger = logging.getLogger(__name__)


class NodeAdapter(Adapter):
    """Node.js package manager adapter.

    Action params:
        operation (str): One of 'init', 'install', 'exec', 'set-script'.
        packages (list[str]): Package specs (for 'install').
        dev (bool): Install as devDependencies (for 'install', default: True).
        args (list[str]): Arguments after ``npx --no-install`` (for 'exec').
        script (str): Script name (for 'set-script').
        command (str): Script body (for 'set-script').
    """

    VALID_OPERATIONS = frozenset({"init", "install", "exec", "set-script"})

    @property
    def name(self) -> str:
        return "node"

    def is_available(self) -> bool:
        return shutil.which("npm") is not None and shutil.which("npx") is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        params = context.action.params
        operation = params.get("operation", "")
        if not operation:
            return False, "Missing required param: 'operation'"

        if operation not in self.VALID_OPERATIONS:
            return False, f"Unknown operation '{operation}'. Valid: {', '.join(sorted(self.VALID_OPERATIONS))}"

        if operation == "install" and not params.get("packages"):
            return False, "Missing required param: 'packages' for install operation"

        if operation == "exec" and not params.get("args"):
            return False, "Missing required param: 'args' for exec operation"

        if operation == "set-script":
            if not params.get("script"):
                return False, "Missing required param: 'script' for set-script operation"
            if not params.get("command"):
                return False, "Missing required param: 'command' for set-script operation"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        operation = context.action.params["operation"]
        try:
            cmd = self.command_for(operation, context.action.params)
        except ValueError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=str(e),
            )
        return run_process(self.name, context, cmd)

    # ── Operations ──────────────────────────────────────────────

    @staticmethod
    def command_for(operation: str, params: dict) -> list[str]:
        """Build the argument vector for an operation."""
        if operation == "init":
            return ["npm", "init", "-y"]
        if operation == "install":
            flags = ["--save-dev"] if params.get("dev", True) else []
            return ["npm", "install", *flags, *params["packages"]]
        if operation == "exec":
            return ["npx", "--no-install", *params["args"]]
        if operation == "set-script":
            return ["npm", "pkg", "set", f"scripts.{params['script']}={params['command']}"]
        raise ValueError(f"Unknown operation: {operation}")
