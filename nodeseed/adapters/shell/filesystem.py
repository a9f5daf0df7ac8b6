"""
Filesystem adapter — file and directory operations.

Provides a receipt-returning interface for the filesystem side effects
of the pipeline, so the engine can dry-run them and stop on failure.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from nodeseed.adapters.base import Adapter, ExecutionContext
from nodeseed.core.models.action import Receipt

logger = logging.getLogger(__name__)

VALID_OPERATIONS = frozenset({"remove", "mkdir", "write"})


class FilesystemAdapter(Adapter):
    """File and directory operations with receipts.

    Action params:
        operation (str): One of 'remove', 'mkdir', 'write'.
        path (str): Target path, relative to working_dir.
        content (str): Content to write (for 'write' operation).
    """

    @property
    def name(self) -> str:
        return "filesystem"

    def is_available(self) -> bool:
        return True  # filesystem is always available

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        operation = context.action.params.get("operation", "")
        if not operation:
            return False, "Missing required param: 'operation'"

        if operation not in VALID_OPERATIONS:
            return False, f"Unknown operation '{operation}'. Valid: {', '.join(sorted(VALID_OPERATIONS))}"

        path = context.action.params.get("path", "")
        if not path:
            return False, "Missing required param: 'path'"

        if Path(path).is_absolute() or ".." in Path(path).parts:
            return False, f"Path must stay below the working directory: {path}"

        if operation == "remove" and Path(path) == Path("."):
            return False, "Refusing to remove the working directory itself"

        if operation == "write" and "content" not in context.action.params:
            return False, "Missing required param: 'content' for write operation"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        operation = context.action.params["operation"]
        target = Path(context.working_dir) / context.action.params["path"]

        try:
            if operation == "remove":
                return self._remove(context, target)
            elif operation == "mkdir":
                return self._mkdir(context, target)
            elif operation == "write":
                return self._write(context, target)
            else:
                return Receipt.failure(
                    adapter=self.name,
                    action_id=context.action.id,
                    error=f"Unknown operation: {operation}",
                )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=str(e),
                metadata={"operation": operation, "path": str(target)},
            )

    def _remove(self, ctx: ExecutionContext, target: Path) -> Receipt:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
            output = f"Removed directory: {target}"
        elif target.exists() or target.is_symlink():
            target.unlink()
            output = f"Removed file: {target}"
        else:
            output = f"Nothing to remove: {target}"
        logger.debug(output)
        return Receipt.success(
            adapter=self.name,
            action_id=ctx.action.id,
            output=output,
            metadata={"path": str(target)},
        )

    def _mkdir(self, ctx: ExecutionContext, target: Path) -> Receipt:
        target.mkdir(parents=True, exist_ok=True)
        return Receipt.success(
            adapter=self.name,
            action_id=ctx.action.id,
            output=f"Directory created: {target}",
            metadata={"path": str(target)},
        )

    def _write(self, ctx: ExecutionContext, target: Path) -> Receipt:
        content = ctx.action.params["content"]
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return Receipt.success(
            adapter=self.name,
            action_id=ctx.action.id,
            output=f"Written {len(content)} bytes to {target}",
            metadata={"path": str(target), "size": len(content)},
        )
