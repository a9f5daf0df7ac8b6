"""
Adapter registry — the one place actions are dispatched.

The engine hands every action to ``AdapterRegistry.execute_action`` and
gets a Receipt back. Lookup, validation, dry-run and mock mode all
happen here so the adapters only have to know how to do their job.
"""

from __future__ import annotations

import logging
import time

from nodeseed.adapters.base import Adapter, ExecutionContext
from nodeseed.core.models.action import Action, Receipt

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Name → adapter table plus the dispatch loop for a single action.

    In mock mode nothing registered is used: either the mock adapter
    given to ``set_mock_mode`` receives every action, or each action
    succeeds immediately with a ``[mock]`` receipt.
    """

    def __init__(self, mock_mode: bool = False):
        self._adapters: dict[str, Adapter] = {}
        self._mock_mode = mock_mode
        self._mock_adapter: Adapter | None = None

    @property
    def mock_mode(self) -> bool:
        return self._mock_mode

    def set_mock_mode(self, enabled: bool, mock_adapter: Adapter | None = None) -> None:
        """Switch mock mode, optionally routing everything to ``mock_adapter``."""
        self._mock_mode = enabled
        self._mock_adapter = mock_adapter

    def register(self, adapter: Adapter) -> None:
        if adapter.name in self._adapters:
            logger.warning("Replacing adapter '%s'", adapter.name)
        self._adapters[adapter.name] = adapter
        logger.debug("Registered adapter: %s", adapter.name)

    def get(self, name: str) -> Adapter | None:
        return self._adapters.get(name)

    def list_adapters(self) -> list[str]:
        return list(self._adapters)

    def unavailable(self) -> list[str]:
        """Names of registered adapters whose tool cannot be found."""
        missing = []
        for name, adapter in self._adapters.items():
            try:
                if not adapter.is_available():
                    missing.append(name)
            except OSError:
                missing.append(name)
        return missing

    def execute_action(
        self,
        action: Action,
        project_root: str = ".",
        module_path: str | None = None,
        dry_run: bool = False,
        timeout: float | None = None,
    ) -> Receipt:
        """Validate and run one action, always returning a Receipt.

        Args:
            action: The action to execute.
            project_root: Workspace directory.
            module_path: Project folder (relative to the workspace), if any.
            dry_run: If True, validate but don't execute.
            timeout: Per-process timeout in seconds. None waits forever.

        Returns:
            ``ok`` or ``failed`` after execution, ``skipped`` in dry-run.
        """
        started = time.monotonic()
        context = ExecutionContext(
            action=action,
            project_root=project_root,
            module_path=module_path,
            dry_run=dry_run,
            timeout=timeout,
            params=action.params,
        )

        if self._mock_mode and self._mock_adapter is None:
            return Receipt.success(
                adapter=action.adapter,
                action_id=action.id,
                output=f"[mock] {action.adapter}:{action.id} executed",
                metadata={"mock": True, "dry_run": dry_run},
            )

        adapter = self._mock_adapter if self._mock_mode else self._adapters.get(action.adapter)
        if adapter is None:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"No adapter registered for '{action.adapter}'",
            )

        rejected = self._validate(adapter, context)
        if rejected is not None:
            return rejected

        if dry_run:
            return Receipt.skip(
                adapter=action.adapter,
                action_id=action.id,
                reason=f"[dry-run] Would execute {action.adapter}:{action.id}",
                metadata={"dry_run": True},
            )

        try:
            receipt = adapter.execute(context)
        except Exception as e:
            # Adapters report failures in receipts; anything raised is a bug
            logger.exception("Adapter %s raised on %s", action.adapter, action.id)
            receipt = Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Unexpected error: {e}",
            )

        receipt.duration_ms = int((time.monotonic() - started) * 1000)
        return receipt

    @staticmethod
    def _validate(adapter: Adapter, context: ExecutionContext) -> Receipt | None:
        """Failure receipt if the adapter rejects the action, else None."""
        action = context.action
        try:
            is_valid, message = adapter.validate(context)
        except Exception as e:
            return Receipt.failure(
                adapter=action.adapter,
                action_id=action.id,
                error=f"Validation error: {e}",
            )
        if is_valid:
            return None
        return Receipt.failure(
            adapter=action.adapter,
            action_id=action.id,
            error=f"Validation failed: {message}",
        )


def default_registry(mock_mode: bool = False) -> AdapterRegistry:
    """Build a registry with every adapter the bootstrap pipeline uses."""
    from nodeseed.adapters.languages.node import NodeAdapter
    from nodeseed.adapters.shell.command import ShellCommandAdapter
    from nodeseed.adapters.shell.filesystem import FilesystemAdapter
    from nodeseed.adapters.vcs.git import GitAdapter

    registry = AdapterRegistry(mock_mode=mock_mode)
    registry.register(FilesystemAdapter())
    registry.register(ShellCommandAdapter())
    registry.register(GitAdapter())
    registry.register(NodeAdapter())
    return registry
