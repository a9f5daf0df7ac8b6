"""
Mock adapter — stands in for npm, git, chmod or the disk.

Registered under a real adapter name in tests, or passed to
``AdapterRegistry.set_mock_mode``. It remembers every context it
received and succeeds unless told otherwise for a given action id.
"""

from __future__ import annotations

from nodeseed.adapters.base import Adapter, ExecutionContext
from nodeseed.core.models.action import Receipt


class MockAdapter(Adapter):
    """Recording test double.

    >>> node = MockAdapter(adapter_name="node")
    >>> node.set_failure("install-dependencies:npm-install", return_code=1)
    """

    def __init__(
        self,
        adapter_name: str = "mock",
        available: bool = True,
        default_output: str = "[mock] executed",
    ):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._responses: dict[str, Receipt] = {}
        self.call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_count(self) -> int:
        return len(self.call_log)

    @property
    def executed_ids(self) -> list[str]:
        """Action ids in execution order."""
        return [ctx.action.id for ctx in self.call_log]

    def is_available(self) -> bool:
        return self._available

    def set_response(self, action_id: str, receipt: Receipt) -> None:
        self._responses[action_id] = receipt

    def set_failure(
        self,
        action_id: str,
        error: str = "Mock failure",
        return_code: int | None = None,
    ) -> None:
        """Make ``action_id`` fail, optionally with a process exit status."""
        metadata = {} if return_code is None else {"return_code": return_code}
        self.set_response(
            action_id,
            Receipt.failure(adapter=self._name, action_id=action_id, error=error, metadata=metadata),
        )

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self.call_log.append(context)
        canned = self._responses.get(context.action.id)
        if canned is not None:
            return canned
        return Receipt.success(
            adapter=self._name,
            action_id=context.action.id,
            output=self._default_output,
            metadata={"mock": True},
        )

    def reset(self) -> None:
        """Forget recorded calls and canned responses."""
        self.call_log.clear()
        self._responses.clear()
