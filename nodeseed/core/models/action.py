"""
Action and Receipt — what the engine asks for and what it gets back.

Stages are lists of Actions. Every dispatched Action yields exactly one
Receipt; adapters report failure through the Receipt, not by raising.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


class Action(BaseModel):
    """One side effect of one stage."""

    id: str                         # unique within a plan, "<stage>:<step>"
    name: str = ""                  # human-readable name
    adapter: str                    # filesystem | shell | git | node
    stage: str = ""                 # owning stage slug
    params: dict[str, Any] = Field(default_factory=dict)
    in_project: bool = True         # run inside the project folder, not the workspace


class Receipt(BaseModel):
    """Outcome of one Action.

    Process adapters record the exit status in ``metadata["return_code"]``.
    """

    adapter: str
    action_id: str
    status: Literal["ok", "skipped", "failed"] = "ok"

    started_at: str = Field(default_factory=_now_iso)
    ended_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    output: str = ""
    error: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @property
    def return_code(self) -> int | None:
        """Exit status of the spawned process, None when nothing was spawned."""
        code = self.metadata.get("return_code")
        return code if isinstance(code, int) else None

    @classmethod
    def success(cls, adapter: str, action_id: str, output: str = "", **kwargs: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, status="ok", output=output, **kwargs)

    @classmethod
    def failure(cls, adapter: str, action_id: str, error: str, **kwargs: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, status="failed", error=error, **kwargs)

    @classmethod
    def skip(cls, adapter: str, action_id: str, reason: str = "", **kwargs: Any) -> Receipt:
        """A validated action that was not executed (dry-run)."""
        return cls(adapter=adapter, action_id=action_id, status="skipped", output=reason, **kwargs)
