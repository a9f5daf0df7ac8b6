"""
Stage model — one ordered unit of the bootstrap pipeline.

A stage has no stored state. It is identified by its position in
the plan and carries the actions to run, in order.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from nodeseed.core.models.action import Action


class Stage(BaseModel):
    """A named, ordered batch of actions."""

    name: str                       # stable slug, e.g. "install-dependencies"
    title: str                      # status line printed before the stage runs
    actions: list[Action] = Field(default_factory=list)

    @property
    def total_actions(self) -> int:
        return len(self.actions)

    def get_action(self, action_id: str) -> Action | None:
        """Look up an action by id."""
        for action in self.actions:
            if action.id == action_id:
                return action
        return None
