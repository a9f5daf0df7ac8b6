"""
Adapter protocol — how the engine reaches npm, git and the disk.

An adapter turns one Action into one Receipt. The engine never calls
a tool itself; it goes through the registry, which goes through here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import Any

from pydantic import BaseModel, Field

from nodeseed.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """The action plus where and how to run it."""

    action: Action
    project_root: str = "."             # workspace directory
    module_path: str | None = None      # project folder, for in-project actions
    dry_run: bool = False
    timeout: float | None = None        # seconds per spawned process
    params: dict[str, Any] = Field(default_factory=dict)

    @property
    def working_dir(self) -> str:
        """Workspace, or the project folder inside it."""
        if self.module_path:
            return str(PurePosixPath(self.project_root) / self.module_path)
        return self.project_root


class Adapter(ABC):
    """One kind of side effect (files, a shell command, git, npm).

    ``execute`` reports every failure in the returned Receipt and does
    not raise. ``validate`` runs first, also in dry-run, and must not
    touch anything.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Key actions use in ``Action.adapter``."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the underlying tool can be found. Fast, never raises."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check params before running.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Perform the action and describe the outcome."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
