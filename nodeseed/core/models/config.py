"""
Bootstrap configuration model.

Defaults are the canonical configuration. A YAML file passed with
``--config`` may override them; unknown keys are rejected.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PROJECT_FOLDER = "new-project"


class BootstrapConfig(BaseModel):
    """What to create and where."""

    model_config = ConfigDict(extra="forbid")

    project_folder: str = DEFAULT_PROJECT_FOLDER
    workspace: str = "."
    command_timeout: float | None = Field(default=None, gt=0)

    @field_validator("project_folder")
    @classmethod
    def _single_path_segment(cls, value: str) -> str:
        # The folder is removed recursively on every run, so it must
        # name exactly one directory below the workspace.
        if not value or value in {".", ".."} or "/" in value or "\\" in value:
            raise ValueError(
                f"project_folder must be a single directory name, got {value!r}"
            )
        return value
