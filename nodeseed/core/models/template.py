"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file written into the new project directory.

    Attributes:
        path:       Relative path from the project directory.
        content:    Full file content.
        executable: Whether the file must be marked executable after writing.
        reason:     Why this file was generated.
    """

    path: str
    content: str
    executable: bool = False
    reason: str = ""
