"""
Domain models — Pydantic types for the bootstrapper.

All models are re-exported here for convenient access:

    from nodeseed.core.models import Action, Receipt, Stage, GeneratedFile
"""

from nodeseed.core.models.action import Action, Receipt
from nodeseed.core.models.config import DEFAULT_PROJECT_FOLDER, BootstrapConfig
from nodeseed.core.models.stage import Stage
from nodeseed.core.models.template import GeneratedFile

__all__ = [
    "DEFAULT_PROJECT_FOLDER",
    "Action",
    "BootstrapConfig",
    "GeneratedFile",
    "Receipt",
    "Stage",
]
