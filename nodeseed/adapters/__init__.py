"""Adapters — tool bindings for external integrations.

Public re-exports for convenient access.
"""

from nodeseed.adapters.base import Adapter, ExecutionContext
from nodeseed.adapters.mock import MockAdapter
from nodeseed.adapters.registry import AdapterRegistry, default_registry

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "ExecutionContext",
    "MockAdapter",
    "default_registry",
]
