"""Language toolchain adapters."""

from nodeseed.adapters.languages.node import NodeAdapter

__all__ = ["NodeAdapter"]
