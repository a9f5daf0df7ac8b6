"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from nodeseed.adapters.mock import MockAdapter
from nodeseed.adapters.registry import AdapterRegistry
from nodeseed.adapters.shell.filesystem import FilesystemAdapter
from nodeseed.core.models.config import BootstrapConfig

PROCESS_ADAPTERS = ("shell", "git", "node")


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Return a temporary workspace directory for bootstrap runs."""
    ws = tmp_path / "workspace"
    ws.mkdir()
    return ws


@pytest.fixture
def config(workspace: Path) -> BootstrapConfig:
    """Default configuration pointed at the temporary workspace."""
    return BootstrapConfig(project_folder="demo-app", workspace=str(workspace))


@pytest.fixture
def process_mocks() -> dict[str, MockAdapter]:
    """One recording mock per process-spawning adapter."""
    return {name: MockAdapter(adapter_name=name) for name in PROCESS_ADAPTERS}


@pytest.fixture
def registry(process_mocks: dict[str, MockAdapter]) -> AdapterRegistry:
    """Real filesystem adapter; npm, npx, git and chmod are mocked."""
    reg = AdapterRegistry()
    reg.register(FilesystemAdapter())
    for mock in process_mocks.values():
        reg.register(mock)
    return reg
