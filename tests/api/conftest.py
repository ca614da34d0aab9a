# tests/api/conftest.py
"""
Shared fixtures for API tests.
Uses FastAPI's TestClient with dependency overrides to inject a mock service.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from kubescope.api.app import create_app
from kubescope.api.dependencies import get_service_factory
from kubescope.core.assembler import build_cluster_snapshot, build_namespace_summary
from kubescope.models.quantity import ResourceQuantity
from kubescope.models.snapshot import CapacityPolicy, KubeContext, NamespaceSnapshot, PodSnapshot


@pytest.fixture
def sample_namespace():
    return NamespaceSnapshot(
        id="shop",
        name="shop",
        pod_count=1,
        quantity=ResourceQuantity(cpu_millicores=120, memory_mebibytes=256.5),
        pods=[
            PodSnapshot(
                id="web-0",
                name="web-0",
                quantity=ResourceQuantity(cpu_millicores=120, memory_mebibytes=256.5),
                pvcs=["data-1"],
                config_maps=["app-config"],
                secrets=["db-secret"],
                services=["web:80,443"],
                ingresses=["shop.example.com"],
            )
        ],
    )


@pytest.fixture
def sample_cluster():
    return build_cluster_snapshot(
        "prod",
        [build_namespace_summary("shop", 4, "web-0 100m 64Mi\nweb-1 50m 32Mi")],
        "node-a 1 10% 1Gi 5%",
        CapacityPolicy(),
    )


@pytest.fixture
def mock_service(sample_namespace, sample_cluster):
    """Returns a mock DashboardService."""
    service = MagicMock()
    service.get_contexts = AsyncMock(return_value=[KubeContext(name="prod", cluster="c", user="u", current=True)])
    service.get_cluster_info = AsyncMock(return_value=sample_cluster)
    service.get_namespace_details = AsyncMock(return_value=sample_namespace)
    service.switch_context = AsyncMock(return_value=None)
    return service


@pytest.fixture
def service_factory(mock_service):
    factory = MagicMock(return_value=mock_service)
    return factory


@pytest.fixture
def client(service_factory):
    """Creates a TestClient with the service factory overridden."""
    app = create_app()
    app.dependency_overrides[get_service_factory] = lambda: service_factory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
