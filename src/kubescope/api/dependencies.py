# src/kubescope/api/dependencies.py
"""
FastAPI dependency injection functions.

Route handlers receive a factory that builds a DashboardService for a given
kubeconfig, so tests can swap in a service backed by a fake collector.
"""

import logging
import os
from typing import Callable

from kubescope.collectors.kubectl_collector import KubectlCollector
from kubescope.core.config import config
from kubescope.core.exceptions import InvalidKubeconfigError
from kubescope.core.service import DashboardService

logger = logging.getLogger(__name__)

ServiceFactory = Callable[[str], DashboardService]


def validate_kubeconfig_path(file_path: str, allowed_dir: str | None = None) -> str:
    """
    Returns the resolved kubeconfig path.

    Raises:
        InvalidKubeconfigError: If the path is outside the kubeconfig directory.
    """
    base = os.path.realpath(allowed_dir or config.KUBECONFIG_DIR)
    resolved = os.path.realpath(file_path)
    if os.path.commonpath([base, resolved]) != base or resolved == base:
        raise InvalidKubeconfigError(f"Invalid file path: {file_path}")
    return resolved


def _build_service(file_path: str) -> DashboardService:
    return DashboardService(KubectlCollector(kubeconfig=validate_kubeconfig_path(file_path)))


async def get_service_factory() -> ServiceFactory:
    """Provides the factory that builds a DashboardService per kubeconfig."""
    return _build_service
