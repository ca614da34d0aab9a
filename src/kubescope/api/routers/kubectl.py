# src/kubescope/api/routers/kubectl.py
"""
API routes backing the dashboard: contexts, context switching, cluster overview
and namespace details for an uploaded kubeconfig.
"""

import logging

from fastapi import APIRouter, Depends

from kubescope.api.dependencies import ServiceFactory, get_service_factory
from kubescope.api.schemas import (
    ClusterInfoRequest,
    ClusterInfoResponse,
    ContextsResponse,
    KubeconfigRequest,
    NamespaceDetailsRequest,
    NamespaceDetailsResponse,
    SwitchContextResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/kubectl")


@router.post("/contexts", response_model=ContextsResponse)
async def list_contexts(
    request: KubeconfigRequest,
    service_factory: ServiceFactory = Depends(get_service_factory),
):
    """Return the contexts declared in the kubeconfig."""
    service = service_factory(request.file_path)
    contexts = await service.get_contexts()
    return ContextsResponse(contexts=contexts)


@router.post("/switch-context", response_model=SwitchContextResponse)
async def switch_context(
    request: ClusterInfoRequest,
    service_factory: ServiceFactory = Depends(get_service_factory),
):
    """Make `contextName` the current context of the kubeconfig."""
    service = service_factory(request.file_path)
    await service.switch_context(request.context_name)
    return SwitchContextResponse()


@router.post("/cluster-info", response_model=ClusterInfoResponse)
async def cluster_info(
    request: ClusterInfoRequest,
    service_factory: ServiceFactory = Depends(get_service_factory),
):
    """Return usage, capacity and namespace summaries for a context."""
    service = service_factory(request.file_path)
    cluster = await service.get_cluster_info(request.context_name)
    return ClusterInfoResponse(cluster=cluster.to_api())


@router.post("/namespace-details", response_model=NamespaceDetailsResponse)
async def namespace_details(
    request: NamespaceDetailsRequest,
    service_factory: ServiceFactory = Depends(get_service_factory),
):
    """Return pods of a namespace with their usage and associated objects."""
    service = service_factory(request.file_path)
    namespace = await service.get_namespace_details(request.context_name, request.namespace_name)
    return NamespaceDetailsResponse(namespace=namespace.to_api())
