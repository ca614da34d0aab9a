# src/kubescope/core/service.py
import asyncio
import logging
from typing import List, Optional

from ..collectors.kubectl_collector import KubectlCollector
from ..models.resources import (
    CatalogObject,
    ConfigRefKind,
    IngressObject,
    ServiceObject,
    WorkloadUnit,
    parse_items,
)
from ..models.snapshot import CapacityPolicy, ClusterSnapshot, KubeContext, NamespaceSnapshot
from .assembler import build_cluster_snapshot, build_namespace_snapshot, build_namespace_summary
from .config import config
from .resolver import NamespaceCatalogs

logger = logging.getLogger(__name__)


class DashboardService:
    """
    Orchestrates kubectl calls and feeds their output to the core.

    Independent listings for a namespace are issued concurrently and joined
    before any resolution happens, so every pod is matched against catalogs
    from the same snapshot.
    """

    def __init__(
        self,
        collector: KubectlCollector,
        capacity_policy: Optional[CapacityPolicy] = None,
        strict: Optional[bool] = None,
    ):
        self.collector = collector
        self.capacity_policy = capacity_policy or config.capacity_policy()
        self.strict = config.STRICT_QUANTITY_PARSING if strict is None else strict

    async def get_contexts(self) -> List[KubeContext]:
        return await self.collector.list_contexts()

    async def switch_context(self, context: str) -> None:
        await self.collector.use_context(context)
        logger.info(f"Switched to context '{context}'.")

    async def _namespace_summary(self, namespace: str) -> NamespaceSnapshot:
        pods_doc, metrics = await asyncio.gather(
            self.collector.list_optional_objects("pods", namespace),
            self.collector.top_pods(namespace),
        )
        pod_count = len(pods_doc.get("items") or [])
        return build_namespace_summary(namespace, pod_count, metrics, strict=self.strict)

    async def get_cluster_info(self, context: str) -> ClusterSnapshot:
        """Overview of every namespace in `context`, without per-pod detail."""
        await self.collector.use_context(context)
        namespace_names, node_metrics = await asyncio.gather(
            self.collector.list_namespaces(),
            self.collector.top_nodes(),
        )
        namespaces = await asyncio.gather(*(self._namespace_summary(name) for name in namespace_names))
        logger.info(f"Collected {len(namespaces)} namespace summaries for context '{context}'.")
        return build_cluster_snapshot(context, list(namespaces), node_metrics, self.capacity_policy)

    async def get_namespace_details(self, context: str, namespace: str) -> NamespaceSnapshot:
        """Pods of one namespace with their usage and associated objects."""
        await self.collector.use_context(context)
        pods_doc = await self.collector.list_objects("pods", namespace)

        metrics, pvcs, config_maps, secrets, services, ingresses = await asyncio.gather(
            self.collector.top_pods(namespace),
            self.collector.list_optional_objects(ConfigRefKind.STORAGE_CLAIM.kubectl_resource, namespace),
            self.collector.list_optional_objects(ConfigRefKind.CONFIG_SET.kubectl_resource, namespace),
            self.collector.list_optional_objects(ConfigRefKind.SECRET_SET.kubectl_resource, namespace),
            self.collector.list_optional_objects("service", namespace),
            self.collector.list_optional_objects("ingress", namespace),
        )
        catalogs = NamespaceCatalogs(
            pvcs=parse_items(pvcs, CatalogObject.from_manifest),
            config_maps=parse_items(config_maps, CatalogObject.from_manifest),
            secrets=parse_items(secrets, CatalogObject.from_manifest),
            services=parse_items(services, ServiceObject.from_manifest),
            ingresses=parse_items(ingresses, IngressObject.from_manifest),
        )
        pods = parse_items(pods_doc, WorkloadUnit.from_manifest)
        if metrics is None:
            logger.warning(f"Pod metrics unavailable for namespace {namespace}; reporting zero usage.")
        return build_namespace_snapshot(namespace, pods, catalogs, metrics, strict=self.strict)
