# src/kubescope/core/assembler.py
"""
Assembles namespace and cluster snapshots from parsed listings and raw
`kubectl top` output.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ..models.quantity import ResourceQuantity
from ..models.resources import WorkloadUnit
from ..models.snapshot import CapacityPolicy, ClusterSnapshot, NamespaceSnapshot
from ..utils.quantity import aggregate, parse_metrics_output, sample_quantity
from .resolver import NamespaceCatalogs, resolve_associations

logger = logging.getLogger(__name__)


def quantities_by_subject(metrics_output: Optional[str], strict: bool = False) -> Dict[str, ResourceQuantity]:
    """Maps each pod (or node) name in a `kubectl top` block to its usage."""
    return {
        sample.subject_name: sample_quantity(sample, strict=strict) for sample in parse_metrics_output(metrics_output)
    }


def build_namespace_snapshot(
    name: str,
    pods: Sequence[WorkloadUnit],
    catalogs: NamespaceCatalogs,
    pod_metrics_output: Optional[str],
    strict: bool = False,
) -> NamespaceSnapshot:
    """
    Builds the detailed view of one namespace.

    Pods missing from the metrics output (or all pods, when metrics are
    unavailable) report zero usage.
    """
    usage = quantities_by_subject(pod_metrics_output, strict=strict)
    snapshots = []
    for pod in pods:
        quantity = usage.get(pod.name, ResourceQuantity.zero())
        snapshots.append(resolve_associations(pod.model_copy(update={"quantity": quantity}), catalogs))

    return NamespaceSnapshot(
        id=name,
        name=name,
        pod_count=len(snapshots),
        quantity=aggregate(pod.quantity for pod in snapshots),
        pods=snapshots,
    )


def build_namespace_summary(
    name: str, pod_count: int, pod_metrics_output: Optional[str], strict: bool = False
) -> NamespaceSnapshot:
    """Builds a namespace row for the cluster overview, without pods."""
    return NamespaceSnapshot(
        id=name,
        name=name,
        pod_count=max(pod_count, 0),
        quantity=aggregate(quantities_by_subject(pod_metrics_output, strict=strict).values()),
    )


def estimate_capacity(node_metrics_output: Optional[str], policy: CapacityPolicy) -> ResourceQuantity:
    """
    Estimates cluster capacity as `policy.per_node` times the number of nodes
    in the node metrics output, or `policy.fallback` when node metrics are
    unavailable (None).
    """
    if node_metrics_output is None:
        logger.debug("Node metrics unavailable; using fallback capacity.")
        return policy.fallback
    node_count = len(parse_metrics_output(node_metrics_output))
    return aggregate([policy.per_node] * node_count)


def build_cluster_snapshot(
    context: str,
    namespaces: List[NamespaceSnapshot],
    node_metrics_output: Optional[str],
    capacity_policy: CapacityPolicy,
) -> ClusterSnapshot:
    return ClusterSnapshot(
        id=context,
        name=context,
        context=context,
        quantity=aggregate(namespace.quantity for namespace in namespaces),
        capacity=estimate_capacity(node_metrics_output, capacity_policy),
        namespaces=namespaces,
    )
