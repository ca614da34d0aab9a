# src/kubescope/models/snapshot.py
"""
Outbound records returned to the dashboard: one pod, one namespace, or a
whole cluster. They are built fresh for each request and never stored.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .quantity import ResourceQuantity


class CapacityPolicy(BaseModel):
    """
    How cluster capacity is estimated from node metrics.

    `per_node` is added once for every node reported by `kubectl top nodes`;
    `fallback` is the whole-cluster capacity used when node metrics are
    unavailable.
    """

    model_config = ConfigDict(frozen=True)

    per_node: ResourceQuantity = Field(
        default_factory=lambda: ResourceQuantity(cpu_millicores=4000, memory_mebibytes=16384)
    )
    fallback: ResourceQuantity = Field(
        default_factory=lambda: ResourceQuantity(cpu_millicores=8000, memory_mebibytes=32000)
    )


class PodSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    quantity: ResourceQuantity = Field(default_factory=ResourceQuantity.zero)
    pvcs: List[str] = Field(default_factory=list)
    config_maps: List[str] = Field(default_factory=list)
    secrets: List[str] = Field(default_factory=list)
    services: List[str] = Field(default_factory=list)
    ingresses: List[str] = Field(default_factory=list)

    def to_api(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "cpuUsage": self.quantity.cpu_millicores,
            "memoryUsage": self.quantity.memory_mebibytes,
            "pvcs": list(self.pvcs),
            "configMaps": list(self.config_maps),
            "secrets": list(self.secrets),
            "services": list(self.services),
            "ingresses": list(self.ingresses),
        }


class NamespaceSnapshot(BaseModel):
    """Usage and pods of one namespace. `pods` is empty in the cluster overview."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    pod_count: int = Field(0, ge=0)
    quantity: ResourceQuantity = Field(default_factory=ResourceQuantity.zero)
    pods: List[PodSnapshot] = Field(default_factory=list)

    def to_api(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "podCount": self.pod_count,
            "cpuUsage": self.quantity.cpu_millicores,
            "memoryUsage": self.quantity.memory_mebibytes,
            "pods": [pod.to_api() for pod in self.pods],
        }


class ClusterSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    context: str
    quantity: ResourceQuantity = Field(default_factory=ResourceQuantity.zero)
    capacity: ResourceQuantity = Field(default_factory=ResourceQuantity.zero)
    namespaces: List[NamespaceSnapshot] = Field(default_factory=list)

    def to_api(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "context": self.context,
            "cpuUsage": self.quantity.cpu_millicores,
            "cpuTotal": self.capacity.cpu_millicores,
            "memoryUsage": self.quantity.memory_mebibytes,
            "memoryTotal": self.capacity.memory_mebibytes,
            "namespaces": [namespace.to_api() for namespace in self.namespaces],
        }


class KubeContext(BaseModel):
    """One entry of `kubectl config get-contexts`."""

    name: str
    cluster: str = ""
    user: str = ""
    namespace: str = "default"
    current: bool = False
