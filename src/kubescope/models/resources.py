# src/kubescope/models/resources.py
"""
Pydantic models for the Kubernetes objects KubeScope reads from `kubectl -o json`.

Raw manifests are loosely structured dictionaries where any nested field may be
absent. The `from_manifest` constructors below are the only place that looks at
that raw shape: they resolve every reference to an explicit `ConfigRef` once,
so the resolver never has to re-derive an object's kind from field names.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .quantity import ResourceQuantity

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _dig(obj: Any, *keys: str) -> Any:
    """Walks nested dictionaries, returning None as soon as a level is missing."""
    for key in keys:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_str_dict(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): str(v) for k, v in value.items()}


class ConfigRefKind(str, Enum):
    """The kinds of namespaced objects a pod can reference by name."""

    STORAGE_CLAIM = "StorageClaim"
    CONFIG_SET = "ConfigSet"
    SECRET_SET = "SecretSet"

    @property
    def kubectl_resource(self) -> str:
        """Resource name accepted by `kubectl get`."""
        return _KUBECTL_RESOURCES[self]


_KUBECTL_RESOURCES = {
    ConfigRefKind.STORAGE_CLAIM: "pvc",
    ConfigRefKind.CONFIG_SET: "configmap",
    ConfigRefKind.SECRET_SET: "secret",
}


class ConfigRef(BaseModel):
    """A by-name reference from a pod to a PVC, ConfigMap or Secret."""

    model_config = ConfigDict(frozen=True)

    kind: ConfigRefKind
    name: str

    @classmethod
    def from_volume(cls, volume: Any) -> Optional["ConfigRef"]:
        """Returns the reference carried by a pod volume, if it has one."""
        claim = _dig(volume, "persistentVolumeClaim", "claimName")
        if claim:
            return cls(kind=ConfigRefKind.STORAGE_CLAIM, name=claim)
        config_map = _dig(volume, "configMap", "name")
        if config_map:
            return cls(kind=ConfigRefKind.CONFIG_SET, name=config_map)
        secret = _dig(volume, "secret", "secretName")
        if secret:
            return cls(kind=ConfigRefKind.SECRET_SET, name=secret)
        return None

    @classmethod
    def from_env_var(cls, env: Any) -> Optional["ConfigRef"]:
        """Returns the reference of an `env` entry using `valueFrom`; literal values yield None."""
        config_map = _dig(env, "valueFrom", "configMapKeyRef", "name")
        if config_map:
            return cls(kind=ConfigRefKind.CONFIG_SET, name=config_map)
        secret = _dig(env, "valueFrom", "secretKeyRef", "name")
        if secret:
            return cls(kind=ConfigRefKind.SECRET_SET, name=secret)
        return None

    @classmethod
    def from_env_source(cls, source: Any) -> Optional["ConfigRef"]:
        """Returns the reference of an `envFrom` entry."""
        config_map = _dig(source, "configMapRef", "name")
        if config_map:
            return cls(kind=ConfigRefKind.CONFIG_SET, name=config_map)
        secret = _dig(source, "secretRef", "name")
        if secret:
            return cls(kind=ConfigRefKind.SECRET_SET, name=secret)
        return None


class WorkloadUnit(BaseModel):
    """
    A pod as seen by the resolver: its labels, the references declared in its
    spec, and its current resource usage.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    namespace: Optional[str] = None
    labels: Dict[str, str] = Field(default_factory=dict)
    volume_refs: List[ConfigRef] = Field(default_factory=list)
    env_refs: List[ConfigRef] = Field(default_factory=list)
    quantity: ResourceQuantity = Field(default_factory=ResourceQuantity.zero)

    @classmethod
    def from_manifest(cls, item: Dict[str, Any]) -> Optional["WorkloadUnit"]:
        name = _dig(item, "metadata", "name")
        if not name:
            return None

        volume_refs = [ref for ref in map(ConfigRef.from_volume, _as_list(_dig(item, "spec", "volumes"))) if ref]

        env_refs: List[ConfigRef] = []
        for container in _as_list(_dig(item, "spec", "containers")):
            for env in _as_list(_dig(container, "env")):
                ref = ConfigRef.from_env_var(env)
                if ref:
                    env_refs.append(ref)
            for source in _as_list(_dig(container, "envFrom")):
                ref = ConfigRef.from_env_source(source)
                if ref:
                    env_refs.append(ref)

        return cls(
            id=name,
            name=name,
            namespace=_dig(item, "metadata", "namespace"),
            labels=_as_str_dict(_dig(item, "metadata", "labels")),
            volume_refs=volume_refs,
            env_refs=env_refs,
        )


# Kubernetes calls this a Pod; both names are used across the codebase.
Pod = WorkloadUnit


class CatalogObject(BaseModel):
    """A PVC, ConfigMap or Secret listing entry. Only the name matters for association."""

    model_config = ConfigDict(frozen=True)

    name: str

    @classmethod
    def from_manifest(cls, item: Dict[str, Any]) -> Optional["CatalogObject"]:
        name = _dig(item, "metadata", "name")
        return cls(name=name) if name else None


class ServiceObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    selector: Dict[str, str] = Field(default_factory=dict)
    ports: List[int] = Field(default_factory=list)

    @classmethod
    def from_manifest(cls, item: Dict[str, Any]) -> Optional["ServiceObject"]:
        name = _dig(item, "metadata", "name")
        if not name:
            return None
        ports = [port["port"] for port in _as_list(_dig(item, "spec", "ports")) if isinstance(_dig(port, "port"), int)]
        return cls(name=name, selector=_as_str_dict(_dig(item, "spec", "selector")), ports=ports)


class IngressRule(BaseModel):
    """One host rule of an ingress and the services its paths route to."""

    model_config = ConfigDict(frozen=True)

    host: Optional[str] = None
    backend_service_names: List[str] = Field(default_factory=list)


class IngressObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    rules: List[IngressRule] = Field(default_factory=list)

    @classmethod
    def from_manifest(cls, item: Dict[str, Any]) -> Optional["IngressObject"]:
        name = _dig(item, "metadata", "name")
        if not name:
            return None
        rules = []
        for rule in _as_list(_dig(item, "spec", "rules")):
            backends = []
            for path in _as_list(_dig(rule, "http", "paths")):
                # networking.k8s.io/v1 first, then the v1beta1 shape.
                backend = _dig(path, "backend", "service", "name") or _dig(path, "backend", "serviceName")
                if backend:
                    backends.append(backend)
            rules.append(IngressRule(host=_dig(rule, "host") or None, backend_service_names=backends))
        return cls(name=name, rules=rules)


def parse_items(payload: Any, factory: Callable[[Dict[str, Any]], Optional[T]]) -> List[T]:
    """
    Decodes the `items` of a kubectl list document with `factory`.

    Items the factory rejects (typically because they have no name) are dropped.
    """
    items = _as_list(_dig(payload, "items"))
    parsed = [obj for obj in map(factory, items) if obj is not None]
    if len(parsed) != len(items):
        logger.debug(f"Dropped {len(items) - len(parsed)} unnamed item(s) while decoding kubectl listing.")
    return parsed
