# src/kubescope/core/resolver.py
"""
Works out which PVCs, ConfigMaps, Secrets, Services and Ingress hosts a pod
depends on, by matching the references declared in its spec against the
objects that currently exist in its namespace.

Every function here is pure: inputs are never mutated and a reference to an
object that no longer exists is silently left out.
"""

import logging
from typing import Iterable, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..models.resources import CatalogObject, ConfigRefKind, IngressObject, ServiceObject, WorkloadUnit
from ..models.snapshot import PodSnapshot

logger = logging.getLogger(__name__)


class NamespaceCatalogs(BaseModel):
    """All objects listed for one namespace in the same snapshot."""

    model_config = ConfigDict(frozen=True)

    pvcs: List[CatalogObject] = Field(default_factory=list)
    config_maps: List[CatalogObject] = Field(default_factory=list)
    secrets: List[CatalogObject] = Field(default_factory=list)
    services: List[ServiceObject] = Field(default_factory=list)
    ingresses: List[IngressObject] = Field(default_factory=list)


def _unique(names: Iterable[str]) -> List[str]:
    """Drops repeated names, keeping first-seen order."""
    return list(dict.fromkeys(names))


def resolve_config_refs(
    unit: WorkloadUnit, catalog: Sequence[CatalogObject], kind: ConfigRefKind
) -> List[str]:
    """
    Returns the names of `kind` objects in `catalog` that the pod references,
    first through its volumes and then through container environment
    indirection.
    """
    existing = {obj.name for obj in catalog}
    found = []
    for ref in [*unit.volume_refs, *unit.env_refs]:
        if ref.kind is not kind:
            continue
        if ref.name in existing:
            found.append(ref.name)
        else:
            logger.debug(f"Pod '{unit.name}' references missing {kind.value} '{ref.name}'; skipping.")
    return _unique(found)


def selector_matches(selector: dict, labels: dict) -> bool:
    """True when the selector is non-empty and every pair appears in `labels`."""
    if not selector:
        return False
    return all(key in labels and labels[key] == value for key, value in selector.items())


def format_service(service: ServiceObject) -> str:
    """Renders a service as 'name' or 'name:port1,port2'."""
    if not service.ports:
        return service.name
    return f"{service.name}:{','.join(str(port) for port in service.ports)}"


def service_base_name(formatted: str) -> str:
    """Strips the ':ports' suffix added by format_service."""
    return formatted.split(":", 1)[0]


def resolve_services(unit: WorkloadUnit, services: Sequence[ServiceObject]) -> List[str]:
    return _unique(format_service(service) for service in services if selector_matches(service.selector, unit.labels))


def resolve_ingresses(service_names: Sequence[str], ingresses: Sequence[IngressObject]) -> List[str]:
    """
    Returns the hosts of ingress rules routing to any of the given services.

    `service_names` are the formatted strings returned by resolve_services.
    Rules without a host are skipped even when their backend matches.
    """
    base_names = {service_base_name(name) for name in service_names}
    hosts = []
    for ingress in ingresses:
        for rule in ingress.rules:
            if not rule.host:
                continue
            if any(service_base_name(backend) in base_names for backend in rule.backend_service_names):
                hosts.append(rule.host)
    return _unique(hosts)


def resolve_associations(unit: WorkloadUnit, catalogs: NamespaceCatalogs) -> PodSnapshot:
    """Resolves every association of one pod into its outbound snapshot."""
    services = resolve_services(unit, catalogs.services)
    return PodSnapshot(
        id=unit.id,
        name=unit.name,
        quantity=unit.quantity,
        pvcs=resolve_config_refs(unit, catalogs.pvcs, ConfigRefKind.STORAGE_CLAIM),
        config_maps=resolve_config_refs(unit, catalogs.config_maps, ConfigRefKind.CONFIG_SET),
        secrets=resolve_config_refs(unit, catalogs.secrets, ConfigRefKind.SECRET_SET),
        services=services,
        ingresses=resolve_ingresses(services, catalogs.ingresses),
    )
