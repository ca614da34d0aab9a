# tests/models/test_resources.py
"""
Tests for decoding kubectl JSON listings into resolver models.
"""

from kubescope.models.resources import (
    CatalogObject,
    ConfigRef,
    ConfigRefKind,
    IngressObject,
    ServiceObject,
    WorkloadUnit,
    parse_items,
)


def test_pod_refs_are_tagged_at_ingestion(pod_manifest):
    pod = WorkloadUnit.from_manifest(pod_manifest)

    assert pod.id == pod.name == "web-7d9f"
    assert pod.namespace == "shop"
    assert pod.labels == {"app": "web", "tier": "frontend"}
    assert pod.volume_refs == [
        ConfigRef(kind=ConfigRefKind.STORAGE_CLAIM, name="data-1"),
        ConfigRef(kind=ConfigRefKind.CONFIG_SET, name="web-settings"),
        ConfigRef(kind=ConfigRefKind.SECRET_SET, name="tls-certs"),
    ]
    # Literal values and fieldRefs carry no reference.
    assert pod.env_refs == [
        ConfigRef(kind=ConfigRefKind.CONFIG_SET, name="app-config"),
        ConfigRef(kind=ConfigRefKind.SECRET_SET, name="db-secret"),
        ConfigRef(kind=ConfigRefKind.CONFIG_SET, name="web-settings"),
    ]
    assert pod.quantity.cpu_millicores == 0


def test_pod_env_from_sources():
    pod = WorkloadUnit.from_manifest(
        {
            "metadata": {"name": "p"},
            "spec": {
                "containers": [
                    {"envFrom": [{"configMapRef": {"name": "bulk-config"}}, {"secretRef": {"name": "bulk-secret"}}]}
                ]
            },
        }
    )
    assert [(ref.kind, ref.name) for ref in pod.env_refs] == [
        (ConfigRefKind.CONFIG_SET, "bulk-config"),
        (ConfigRefKind.SECRET_SET, "bulk-secret"),
    ]


def test_pod_with_missing_fields_is_empty():
    pod = WorkloadUnit.from_manifest({"metadata": {"name": "bare"}})
    assert pod.labels == {}
    assert pod.volume_refs == []
    assert pod.env_refs == []

    pod = WorkloadUnit.from_manifest(
        {"metadata": {"name": "odd", "labels": None}, "spec": {"volumes": None, "containers": [{"env": None}, None]}}
    )
    assert pod.labels == {}
    assert pod.env_refs == []


def test_unnamed_items_are_dropped():
    assert WorkloadUnit.from_manifest({}) is None
    assert CatalogObject.from_manifest({"metadata": {}}) is None
    assert parse_items({"items": [{"metadata": {"name": "a"}}, {}, "junk"]}, CatalogObject.from_manifest) == [
        CatalogObject(name="a")
    ]


def test_parse_items_without_items_key():
    assert parse_items({}, CatalogObject.from_manifest) == []
    assert parse_items(None, ServiceObject.from_manifest) == []


def test_service_from_manifest():
    service = ServiceObject.from_manifest(
        {
            "metadata": {"name": "web"},
            "spec": {"selector": {"app": "web"}, "ports": [{"port": 80}, {"name": "no-port"}, {"port": 443}]},
        }
    )
    assert service.selector == {"app": "web"}
    assert service.ports == [80, 443]

    headless = ServiceObject.from_manifest({"metadata": {"name": "h"}, "spec": {}})
    assert headless.selector == {}
    assert headless.ports == []


def test_ingress_from_manifest_reads_both_backend_shapes():
    ingress = IngressObject.from_manifest(
        {
            "metadata": {"name": "edge"},
            "spec": {
                "rules": [
                    {"host": "a.example.com", "http": {"paths": [{"backend": {"service": {"name": "svc-a"}}}]}},
                    {"host": "b.example.com", "http": {"paths": [{"backend": {"serviceName": "svc-b"}}]}},
                    {"host": "c.example.com"},
                ]
            },
        }
    )
    assert [(rule.host, rule.backend_service_names) for rule in ingress.rules] == [
        ("a.example.com", ["svc-a"]),
        ("b.example.com", ["svc-b"]),
        ("c.example.com", []),
    ]


def test_kind_knows_its_kubectl_resource():
    assert ConfigRefKind.STORAGE_CLAIM.kubectl_resource == "pvc"
    assert ConfigRefKind.CONFIG_SET.kubectl_resource == "configmap"
    assert ConfigRefKind.SECRET_SET.kubectl_resource == "secret"
