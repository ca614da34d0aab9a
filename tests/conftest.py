# tests/conftest.py

import pytest


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch, tmp_path):
    """
    Pytest fixture to mock environment variables for the config module.

    This fixture runs automatically for every test (`autouse=True`) so the
    capacity defaults read by `Config` are predictable and isolated from the
    actual environment.
    """
    monkeypatch.setenv("NODE_CPU_CAPACITY_MILLICORES", "4000")
    monkeypatch.setenv("NODE_MEMORY_CAPACITY_MEBIBYTES", "16384")
    monkeypatch.setenv("FALLBACK_CPU_CAPACITY_MILLICORES", "8000")
    monkeypatch.setenv("FALLBACK_MEMORY_CAPACITY_MEBIBYTES", "32000")


@pytest.fixture
def pod_manifest():
    """A `kubectl get pods -o json` item referencing one object of every kind."""
    return {
        "metadata": {"name": "web-7d9f", "namespace": "shop", "labels": {"app": "web", "tier": "frontend"}},
        "spec": {
            "volumes": [
                {"name": "data", "persistentVolumeClaim": {"claimName": "data-1"}},
                {"name": "settings", "configMap": {"name": "web-settings"}},
                {"name": "certs", "secret": {"secretName": "tls-certs"}},
                {"name": "scratch", "emptyDir": {}},
            ],
            "containers": [
                {
                    "name": "app",
                    "env": [
                        {"name": "MODE", "value": "production"},
                        {"name": "FEATURE", "valueFrom": {"configMapKeyRef": {"name": "app-config", "key": "feature"}}},
                        {"name": "DB_PASS", "valueFrom": {"secretKeyRef": {"name": "db-secret", "key": "password"}}},
                        {"name": "POD_IP", "valueFrom": {"fieldRef": {"fieldPath": "status.podIP"}}},
                    ],
                },
                {
                    "name": "sidecar",
                    "env": [
                        {"name": "FEATURE", "valueFrom": {"configMapKeyRef": {"name": "web-settings", "key": "x"}}},
                    ],
                },
            ],
        },
    }


@pytest.fixture
def namespace_listings(pod_manifest):
    """Raw kubectl list documents for one namespace snapshot."""

    def named(*names):
        return {"items": [{"metadata": {"name": name}} for name in names]}

    return {
        "pods": {
            "items": [
                pod_manifest,
                {"metadata": {"name": "worker-1", "labels": {"app": "worker"}}, "spec": {"containers": [{}]}},
            ]
        },
        "pvc": named("data-1", "data-2"),
        "configmap": named("app-config", "web-settings", "kube-root-ca.crt"),
        "secret": named("db-secret"),
        "service": {
            "items": [
                {
                    "metadata": {"name": "web"},
                    "spec": {"selector": {"app": "web"}, "ports": [{"port": 80}, {"port": 443}]},
                },
                {"metadata": {"name": "web-backend"}, "spec": {"selector": {"app": "web", "tier": "backend"}}},
                {"metadata": {"name": "headless"}, "spec": {"ports": [{"port": 9000}]}},
            ]
        },
        "ingress": {
            "items": [
                {
                    "metadata": {"name": "web"},
                    "spec": {
                        "rules": [
                            {
                                "host": "shop.example.com",
                                "http": {"paths": [{"backend": {"service": {"name": "web", "port": {"number": 80}}}}]},
                            },
                            {"http": {"paths": [{"backend": {"service": {"name": "web"}}}]}},
                        ]
                    },
                }
            ]
        },
    }
