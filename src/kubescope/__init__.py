# src/kubescope/__init__.py
"""
KubeScope: resource usage and topology snapshots for Kubernetes namespaces.
"""

__version__ = "0.3.0"
