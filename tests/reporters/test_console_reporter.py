# tests/reporters/test_console_reporter.py
"""
Unit tests for the ConsoleReporter class.
"""
from rich.console import Console

from kubescope.models.quantity import ResourceQuantity
from kubescope.models.snapshot import ClusterSnapshot, NamespaceSnapshot, PodSnapshot
from kubescope.reporters.console_reporter import ConsoleReporter


def _reporter():
    console = Console(record=True, width=200)
    return ConsoleReporter(console=console), console


def test_namespace_table_lists_pods_and_associations():
    reporter, console = _reporter()
    namespace = NamespaceSnapshot(
        id="shop",
        name="shop",
        pod_count=1,
        quantity=ResourceQuantity(cpu_millicores=250, memory_mebibytes=1.9),
        pods=[
            PodSnapshot(
                id="web-0",
                name="web-0",
                quantity=ResourceQuantity(cpu_millicores=250, memory_mebibytes=1.9),
                services=["web:80,443"],
                ingresses=["shop.example.com"],
            )
        ],
    )

    reporter.report_namespace(namespace)

    text = console.export_text()
    assert "web-0" in text
    assert "web:80,443" in text
    assert "shop.example.com" in text
    # Memory is floored for display only.
    assert "1.9" not in text


def test_empty_namespace_prints_notice():
    reporter, console = _reporter()

    reporter.report_namespace(NamespaceSnapshot(id="empty", name="empty"))

    assert "No pods found in namespace empty." in console.export_text()


def test_cluster_summary_shows_utilization():
    reporter, console = _reporter()
    cluster = ClusterSnapshot(
        id="prod",
        name="prod",
        context="prod",
        quantity=ResourceQuantity(cpu_millicores=2000, memory_mebibytes=4096),
        capacity=ResourceQuantity(cpu_millicores=8000, memory_mebibytes=16384),
        namespaces=[
            NamespaceSnapshot(
                id="shop", name="shop", pod_count=3, quantity=ResourceQuantity(cpu_millicores=2000, memory_mebibytes=4096)
            )
        ],
    )

    reporter.report_cluster(cluster)

    text = console.export_text()
    assert "2000m / 8000m (25% utilized)" in text
    assert "4096Mi / 16384Mi (25% utilized)" in text
    assert "shop" in text


def test_cluster_with_zero_capacity_does_not_divide():
    reporter, console = _reporter()

    reporter.report_cluster(ClusterSnapshot(id="x", name="x", context="x"))

    text = console.export_text()
    assert "(- utilized)" in text
    assert "No namespaces to report." in text
