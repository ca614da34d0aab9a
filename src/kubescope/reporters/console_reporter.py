# src/kubescope/reporters/console_reporter.py
"""
A reporter that displays snapshots as formatted tables in the console.
"""

import logging

from rich.console import Console
from rich.table import Table

from ..models.snapshot import ClusterSnapshot, NamespaceSnapshot
from ..utils.quantity import display_mebibytes
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)


def _percent(used: float, total: float) -> str:
    if not total:
        return "-"
    return f"{round(used / total * 100)}%"


def _join(names) -> str:
    return "\n".join(names) if names else "-"


class ConsoleReporter(BaseReporter):
    """
    Renders KubeScope snapshots to the console using the 'rich' library.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report_cluster(self, cluster: ClusterSnapshot):
        used, capacity = cluster.quantity, cluster.capacity
        self.console.print(f"[bold]Cluster[/bold] {cluster.name} (context: {cluster.context})")
        self.console.print(
            f"CPU: {used.cpu_millicores}m / {capacity.cpu_millicores}m "
            f"({_percent(used.cpu_millicores, capacity.cpu_millicores)} utilized)"
        )
        self.console.print(
            f"Memory: {display_mebibytes(used.memory_mebibytes)}Mi / {display_mebibytes(capacity.memory_mebibytes)}Mi "
            f"({_percent(used.memory_mebibytes, capacity.memory_mebibytes)} utilized)"
        )

        if not cluster.namespaces:
            self.console.print("No namespaces to report.", style="yellow")
            return

        table = Table(title="Namespaces", header_style="bold magenta")
        table.add_column("Namespace", style="cyan")
        table.add_column("Pods", justify="right")
        table.add_column("CPU (m)", style="blue", justify="right")
        table.add_column("Memory (Mi)", style="blue", justify="right")

        for namespace in sorted(cluster.namespaces, key=lambda ns: ns.quantity.cpu_millicores, reverse=True):
            table.add_row(
                namespace.name,
                str(namespace.pod_count),
                str(namespace.quantity.cpu_millicores),
                str(display_mebibytes(namespace.quantity.memory_mebibytes)),
            )
        self.console.print(table)

    def report_namespace(self, namespace: NamespaceSnapshot):
        if not namespace.pods:
            self.console.print(f"No pods found in namespace {namespace.name}.", style="yellow")
            return

        table = Table(
            title=f"Namespace {namespace.name}: {namespace.pod_count} pods, "
            f"{namespace.quantity.cpu_millicores}m CPU, {display_mebibytes(namespace.quantity.memory_mebibytes)}Mi",
            header_style="bold magenta",
            show_lines=True,
        )
        table.add_column("Pod", style="cyan")
        table.add_column("CPU (m)", style="blue", justify="right")
        table.add_column("Memory (Mi)", style="blue", justify="right")
        table.add_column("PVCs")
        table.add_column("ConfigMaps")
        table.add_column("Secrets")
        table.add_column("Services", style="green")
        table.add_column("Ingresses", style="green")

        for pod in namespace.pods:
            table.add_row(
                pod.name,
                str(pod.quantity.cpu_millicores),
                str(display_mebibytes(pod.quantity.memory_mebibytes)),
                _join(pod.pvcs),
                _join(pod.config_maps),
                _join(pod.secrets),
                _join(pod.services),
                _join(pod.ingresses),
            )
        self.console.print(table)
