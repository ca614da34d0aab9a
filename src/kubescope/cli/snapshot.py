# src/kubescope/cli/snapshot.py
"""
Implements the `contexts`, `cluster` and `namespace` commands.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from typing_extensions import Annotated

from ..collectors.kubectl_collector import KubectlCollector
from ..core.exceptions import KubeScopeError
from ..core.service import DashboardService
from ..exporters.json_exporter import JSONExporter
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)

KubeconfigOption = Annotated[
    Optional[Path],
    typer.Option("--kubeconfig", help="Path to the kubeconfig file. Defaults to kubectl's own resolution."),
]
OutputOption = Annotated[
    Optional[str],
    typer.Option("--output", help="Output format (json). If set, writes to a file instead of the console."),
]
OutputPathOption = Annotated[
    Optional[Path],
    typer.Option(
        "--output-path",
        help="Specify output file path. Default: './data/kubescope-<id>.json'",
        dir_okay=False,
        writable=True,
    ),
]


def _make_service(kubeconfig: Optional[Path]) -> DashboardService:
    return DashboardService(KubectlCollector(kubeconfig=str(kubeconfig) if kubeconfig else None))


def _check_output_format(output_format: Optional[str]):
    if output_format is not None and output_format.lower() != "json":
        logger.error(f"Invalid output format '{output_format}'.")
        raise typer.Exit(code=1)


async def handle_export(data: Dict[str, Any], output_path: Optional[Path]):
    """Handles writing the snapshot to a JSON file."""
    exporter = JSONExporter(directory=str(Path.cwd() / "data"))
    path = str(output_path) if output_path else exporter.default_path(data)
    try:
        written_path = await exporter.export(data, path)
    except OSError as e:
        logger.error(f"Failed to export snapshot to {path}: {e}")
        raise typer.Exit(code=1)
    logger.info(f"Successfully exported snapshot to {written_path}")
    print(f"Snapshot exported to: {written_path}", file=sys.stderr)


def _run(coro):
    try:
        return asyncio.run(coro)
    except KubeScopeError as e:
        logger.error(f"{type(e).__name__}: {e}")
        raise typer.Exit(code=1)


def contexts(kubeconfig: KubeconfigOption = None):
    """
    List the contexts declared in the kubeconfig.
    """
    for context in _run(_make_service(kubeconfig).get_contexts()):
        marker = "*" if context.current else " "
        typer.echo(f"{marker} {context.name}\t{context.cluster}\t{context.user}\t{context.namespace}")


def cluster(
    context: Annotated[str, typer.Option("--context", help="Context to inspect.")],
    kubeconfig: KubeconfigOption = None,
    output_format: OutputOption = None,
    output_path: OutputPathOption = None,
):
    """
    Show cluster usage, capacity and a summary of every namespace.
    """
    _check_output_format(output_format)
    snapshot = _run(_make_service(kubeconfig).get_cluster_info(context))
    if output_format:
        asyncio.run(handle_export(snapshot.to_api(), output_path))
    else:
        ConsoleReporter().report_cluster(snapshot)


def namespace(
    name: Annotated[str, typer.Argument(help="Namespace to inspect.")],
    context: Annotated[str, typer.Option("--context", help="Context to inspect.")],
    kubeconfig: KubeconfigOption = None,
    output_format: OutputOption = None,
    output_path: OutputPathOption = None,
):
    """
    Show the pods of a namespace with their usage and associated objects.
    """
    _check_output_format(output_format)
    snapshot = _run(_make_service(kubeconfig).get_namespace_details(context, name))
    if output_format:
        asyncio.run(handle_export(snapshot.to_api(), output_path))
    else:
        ConsoleReporter().report_namespace(snapshot)
