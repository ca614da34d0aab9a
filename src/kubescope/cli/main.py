# src/kubescope/cli/main.py
"""
Top-level `kubescope` command: logging setup, `version`, and the snapshot
commands from `snapshot.py`.
"""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from .. import __version__
from ..core.config import config
from . import snapshot

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="kubescope",
    help="Inspect resource usage and object topology of Kubernetes namespaces.",
    add_completion=False,
)


@app.callback()
def main(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Overrides LOG_LEVEL for this invocation (e.g. DEBUG)."),
    ] = None,
):
    """
    Snapshots of a cluster as seen through kubectl.
    """
    level = (log_level or config.LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        typer.echo(f"Unknown log level '{log_level}'.", err=True)
        raise typer.Exit(code=2)
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


@app.command()
def version():
    """
    Show the version of KubeScope.
    """
    typer.echo(f"KubeScope version: {__version__}")


app.command("contexts")(snapshot.contexts)
app.command("cluster")(snapshot.cluster)
app.command("namespace")(snapshot.namespace)


if __name__ == "__main__":
    app()
