# src/kubescope/collectors/kubectl_collector.py
"""
Runs `kubectl` against one kubeconfig file and returns its raw output.

This is the only module that starts processes. It hands structured listings
and raw `kubectl top` text to the core, which does all interpretation.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

from ..core.config import config
from ..core.exceptions import KubectlError
from ..models.snapshot import KubeContext

logger = logging.getLogger(__name__)


class KubectlCollector:
    """
    Thin async wrapper around the kubectl binary.

    Commands are started with `asyncio.create_subprocess_exec`, never through a
    shell, so context and namespace names are passed as plain arguments.
    """

    def __init__(
        self,
        kubeconfig: Optional[str] = None,
        kubectl_path: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.kubeconfig = kubeconfig
        self.kubectl_path = kubectl_path or config.KUBECTL_PATH
        self.timeout = timeout or config.KUBECTL_TIMEOUT_SECONDS

    def _command(self, *args: str) -> List[str]:
        command = [self.kubectl_path, *args]
        if self.kubeconfig:
            command.append(f"--kubeconfig={self.kubeconfig}")
        return command

    async def _run(self, *args: str) -> str:
        """Runs kubectl and returns stdout; raises KubectlError on any failure."""
        command = self._command(*args)
        printable = " ".join(command)
        logger.debug(f"Running: {printable}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise KubectlError(f"Could not start kubectl: {e}", command=printable) from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise KubectlError(f"kubectl timed out after {self.timeout}s", command=printable) from e

        err_text = stderr.decode("utf-8", errors="replace").strip()
        if process.returncode != 0:
            raise KubectlError(
                err_text or f"kubectl exited with code {process.returncode}",
                command=printable,
                stderr=err_text,
            )
        if err_text:
            logger.warning(f"kubectl wrote to stderr for '{printable}': {err_text}")
        return stdout.decode("utf-8", errors="replace")

    async def _run_json(self, *args: str) -> Dict[str, Any]:
        output = await self._run(*args, "-o", "json")
        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise KubectlError(f"kubectl returned invalid JSON: {e}", command=" ".join(self._command(*args))) from e

    async def use_context(self, context: str) -> None:
        await self._run("config", "use-context", context)

    async def list_contexts(self) -> List[KubeContext]:
        """Reads the contexts declared in the kubeconfig."""
        data = await self._run_json("config", "view")
        current = data.get("current-context") or ""
        contexts = []
        for entry in data.get("contexts") or []:
            name = entry.get("name")
            if not name:
                continue
            details = entry.get("context") or {}
            contexts.append(
                KubeContext(
                    name=name,
                    cluster=details.get("cluster") or "",
                    user=details.get("user") or "",
                    namespace=details.get("namespace") or "default",
                    current=name == current,
                )
            )
        return contexts

    async def list_namespaces(self) -> List[str]:
        data = await self._run_json("get", "namespaces")
        return [item["metadata"]["name"] for item in data.get("items") or [] if item.get("metadata", {}).get("name")]

    async def list_objects(self, resource: str, namespace: str) -> Dict[str, Any]:
        """Returns the raw `kubectl get <resource> -o json` list document."""
        return await self._run_json("get", resource, "-n", namespace)

    async def list_optional_objects(self, resource: str, namespace: str) -> Dict[str, Any]:
        """Like list_objects, but a failed listing degrades to an empty list."""
        try:
            return await self.list_objects(resource, namespace)
        except KubectlError as e:
            logger.warning(f"Could not get {resource} for namespace {namespace}: {e}")
            return {"items": []}

    async def _top(self, *args: str) -> Optional[str]:
        try:
            return await self._run("top", *args, "--no-headers")
        except KubectlError as e:
            logger.warning(f"Metrics unavailable for 'kubectl top {' '.join(args)}': {e}")
            return None

    async def top_pods(self, namespace: str) -> Optional[str]:
        """Returns `kubectl top pods` text, or None when the metrics API is unavailable."""
        return await self._top("pods", "-n", namespace)

    async def top_nodes(self) -> Optional[str]:
        return await self._top("nodes")
