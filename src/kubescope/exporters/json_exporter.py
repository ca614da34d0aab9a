import json
import os
from typing import Any, Dict, Optional

import aiofiles


class JSONExporter:
    """Writes a snapshot in its dashboard JSON shape."""

    def __init__(self, directory: str = "data"):
        self.directory = directory

    def default_path(self, snapshot: Dict[str, Any]) -> str:
        """`<directory>/kubescope-<id>.json`, or `kubescope-snapshot.json` for snapshots without an id."""
        snapshot_id = str(snapshot.get("id") or "snapshot")
        # Context names may contain '/' (e.g. EKS ARNs).
        safe_id = snapshot_id.replace(os.sep, "_").replace("/", "_")
        return os.path.join(self.directory, f"kubescope-{safe_id}.json")

    async def export(self, snapshot: Dict[str, Any], path: Optional[str] = None) -> str:
        out_path = path or self.default_path(snapshot)
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        async with aiofiles.open(out_path, "w", encoding="utf-8") as fh:
            await fh.write(json.dumps(snapshot, ensure_ascii=False, indent=2))
        return out_path
