# src/kubescope/core/config.py

import logging
import os

from dotenv import load_dotenv

from kubescope.models.quantity import ResourceQuantity
from kubescope.models.snapshot import CapacityPolicy

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)


def _get_bool(key: str, default: str) -> bool:
    return os.getenv(key, default).lower() in ("true", "1", "t", "y", "yes")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- kubectl variables ---
    KUBECTL_PATH = os.getenv("KUBECTL_PATH", "kubectl")
    KUBECTL_TIMEOUT_SECONDS = float(os.getenv("KUBECTL_TIMEOUT_SECONDS", "30"))
    # Kubeconfig files handed to the API must live under this directory.
    KUBECONFIG_DIR = os.getenv("KUBECONFIG_DIR", os.path.join(os.getcwd(), "tmp"))

    # --- API variables ---
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))

    # --- Quantity parsing ---
    STRICT_QUANTITY_PARSING = _get_bool("STRICT_QUANTITY_PARSING", "False")

    # Capacity and usage defaults are resolved at access time so tests and
    # long-running processes see env changes made after import.
    @property
    def NODE_CPU_CAPACITY_MILLICORES(self) -> int:
        return int(os.getenv("NODE_CPU_CAPACITY_MILLICORES", "4000"))

    @property
    def NODE_MEMORY_CAPACITY_MEBIBYTES(self) -> float:
        return float(os.getenv("NODE_MEMORY_CAPACITY_MEBIBYTES", "16384"))

    @property
    def FALLBACK_CPU_CAPACITY_MILLICORES(self) -> int:
        return int(os.getenv("FALLBACK_CPU_CAPACITY_MILLICORES", "8000"))

    @property
    def FALLBACK_MEMORY_CAPACITY_MEBIBYTES(self) -> float:
        return float(os.getenv("FALLBACK_MEMORY_CAPACITY_MEBIBYTES", "32000"))

    def capacity_policy(self) -> CapacityPolicy:
        """Builds the capacity estimate used when assembling cluster snapshots."""
        return CapacityPolicy(
            per_node=ResourceQuantity(
                cpu_millicores=self.NODE_CPU_CAPACITY_MILLICORES,
                memory_mebibytes=self.NODE_MEMORY_CAPACITY_MEBIBYTES,
            ),
            fallback=ResourceQuantity(
                cpu_millicores=self.FALLBACK_CPU_CAPACITY_MILLICORES,
                memory_mebibytes=self.FALLBACK_MEMORY_CAPACITY_MEBIBYTES,
            ),
        )

    def validate_instance(self):
        if self.KUBECTL_TIMEOUT_SECONDS <= 0:
            raise ValueError("KUBECTL_TIMEOUT_SECONDS must be greater than 0.")
        if not 0 < self.API_PORT < 65536:
            raise ValueError("API_PORT must be between 1 and 65535.")
        for name in (
            "NODE_CPU_CAPACITY_MILLICORES",
            "NODE_MEMORY_CAPACITY_MEBIBYTES",
            "FALLBACK_CPU_CAPACITY_MILLICORES",
            "FALLBACK_MEMORY_CAPACITY_MEBIBYTES",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative.")
        if not isinstance(logging.getLevelName(self.LOG_LEVEL.upper()), int):
            raise ValueError(f"LOG_LEVEL '{self.LOG_LEVEL}' is not a valid logging level.")


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
