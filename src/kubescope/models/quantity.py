# src/kubescope/models/quantity.py
"""
Normalized resource quantities.

Every CPU figure in KubeScope is expressed in millicores and every memory
figure in mebibytes. Instances are produced by `kubescope.utils.quantity`
and combined by plain addition.
"""

from pydantic import BaseModel, ConfigDict, Field


class ResourceQuantity(BaseModel):
    """A CPU/memory pair in millicores and mebibytes."""

    model_config = ConfigDict(frozen=True)

    cpu_millicores: int = Field(0, ge=0, description="CPU in millicores.")
    memory_mebibytes: float = Field(0.0, ge=0, description="Memory in mebibytes (2^20 bytes).")

    @classmethod
    def zero(cls) -> "ResourceQuantity":
        return cls(cpu_millicores=0, memory_mebibytes=0.0)

    def __add__(self, other: "ResourceQuantity") -> "ResourceQuantity":
        if not isinstance(other, ResourceQuantity):
            return NotImplemented
        return ResourceQuantity(
            cpu_millicores=self.cpu_millicores + other.cpu_millicores,
            memory_mebibytes=self.memory_mebibytes + other.memory_mebibytes,
        )


class MetricSample(BaseModel):
    """
    One line of `kubectl top` output, before unit decoding.
    """

    model_config = ConfigDict(frozen=True)

    subject_name: str = Field(..., description="Pod or node name in the first column.")
    raw_cpu: str = Field(..., description="CPU column as printed, e.g. '250m' or '2'.")
    raw_memory: str = Field(..., description="Memory column as printed, e.g. '128Mi'.")
