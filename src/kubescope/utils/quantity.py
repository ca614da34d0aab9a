# src/kubescope/utils/quantity.py
"""
Decodes the CPU and memory columns printed by `kubectl top` into
ResourceQuantity values (millicores, mebibytes).

All decoding in KubeScope goes through this module so that one rounding
policy applies everywhere: values are never rounded while parsing or
summing, and are floored only when rendered for display.
"""

import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Optional

from ..core.exceptions import QuantityDecodeError
from ..models.quantity import MetricSample, ResourceQuantity

logger = logging.getLogger(__name__)

ROUNDING_POLICY = "floor-at-display/v1"

BYTES_PER_MEBIBYTE = 1024 * 1024

# Longest suffix first; matching is case-sensitive.
_MEMORY_SUFFIXES = (
    ("Gi", Decimal(1024)),
    ("Mi", Decimal(1)),
    ("Ki", Decimal(1) / Decimal(1024)),
    ("m", Decimal(1) / Decimal(BYTES_PER_MEBIBYTE)),
)
_BYTES_FACTOR = Decimal(1) / Decimal(BYTES_PER_MEBIBYTE)


def _decode(number: str, factor: Decimal, raw: str, field: str, strict: bool) -> Optional[Decimal]:
    """Scales `number` by `factor`; None when the result is not a finite, non-negative float."""
    try:
        value = Decimal(number)
        scaled = value * factor
        valid = value.is_finite() and value >= 0 and math.isfinite(float(scaled))
    except (ArithmeticError, ValueError):
        valid = False
    if not valid:
        if strict:
            raise QuantityDecodeError(f"Cannot decode {field} quantity '{raw}'.")
        logger.debug(f"Could not decode {field} quantity '{raw}'; using 0.")
        return None
    return scaled


def parse_cpu(raw: Optional[str], strict: bool = False) -> int:
    """Converts a CPU column ('250m', '2') to millicores."""
    if raw is None:
        if strict:
            raise QuantityDecodeError("Missing CPU quantity.")
        return 0
    raw = raw.strip()
    if raw.endswith("m"):
        value = _decode(raw[:-1], Decimal(1), raw, "CPU", strict)
    else:
        # No suffix: whole cores.
        value = _decode(raw, Decimal(1000), raw, "CPU", strict)
    return int(value) if value is not None else 0


def parse_memory(raw: Optional[str], strict: bool = False) -> float:
    """Converts a memory column ('128Mi', '1Gi', '2048Ki', '1048576') to mebibytes."""
    if raw is None:
        if strict:
            raise QuantityDecodeError("Missing memory quantity.")
        return 0.0
    raw = raw.strip()
    for suffix, factor in _MEMORY_SUFFIXES:
        if raw.endswith(suffix):
            value = _decode(raw[: -len(suffix)], factor, raw, "memory", strict)
            break
    else:
        # No suffix: bytes.
        value = _decode(raw, _BYTES_FACTOR, raw, "memory", strict)
    return float(value) if value is not None else 0.0


def parse_metric_line(line: str) -> Optional[MetricSample]:
    """
    Splits one `kubectl top` line into name, CPU and memory columns.

    Lines with fewer than three columns (blank lines, stray headers) yield None;
    columns past the third (such as CPU% and MEMORY%) are ignored.
    """
    parts = line.split()
    if len(parts) < 3:
        return None
    return MetricSample(subject_name=parts[0], raw_cpu=parts[1], raw_memory=parts[2])


def parse_metrics_output(output: Optional[str]) -> List[MetricSample]:
    """Parses a multi-line `kubectl top ... --no-headers` block."""
    if not output:
        return []
    samples = []
    for line in output.splitlines():
        sample = parse_metric_line(line)
        if sample is not None:
            samples.append(sample)
    return samples


def to_resource_quantity(raw_cpu: str, raw_memory: str, strict: bool = False) -> ResourceQuantity:
    return ResourceQuantity(
        cpu_millicores=parse_cpu(raw_cpu, strict=strict),
        memory_mebibytes=parse_memory(raw_memory, strict=strict),
    )


def sample_quantity(sample: MetricSample, strict: bool = False) -> ResourceQuantity:
    return to_resource_quantity(sample.raw_cpu, sample.raw_memory, strict=strict)


def aggregate(quantities: Iterable[ResourceQuantity]) -> ResourceQuantity:
    """Sums quantities field by field. An empty sequence sums to zero."""
    return sum(quantities, ResourceQuantity.zero())


def display_mebibytes(value: float) -> int:
    """Floors a mebibyte figure for display; the only place rounding happens."""
    return math.floor(value)
