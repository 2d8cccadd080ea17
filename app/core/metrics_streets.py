"""Street reconstruction metrics.

Collects request latency and how many reconstructed streets carried usable
geometry. In-process only; reset on restart.
"""
import time
from contextlib import contextmanager

_street_timings_ms: list[float] = []
_streets_total: int = 0
_streets_with_geometry: int = 0


@contextmanager
def record_street_latency():
    start = time.perf_counter()
    try:
        yield
    finally:
        _street_timings_ms.append((time.perf_counter() - start) * 1000.0)


def record_geometry_coverage(total: int, with_geometry: int) -> None:
    global _streets_total, _streets_with_geometry
    _streets_total += total
    _streets_with_geometry += with_geometry


def _percentiles(values: list[float]) -> dict:
    if not values:
        return {"count": 0, "p95_ms": None, "p99_ms": None}
    vals = sorted(values)
    count = len(vals)

    def _p(p: float) -> float:
        idx = int(round(p * (count - 1)))
        return vals[idx]
    return {"count": count, "p95_ms": _p(0.95), "p99_ms": _p(0.99)}


def snapshot_metrics() -> dict:
    return {
        "streets_request": _percentiles(_street_timings_ms),
        "geometry": {
            "streets": _streets_total,
            "with_geometry": _streets_with_geometry,
        },
    }
