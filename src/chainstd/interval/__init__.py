"""interval: bounded ranges with open, closed or infinite endpoints."""

from chainstd.interval.eval import contains
from chainstd.interval.models import (
    BoundKind,
    Finite,
    Interval,
    IntervalBound,
    IntervalBoundType,
    NegativeInfinity,
    PositiveInfinity,
)
from chainstd.interval.ops import (
    after,
    before,
    between,
    compare_bound_types,
    entirely_after,
    entirely_before,
    entirely_between,
    everything,
    hull,
    intersection,
    render_interval,
)

__all__ = [
    "BoundKind",
    "Finite",
    "Interval",
    "IntervalBound",
    "IntervalBoundType",
    "NegativeInfinity",
    "PositiveInfinity",
    "after",
    "before",
    "between",
    "compare_bound_types",
    "contains",
    "entirely_after",
    "entirely_before",
    "entirely_between",
    "everything",
    "hull",
    "intersection",
    "render_interval",
]
