from typing import Any

from chainstd.interval.models import (
    Finite,
    Interval,
    IntervalBound,
    NegativeInfinity,
    PositiveInfinity,
)


def _above_lower(bound: IntervalBound, element: Any) -> bool:
    match bound.bound_type:
        case NegativeInfinity():
            return True
        case Finite(value=lb):
            if bound.is_inclusive:
                return element >= lb
            return element > lb
        case PositiveInfinity():
            return False
        case _:
            raise ValueError(f"Unknown bound type: {bound.bound_type}")


def _below_upper(bound: IntervalBound, element: Any) -> bool:
    match bound.bound_type:
        case NegativeInfinity():
            return False
        case Finite(value=ub):
            if bound.is_inclusive:
                return element <= ub
            return element < ub
        case PositiveInfinity():
            return True
        case _:
            raise ValueError(f"Unknown bound type: {bound.bound_type}")


def contains(interval: Interval, element: Any) -> bool:
    """Whether ``element`` lies within both bounds of ``interval``.

    Both sides are tested independently, so an interval whose lower bound
    is positive infinity, or whose upper bound is negative infinity,
    contains nothing.
    """
    lower_ok = _above_lower(interval.lower_bound, element)
    upper_ok = _below_upper(interval.upper_bound, element)
    return lower_ok and upper_ok
