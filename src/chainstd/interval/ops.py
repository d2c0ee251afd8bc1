from typing import Any

from chainstd.interval.models import (
    BoundKind,
    Finite,
    Interval,
    IntervalBound,
    IntervalBoundType,
    NegativeInfinity,
    PositiveInfinity,
)

_KIND_RANK: dict[BoundKind, int] = {
    BoundKind.NEGATIVE_INFINITY: 0,
    BoundKind.FINITE: 1,
    BoundKind.POSITIVE_INFINITY: 2,
}


def _bound(bound_type: IntervalBoundType, is_inclusive: bool) -> IntervalBound:
    return IntervalBound(bound_type=bound_type, is_inclusive=is_inclusive)


def everything() -> Interval:
    return Interval(
        lower_bound=_bound(NegativeInfinity(), True),
        upper_bound=_bound(PositiveInfinity(), True),
    )


def after(value: Any) -> Interval:
    """All values from ``value`` (included) upwards."""
    return Interval(
        lower_bound=_bound(Finite(value=value), True),
        upper_bound=_bound(PositiveInfinity(), True),
    )


def entirely_after(value: Any) -> Interval:
    return Interval(
        lower_bound=_bound(Finite(value=value), False),
        upper_bound=_bound(PositiveInfinity(), True),
    )


def before(value: Any) -> Interval:
    """All values up to ``value`` (included)."""
    return Interval(
        lower_bound=_bound(NegativeInfinity(), True),
        upper_bound=_bound(Finite(value=value), True),
    )


def entirely_before(value: Any) -> Interval:
    return Interval(
        lower_bound=_bound(NegativeInfinity(), True),
        upper_bound=_bound(Finite(value=value), False),
    )


def between(lower: Any, upper: Any) -> Interval:
    return Interval(
        lower_bound=_bound(Finite(value=lower), True),
        upper_bound=_bound(Finite(value=upper), True),
    )


def entirely_between(lower: Any, upper: Any) -> Interval:
    return Interval(
        lower_bound=_bound(Finite(value=lower), False),
        upper_bound=_bound(Finite(value=upper), False),
    )


def _rank(bound_type: IntervalBoundType) -> int:
    match bound_type:
        case NegativeInfinity():
            kind = BoundKind.NEGATIVE_INFINITY
        case Finite():
            kind = BoundKind.FINITE
        case PositiveInfinity():
            kind = BoundKind.POSITIVE_INFINITY
        case _:
            raise ValueError(f"Unknown bound type: {bound_type}")
    return _KIND_RANK[kind]


def compare_bound_types(a: IntervalBoundType, b: IntervalBoundType) -> int:
    """Three-way compare: -inf < every finite value < +inf."""
    rank_a = _rank(a)
    rank_b = _rank(b)
    if rank_a != rank_b:
        return -1 if rank_a < rank_b else 1
    match a, b:
        case Finite(value=x), Finite(value=y):
            if x < y:
                return -1
            if x > y:
                return 1
            return 0
        case _:
            return 0


def _pick(
    a: IntervalBound, b: IntervalBound, *, larger: bool, inclusive_wins: bool
) -> IntervalBound:
    order = compare_bound_types(a.bound_type, b.bound_type)
    if order == 0:
        if inclusive_wins:
            is_inclusive = a.is_inclusive or b.is_inclusive
        else:
            is_inclusive = a.is_inclusive and b.is_inclusive
        return _bound(a.bound_type, is_inclusive)
    if (order > 0) == larger:
        return a
    return b


def intersection(a: Interval, b: Interval) -> Interval:
    """Values contained in both ``a`` and ``b``.

    On equal bounds the exclusive one wins. Disjoint inputs give an
    inverted interval, which contains nothing.
    """
    return Interval(
        lower_bound=_pick(
            a.lower_bound, b.lower_bound, larger=True, inclusive_wins=False
        ),
        upper_bound=_pick(
            a.upper_bound, b.upper_bound, larger=False, inclusive_wins=False
        ),
    )


def hull(a: Interval, b: Interval) -> Interval:
    """Smallest interval containing both ``a`` and ``b``."""
    return Interval(
        lower_bound=_pick(
            a.lower_bound, b.lower_bound, larger=False, inclusive_wins=True
        ),
        upper_bound=_pick(
            a.upper_bound, b.upper_bound, larger=True, inclusive_wins=True
        ),
    )


def _render_bound_type(bound_type: IntervalBoundType) -> str:
    match bound_type:
        case NegativeInfinity():
            return "-inf"
        case Finite(value=v):
            return str(v)
        case PositiveInfinity():
            return "+inf"
        case _:
            raise ValueError(f"Unknown bound type: {bound_type}")


def render_interval(interval: Interval) -> str:
    lower, upper = interval.lower_bound, interval.upper_bound
    opening = "[" if lower.is_inclusive else "("
    closing = "]" if upper.is_inclusive else ")"
    return (
        f"{opening}{_render_bound_type(lower.bound_type)}, "
        f"{_render_bound_type(upper.bound_type)}{closing}"
    )
