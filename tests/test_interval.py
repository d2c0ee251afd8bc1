import pytest
from pydantic import ValidationError

from chainstd.interval.eval import contains
from chainstd.interval.models import (
    Finite,
    Interval,
    IntervalBound,
    NegativeInfinity,
    PositiveInfinity,
)


def _bound(bound_type, is_inclusive: bool = True) -> IntervalBound:
    return IntervalBound(bound_type=bound_type, is_inclusive=is_inclusive)


def _interval(lower: IntervalBound, upper: IntervalBound) -> Interval:
    return Interval(lower_bound=lower, upper_bound=upper)


class TestContainsScenarios:
    def test_inclusive_lower_bound_contains_itself(self) -> None:
        window = _interval(
            _bound(Finite(value=14), True),
            _bound(PositiveInfinity(), False),
        )
        assert contains(window, 14) is True
        assert contains(window, 13) is False
        assert contains(window, 10**12) is True

    def test_exclusive_lower_bound_excludes_itself(self) -> None:
        window = _interval(
            _bound(Finite(value=14), False),
            _bound(PositiveInfinity(), False),
        )
        assert contains(window, 14) is False
        assert contains(window, 15) is True

    def test_finite_upper_bound(self) -> None:
        inclusive = _interval(
            _bound(NegativeInfinity()), _bound(Finite(value=5), True)
        )
        exclusive = _interval(
            _bound(NegativeInfinity()), _bound(Finite(value=5), False)
        )
        assert contains(inclusive, 5) is True
        assert contains(exclusive, 5) is False
        assert contains(exclusive, 4) is True
        assert contains(exclusive, -(10**12)) is True

    def test_closed_range(self) -> None:
        window = _interval(
            _bound(Finite(value=1), True), _bound(Finite(value=3), True)
        )
        assert [contains(window, x) for x in range(5)] == [
            False,
            True,
            True,
            True,
            False,
        ]

    def test_open_range(self) -> None:
        window = _interval(
            _bound(Finite(value=1), False), _bound(Finite(value=3), False)
        )
        assert [contains(window, x) for x in range(5)] == [
            False,
            False,
            True,
            False,
            False,
        ]

    def test_everything(self) -> None:
        window = _interval(
            _bound(NegativeInfinity(), False),
            _bound(PositiveInfinity(), False),
        )
        assert contains(window, 0) is True
        assert contains(window, -(10**18)) is True

    def test_generic_ordered_values(self) -> None:
        window = _interval(
            _bound(Finite(value="b"), True), _bound(Finite(value="d"), False)
        )
        assert contains(window, "c") is True
        assert contains(window, "d") is False
        assert contains(window, "a") is False


class TestDegenerateIntervals:
    @pytest.mark.parametrize("is_inclusive", [True, False])
    def test_positive_infinity_lower_bound_is_empty(
        self, is_inclusive: bool
    ) -> None:
        window = _interval(
            _bound(PositiveInfinity(), is_inclusive),
            _bound(PositiveInfinity(), True),
        )
        assert contains(window, 0) is False
        assert contains(window, 10**18) is False

    @pytest.mark.parametrize("is_inclusive", [True, False])
    def test_negative_infinity_upper_bound_is_empty(
        self, is_inclusive: bool
    ) -> None:
        window = _interval(
            _bound(NegativeInfinity(), True),
            _bound(NegativeInfinity(), is_inclusive),
        )
        assert contains(window, 0) is False
        assert contains(window, -(10**18)) is False

    def test_inverted_finite_bounds_accepted_and_empty(self) -> None:
        window = _interval(
            _bound(Finite(value=10), True), _bound(Finite(value=2), True)
        )
        assert [contains(window, x) for x in range(0, 13)] == [False] * 13

    def test_single_point(self) -> None:
        window = _interval(
            _bound(Finite(value=7), True), _bound(Finite(value=7), True)
        )
        assert contains(window, 7) is True
        half_open = _interval(
            _bound(Finite(value=7), True), _bound(Finite(value=7), False)
        )
        assert contains(half_open, 7) is False


class TestIntervalModels:
    def test_from_json(self) -> None:
        window = Interval.model_validate(
            {
                "lower_bound": {
                    "bound_type": {"kind": "finite", "value": 14},
                    "is_inclusive": True,
                },
                "upper_bound": {
                    "bound_type": {"kind": "positive_infinity"},
                    "is_inclusive": False,
                },
            }
        )
        assert window.lower_bound.bound_type == Finite(value=14)
        assert isinstance(window.upper_bound.bound_type, PositiveInfinity)

    def test_round_trip(self) -> None:
        window = _interval(
            _bound(NegativeInfinity()), _bound(Finite(value=3), False)
        )
        assert Interval.model_validate_json(window.model_dump_json()) == window

    def test_finite_requires_value(self) -> None:
        with pytest.raises(ValidationError):
            IntervalBound.model_validate(
                {"bound_type": {"kind": "finite"}, "is_inclusive": True}
            )

    def test_unknown_bound_kind(self) -> None:
        with pytest.raises(ValidationError):
            IntervalBound.model_validate(
                {"bound_type": {"kind": "sideways"}, "is_inclusive": True}
            )

    def test_frozen(self) -> None:
        bound = _bound(Finite(value=1))
        with pytest.raises(ValidationError):
            bound.is_inclusive = False  # type: ignore[misc]

    def test_unknown_bound_type_raises(self) -> None:
        window = Interval.model_construct(
            lower_bound=IntervalBound.model_construct(
                bound_type="bogus", is_inclusive=True
            ),
            upper_bound=_bound(PositiveInfinity()),
        )
        with pytest.raises(ValueError, match="Unknown bound type"):
            contains(window, 1)
