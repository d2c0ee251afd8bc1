from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class NegativeInfinity(BaseModel):
    model_config = {"frozen": True}
    kind: Literal["negative_infinity"] = "negative_infinity"


class Finite(BaseModel):
    model_config = {"frozen": True}
    kind: Literal["finite"] = "finite"
    # Any totally ordered value; integer time units in practice.
    value: Any


class PositiveInfinity(BaseModel):
    model_config = {"frozen": True}
    kind: Literal["positive_infinity"] = "positive_infinity"


class BoundKind(str, Enum):
    NEGATIVE_INFINITY = NegativeInfinity.model_fields["kind"].default
    FINITE = Finite.model_fields["kind"].default
    POSITIVE_INFINITY = PositiveInfinity.model_fields["kind"].default


IntervalBoundType = Annotated[
    NegativeInfinity | Finite | PositiveInfinity,
    Field(discriminator="kind"),
]


class IntervalBound(BaseModel):
    model_config = {"frozen": True}
    bound_type: IntervalBoundType
    is_inclusive: bool


class Interval(BaseModel):
    """Range of ordered values between two possibly infinite bounds.

    Bounds are not checked against each other: a lower bound above the
    upper bound is accepted and simply contains nothing.
    """

    model_config = {"frozen": True}
    lower_bound: IntervalBound
    upper_bound: IntervalBound
