from __future__ import annotations

from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Nothing(BaseModel):
    model_config = {"frozen": True}
    kind: Literal["none"] = "none"


class Some(BaseModel, Generic[T]):
    model_config = {"frozen": True}
    kind: Literal["some"] = "some"
    value: T


Option = Annotated[Nothing | Some[T], Field(discriminator="kind")]

NOTHING = Nothing()


def from_optional(value: T | None) -> Option[T]:
    """Wrap a Python optional, mapping ``None`` to ``Nothing``."""
    if value is None:
        return NOTHING
    return Some(value=value)


def to_optional(opt: Option[T]) -> T | None:
    match opt:
        case Some(value=v):
            return v
        case Nothing():
            return None
        case _:
            raise ValueError(f"Unknown option: {opt}")


def unwrap_or(opt: Option[T], default: Any) -> Any:
    match opt:
        case Some(value=v):
            return v
        case Nothing():
            return default
        case _:
            raise ValueError(f"Unknown option: {opt}")


def is_some(opt: Option[T]) -> bool:
    match opt:
        case Some():
            return True
        case Nothing():
            return False
        case _:
            raise ValueError(f"Unknown option: {opt}")
