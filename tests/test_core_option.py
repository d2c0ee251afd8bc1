import pytest
from pydantic import TypeAdapter, ValidationError

from chainstd.core.option import (
    NOTHING,
    Nothing,
    Option,
    Some,
    from_optional,
    is_some,
    to_optional,
    unwrap_or,
)


class TestOptionModels:
    def test_some_holds_value(self) -> None:
        opt = Some(value=3)
        assert opt.kind == "some"
        assert opt.value == 3

    def test_structural_equality(self) -> None:
        assert Some(value=[1, 2]) == Some(value=[1, 2])
        assert Some(value=1) != Some(value=2)
        assert Nothing() == NOTHING
        assert Some(value=None) != NOTHING

    def test_frozen(self) -> None:
        opt = Some(value=1)
        with pytest.raises(ValidationError):
            opt.value = 2  # type: ignore[misc]

    def test_discriminated_union_from_json(self) -> None:
        adapter = TypeAdapter(Option)
        assert adapter.validate_python({"kind": "none"}) == NOTHING
        assert adapter.validate_python({"kind": "some", "value": 7}) == Some(
            value=7
        )

    def test_unknown_kind_rejected(self) -> None:
        adapter = TypeAdapter(Option)
        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "maybe", "value": 7})


class TestOptionHelpers:
    def test_from_optional(self) -> None:
        assert from_optional(None) == NOTHING
        assert from_optional(0) == Some(value=0)

    def test_to_optional(self) -> None:
        assert to_optional(Some(value="a")) == "a"
        assert to_optional(NOTHING) is None

    def test_unwrap_or(self) -> None:
        assert unwrap_or(Some(value=5), 0) == 5
        assert unwrap_or(NOTHING, 0) == 0

    def test_is_some(self) -> None:
        assert is_some(Some(value=False)) is True
        assert is_some(NOTHING) is False

    def test_unknown_option_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown option"):
            to_optional(3)  # type: ignore[arg-type]
