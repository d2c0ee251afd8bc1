from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

T = TypeVar("T")


class Seq(Generic[T]):
    """Immutable, persistent singly linked sequence.

    ``Seq(1, 2, 3)`` builds a literal sequence and ``Seq()`` the empty one.
    New sequences are made by prepending with ``cons``; the receiver is never
    modified, so any number of sequences may share a common tail.

    Every method walks the nodes with a loop, never by recursion, so very
    long sequences are safe to compare, hash and print.
    """

    __slots__ = ("_first", "_rest", "_size")

    def __init__(self, *items: T) -> None:
        node = Seq.from_iterable(items) if items else None
        object.__setattr__(self, "_first", node._first if node else None)
        object.__setattr__(self, "_rest", node._rest if node else None)
        object.__setattr__(self, "_size", node._size if node else 0)

    @classmethod
    def _node(cls, first: T, rest: "Seq[T]") -> "Seq[T]":
        node = object.__new__(cls)
        object.__setattr__(node, "_first", first)
        object.__setattr__(node, "_rest", rest)
        object.__setattr__(node, "_size", rest._size + 1)
        return node

    @classmethod
    def from_iterable(
        cls, items: Iterable[T], tail: "Seq[T] | None" = None
    ) -> "Seq[T]":
        """Build a sequence holding ``items`` in order, followed by ``tail``.

        ``tail`` is shared, not copied.
        """
        buffered = list(items)
        node = tail if tail is not None else EMPTY
        for item in reversed(buffered):
            node = cls._node(item, node)
        return node

    def cons(self, item: T) -> "Seq[T]":
        return Seq._node(item, self)

    def uncons(self) -> "tuple[T, Seq[T]] | None":
        """Split into ``(first, rest)``, or ``None`` when empty."""
        if self._size == 0:
            return None
        return self._first, self._rest

    def to_list(self) -> list[T]:
        return list(self)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Seq is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Seq is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        # Rebuilt from items since attribute assignment is blocked.
        return (Seq.from_iterable, (list(self),))

    def __iter__(self) -> Iterator[T]:
        node = self
        while node._size:
            yield node._first
            node = node._rest

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        if self._size != other._size:
            return False
        left, right = self, other
        # Shared tails are equal by identity.
        while left is not right and left._size:
            if left._first != right._first:
                return False
            left, right = left._rest, right._rest
        return True

    def __hash__(self) -> int:
        return hash(("Seq", tuple(self)))

    def __repr__(self) -> str:
        return f"Seq({', '.join(repr(item) for item in self)})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        item_schema = (
            handler.generate_schema(args[0])
            if args
            else core_schema.any_schema()
        )
        from_list = core_schema.no_info_after_validator_function(
            cls.from_iterable, core_schema.list_schema(item_schema)
        )
        if args:
            python_schema = core_schema.no_info_wrap_validator_function(
                _revalidate_items, from_list
            )
        else:
            python_schema = core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_list]
            )
        return core_schema.json_or_python_schema(
            json_schema=from_list,
            python_schema=python_schema,
            serialization=core_schema.plain_serializer_function_ser_schema(
                list
            ),
        )


def _revalidate_items(
    value: Any, handler: core_schema.ValidatorFunctionWrapHandler
) -> Any:
    """Check the items of an existing ``Seq``; keep it if none changed."""
    if not isinstance(value, Seq):
        return handler(value)
    validated = handler(list(value))
    for before, after in zip(value, validated):
        if before is not after:
            return validated
    return value


EMPTY: Seq[Any] = object.__new__(Seq)
object.__setattr__(EMPTY, "_first", None)
object.__setattr__(EMPTY, "_rest", None)
object.__setattr__(EMPTY, "_size", 0)
