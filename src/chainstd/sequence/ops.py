"""Algorithms over persistent sequences.

Every function is pure and iterative: inputs are never modified and the
call stack stays flat however long the sequence is. Functions that can
find nothing return ``Option`` values instead of raising.

Several names (``all``, ``any``, ``map``, ``filter``, ``zip``, ``sum``)
mirror builtins; use them through the module namespace.
"""

from __future__ import annotations

import builtins
import functools
import itertools
from collections.abc import Callable
from typing import Any, TypeVar

from chainstd.core.option import NOTHING, Nothing, Option, Some
from chainstd.sequence.models import EMPTY, Seq

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
R = TypeVar("R")


# ── Quantifiers ──────────────────────────────────────────────────────────


def all(xs: Seq[A], predicate: Callable[[A], bool]) -> bool:
    for x in xs:
        if not predicate(x):
            return False
    return True


def any(xs: Seq[A], predicate: Callable[[A], bool]) -> bool:
    for x in xs:
        if predicate(x):
            return True
    return False


def and_(xs: Seq[bool]) -> bool:
    for x in xs:
        if not x:
            return False
    return True


def or_(xs: Seq[bool]) -> bool:
    for x in xs:
        if x:
            return True
    return False


# ── Transform ────────────────────────────────────────────────────────────


def map(xs: Seq[A], with_: Callable[[A], B]) -> Seq[B]:
    return Seq.from_iterable(with_(x) for x in xs)


def indexed_map(xs: Seq[A], with_: Callable[[int, A], B]) -> Seq[B]:
    """Like ``map`` but also passes each element's zero-based index."""
    return Seq.from_iterable(with_(i, x) for i, x in enumerate(xs))


def map2(xs: Seq[A], ys: Seq[B], with_: Callable[[A, B], R]) -> Seq[R]:
    """Combine two sequences pairwise, stopping at the shorter one."""
    return Seq.from_iterable(with_(x, y) for x, y in builtins.zip(xs, ys))


def map3(
    xs: Seq[A], ys: Seq[B], zs: Seq[C], with_: Callable[[A, B, C], R]
) -> Seq[R]:
    return Seq.from_iterable(
        with_(x, y, z) for x, y, z in builtins.zip(xs, ys, zs)
    )


# ── Folds ────────────────────────────────────────────────────────────────


def foldl(xs: Seq[A], with_: Callable[[A, B], B], zero: B) -> B:
    """Reduce from the left: ``f(xn, ... f(x2, f(x1, zero)))``."""
    acc = zero
    for x in xs:
        acc = with_(x, acc)
    return acc


def foldr(xs: Seq[A], with_: Callable[[A, B], B], zero: B) -> B:
    """Reduce from the right: ``f(x1, f(x2, ... f(xn, zero)))``."""
    acc = zero
    for x in reverse(xs):
        acc = with_(x, acc)
    return acc


def indexed_foldr(
    xs: Seq[A], with_: Callable[[int, A, B], B], zero: B
) -> B:
    acc = zero
    index = len(xs)
    for x in reverse(xs):
        index -= 1
        acc = with_(index, x, acc)
    return acc


# ── Filter / search ──────────────────────────────────────────────────────


def filter(xs: Seq[A], predicate: Callable[[A], bool]) -> Seq[A]:
    return Seq.from_iterable(x for x in xs if predicate(x))


def filter_map(xs: Seq[A], with_: Callable[[A], Option[B]]) -> Seq[B]:
    """Transform every element, keeping only the ``Some`` results."""
    kept: list[B] = []
    for x in xs:
        match with_(x):
            case Some(value=v):
                kept.append(v)
            case Nothing():
                continue
            case other:
                raise ValueError(f"Unknown option: {other}")
    return Seq.from_iterable(kept)


def find(xs: Seq[A], predicate: Callable[[A], bool]) -> Option[A]:
    for x in xs:
        if predicate(x):
            return Some(value=x)
    return NOTHING


def has(xs: Seq[A], elem: A) -> bool:
    for x in xs:
        if x == elem:
            return True
    return False


def unique(xs: Seq[A]) -> Seq[A]:
    """Drop repeated values, keeping each first occurrence in place.

    Equality is structural across hashable and unhashable values, so
    ``{1}`` and ``frozenset({1})`` count as the same value.
    """
    kept: list[A] = []
    seen_hashable: set[Any] = set()
    seen_unhashable: list[A] = []
    for x in xs:
        try:
            hash(x)
        except TypeError:
            if x in seen_unhashable or builtins.any(
                x == seen for seen in seen_hashable
            ):
                continue
            seen_unhashable.append(x)
        else:
            if x in seen_hashable or x in seen_unhashable:
                continue
            seen_hashable.add(x)
        kept.append(x)
    return Seq.from_iterable(kept)


def take(xs: Seq[A], n: int) -> Seq[A]:
    if n <= 0:
        return EMPTY
    if n >= len(xs):
        return xs
    return Seq.from_iterable(itertools.islice(xs, n))


def drop(xs: Seq[A], n: int) -> Seq[A]:
    node = xs
    while n > 0:
        split = node.uncons()
        if split is None:
            break
        node = split[1]
        n -= 1
    return node


# ── Access ───────────────────────────────────────────────────────────────


def head(xs: Seq[A]) -> Option[A]:
    split = xs.uncons()
    if split is None:
        return NOTHING
    return Some(value=split[0])


def tail(xs: Seq[A]) -> Option[Seq[A]]:
    split = xs.uncons()
    if split is None:
        return NOTHING
    return Some(value=split[1])


def is_empty(xs: Seq[A]) -> bool:
    return not xs


def length(xs: Seq[A]) -> int:
    return len(xs)


def at(xs: Seq[A], index: int) -> Option[A]:
    if index < 0:
        return NOTHING
    return head(drop(xs, index))


def last(xs: Seq[A]) -> Option[A]:
    if not xs:
        return NOTHING
    return head(drop(xs, len(xs) - 1))


def count(xs: Seq[A], predicate: Callable[[A], bool]) -> int:
    total = 0
    for x in xs:
        if predicate(x):
            total += 1
    return total


def index_of(xs: Seq[A], elem: A) -> Option[int]:
    for i, x in enumerate(xs):
        if x == elem:
            return Some(value=i)
    return NOTHING


# ── Combine ──────────────────────────────────────────────────────────────


def concat(left: Seq[A], right: Seq[A]) -> Seq[A]:
    """``left`` followed by ``right``. Only ``left`` is copied."""
    if not right:
        return left
    return Seq.from_iterable(left, tail=right)


def flat_map(xs: Seq[A], with_: Callable[[A], Seq[B]]) -> Seq[B]:
    return Seq.from_iterable(y for x in xs for y in with_(x))


def zip(xs: Seq[A], ys: Seq[B]) -> Seq[tuple[A, B]]:
    return map2(xs, ys, lambda x, y: (x, y))


def unzip(xs: Seq[tuple[A, B]]) -> tuple[Seq[A], Seq[B]]:
    lefts: list[A] = []
    rights: list[B] = []
    for a, b in xs:
        lefts.append(a)
        rights.append(b)
    return Seq.from_iterable(lefts), Seq.from_iterable(rights)


def reverse(xs: Seq[A]) -> Seq[A]:
    return foldl(xs, lambda x, acc: acc.cons(x), EMPTY)


def partition(
    xs: Seq[A], predicate: Callable[[A], bool]
) -> tuple[Seq[A], Seq[A]]:
    """Split into ``(satisfying, rest)``, both in original order."""
    matching: list[A] = []
    rest: list[A] = []
    for x in xs:
        (matching if predicate(x) else rest).append(x)
    return Seq.from_iterable(matching), Seq.from_iterable(rest)


def span(xs: Seq[A], n: int) -> tuple[Seq[A], Seq[A]]:
    return take(xs, n), drop(xs, n)


def delete(xs: Seq[A], elem: A) -> Seq[A]:
    """Remove the first element equal to ``elem``; later ones stay."""
    prefix: list[A] = []
    node = xs
    while (split := node.uncons()) is not None:
        first, rest = split
        if first == elem:
            return Seq.from_iterable(prefix, tail=rest)
        prefix.append(first)
        node = rest
    return xs


def difference(xs: Seq[A], ys: Seq[A]) -> Seq[A]:
    return foldl(ys, lambda y, acc: delete(acc, y), xs)


def sort(xs: Seq[A], compare: Callable[[A, A], int]) -> Seq[A]:
    """Stable sort using a three-way ``compare`` (<0, 0, >0)."""
    return Seq.from_iterable(sorted(xs, key=functools.cmp_to_key(compare)))


def sum(xs: Seq[int]) -> int:
    return foldl(xs, lambda x, acc: acc + x, 0)


# ── Construct ────────────────────────────────────────────────────────────


def range_(from_: int, to: int) -> Seq[int]:
    """Integers from ``from_`` to ``to``, both inclusive."""
    if from_ > to:
        return EMPTY
    return Seq.from_iterable(range(from_, to + 1))


def repeat(elem: A, n: int) -> Seq[A]:
    if n <= 0:
        return EMPTY
    return Seq.from_iterable(itertools.repeat(elem, n))


def push(xs: Seq[A], elem: A) -> Seq[A]:
    return xs.cons(elem)
