"""sequence: persistent linked sequences and the algorithms over them."""

from chainstd.sequence.models import EMPTY, Seq
from chainstd.sequence.ops import (
    all,
    and_,
    any,
    at,
    concat,
    count,
    delete,
    difference,
    drop,
    filter,
    filter_map,
    find,
    flat_map,
    foldl,
    foldr,
    has,
    head,
    index_of,
    indexed_foldr,
    indexed_map,
    is_empty,
    last,
    length,
    map,
    map2,
    map3,
    or_,
    partition,
    push,
    range_,
    repeat,
    reverse,
    sort,
    span,
    sum,
    tail,
    take,
    unique,
    unzip,
    zip,
)

__all__ = [
    "EMPTY",
    "Seq",
    "all",
    "and_",
    "any",
    "at",
    "concat",
    "count",
    "delete",
    "difference",
    "drop",
    "filter",
    "filter_map",
    "find",
    "flat_map",
    "foldl",
    "foldr",
    "has",
    "head",
    "index_of",
    "indexed_foldr",
    "indexed_map",
    "is_empty",
    "last",
    "length",
    "map",
    "map2",
    "map3",
    "or_",
    "partition",
    "push",
    "range_",
    "repeat",
    "reverse",
    "sort",
    "span",
    "sum",
    "tail",
    "take",
    "unique",
    "unzip",
    "zip",
]
