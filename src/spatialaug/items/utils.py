# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import Callable, List, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def map_maybe(f: Callable[[T], R], values: Sequence[Optional[T]]) -> List[Optional[R]]:
    """Map ``f`` over ``values``, keeping ``None`` entries in place."""
    return [None if value is None else f(value) for value in values]


def map_maybe_into(
    f: Callable[[T], R],
    dest: MutableSequence[Optional[R]],
    values: Sequence[Optional[T]],
) -> MutableSequence[Optional[R]]:
    """Like :func:`map_maybe`, writing the results into ``dest``."""
    if len(dest) != len(values):
        raise ValueError(
            f"Destination holds {len(dest)} entries, got {len(values)} values"
        )
    for i, value in enumerate(values):
        dest[i] = None if value is None else f(value)
    return dest
