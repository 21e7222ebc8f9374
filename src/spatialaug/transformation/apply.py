# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Entry points applying an affine transformation to items."""

from typing import Any, List, Optional, Sequence

import numpy as np

from spatialaug.core import logger
from spatialaug.items import Item, apply_affine, get_bounds

from .base import AbstractAffine


def apply(
    transform: AbstractAffine,
    item: Item,
    randstate: Any = None,
    rng: Optional[np.random.Generator] = None,
) -> Item:
    """Apply ``transform`` to ``item`` and return a new item of the same type.

    The transformation is resolved to a single affine map against the item's
    bounds and in the item's coordinate precision, then handed to the item's
    applicator.

    Args:
        transform: The affine transformation to apply
        item: Item to transform
        randstate: Random state to use; drawn from ``transform`` if omitted
        rng: Generator used when the random state has to be drawn

    Returns:
        The transformed item

    Raises:
        UnsupportedItemKindError: If ``item`` has no bounds or no applicator
    """
    if randstate is None:
        randstate = transform.get_randstate(rng)
    bounds = get_bounds(item)
    dtype = item.affine_dtype if isinstance(item, Item) else np.float32
    affine = transform.get_affine(bounds, randstate, dtype)
    logger.debug(f"Applying {transform!r} to {type(item).__name__}")
    return apply_affine(item, affine)


def apply_many(
    transform: AbstractAffine,
    items: Sequence[Item],
    randstate: Any = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Item]:
    """Apply ``transform`` with one shared random state to several items.

    Items describing the same scene, e.g. an image and its mask, stay
    aligned because the random state is drawn only once.
    """
    if randstate is None:
        randstate = transform.get_randstate(rng)
    return [apply(transform, item, randstate=randstate) for item in items]
