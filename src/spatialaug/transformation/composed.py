# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Iterable, Optional, Tuple

import numpy as np

from spatialaug.core import Bounds, logger

from .affine_map import AffineMap
from .base import AbstractAffine


class ComposedAffine(AbstractAffine):
    """Composes several affine transformations.

    Affine maps are associative, so the children are folded into a single
    map before anything is resampled: dense items are interpolated once
    instead of once per child.

    The children form a flat tuple. Nested compositions are merged at
    construction time, so a ComposedAffine never holds another one.
    """

    def __init__(self, transforms: Iterable[AbstractAffine]):
        flat = []
        for tfm in transforms:
            if isinstance(tfm, ComposedAffine):
                flat.extend(tfm.transforms)
            elif isinstance(tfm, AbstractAffine):
                flat.append(tfm)
            else:
                raise TypeError(
                    f"ComposedAffine children must be affine transforms, got {type(tfm).__name__}"
                )
        if not flat:
            raise ValueError("ComposedAffine needs at least one transform")
        self._transforms: Tuple[AbstractAffine, ...] = tuple(flat)

    @property
    def transforms(self) -> Tuple[AbstractAffine, ...]:
        return self._transforms

    def __len__(self) -> int:
        return len(self._transforms)

    def __iter__(self):
        return iter(self._transforms)

    def get_randstate(self, rng: Optional[np.random.Generator] = None) -> Tuple[Any, ...]:
        if rng is None:
            rng = np.random.default_rng()
        return tuple(tfm.get_randstate(rng) for tfm in self._transforms)

    def get_affine(
        self,
        bounds: Bounds,
        randstate: Optional[Tuple[Any, ...]] = None,
        dtype=np.float32,
    ) -> AffineMap:
        """Fold the children into one map.

        Each child is resolved against the bounds as transformed by all
        children before it. Applying the result to a point is equivalent to
        applying the children in order.
        """
        if randstate is None:
            randstate = self.get_randstate()
        if len(randstate) != len(self._transforms):
            raise ValueError(
                f"Expected {len(self._transforms)} random states, got {len(randstate)}"
            )

        accumulated = AffineMap.identity(bounds.ndim, dtype=dtype)
        for tfm, state in zip(self._transforms, randstate):
            affine = tfm.get_affine(bounds, state, dtype)
            bounds = bounds.transform(affine)
            accumulated = affine.after(accumulated)
            logger.debug(f"Folded {tfm!r}; bounds now {bounds!r}")
        return accumulated

    def __repr__(self) -> str:
        children = ", ".join(repr(tfm) for tfm in self._transforms)
        return f"ComposedAffine({children})"


def compose(*transforms: AbstractAffine) -> ComposedAffine:
    """Compose affine transforms into one flat ComposedAffine.

    Order is preserved: the first transform is applied first. Composing a
    composition with another transform, in either order, extends its
    sequence instead of nesting it.
    """
    if len(transforms) < 2:
        raise ValueError("compose needs at least two transforms")
    result = transforms[0]
    for tfm in transforms[1:]:
        result = _compose_pair(result, tfm)
    return result


def _compose_pair(first: AbstractAffine, second: AbstractAffine) -> ComposedAffine:
    if isinstance(first, ComposedAffine) and isinstance(second, ComposedAffine):
        return ComposedAffine(first.transforms + second.transforms)
    if isinstance(first, ComposedAffine):
        return ComposedAffine(first.transforms + (second,))
    if isinstance(second, ComposedAffine):
        return ComposedAffine((first,) + second.transforms)
    return ComposedAffine((first, second))
