# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Concrete affine transformations that depend on the item's bounds."""

from typing import Optional, Sequence, Tuple, Union

import numpy as np

from spatialaug.core import Bounds

from .affine_map import (
    AffineMap,
    reflection_map,
    rotation_map,
    scaling_map,
    shear_map,
    translation_map,
)
from .base import AbstractAffine

Range = Tuple[float, float]


def _sample(value: Union[float, Range], rng: Optional[np.random.Generator]) -> float:
    """Return a fixed value or draw uniformly from a ``(low, high)`` range."""
    if isinstance(value, (tuple, list)):
        low, high = value
        if rng is None:
            rng = np.random.default_rng()
        return float(rng.uniform(low, high))
    return float(value)


class Translate(AbstractAffine):
    """Shift every coordinate by a fixed offset."""

    def __init__(self, offset: Sequence[float]):
        self.offset = tuple(float(o) for o in offset)

    def get_affine(self, bounds: Bounds, randstate=None, dtype=np.float32) -> AffineMap:
        if len(self.offset) != bounds.ndim:
            raise ValueError(
                f"Offset has {len(self.offset)} components, item has {bounds.ndim} dimensions"
            )
        return translation_map(self.offset, dtype=dtype)

    def __repr__(self) -> str:
        return f"Translate({self.offset})"


class Scale(AbstractAffine):
    """Scale coordinates per axis.

    With ``centered`` the bounds center stays in place, otherwise the origin
    does.
    """

    def __init__(self, factors: Union[float, Sequence[float]], centered: bool = False):
        self.factors = factors
        self.centered = centered

    def get_affine(self, bounds: Bounds, randstate=None, dtype=np.float32) -> AffineMap:
        affine = scaling_map(self.factors, bounds.ndim, dtype=dtype)
        if self.centered:
            affine = affine.about(bounds.center)
        return affine

    def __repr__(self) -> str:
        return f"Scale({self.factors}, centered={self.centered})"


class Rotate(AbstractAffine):
    """Rotate around the bounds center.

    Args:
        degrees: Fixed angle, or a ``(low, high)`` range to draw the angle from
        axes: The two axes spanning the rotation plane
    """

    def __init__(self, degrees: Union[float, Range], axes: Tuple[int, int] = (0, 1)):
        self.degrees = degrees
        self.axes = axes

    def get_randstate(self, rng: Optional[np.random.Generator] = None) -> float:
        return _sample(self.degrees, rng)

    def get_affine(self, bounds: Bounds, randstate=None, dtype=np.float32) -> AffineMap:
        angle = self.get_randstate() if randstate is None else randstate
        rotation = rotation_map(angle, bounds.ndim, axes=self.axes, dtype=dtype)
        return rotation.about(bounds.center)

    def __repr__(self) -> str:
        return f"Rotate({self.degrees}, axes={self.axes})"


class Shear(AbstractAffine):
    """Shear around the bounds center; ``factor`` may be a ``(low, high)`` range."""

    def __init__(self, factor: Union[float, Range], axes: Tuple[int, int] = (0, 1)):
        self.factor = factor
        self.axes = axes

    def get_randstate(self, rng: Optional[np.random.Generator] = None) -> float:
        return _sample(self.factor, rng)

    def get_affine(self, bounds: Bounds, randstate=None, dtype=np.float32) -> AffineMap:
        factor = self.get_randstate() if randstate is None else randstate
        shear = shear_map(factor, bounds.ndim, axes=self.axes, dtype=dtype)
        return shear.about(bounds.center)

    def __repr__(self) -> str:
        return f"Shear({self.factor}, axes={self.axes})"


class Flip(AbstractAffine):
    """Mirror along one axis, around the bounds center."""

    def __init__(self, axis: int):
        self.axis = axis

    def get_affine(self, bounds: Bounds, randstate=None, dtype=np.float32) -> AffineMap:
        return reflection_map(self.axis, bounds.ndim, dtype=dtype).about(bounds.center)

    def __repr__(self) -> str:
        return f"Flip(axis={self.axis})"
