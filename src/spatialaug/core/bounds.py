# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Spatial extent of items and crop windows."""

from itertools import product
from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidCropShapeError

if TYPE_CHECKING:
    from spatialaug.transformation.affine_map import AffineMap

# Round-off allowed before a transformed corner spills into the next index.
_INDEX_TOLERANCE = 1e-3

CropWindow = Tuple[range, ...]


class Bounds:
    """Ordered corner points describing the coordinate extent of an item.

    Points are given in array index coordinates, axis 0 first. A bounds
    object for an N-dimensional item holds ``2**N`` points; after an affine
    map is applied they are no longer axis-aligned.
    """

    def __init__(self, points: np.ndarray):
        points = np.array(points)
        if points.ndim != 2 or points.shape[0] == 0:
            raise ValueError(
                f"Bounds points must have shape (K, N) with K > 0, got {points.shape}"
            )
        self._points = points
        self._points.setflags(write=False)

    @classmethod
    def from_shape(cls, shape: Sequence[int], dtype=np.float32) -> "Bounds":
        """Corners of an array of the given shape (indices ``0 .. s - 1``)."""
        return cls.from_ranges([range(int(s)) for s in shape], dtype=dtype)

    @classmethod
    def from_ranges(cls, ranges: Iterable[range], dtype=np.float32) -> "Bounds":
        """Corners of a tuple of index ranges."""
        extents = [(r.start, r.stop - 1) for r in ranges]
        if not extents:
            raise ValueError("Bounds need at least one dimension")
        corners = np.array(list(product(*extents)), dtype=dtype)
        return cls(corners)

    @property
    def points(self) -> np.ndarray:
        return self._points

    @property
    def ndim(self) -> int:
        return self._points.shape[1]

    @property
    def lower(self) -> np.ndarray:
        return self._points.min(axis=0)

    @property
    def upper(self) -> np.ndarray:
        return self._points.max(axis=0)

    @property
    def center(self) -> np.ndarray:
        """Center of the axis-aligned box enclosing all points."""
        return (self.lower + self.upper) / 2

    def transform(self, affine: "AffineMap") -> "Bounds":
        """Return new bounds with ``affine`` applied to every point."""
        return Bounds(affine.apply(self._points))

    def index_ranges(self) -> CropWindow:
        """Integer index ranges covering the bounds on every axis."""
        lower = np.floor(self.lower.astype(np.float64) + _INDEX_TOLERANCE)
        upper = np.ceil(self.upper.astype(np.float64) - _INDEX_TOLERANCE)
        return tuple(range(int(lo), int(hi) + 1) for lo, hi in zip(lower, upper))

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(len(r) for r in self.index_ranges())

    @property
    def origin(self) -> Tuple[int, ...]:
        """Coordinate of array index zero for data laid out on these bounds."""
        return tuple(r.start for r in self.index_ranges())

    def __len__(self) -> int:
        return self._points.shape[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return self._points.shape == other._points.shape and np.allclose(
            self._points, other._points
        )

    def __repr__(self) -> str:
        return f"Bounds(ndim={self.ndim}, lower={self.lower}, upper={self.upper})"


def normalize_crop(
    crop: Sequence[Union[range, Tuple[int, int]]], ndim: int
) -> CropWindow:
    """Validate a crop window against an item's dimensionality.

    Args:
        crop: One ``range`` or ``(start, stop)`` pair per spatial axis.
        ndim: Number of spatial dimensions of the item.

    Returns:
        The crop window as a tuple of ranges.

    Raises:
        InvalidCropShapeError: If the window has the wrong number of axes,
            or an axis is empty or has a step other than one.
    """
    if isinstance(crop, (str, bytes)) or not isinstance(crop, Sequence):
        raise InvalidCropShapeError(
            f"expected a sequence of ranges, got {type(crop).__name__}"
        )
    if len(crop) != ndim:
        raise InvalidCropShapeError(
            f"window has {len(crop)} dimensions, item has {ndim}"
        )

    window = []
    for axis, part in enumerate(crop):
        if isinstance(part, range):
            r = part
        else:
            r = _pair_to_range(part)
            if r is None:
                raise InvalidCropShapeError(
                    f"axis {axis} must be a range or (start, stop) pair, got {part!r}"
                )
        if r.step != 1:
            raise InvalidCropShapeError(f"axis {axis} has step {r.step}")
        if len(r) == 0:
            raise InvalidCropShapeError(f"axis {axis} is empty")
        window.append(r)
    return tuple(window)


def _pair_to_range(part) -> Optional[range]:
    if isinstance(part, (str, bytes)) or not isinstance(part, Sequence) or len(part) != 2:
        return None
    try:
        return range(int(part[0]), int(part[1]))
    except (TypeError, ValueError):
        return None
