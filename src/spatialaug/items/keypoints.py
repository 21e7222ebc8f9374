# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

import numpy as np

from spatialaug.core import Bounds, UnsupportedItemKindError, normalize_crop

from .base import Item
from .utils import map_maybe, map_maybe_into

if TYPE_CHECKING:
    from spatialaug.transformation.affine_map import AffineMap


class Keypoints(Item):
    """A sparse, ordered set of N-dimensional points.

    Entries may be ``None`` to mark a point that is absent, e.g. a landmark
    hidden in this sample. Absent points stay absent, at the same position,
    through every transformation.

    Args:
        points: Sequence of points of length N, or None
        bounds: Coordinate extent, or the shape of the space the points live in
        dtype: Coordinate type; affine maps are resolved in this precision
    """

    def __init__(
        self,
        points: Sequence[Optional[Sequence[float]]],
        bounds: Union[Bounds, Sequence[int]],
        dtype=np.float32,
    ):
        self._dtype = np.dtype(dtype)
        if not isinstance(bounds, Bounds):
            bounds = Bounds.from_shape(bounds, dtype=self._dtype)
        self._bounds = bounds
        self._points: List[Optional[np.ndarray]] = map_maybe(self._as_point, points)

    def _as_point(self, point: Sequence[float]) -> np.ndarray:
        point = np.asarray(point, dtype=self._dtype)
        if point.shape != (self._bounds.ndim,):
            raise ValueError(
                f"Keypoint must have shape ({self._bounds.ndim},), got {point.shape}"
            )
        return point

    @property
    def points(self) -> Tuple[Optional[np.ndarray], ...]:
        return tuple(self._points)

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def affine_dtype(self) -> np.dtype:
        """Coordinate dtype, promoted to floating point for integer coordinates."""
        if np.issubdtype(self._dtype, np.floating):
            return self._dtype
        return np.result_type(self._dtype, np.float32)

    def __len__(self) -> int:
        return len(self._points)

    def present(self) -> np.ndarray:
        """Boolean array marking which entries hold a point."""
        return np.array([p is not None for p in self._points], dtype=bool)

    def to_array(self) -> np.ndarray:
        """All points as an ``(M, N)`` array with NaN rows for absent points."""
        out = np.full((len(self._points), self._bounds.ndim), np.nan, dtype=np.float64)
        for i, point in enumerate(self._points):
            if point is not None:
                out[i] = point
        return out

    def _new_bounds(self, matrix: "AffineMap", crop: Optional[Sequence]) -> Bounds:
        if crop is None:
            return self._bounds.transform(matrix)
        window = normalize_crop(crop, self._bounds.ndim)
        return Bounds.from_shape([len(r) for r in window], dtype=self._dtype)

    def _mapper(self, matrix: "AffineMap", dtype: np.dtype):
        if np.issubdtype(dtype, np.floating):
            return lambda point: matrix.apply(point).astype(dtype)
        # Integer coordinates are rounded to the nearest grid point
        return lambda point: np.rint(matrix.apply(point)).astype(dtype)

    def apply_affine(self, matrix: "AffineMap", crop: Optional[Sequence] = None) -> "Keypoints":
        bounds = self._new_bounds(matrix, crop)
        points = map_maybe(self._mapper(matrix, self._dtype), self._points)
        return Keypoints(points, bounds, self._dtype)

    def apply_affine_into(
        self, dest: "Keypoints", matrix: "AffineMap", crop: Optional[Sequence] = None
    ) -> "Keypoints":
        """Write the mapped points into ``dest``.

        ``dest`` must hold as many entries of the same dimensionality; the
        points are stored in the coordinate dtype of ``dest``.
        """
        if not isinstance(dest, Keypoints):
            raise UnsupportedItemKindError(dest, "apply_affine_into")
        if dest.bounds.ndim != self._bounds.ndim:
            raise ValueError(
                f"Destination holds {dest.bounds.ndim}D points, "
                f"got {self._bounds.ndim}D points"
            )
        bounds = self._new_bounds(matrix, crop)
        map_maybe_into(self._mapper(matrix, dest._dtype), dest._points, self._points)
        dest._bounds = bounds
        return dest

    def __repr__(self) -> str:
        return f"Keypoints(n={len(self._points)}, ndim={self._bounds.ndim}, dtype={self._dtype})"
