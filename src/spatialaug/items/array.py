# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

import numpy as np

from spatialaug.core import Bounds, CropWindow, normalize_crop
from spatialaug.resampling import ResamplingOptions, warp

from .base import Item

if TYPE_CHECKING:
    from spatialaug.transformation.affine_map import AffineMap


class ArrayItem(Item):
    """Base class for items backed by a dense array.

    The first ``spatial_ndim`` axes of the array are spatial; array index
    ``i`` sits at coordinate ``bounds.origin + i``. Applying an affine map
    resamples the array once through the inverse map.
    """

    def __init__(
        self,
        data: np.ndarray,
        bounds: Optional[Bounds] = None,
        spatial_ndim: Optional[int] = None,
    ):
        data = np.asarray(data)
        if spatial_ndim is None:
            spatial_ndim = data.ndim
        if not 1 <= spatial_ndim <= data.ndim:
            raise ValueError(
                f"spatial_ndim must be between 1 and {data.ndim}, got {spatial_ndim}"
            )
        if bounds is None:
            bounds = Bounds.from_shape(data.shape[:spatial_ndim])
        elif bounds.ndim != spatial_ndim:
            raise ValueError(
                f"Bounds are {bounds.ndim}-dimensional, data has {spatial_ndim} spatial axes"
            )
        elif bounds.shape != data.shape[:spatial_ndim]:
            raise ValueError(
                f"Bounds cover a grid of shape {bounds.shape}, "
                f"data has spatial shape {data.shape[:spatial_ndim]}"
            )
        self._data = data
        self._bounds = bounds
        self._spatial_ndim = spatial_ndim

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def spatial_ndim(self) -> int:
        return self._spatial_ndim

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._data.shape

    @property
    @abstractmethod
    def resampling(self) -> ResamplingOptions:
        """Interpolation settings used when this item is resampled."""
        pass

    @abstractmethod
    def _with_data(self, data: np.ndarray, bounds: Bounds) -> "ArrayItem":
        """Create an item of the same type carrying new data and bounds."""
        pass

    def _output_window(
        self, matrix: "AffineMap", crop: Optional[Sequence]
    ) -> Tuple[CropWindow, Bounds, Optional[float]]:
        """Output grid, bounds of the result and the fill value to use."""
        if crop is None:
            bounds = self._bounds.transform(matrix)
            return bounds.index_ranges(), bounds, self.resampling.fill_value
        window = normalize_crop(crop, self._spatial_ndim)
        return window, Bounds.from_ranges(window), None

    def _resample(
        self,
        matrix: "AffineMap",
        window: CropWindow,
        fill_value: Optional[float],
        output: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        options = self.resampling
        return warp(
            self._data,
            matrix.inverse(),
            window,
            order=options.order,
            boundary=options.boundary,
            fill_value=fill_value,
            source_origin=self._bounds.origin,
            output=output,
        )

    def apply_affine(self, matrix: "AffineMap", crop: Optional[Sequence] = None) -> "ArrayItem":
        window, bounds, fill_value = self._output_window(matrix, crop)
        return self._with_data(self._resample(matrix, window, fill_value), bounds)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self._data.shape}, dtype={self._data.dtype})"
