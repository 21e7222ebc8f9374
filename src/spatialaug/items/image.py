# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from spatialaug.core import Bounds, InvalidCropShapeError, UnsupportedItemKindError
from spatialaug.resampling import IMAGE_RESAMPLING, ResamplingOptions

from .array import ArrayItem

if TYPE_CHECKING:
    from spatialaug.transformation.affine_map import AffineMap


class Image(ArrayItem):
    """A dense N-dimensional image.

    Axes beyond ``spatial_ndim`` are channels (e.g. RGB) and are resampled
    independently. Uncropped results are padded with the fill value (zero by
    default); cropped results reflect at the image edges.

    Args:
        data: Pixel array
        bounds: Coordinate extent, derived from the spatial shape if omitted
        spatial_ndim: Number of leading spatial axes, all axes if omitted
        resampling: Interpolation settings overriding the image defaults
    """

    def __init__(
        self,
        data: np.ndarray,
        bounds: Optional[Bounds] = None,
        spatial_ndim: Optional[int] = None,
        resampling: Optional[ResamplingOptions] = None,
    ):
        super().__init__(data, bounds, spatial_ndim)
        self._resampling = resampling or IMAGE_RESAMPLING

    @property
    def resampling(self) -> ResamplingOptions:
        return self._resampling

    def _with_data(self, data: np.ndarray, bounds: Bounds) -> "Image":
        return Image(data, bounds, self._spatial_ndim, self._resampling)

    def apply_affine_into(
        self, dest: "Image", matrix: "AffineMap", crop: Optional[Sequence] = None
    ) -> "Image":
        """Resample into the array of ``dest``, which must match the output shape."""
        if not isinstance(dest, Image):
            raise UnsupportedItemKindError(dest, "apply_affine_into")
        window, bounds, fill_value = self._output_window(matrix, crop)
        expected = tuple(len(r) for r in window) + self._data.shape[self._spatial_ndim :]
        if dest.data.shape != expected:
            raise InvalidCropShapeError(
                f"destination has shape {dest.data.shape}, result has shape {expected}"
            )
        self._resample(matrix, window, fill_value, output=dest.data)
        dest._bounds = bounds
        return dest
