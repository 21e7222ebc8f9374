# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Segmentation masks.

Masks hold labels, so by default they are resampled with nearest-label
lookup and flat extrapolation: labels are never blended and no label is
invented outside the mask.
"""

from typing import Hashable, Optional, Sequence, Tuple

import numpy as np

from spatialaug.core import Bounds
from spatialaug.resampling import MASK_RESAMPLING, ResamplingOptions

from .array import ArrayItem


class MaskMulti(ArrayItem):
    """A multi-class segmentation mask.

    Args:
        data: Array of class labels
        classes: The label set; carried over unchanged by transformations
        bounds: Coordinate extent, derived from the shape if omitted
        resampling: Interpolation settings overriding the mask defaults
    """

    def __init__(
        self,
        data: np.ndarray,
        classes: Sequence[Hashable],
        bounds: Optional[Bounds] = None,
        resampling: Optional[ResamplingOptions] = None,
    ):
        super().__init__(data, bounds)
        self._classes = tuple(classes)
        self._resampling = resampling or MASK_RESAMPLING

    @property
    def classes(self) -> Tuple[Hashable, ...]:
        return self._classes

    @property
    def resampling(self) -> ResamplingOptions:
        return self._resampling

    def _with_data(self, data: np.ndarray, bounds: Bounds) -> "MaskMulti":
        return MaskMulti(data, self._classes, bounds, self._resampling)

    def __repr__(self) -> str:
        return f"MaskMulti(shape={self.shape}, classes={self._classes})"


class MaskBinary(ArrayItem):
    """A binary segmentation mask, stored as a boolean array."""

    def __init__(
        self,
        data: np.ndarray,
        bounds: Optional[Bounds] = None,
        resampling: Optional[ResamplingOptions] = None,
    ):
        super().__init__(np.asarray(data, dtype=bool), bounds)
        self._resampling = resampling or MASK_RESAMPLING

    @property
    def resampling(self) -> ResamplingOptions:
        return self._resampling

    def _with_data(self, data: np.ndarray, bounds: Bounds) -> "MaskBinary":
        return MaskBinary(data, bounds, self._resampling)
