# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

import numpy as np

from spatialaug.core import SpatialAugError


# Transformation-related errors
class TransformationError(SpatialAugError):
    """Exception raised when a transformation operation fails."""

    def __init__(self, message: str):
        super().__init__(f"Transformation error: {message}")


class SingularMatrixError(TransformationError):
    """Raised when an affine map without an inverse has to be inverted."""

    def __init__(self, linear: np.ndarray):
        self.linear = linear
        super().__init__(f"affine map is not invertible (linear part {linear.tolist()})")
