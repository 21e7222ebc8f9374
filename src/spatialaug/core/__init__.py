# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .errors import (
    SpatialAugError,
    UnsupportedItemKindError,
    InvalidCropShapeError,
)

from .bounds import (
    Bounds,
    CropWindow,
    normalize_crop,
)

from .logger import logger

__all__ = [
    "SpatialAugError",
    "UnsupportedItemKindError",
    "InvalidCropShapeError",
    "Bounds",
    "CropWindow",
    "normalize_crop",
    "logger",
]
