# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .base import (
    Item,
    ItemWrapper,
    get_bounds,
    apply_affine,
    apply_affine_into,
)
from .array import ArrayItem
from .image import Image
from .keypoints import Keypoints
from .mask import MaskMulti, MaskBinary
from .utils import map_maybe, map_maybe_into

__all__ = [
    "Item",
    "ItemWrapper",
    "ArrayItem",
    "Image",
    "Keypoints",
    "MaskMulti",
    "MaskBinary",
    "get_bounds",
    "apply_affine",
    "apply_affine_into",
    "map_maybe",
    "map_maybe_into",
]
