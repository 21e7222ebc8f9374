# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Composable affine transformations for images, keypoints and masks."""

__app_name__ = "spatialaug"
__version__ = "0.1.0"

from spatialaug.core import (  # noqa: E402
    Bounds,
    SpatialAugError,
    UnsupportedItemKindError,
    InvalidCropShapeError,
)
from spatialaug.items import (  # noqa: E402
    Item,
    ItemWrapper,
    Image,
    Keypoints,
    MaskMulti,
    MaskBinary,
    get_bounds,
    apply_affine,
    apply_affine_into,
)
from spatialaug.resampling import BoundaryMode, ResamplingOptions, warp  # noqa: E402
from spatialaug.transformation import (  # noqa: E402
    AffineMap,
    AbstractAffine,
    Affine,
    ComposedAffine,
    compose,
    Translate,
    Scale,
    Rotate,
    Shear,
    Flip,
    apply,
    apply_many,
    TransformationError,
    SingularMatrixError,
)

__all__ = [
    "__app_name__",
    "__version__",
    "Bounds",
    "SpatialAugError",
    "UnsupportedItemKindError",
    "InvalidCropShapeError",
    "Item",
    "ItemWrapper",
    "Image",
    "Keypoints",
    "MaskMulti",
    "MaskBinary",
    "get_bounds",
    "apply_affine",
    "apply_affine_into",
    "BoundaryMode",
    "ResamplingOptions",
    "warp",
    "AffineMap",
    "AbstractAffine",
    "Affine",
    "ComposedAffine",
    "compose",
    "Translate",
    "Scale",
    "Rotate",
    "Shear",
    "Flip",
    "apply",
    "apply_many",
    "TransformationError",
    "SingularMatrixError",
]
