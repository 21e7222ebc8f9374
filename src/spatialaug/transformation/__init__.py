# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .error import TransformationError, SingularMatrixError
from .affine_map import (
    AffineMap,
    translation_map,
    scaling_map,
    rotation_map,
    shear_map,
    reflection_map,
)
from .base import AbstractAffine, Affine
from .composed import ComposedAffine, compose
from .spatial import Translate, Scale, Rotate, Shear, Flip
from .apply import apply, apply_many

__all__ = [
    "TransformationError",
    "SingularMatrixError",
    "AffineMap",
    "translation_map",
    "scaling_map",
    "rotation_map",
    "shear_map",
    "reflection_map",
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
]
