# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .errors import (
    IOError,
    MatrixError,
    MatrixFileNotFoundError,
    MatrixFileError,
    InvalidMatrixFormatError,
    InvalidMatrixDimensionsError,
    ResamplingConfigError,
    ResamplingConfigFileNotFoundError,
    InvalidTomlError,
    ResamplingConfigValidationError,
)
from .matrix import AffineMatrixLoader, load_affine_transform, save_affine
from .resampling_config import ResamplingConfigParser, load_resampling_config

__all__ = [
    "IOError",
    "MatrixError",
    "MatrixFileNotFoundError",
    "MatrixFileError",
    "InvalidMatrixFormatError",
    "InvalidMatrixDimensionsError",
    "ResamplingConfigError",
    "ResamplingConfigFileNotFoundError",
    "InvalidTomlError",
    "ResamplingConfigValidationError",
    "AffineMatrixLoader",
    "load_affine_transform",
    "save_affine",
    "ResamplingConfigParser",
    "load_resampling_config",
]
