# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Loading and saving affine matrices for fixed transformations."""

from pathlib import Path
from typing import Optional, Union

import numpy as np

from spatialaug.transformation import Affine, AffineMap
from .errors import (
    MatrixFileNotFoundError,
    MatrixFileError,
    InvalidMatrixFormatError,
    InvalidMatrixDimensionsError,
)


class AffineMatrixLoader:
    """Loads affine maps from numpy files."""

    def __init__(self, file_path: Union[str, Path], ndim: Optional[int] = None):
        """Initialize with the path to a matrix file.

        Args:
            file_path: Path to the numpy matrix file (.npy)
            ndim: Expected dimensionality of the map. Without it, a square
                matrix whose last row is ``[0, ..., 0, 1]`` is read as
                homogeneous.

        Raises:
            MatrixFileNotFoundError: If the file doesn't exist
            MatrixFileError: If the file is not a .npy file
        """
        self.file_path = Path(file_path)
        self.ndim = ndim

        if not self.file_path.exists():
            raise MatrixFileNotFoundError(str(self.file_path))

        if not self.file_path.suffix.lower() == ".npy":
            raise MatrixFileError(f"File must be a .npy file: {self.file_path}")

    def load(self) -> AffineMap:
        """Load and validate the matrix file.

        Two layouts are accepted: a homogeneous ``(N + 1, N + 1)`` matrix whose
        last row is ``[0, ..., 0, 1]``, or a bare ``(N, N)`` linear part
        without translation.

        Returns:
            AffineMap object

        Raises:
            InvalidMatrixFormatError: If the matrix can't be loaded
            InvalidMatrixDimensionsError: If the matrix has invalid dimensions
        """
        try:
            matrix_array = np.load(self.file_path, allow_pickle=False)
        except (OSError, ValueError) as e:
            raise InvalidMatrixFormatError(f"Failed to load matrix file: {e}")

        if (
            matrix_array.ndim != 2
            or matrix_array.shape[0] != matrix_array.shape[1]
            or matrix_array.shape[0] == 0
        ):
            raise InvalidMatrixDimensionsError(
                f"Matrix must be square and 2-dimensional, got shape {matrix_array.shape}"
            )
        if not np.issubdtype(matrix_array.dtype, np.number):
            raise InvalidMatrixFormatError(
                f"Matrix must be numeric, got dtype {matrix_array.dtype}"
            )

        n = matrix_array.shape[0]
        if self.ndim is not None:
            if n == self.ndim + 1:
                homogeneous = True
            elif n == self.ndim:
                homogeneous = False
            else:
                raise InvalidMatrixDimensionsError(
                    f"Matrix for a {self.ndim}D map must have shape "
                    f"({self.ndim + 1}, {self.ndim + 1}) or ({self.ndim}, {self.ndim}), "
                    f"got {matrix_array.shape}"
                )
        else:
            last_row = np.zeros(n)
            last_row[-1] = 1
            homogeneous = n > 1 and np.allclose(matrix_array[-1], last_row)

        if homogeneous:
            try:
                return AffineMap.from_homogeneous(matrix_array)
            except ValueError as e:
                raise InvalidMatrixDimensionsError(f"Invalid matrix format: {e}")

        # Only the linear part provided, assume zero translation
        return AffineMap(linear=matrix_array, translation=np.zeros(n, matrix_array.dtype))

    @classmethod
    def from_file(
        cls, file_path: Union[str, Path], ndim: Optional[int] = None
    ) -> AffineMap:
        """Convenience method to load an affine map from a file.

        Args:
            file_path: Path to the numpy matrix file
            ndim: Expected dimensionality of the map

        Returns:
            AffineMap object
        """
        loader = cls(file_path, ndim)
        return loader.load()


def load_affine_transform(
    file_path: Union[str, Path], ndim: Optional[int] = None
) -> Affine:
    """Load a matrix file as a fixed ``Affine`` transformation."""
    return Affine(AffineMatrixLoader.from_file(file_path, ndim))


def save_affine(affine: AffineMap, file_path: Union[str, Path]) -> None:
    """Save an affine map in homogeneous form to a .npy file."""
    path = Path(file_path)
    if path.suffix.lower() != ".npy":
        raise MatrixFileError(f"Affine maps must be saved as .npy file, got '{path.suffix}'")
    np.save(path, affine.to_homogeneous())
