# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

from .error import SingularMatrixError


@dataclass(frozen=True, eq=False)
class AffineMap:
    """An N-dimensional affine map ``x -> linear @ x + translation``.

    Instances are never mutated; every operation returns a new map.
    """

    linear: np.ndarray
    translation: np.ndarray

    def __post_init__(self):
        """Validate matrix shapes."""
        linear = np.array(self.linear)
        translation = np.array(self.translation, dtype=linear.dtype)
        if linear.ndim != 2 or linear.shape[0] != linear.shape[1]:
            raise ValueError(f"Linear part must be square, got {linear.shape}")
        if translation.shape != (linear.shape[0],):
            raise ValueError(
                f"Translation vector must have shape ({linear.shape[0]},), "
                f"got {translation.shape}"
            )
        linear.setflags(write=False)
        translation.setflags(write=False)
        object.__setattr__(self, "linear", linear)
        object.__setattr__(self, "translation", translation)

    @property
    def ndim(self) -> int:
        return self.linear.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self.linear.dtype

    @classmethod
    def identity(cls, ndim: int, dtype=np.float32) -> "AffineMap":
        return cls(linear=np.eye(ndim, dtype=dtype), translation=np.zeros(ndim, dtype))

    def before(self, other: "AffineMap") -> "AffineMap":
        """Combine two maps by first applying self, then other.

        The combined map T = T2 ∘ T1 is:
        linear = L2 @ L1
        translation = L2 @ t1 + t2
        """
        return other.after(self)

    def after(self, other: "AffineMap") -> "AffineMap":
        """Combine two maps by first applying other, then self.

        The combined map T = T1 ∘ T2 is:
        linear = L1 @ L2
        translation = L1 @ t2 + t1
        """
        if other.ndim != self.ndim:
            raise ValueError(
                f"Cannot compose a {self.ndim}D map with a {other.ndim}D map"
            )
        return AffineMap(
            linear=self.linear @ other.linear,
            translation=self.linear @ other.translation + self.translation,
        )

    def __matmul__(self, other: "AffineMap") -> "AffineMap":
        return self.after(other)

    def inverse(self) -> "AffineMap":
        """Return the inverse map.

        Raises:
            SingularMatrixError: If the linear part cannot be inverted.
        """
        try:
            inv_linear = np.linalg.inv(self.linear)
        except np.linalg.LinAlgError as e:
            raise SingularMatrixError(self.linear) from e
        return AffineMap(
            linear=inv_linear, translation=-(inv_linear @ self.translation)
        )

    def apply(self, points: np.ndarray) -> np.ndarray:
        """Apply the map to a single point ``(N,)`` or to points ``(M, N)``."""
        points = np.asarray(points)
        if points.shape[-1] != self.ndim or points.ndim not in (1, 2):
            raise ValueError(
                f"Points must have shape ({self.ndim},) or (M, {self.ndim}), "
                f"got {points.shape}"
            )
        if points.ndim == 1:
            return self.linear @ points + self.translation
        return points @ self.linear.T + self.translation

    def __call__(self, points: np.ndarray) -> np.ndarray:
        return self.apply(points)

    def astype(self, dtype) -> "AffineMap":
        if np.dtype(dtype) == self.dtype:
            return self
        return AffineMap(
            linear=self.linear.astype(dtype),
            translation=self.translation.astype(dtype),
        )

    def about(self, center: Sequence[float]) -> "AffineMap":
        """Conjugate the map so that it acts around ``center`` instead of the origin."""
        center = np.asarray(center, dtype=self.dtype)
        return translation_map(center).after(self).after(translation_map(-center))

    def to_homogeneous(self) -> np.ndarray:
        """Convert to a single ``(N + 1, N + 1)`` array for storage."""
        n = self.ndim
        matrix = np.eye(n + 1, dtype=self.dtype)
        matrix[:n, :n] = self.linear
        matrix[:n, n] = self.translation
        return matrix

    @classmethod
    def from_homogeneous(cls, matrix: np.ndarray) -> "AffineMap":
        """Create an AffineMap from an ``(N + 1, N + 1)`` homogeneous array."""
        matrix = np.asarray(matrix)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1] or matrix.shape[0] < 2:
            raise ValueError(f"Homogeneous matrix must be square, got {matrix.shape}")
        n = matrix.shape[0] - 1
        expected_last_row = np.zeros(n + 1)
        expected_last_row[n] = 1
        if not np.allclose(matrix[n], expected_last_row):
            raise ValueError("Last row of a homogeneous affine matrix must be [0, ..., 0, 1]")
        return cls(linear=matrix[:n, :n], translation=matrix[:n, n])

    def __eq__(self, other: object) -> bool:
        """Check if two AffineMap instances are equal."""
        if not isinstance(other, AffineMap):
            return NotImplemented
        return (
            self.ndim == other.ndim
            and np.allclose(self.linear, other.linear)
            and np.allclose(self.translation, other.translation)
        )


def translation_map(offset: Sequence[float], dtype=None) -> AffineMap:
    offset = np.asarray(offset, dtype=dtype or np.result_type(np.asarray(offset), np.float32))
    return AffineMap(linear=np.eye(offset.shape[0], dtype=offset.dtype), translation=offset)


def scaling_map(factors: Union[float, Sequence[float]], ndim: int, dtype=np.float32) -> AffineMap:
    factors = np.broadcast_to(np.asarray(factors, dtype=dtype), (ndim,))
    return AffineMap(linear=np.diag(factors), translation=np.zeros(ndim, dtype))


def rotation_map(
    degrees: float, ndim: int, axes: Tuple[int, int] = (0, 1), dtype=np.float32
) -> AffineMap:
    """Rotation by ``degrees`` in the plane spanned by ``axes``.

    Positive angles rotate from the first axis towards the second one.
    """
    i, j = _plane_axes(axes, ndim)
    theta = np.deg2rad(degrees)
    linear = np.eye(ndim, dtype=np.float64)
    linear[i, i] = np.cos(theta)
    linear[i, j] = -np.sin(theta)
    linear[j, i] = np.sin(theta)
    linear[j, j] = np.cos(theta)
    return AffineMap(linear=linear.astype(dtype), translation=np.zeros(ndim, dtype))


def shear_map(
    factor: float, ndim: int, axes: Tuple[int, int] = (0, 1), dtype=np.float32
) -> AffineMap:
    """Shear that shifts coordinate ``axes[0]`` by ``factor`` times ``axes[1]``."""
    i, j = _plane_axes(axes, ndim)
    linear = np.eye(ndim, dtype=dtype)
    linear[i, j] = factor
    return AffineMap(linear=linear, translation=np.zeros(ndim, dtype))


def reflection_map(axis: int, ndim: int, dtype=np.float32) -> AffineMap:
    if not 0 <= axis < ndim:
        raise ValueError(f"Axis {axis} out of range for {ndim} dimensions")
    diagonal = np.ones(ndim, dtype=dtype)
    diagonal[axis] = -1
    return AffineMap(linear=np.diag(diagonal), translation=np.zeros(ndim, dtype))


def _plane_axes(axes: Tuple[int, int], ndim: int) -> Tuple[int, int]:
    i, j = axes
    if i == j or not (0 <= i < ndim and 0 <= j < ndim):
        raise ValueError(f"Invalid plane axes {axes} for {ndim} dimensions")
    return i, j
