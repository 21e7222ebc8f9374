# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

import numpy as np
import pytest

from spatialaug.transformation import (
    AffineMap,
    SingularMatrixError,
    TransformationError,
    reflection_map,
    rotation_map,
    scaling_map,
    shear_map,
    translation_map,
)


@pytest.fixture
def shift() -> AffineMap:
    """Translation by one along axis 0."""
    return translation_map([1.0, 0.0])


@pytest.fixture
def double() -> AffineMap:
    """Uniform scaling by two around the origin."""
    return scaling_map(2.0, ndim=2)


def test_apply_single_point_and_points() -> None:
    affine = AffineMap(
        linear=np.array([[0.0, -1.0], [1.0, 0.0]]), translation=np.array([1.0, 2.0])
    )
    assert np.allclose(affine.apply(np.array([1.0, 0.0])), [1.0, 3.0])

    points = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    expected = np.array([[1.0, 3.0], [0.0, 2.0], [0.0, 3.0]])
    assert np.allclose(affine.apply(points), expected)
    assert np.allclose(affine(points), expected)


def test_apply_rejects_wrong_dimension() -> None:
    with pytest.raises(ValueError):
        AffineMap.identity(2).apply(np.zeros(3))
    with pytest.raises(ValueError):
        AffineMap.identity(2).apply(np.zeros((2, 2, 2)))


def test_after_applies_other_first(shift: AffineMap, double: AffineMap) -> None:
    """double.after(shift) shifts first, then scales."""
    combined = double.after(shift)
    # (1, 1) -> (2, 1) -> (4, 2)
    assert np.allclose(combined.apply(np.array([1.0, 1.0])), [4.0, 2.0])


def test_before_applies_self_first(shift: AffineMap, double: AffineMap) -> None:
    assert shift.before(double) == double.after(shift)
    # (1, 1) -> (2, 2) -> (3, 2)
    assert np.allclose(shift.after(double).apply(np.array([1.0, 1.0])), [3.0, 2.0])


def test_matmul_is_composition(shift: AffineMap, double: AffineMap) -> None:
    assert double @ shift == double.after(shift)


def test_composition_is_associative() -> None:
    a = rotation_map(30.0, ndim=2)
    b = translation_map([3.0, -1.0])
    c = shear_map(0.4, ndim=2)
    assert (a @ b) @ c == a @ (b @ c)


def test_compose_dimension_mismatch() -> None:
    with pytest.raises(ValueError):
        AffineMap.identity(2).after(AffineMap.identity(3))


def test_inverse_round_trip() -> None:
    affine = rotation_map(25.0, ndim=2, dtype=np.float64).after(
        translation_map([4.0, -2.0])
    )
    point = np.array([3.0, 7.0])
    assert np.allclose(affine.inverse().apply(affine.apply(point)), point)
    assert affine.inverse().after(affine) == AffineMap.identity(2)


def test_singular_inverse_raises() -> None:
    affine = AffineMap(linear=np.zeros((2, 2)), translation=np.zeros(2))
    with pytest.raises(SingularMatrixError) as exc_info:
        affine.inverse()
    assert isinstance(exc_info.value, TransformationError)
    assert "not invertible" in exc_info.value.message


def test_homogeneous_round_trip() -> None:
    affine = rotation_map(40.0, ndim=3, axes=(1, 2)).after(translation_map([1.0, 2.0, 3.0]))
    matrix = affine.to_homogeneous()
    assert matrix.shape == (4, 4)
    assert np.allclose(matrix[3], [0, 0, 0, 1])
    assert AffineMap.from_homogeneous(matrix) == affine


def test_from_homogeneous_rejects_invalid_matrices() -> None:
    with pytest.raises(ValueError):
        AffineMap.from_homogeneous(np.ones((3, 3)))
    with pytest.raises(ValueError):
        AffineMap.from_homogeneous(np.eye(3)[:2])


def test_invalid_shapes() -> None:
    with pytest.raises(ValueError):
        AffineMap(linear=np.eye(2, 3), translation=np.zeros(2))
    with pytest.raises(ValueError):
        AffineMap(linear=np.eye(2), translation=np.zeros(3))


def test_maps_are_immutable() -> None:
    linear = np.eye(2)
    affine = AffineMap(linear=linear, translation=np.zeros(2))
    linear[0, 0] = 5.0
    assert affine.linear[0, 0] == 1.0
    with pytest.raises(ValueError):
        affine.linear[0, 0] = 3.0
    with pytest.raises(AttributeError):
        affine.linear = np.eye(2)


def test_rotation_map_direction() -> None:
    """Positive angles rotate axis 0 towards axis 1."""
    rotation = rotation_map(90.0, ndim=2)
    assert np.allclose(rotation.apply(np.array([1.0, 0.0])), [0.0, 1.0], atol=1e-6)
    assert np.allclose(rotation.apply(np.array([0.0, 1.0])), [-1.0, 0.0], atol=1e-6)


def test_rotation_map_in_plane_of_3d() -> None:
    rotation = rotation_map(90.0, ndim=3, axes=(1, 2))
    assert np.allclose(rotation.apply(np.array([5.0, 1.0, 0.0])), [5.0, 0.0, 1.0], atol=1e-6)


@pytest.mark.parametrize("axes", [(0, 0), (0, 2), (-1, 1)])
def test_invalid_plane_axes(axes) -> None:
    with pytest.raises(ValueError):
        rotation_map(10.0, ndim=2, axes=axes)


def test_about_center() -> None:
    """A half turn around (1, 1) sends the origin to (2, 2)."""
    rotation = rotation_map(180.0, ndim=2).about([1.0, 1.0])
    assert np.allclose(rotation.apply(np.array([0.0, 0.0])), [2.0, 2.0], atol=1e-5)
    assert np.allclose(rotation.apply(np.array([1.0, 1.0])), [1.0, 1.0], atol=1e-5)


def test_shear_and_reflection() -> None:
    assert np.allclose(shear_map(0.5, ndim=2).apply(np.array([0.0, 2.0])), [1.0, 2.0])
    assert np.allclose(reflection_map(0, ndim=2).apply(np.array([3.0, 4.0])), [-3.0, 4.0])
    with pytest.raises(ValueError):
        reflection_map(2, ndim=2)


def test_scaling_per_axis() -> None:
    affine = scaling_map([2.0, 0.5], ndim=2)
    assert np.allclose(affine.apply(np.array([3.0, 4.0])), [6.0, 2.0])


def test_astype() -> None:
    affine = AffineMap.identity(2)
    assert affine.dtype == np.float32
    assert affine.astype(np.float32) is affine
    converted = affine.astype(np.float64)
    assert converted.dtype == np.float64
    assert converted.translation.dtype == np.float64
    assert converted == affine


def test_equality_with_other_types() -> None:
    assert AffineMap.identity(2) != "identity"
    assert AffineMap.identity(2) != AffineMap.identity(3)
