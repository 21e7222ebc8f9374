# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Tests for resampling dense images."""

import numpy as np
import pytest

from spatialaug.core import Bounds, InvalidCropShapeError, UnsupportedItemKindError
from spatialaug.items import Image, Keypoints, apply_affine, apply_affine_into
from spatialaug.resampling import ResamplingOptions
from spatialaug.transformation import (
    AffineMap,
    Flip,
    Rotate,
    SingularMatrixError,
    scaling_map,
    translation_map,
)


@pytest.fixture
def grid_image() -> Image:
    """A 5 x 6 image holding the values 0 .. 29."""
    return Image(np.arange(30, dtype=np.float32).reshape(5, 6))


def test_identity_keeps_data(grid_image: Image) -> None:
    result = apply_affine(grid_image, AffineMap.identity(2))
    assert isinstance(result, Image)
    assert np.allclose(result.data, grid_image.data)
    assert result.bounds == grid_image.bounds


def test_integer_translation_moves_bounds(grid_image: Image) -> None:
    """Without a crop the data stays put and the bounds carry the shift."""
    result = apply_affine(grid_image, translation_map([2.0, 3.0]))
    assert result.data.shape == (5, 6)
    assert result.bounds.origin == (2, 3)
    assert np.allclose(result.data, grid_image.data)
    assert result.bounds == Bounds.from_ranges([range(2, 7), range(3, 9)])


def test_crop_reflects_at_edges(grid_image: Image) -> None:
    window = (range(0, 5), range(0, 6))
    result = apply_affine(grid_image, translation_map([1.0, 0.0]), crop=window)

    assert result.data.shape == (5, 6)
    assert result.bounds == Bounds.from_ranges(window)
    # Row -1 of the source mirrors to row 1
    assert np.allclose(result.data[0], grid_image.data[1])
    assert np.allclose(result.data[1:], grid_image.data[:-1])


def test_crop_accepts_start_stop_pairs(grid_image: Image) -> None:
    matrix = translation_map([1.0, 0.0])
    from_ranges = apply_affine(grid_image, matrix, crop=(range(1, 4), range(2, 6)))
    from_pairs = apply_affine(grid_image, matrix, crop=[(1, 4), (2, 6)])
    assert from_pairs.data.shape == (3, 4)
    assert np.array_equal(from_pairs.data, from_ranges.data)
    # Output row 1 is source row 0
    assert np.allclose(from_pairs.data[0], grid_image.data[0, 2:6])


def test_uncropped_result_is_zero_filled() -> None:
    image = Image(np.ones((4, 4), dtype=np.float32))
    result = apply_affine(image, Rotate(45.0).get_affine(image.bounds))

    assert result.data.shape == (6, 6)
    assert result.bounds.origin == (-1, -1)
    # Corners of the output lie far outside the rotated source
    assert result.data[0, 0] == 0.0
    assert result.data[-1, -1] == 0.0
    assert result.data[3, 3] == pytest.approx(1.0)


def test_channels_are_resampled_independently() -> None:
    data = np.random.default_rng(0).random((5, 6, 3)).astype(np.float32)
    image = Image(data, spatial_ndim=2)

    result = apply_affine(image, Flip(axis=1).get_affine(image.bounds))
    assert result.data.shape == (5, 6, 3)
    assert result.spatial_ndim == 2
    assert np.allclose(result.data, data[:, ::-1, :])


def test_dtype_is_preserved() -> None:
    data = (np.arange(12).reshape(3, 4) * 20).astype(np.uint8)
    image = Image(data)
    result = apply_affine(image, Flip(axis=0).get_affine(image.bounds))
    assert result.data.dtype == np.uint8
    assert np.array_equal(result.data, data[::-1])


def test_custom_resampling_options(grid_image: Image) -> None:
    nearest = Image(grid_image.data, resampling=ResamplingOptions(order=0))
    result = apply_affine(nearest, translation_map([0.4, 0.0]), crop=[(0, 5), (0, 6)])
    assert result.resampling.order == 0
    # Nearest lookup never blends neighbouring rows
    assert np.array_equal(result.data, grid_image.data)


@pytest.mark.parametrize(
    "crop",
    [
        (range(0, 5),),
        (range(0, 5), range(0, 6), range(0, 2)),
        (range(0, 5), range(3, 3)),
        (range(0, 5), range(0, 6, 2)),
        [(0, 5), "ab"],
        "ab",
    ],
)
def test_invalid_crop_window(grid_image: Image, crop) -> None:
    with pytest.raises(InvalidCropShapeError) as exc_info:
        apply_affine(grid_image, AffineMap.identity(2), crop=crop)
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.message.startswith("Invalid crop window")


def test_2d_crop_on_3d_image() -> None:
    image = Image(np.zeros((3, 4, 5), dtype=np.float32))
    with pytest.raises(InvalidCropShapeError):
        apply_affine(image, AffineMap.identity(3), crop=(range(0, 4), range(0, 5)))


def test_singular_matrix_surfaces(grid_image: Image) -> None:
    with pytest.raises(SingularMatrixError):
        apply_affine(grid_image, scaling_map(0.0, ndim=2))


def test_apply_affine_into_writes_destination(grid_image: Image) -> None:
    matrix = translation_map([1.0, 0.0])
    window = (range(0, 5), range(0, 6))
    buffer = np.full((5, 6), -1.0, dtype=np.float32)
    dest = Image(buffer)

    result = apply_affine_into(dest, grid_image, matrix, window)

    assert result is dest
    assert result.data is buffer
    assert np.allclose(buffer, apply_affine(grid_image, matrix, window).data)
    assert dest.bounds == Bounds.from_ranges(window)


def test_apply_affine_into_without_crop(grid_image: Image) -> None:
    dest = Image(np.zeros((5, 6), dtype=np.float64))
    grid_image.apply_affine_into(dest, translation_map([2.0, 0.0]))
    assert np.allclose(dest.data, grid_image.data)
    assert dest.bounds.origin == (2, 0)


def test_apply_affine_into_shape_mismatch(grid_image: Image) -> None:
    dest = Image(np.zeros((4, 6), dtype=np.float32))
    with pytest.raises(InvalidCropShapeError):
        grid_image.apply_affine_into(dest, AffineMap.identity(2), (range(0, 5), range(0, 6)))


def test_apply_affine_into_other_kind(grid_image: Image) -> None:
    dest = Keypoints([(0.0, 0.0)], bounds=(5, 6))
    with pytest.raises(UnsupportedItemKindError):
        grid_image.apply_affine_into(dest, AffineMap.identity(2))


def test_constructor_validation() -> None:
    with pytest.raises(ValueError):
        Image(np.zeros((3, 3)), spatial_ndim=3)
    with pytest.raises(ValueError):
        Image(np.zeros((3, 3)), bounds=Bounds.from_shape((3, 3, 3)))


def test_bounds_must_match_data_shape() -> None:
    """Bounds covering a smaller grid would silently drop part of the data."""
    with pytest.raises(ValueError, match="spatial shape"):
        Image(np.ones((10, 10)), bounds=Bounds.from_shape((5, 5)))
    with pytest.raises(ValueError):
        Image(np.ones((4, 6, 3)), bounds=Bounds.from_shape((4, 5)), spatial_ndim=2)

    offset = Bounds.from_ranges((range(2, 6), range(-1, 5)))
    shifted = Image(np.ones((4, 6, 3)), bounds=offset, spatial_ndim=2)
    assert shifted.bounds.origin == (2, -1)


def test_repr(grid_image: Image) -> None:
    assert repr(grid_image) == "Image(shape=(5, 6), dtype=float32)"
