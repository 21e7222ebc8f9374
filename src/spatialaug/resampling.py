# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Inverse-mapped resampling of dense arrays."""

from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np
from pydantic import BaseModel, Field
from scipy import ndimage

from spatialaug.core import CropWindow, logger

if TYPE_CHECKING:
    from spatialaug.transformation.affine_map import AffineMap


class BoundaryMode(str, Enum):
    """How samples outside the source array are extrapolated."""

    REFLECT = "reflect"
    FLAT = "flat"
    CONSTANT = "constant"
    WRAP = "wrap"


# scipy.ndimage names for each boundary mode. "mirror" reflects about the
# edge sample, "nearest" repeats it.
_NDIMAGE_MODES = {
    BoundaryMode.REFLECT: "mirror",
    BoundaryMode.FLAT: "nearest",
    BoundaryMode.CONSTANT: "constant",
    BoundaryMode.WRAP: "grid-wrap",
}


class ResamplingOptions(BaseModel):
    """Interpolation settings for dense items."""

    order: int = Field(
        default=1, ge=0, le=5, description="Spline order (0 = nearest, 1 = linear)."
    )
    boundary: BoundaryMode = Field(
        default=BoundaryMode.REFLECT,
        description="Extrapolation used when no fill value applies.",
    )
    fill_value: Optional[float] = Field(
        default=0.0,
        description="Constant for samples outside the source when the output is not cropped. "
        "None uses the boundary mode instead.",
    )

    model_config = {"extra": "forbid", "frozen": True}


IMAGE_RESAMPLING = ResamplingOptions()
MASK_RESAMPLING = ResamplingOptions(order=0, boundary=BoundaryMode.FLAT, fill_value=None)


def warp(
    source: np.ndarray,
    inverse: "AffineMap",
    window: CropWindow,
    order: int = 1,
    boundary: BoundaryMode = BoundaryMode.REFLECT,
    fill_value: Optional[float] = None,
    source_origin: Optional[Sequence[int]] = None,
    output: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Resample ``source`` on the output grid ``window``.

    Every output index is mapped to its coordinate (``window`` start plus the
    index), through ``inverse`` into source coordinates, and finally to a
    source index by subtracting ``source_origin``. Axes of ``source`` beyond
    the map's dimensionality are channels and are resampled independently.

    Args:
        source: Array to resample
        inverse: Map from output coordinates to source coordinates
        window: One index range per spatial axis; fixes the output shape
        order: Spline interpolation order
        boundary: Extrapolation used when ``fill_value`` is None
        fill_value: Constant for samples outside ``source``
        source_origin: Coordinate of ``source[0, ..., 0]``, zero if omitted
        output: Array to write into instead of allocating a new one

    Returns:
        The resampled array (``output`` if given)
    """
    ndim = inverse.ndim
    if source.ndim < ndim:
        raise ValueError(
            f"Source has {source.ndim} dimensions, map needs at least {ndim}"
        )
    if len(window) != ndim:
        raise ValueError(f"Window has {len(window)} axes, map has {ndim}")
    if source_origin is None:
        source_origin = np.zeros(ndim)

    linear = inverse.linear.astype(np.float64)
    out_origin = np.array([r.start for r in window], dtype=np.float64)
    offset = (
        linear @ out_origin
        + inverse.translation.astype(np.float64)
        - np.asarray(source_origin, dtype=np.float64)
    )
    shape = tuple(len(r) for r in window) + source.shape[ndim:]

    if fill_value is None:
        mode, cval = _NDIMAGE_MODES[BoundaryMode(boundary)], 0.0
    else:
        mode, cval = "constant", float(fill_value)

    logger.debug(f"Resampling {source.shape} -> {shape} (order={order}, mode={mode})")

    is_bool = source.dtype == np.bool_
    data = source.view(np.uint8) if is_bool else source

    channels = int(np.prod(source.shape[ndim:], dtype=int))
    flat_source = data.reshape(data.shape[:ndim] + (channels,))
    result = np.empty(shape[:ndim] + (channels,), dtype=data.dtype)
    for c in range(channels):
        result[..., c] = ndimage.affine_transform(
            flat_source[..., c],
            linear,
            offset=offset,
            output_shape=shape[:ndim],
            order=order,
            mode=mode,
            cval=cval,
        )
    result = result.reshape(shape)
    if is_bool:
        result = result.view(np.bool_)

    if output is None:
        return result
    if output.shape != shape:
        raise ValueError(f"Output has shape {output.shape}, expected {shape}")
    np.copyto(output, result, casting="unsafe")
    return output
