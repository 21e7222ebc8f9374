# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, Union

import numpy as np

from spatialaug.core import Bounds

from .affine_map import AffineMap

if TYPE_CHECKING:
    from spatialaug.items import Item


class AbstractAffine(ABC):
    """Base class for all affine transformations.

    A subclass only resolves a matrix; applying it is the job of the item.
    To take part, a transform implements :meth:`get_affine` and, if it is
    stochastic, :meth:`get_randstate`.
    """

    @abstractmethod
    def get_affine(
        self,
        bounds: Bounds,
        randstate: Any = None,
        dtype=np.float32,
    ) -> AffineMap:
        """Resolve the affine map for an item.

        Args:
            bounds: Bounds of the item the map will be applied to
            randstate: Random state as returned by :meth:`get_randstate`
            dtype: Numeric precision of the returned map

        Returns:
            The affine map of this transformation
        """
        pass

    def get_randstate(self, rng: Optional[np.random.Generator] = None) -> Any:
        """Draw the random state for one application. Deterministic transforms return None."""
        return None

    def apply(
        self,
        item: "Item",
        randstate: Any = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "Item":
        from .apply import apply

        return apply(self, item, randstate=randstate, rng=rng)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Affine(AbstractAffine):
    """A fixed, precomputed affine map.

    Bounds, random state and precision are ignored; the stored map is
    returned unchanged.
    """

    def __init__(self, matrix: Union[AffineMap, np.ndarray]):
        if not isinstance(matrix, AffineMap):
            matrix = AffineMap.from_homogeneous(matrix)
        self.matrix = matrix

    def get_affine(
        self,
        bounds: Bounds,
        randstate: Any = None,
        dtype=np.float32,
    ) -> AffineMap:
        return self.matrix

    def __repr__(self) -> str:
        return f"Affine(ndim={self.matrix.ndim})"
