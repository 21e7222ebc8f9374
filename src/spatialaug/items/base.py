# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, Sequence

import numpy as np

from spatialaug.core import Bounds, UnsupportedItemKindError

if TYPE_CHECKING:
    from spatialaug.transformation.affine_map import AffineMap


class Item(ABC):
    """Base class for everything a transformation can be applied to.

    To support affine transformations a subclass provides its
    :attr:`bounds` and overrides :meth:`apply_affine`. Overriding
    :meth:`apply_affine_into` is optional.
    """

    @property
    @abstractmethod
    def bounds(self) -> Bounds:
        """Spatial extent of the item in its coordinate space."""
        pass

    @property
    def affine_dtype(self) -> np.dtype:
        """Precision in which affine maps for this item are resolved."""
        return np.dtype(np.float32)

    def apply_affine(self, matrix: "AffineMap", crop: Optional[Sequence] = None) -> "Item":
        """Apply ``matrix`` and return a new item of the same type.

        Args:
            matrix: Affine map to apply
            crop: Index ranges of the output window; without it the whole
                transformed extent is kept

        Raises:
            UnsupportedItemKindError: If the item type has no applicator
        """
        raise UnsupportedItemKindError(self, "apply_affine")

    def apply_affine_into(
        self, dest: "Item", matrix: "AffineMap", crop: Optional[Sequence] = None
    ) -> "Item":
        """Apply ``matrix`` writing the result into ``dest`` where supported.

        Item types without in-place support fall back to :meth:`apply_affine`;
        the returned item always holds the result.
        """
        return self.apply_affine(matrix, crop)


class ItemWrapper(Item):
    """Transparent decorator around another item.

    Bounds and precision come from the wrapped item. Applying an affine map
    transforms the wrapped item and wraps the result again.
    """

    def __init__(self, item: Item):
        self._item = item

    @property
    def wrapped(self) -> Item:
        return self._item

    @property
    def bounds(self) -> Bounds:
        return get_bounds(self._item)

    @property
    def affine_dtype(self) -> np.dtype:
        return self._item.affine_dtype

    def rewrap(self, item: Item) -> "ItemWrapper":
        """Wrap a transformed item the same way as this one."""
        return type(self)(item)

    def apply_affine(self, matrix: "AffineMap", crop: Optional[Sequence] = None) -> "ItemWrapper":
        return self.rewrap(apply_affine(self._item, matrix, crop))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._item!r})"


def get_bounds(item: Any) -> Bounds:
    """Return the bounds of ``item``.

    Plain numpy arrays are accepted and get the bounds of their shape.

    Raises:
        UnsupportedItemKindError: If ``item`` has no notion of bounds
    """
    if isinstance(item, Item):
        return item.bounds
    if isinstance(item, np.ndarray):
        return Bounds.from_shape(item.shape)
    raise UnsupportedItemKindError(item, "get_bounds")


def apply_affine(item: Any, matrix: "AffineMap", crop: Optional[Sequence] = None) -> Item:
    """Apply ``matrix`` to ``item``, optionally cropping to the index ranges ``crop``.

    Raises:
        UnsupportedItemKindError: If ``item`` has no affine applicator
        InvalidCropShapeError: If ``crop`` does not match the item
    """
    if not isinstance(item, Item):
        raise UnsupportedItemKindError(item, "apply_affine")
    return item.apply_affine(matrix, crop)


def apply_affine_into(
    dest: Item, item: Any, matrix: "AffineMap", crop: Optional[Sequence] = None
) -> Item:
    """In-place variant of :func:`apply_affine` writing into ``dest`` where supported."""
    if not isinstance(item, Item):
        raise UnsupportedItemKindError(item, "apply_affine_into")
    return item.apply_affine_into(dest, matrix, crop)
