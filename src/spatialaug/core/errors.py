# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Optional


class SpatialAugError(Exception):
    """Base exception class for all errors raised by spatialaug.

    Provides a consistent interface for error handling and formatting.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class UnsupportedItemKindError(SpatialAugError, TypeError):
    """Raised when an object has no bounds provider or affine applicator."""

    def __init__(self, item: Any, operation: Optional[str] = None):
        self.item_type = type(item)
        message = f"Unsupported item kind: {self.item_type.__name__}"
        if operation is not None:
            message += f" does not support '{operation}'"
        super().__init__(message)


class InvalidCropShapeError(SpatialAugError, ValueError):
    """Raised when a crop window does not match the item it is applied to."""

    def __init__(self, message: str):
        super().__init__(f"Invalid crop window: {message}")
