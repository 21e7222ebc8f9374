# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Error classes for the spatialaug IO module."""

from spatialaug.core import SpatialAugError


# Base IO error classes
class IOError(SpatialAugError):
    """Base class for all IO-related errors in spatialaug."""

    def __init__(self, message: str):
        super().__init__(f"IO error: {message}")


# Matrix-related errors
class MatrixError(IOError):
    """Base class for matrix-related errors."""

    def __init__(self, message: str):
        super().__init__(f"Matrix error: {message}")


class MatrixFileNotFoundError(MatrixError):
    """Exception raised when a matrix file is not found."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        message = f"Matrix file not found: {file_path}"
        suggestion = "Please check that the file exists and the path is correct."
        super().__init__(f"{message}\n{suggestion}")


class MatrixFileError(MatrixError):
    """Exception raised when a matrix file can't be read."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidMatrixFormatError(MatrixError):
    """Exception raised when the contents of a matrix file can't be parsed."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidMatrixDimensionsError(MatrixError):
    """Exception raised when a matrix has a shape that is not an affine map."""

    def __init__(self, message: str):
        super().__init__(message)


# Resampling configuration errors
class ResamplingConfigError(IOError):
    """Base class for resampling configuration errors."""

    def __init__(self, message: str):
        super().__init__(f"Resampling config error: {message}")


class ResamplingConfigFileNotFoundError(ResamplingConfigError):
    """Exception raised when a resampling configuration file is not found."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__(f"Config file not found: {file_path}")


class InvalidTomlError(ResamplingConfigError):
    """Exception raised when a configuration file is not valid TOML."""

    def __init__(self, message: str):
        super().__init__(message)


class ResamplingConfigValidationError(ResamplingConfigError):
    """Exception raised when a configuration section has invalid values."""

    def __init__(self, message: str):
        super().__init__(message)
