# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Parser for resampling settings in TOML format.

Example::

    [image]
    order = 3
    fill_value = 0.5

    [mask]
    boundary = "constant"
"""

from pathlib import Path
from typing import Dict, Union

import toml
from pydantic import ValidationError

from spatialaug.core import logger
from spatialaug.resampling import (
    IMAGE_RESAMPLING,
    MASK_RESAMPLING,
    ResamplingOptions,
)

from .errors import (
    InvalidTomlError,
    ResamplingConfigFileNotFoundError,
    ResamplingConfigValidationError,
)


class ResamplingConfigParser:
    """Parser for TOML files holding per-item-kind resampling settings."""

    # Known sections and the defaults their values are layered on
    KNOWN_SECTIONS = {
        "image": IMAGE_RESAMPLING,
        "mask": MASK_RESAMPLING,
    }

    def __init__(self, file_path: Union[str, Path]):
        """Initialize the parser.

        Args:
            file_path: Path to the TOML file

        Raises:
            ResamplingConfigFileNotFoundError: If the file doesn't exist
            InvalidTomlError: If the TOML is malformed
        """
        self.file_path = Path(file_path)
        if not self.file_path.exists():
            raise ResamplingConfigFileNotFoundError(str(self.file_path))

        try:
            with open(self.file_path, "r") as f:
                self.raw_data = toml.load(f)
        except toml.TomlDecodeError as e:
            raise InvalidTomlError(f"Invalid TOML format: {e}")

        unknown_sections = [s for s in self.raw_data if s not in self.KNOWN_SECTIONS]
        if unknown_sections:
            logger.warning(
                f"Unknown resampling sections ignored: {', '.join(unknown_sections)}"
            )

    def parse(self) -> Dict[str, ResamplingOptions]:
        """Parse every known section, falling back to defaults for missing ones.

        Values given in a section override the defaults of that item kind;
        a section only setting ``order`` keeps the default boundary and fill.

        Returns:
            Mapping from section name ('image', 'mask') to ResamplingOptions

        Raises:
            ResamplingConfigValidationError: If a section has invalid values
        """
        parsed: Dict[str, ResamplingOptions] = {}
        for section_name, defaults in self.KNOWN_SECTIONS.items():
            section_data = self.raw_data.get(section_name)
            if section_data is None:
                parsed[section_name] = defaults
                continue

            if not isinstance(section_data, dict):
                raise ResamplingConfigValidationError(
                    f"Invalid format for section '{section_name}'. "
                    f"Expected a table, got {type(section_data).__name__}."
                )

            try:
                parsed[section_name] = ResamplingOptions(
                    **{**defaults.model_dump(), **section_data}
                )
            except ValidationError as e:
                error_msgs = [
                    f"  - {'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                ]
                raise ResamplingConfigValidationError(
                    f"Invalid settings in section '{section_name}':\n"
                    + "\n".join(error_msgs)
                ) from e
        return parsed


def load_resampling_config(file_path: Union[str, Path]) -> Dict[str, ResamplingOptions]:
    """Read a TOML resampling configuration in one call."""
    return ResamplingConfigParser(file_path).parse()
