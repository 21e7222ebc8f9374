# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Logging utilities for spatialaug."""

import logging

from spatialaug import __app_name__


def getLogger(name: str = __app_name__) -> logging.Logger:
    """Get the logger with the given name (defaults to "spatialaug")."""
    return logging.getLogger(name)


logger = getLogger()
