# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""Exceptions raised by colorsense."""


class ColorSenseError(Exception):
    """Base class for colorsense errors."""


class MalformedEncoding(ColorSenseError, ValueError):
    """A stored hex string cannot be decoded.

    Raised for wrong length, characters outside ``[0-9A-F]`` or a
    missing storage field. The whole string is rejected, never repaired.
    """


class AggregationClosedError(ColorSenseError, RuntimeError):
    """An aggregator was used after ``finalize()``."""
