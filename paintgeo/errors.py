"""Typed errors for paintgeo.

The geometry operations themselves never raise on valid points; these
are raised where input enters the package (point construction,
parsing, rules files).
"""

from __future__ import annotations


class GeometryError(ValueError):
    """Base error for paintgeo."""


class InvalidPointError(GeometryError):
    """A coordinate pair is malformed or not finite."""


class ConfigError(GeometryError):
    """A rules file cannot be read or holds invalid values."""
