"""Tunable geometry rules.

The containment threshold and the parallel-line tolerance are the only
knobs the geometry core has.  Both live here so the CLI, the library
and the tests read them from a single place.

Overrides come from a JSON object, e.g. ``{"winding_threshold_rad": 1.0}``,
either passed explicitly to ``load_rules`` or named by the
``PAINTGEO_RULES`` environment variable and picked up by ``active_rules``.
"""

from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

from paintgeo.errors import ConfigError


RULES_ENV_VAR = "PAINTGEO_RULES"


@dataclass(frozen=True)
class GeometryRules:
    """Numerical rules for the geometry core.

    Angles are in radians.
    """

    winding_threshold_rad: float = 1.0
    """|winding sum| above this means the point is inside.  A full
    winding is 2π and an outside point sums to ~0; 1.0 sits between
    them but is not a half-winding.  Kept at 1.0 for compatibility
    with existing hit-testing callers."""

    parallel_tolerance: float = 0.0
    """Two oblique lines whose inverse slopes differ by at most this
    much are reported as parallel.  0.0 means exact equality."""


# Module-level singleton — the compiled-in defaults.
GEOMETRY_RULES = GeometryRules()

_active_cache: GeometryRules | None = None


def load_rules(path: str | os.PathLike) -> GeometryRules:
    """Read a JSON override file on top of the defaults."""
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read rules file {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Rules file {p} is not valid JSON: {e}") from e
    return rules_from_dict(raw, source=str(p))


def rules_from_dict(raw: object, source: str = "<dict>") -> GeometryRules:
    """Validate an override mapping and apply it to the defaults."""
    if not isinstance(raw, dict):
        raise ConfigError(f"{source}: expected a JSON object, got {type(raw).__name__}")

    known = {f.name for f in fields(GeometryRules)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"{source}: unknown rule(s) {', '.join(unknown)}")

    values: dict[str, float] = {}
    for key, val in raw.items():
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            raise ConfigError(f"{source}: '{key}' must be a number, got {val!r}")
        if not math.isfinite(val):
            raise ConfigError(f"{source}: '{key}' must be finite, got {val!r}")
        values[key] = float(val)

    rules = replace(GEOMETRY_RULES, **values)
    if rules.winding_threshold_rad <= 0:
        raise ConfigError(f"{source}: winding_threshold_rad must be > 0")
    if rules.parallel_tolerance < 0:
        raise ConfigError(f"{source}: parallel_tolerance must be >= 0")
    return rules


def active_rules() -> GeometryRules:
    """Rules in effect: ``$PAINTGEO_RULES`` if set, else the defaults. Cached."""
    global _active_cache
    if _active_cache is None:
        env_path = os.environ.get(RULES_ENV_VAR)
        _active_cache = load_rules(env_path) if env_path else GEOMETRY_RULES
    return _active_cache


def use_rules(rules: GeometryRules) -> None:
    """Install *rules* as the active set (CLI ``--config``)."""
    global _active_cache
    _active_cache = rules


def reload():
    """Force re-reading of the active rules (for testing)."""
    global _active_cache
    _active_cache = None
