"""Projection names for positional queries and their alias normalization."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from .constants.runtime import (
    BOTH_PROJECTION_ALIASES,
    DEFAULT_PROJECTION,
    KEY_PROJECTION_ALIASES,
    PROJECTION_BOTH,
    PROJECTION_KEY,
    PROJECTION_VALUE,
    VALUE_PROJECTION_ALIASES,
)

logger = logging.getLogger(__name__)

PROJECTION_ALIASES: Mapping[str, str] = {
    **{alias: PROJECTION_KEY for alias in KEY_PROJECTION_ALIASES},
    **{alias: PROJECTION_VALUE for alias in VALUE_PROJECTION_ALIASES},
    **{alias: PROJECTION_BOTH for alias in BOTH_PROJECTION_ALIASES},
}


def normalize_projection(type: Optional[str] = DEFAULT_PROJECTION) -> str:
    """
    Resolve a projection name to ``"key"``, ``"value"`` or ``"both"``.

    Matching is case-insensitive. ``None`` and unknown names resolve to the
    value projection.
    """
    if type is None:
        return DEFAULT_PROJECTION
    name = str(type).lower()
    resolved = PROJECTION_ALIASES.get(name)
    if resolved is None:
        logger.debug(f"Unknown projection {type!r}, using {DEFAULT_PROJECTION!r}")
        return DEFAULT_PROJECTION
    return resolved


def project(entries: Mapping[Any, Any], type: Optional[str] = DEFAULT_PROJECTION) -> List[Any]:
    """Snapshot ``entries`` as a list of keys, values or ``(key, value)`` tuples."""
    projection = normalize_projection(type)
    if projection == PROJECTION_KEY:
        return list(entries.keys())
    if projection == PROJECTION_BOTH:
        return list(entries.items())
    return list(entries.values())
