"""
ordcache Constants Module.

Centralized defaults for:
- Projection names and their accepted aliases
- Lookup sentinels
- String rendering tokens
"""

# =============================================================================
# Runtime Defaults
# =============================================================================
from .runtime import (
    # Projections
    PROJECTION_KEY,
    PROJECTION_VALUE,
    PROJECTION_BOTH,
    DEFAULT_PROJECTION,
    KEY_PROJECTION_ALIASES,
    BOTH_PROJECTION_ALIASES,
    VALUE_PROJECTION_ALIASES,
    # Lookups
    NOT_FOUND_POSITION,
    # Rendering
    STRING_OPEN,
    STRING_CLOSE,
    STRING_ENTRY_SEPARATOR,
    STRING_KEY_VALUE_SEPARATOR,
    STRING_EMPTY,
)

__all__ = [
    "PROJECTION_KEY",
    "PROJECTION_VALUE",
    "PROJECTION_BOTH",
    "DEFAULT_PROJECTION",
    "KEY_PROJECTION_ALIASES",
    "BOTH_PROJECTION_ALIASES",
    "VALUE_PROJECTION_ALIASES",
    "NOT_FOUND_POSITION",
    "STRING_OPEN",
    "STRING_CLOSE",
    "STRING_ENTRY_SEPARATOR",
    "STRING_KEY_VALUE_SEPARATOR",
    "STRING_EMPTY",
]
