"""ordcache - Insertion-ordered key/value cache with array-style operations."""

# --- Container ---
from .cache import OrderedCache

# --- Projections ---
from .projection import normalize_projection, project

# --- Infrastructure ---
from .errors import OrdcacheError, InputError
from . import constants

__version__ = "0.1.0"

__all__ = [
    "OrderedCache",
    "normalize_projection", "project",
    "OrdcacheError", "InputError",
    "constants",
]
