"""Runtime/default constants for projections, lookups and rendering."""

# Projections
PROJECTION_KEY = "key"
PROJECTION_VALUE = "value"
PROJECTION_BOTH = "both"
DEFAULT_PROJECTION = PROJECTION_VALUE

# Lower-cased aliases accepted by array()/position()/first()/... ;
# anything not listed falls back to DEFAULT_PROJECTION.
KEY_PROJECTION_ALIASES = ("k", "ke", "key", "keys")
BOTH_PROJECTION_ALIASES = ("b", "both", "entries", "items", "pairs")
VALUE_PROJECTION_ALIASES = ("v", "va", "val", "value", "values")

# Lookups
NOT_FOUND_POSITION = -1

# to_string() rendering
STRING_OPEN = "{ "
STRING_CLOSE = " }"
STRING_ENTRY_SEPARATOR = ", "
STRING_KEY_VALUE_SEPARATOR = ": "
STRING_EMPTY = "{ }"
