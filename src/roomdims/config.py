"""
Configuration for the room dimension engine
"""

# Geometry
TOLERANCE = 0.01  # Point coincidence and angle matching, in room units
MIN_CORNERS = 3

# Dimension options
DESCRIPTION_PRECISION = 1
OPTION_ID_PREFIX = "dim"

# Room data
DEFAULT_ROOM_TYPE = "simple"
ROOM_TYPES = ("simple", "triangle", "t_shape")

# Output
JSON_INDENT = 2
