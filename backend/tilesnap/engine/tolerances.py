"""Shared geometric tolerances for snapping and suggestion placement.

All distances are in canvas units. Shapes are drawn at a fixed scale
(square side 50), so tolerances are absolute rather than relative to
edge length.
"""

# Largest difference in edge length still treated as "the same edge".
# 4% of the 50-unit reference side.
MAX_LENGTH_DELTA = 2.0

# Largest midpoint-to-midpoint distance at which two edges may fuse.
# A little under one square side, so opposite edges of one tile never qualify.
MAX_EDGE_PROXIMITY = 40.0

# Normals must diverge by ~154° or more (cos 154° ≈ -0.9).
MIN_ANTIPARALLEL_COSINE = -0.9

# |cos| between raw edge directions; rejects corner-to-corner near misses.
MIN_PARALLEL_COSINE = 0.9

# Push along the stationary edge normal after alignment so edges never coincide.
SEPARATION_PUSH = 1.0

# A suggestion closer than this to any existing tile centre is occupied.
OCCUPANCY_CLEARANCE = 50.0

# Suggestions must fall strictly inside this square working area.
SUGGESTION_BOUNDS = (80.0, 520.0)

# Dragged and snapped tiles are clamped into this square (inclusive).
DRAG_BOUNDS = (50.0, 550.0)

# Half-width of the angle bands used to classify edge orientation.
BAND_TOLERANCE_DEG = 15.0
