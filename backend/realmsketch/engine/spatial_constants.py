"""Shared spatial constants for placement and layout resolution.

All distances are in canvas units (editor pixels). The defaults were tuned
against the 600x600 world-builder canvas and the prefab template layouts.
"""

# Keep generated objects this far from every canvas edge.
EDGE_MARGIN = 20.0

# Radial placement ring for synthesized elements, as a fraction of the
# shorter canvas side.
RADIAL_FRACTION = 0.2

# Pairs closer than this are considered overlapping.
MIN_SEPARATION = 50.0

# Displaced objects land this far from their neighbour, leaving slack
# above MIN_SEPARATION.
TARGET_SEPARATION = 60.0

# Above this object count a populated scene also gets a level-of-detail hint.
LOD_OBJECT_THRESHOLD = 100
