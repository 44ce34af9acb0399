"""
Default parameters for joint post-processing and statistics.

Functions take these as keyword defaults; the CLI and GUI expose the ones a
user is expected to tune.
"""

from matplotlib.colors import TABLEAU_COLORS

# ---------------------------------------------------------------
# DEDUPLICATION
# ---------------------------------------------------------------

# Pixel tolerance for endpoint / perpendicular matches
DEFAULT_MATCH_THRESHOLD = 15.0

# Tolerance applied to raw Hough output in the detection pipeline
DETECTION_MATCH_THRESHOLD = 20.0

# Max folded angle difference (deg) for the collinear-containment test
COLLINEAR_ANGLE_DEG = 10.0

# Midpoint gate, as a fraction of the longer segment's length
MIDPOINT_GATE_RATIO = 0.5


# ---------------------------------------------------------------
# JOINTS
# ---------------------------------------------------------------

# Detected joints shorter than this (metres) are discarded
MIN_JOINT_LENGTH_M = 0.1


# ---------------------------------------------------------------
# ORIENTATION CLUSTERING
# ---------------------------------------------------------------

BIN_WIDTH_DEG = 15.0
MAX_JOINT_SETS = 12

# Joint set colours by rank; cycles past ten sets
PALETTE = tuple(TABLEAU_COLORS.values())
