import numpy as np

FloatArray = np.ndarray
IntArray = np.ndarray

# Quickselect gives up on its pivot heuristic after this many consecutive
# poor splits, and finishes the call with median-of-medians. A split is poor
# when the range that remains is larger than POOR_SPLIT_RATIO times the
# range that was partitioned.
MAX_POOR_SPLITS = 3
POOR_SPLIT_RATIO = 0.75

# Size of the frame stack of the median-of-medians selection. Every nested
# frame covers at most a fifth of its parent, and 5 ** 64 exceeds any
# addressable array size.
MEDIAN_OF_MEDIANS_DEPTH = 64

# Median-of-medians group size.
GROUP_SIZE = 5
