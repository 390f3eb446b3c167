"""
Constants for the interpolation_calc package.

"""

import numpy as np

EPSILON = float(np.finfo(np.float64).eps)  # smallest span accepted between two bounds

DEFAULT_DECIMALS = 5  # digits kept by the interpolation functions
DISPLAY_DECIMALS = 5  # digits shown when formatting a result
MAX_DECIMALS = 15  # float64 carries ~15-17 significant decimal digits

NO_VALUE = "—"  # rendered in place of an absent result

DECIMALS_ENV_VAR = "INTERPOLATION_DECIMALS"
CONFIG_DIR_NAME = "interpolation_calc"

