# config.py
# Library-wide constants (dtypes, bounds, loader and CLI defaults)

import numpy as np

# ---------------------------
# Sample record
# ---------------------------
LABEL_DTYPE = np.uint32
PREDICTION_DTYPE = np.float32  # precision of records read from text files
LABEL_FIELD = "ground_truth"
PREDICTION_FIELD = "prediction"

# ---------------------------
# Integration
# ---------------------------
ACCUMULATOR_DTYPE = np.uint64  # holds 2 * P * N for any dataset up to MAX_SAMPLES
MIN_SAMPLES = 2
MAX_SAMPLES = 2**32

# Legacy out-of-range return values of the reference tool
ALL_NEGATIVES_SENTINEL = -1.0
ALL_POSITIVES_SENTINEL = -2.0

# ---------------------------
# Loader
# ---------------------------
DEFAULT_DELIMITER = ","
MALFORMED_POLICIES = ("stop", "skip", "raise")
DEFAULT_MALFORMED_POLICY = "stop"
FILE_ENCODING = "utf-8"

# ---------------------------
# CLI exit codes
# ---------------------------
EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_ALL_NEGATIVES = 3
EXIT_ALL_POSITIVES = 4
