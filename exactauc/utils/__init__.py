"""Utility functions for the AUC engine.

This module provides input validation, input conversion and floating-point
curve integration helpers used across the package.
"""

from .validation import validate_labels, validate_predictions, validate_samples
from .computation import trapezoid_area, threshold_groups
from .decorator import as_sample_array

__all__ = [
    # Validation functions
    "validate_labels",
    "validate_predictions",
    "validate_samples",
    # Computation functions
    "trapezoid_area",
    "threshold_groups",
    # Input conversion
    "as_sample_array",
]
