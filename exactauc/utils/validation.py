"""Input validation utilities for the AUC engine."""

import numpy as np
from ..config import LABEL_FIELD, PREDICTION_FIELD, MIN_SAMPLES, MAX_SAMPLES


def validate_labels(labels: np.ndarray, name: str = "ground_truth") -> np.ndarray:
    """Ensure labels are a 1D array of 0/1 values."""
    labels = np.asarray(labels)
    if labels.ndim != 1:
        raise ValueError(f"{name} must be 1D array, got shape {labels.shape}")
    if len(labels) == 0:
        raise ValueError(f"{name} cannot be empty")
    if labels.dtype == bool:
        return labels
    if not np.issubdtype(labels.dtype, np.number):
        raise ValueError(f"{name} must be numeric, got dtype {labels.dtype}")
    if not np.isin(labels, (0, 1)).all():
        bad = labels[~np.isin(labels, (0, 1))]
        raise ValueError(
            f"{name} value must be either 0 or 1, got {bad[0]}"
        )
    return labels


def validate_predictions(
    predictions: np.ndarray, name: str = "prediction"
) -> np.ndarray:
    """Ensure predictions are a valid 1D floating array."""
    predictions = np.asarray(predictions)
    if predictions.ndim != 1:
        raise ValueError(
            f"{name} must be 1D array, got shape {predictions.shape}"
        )
    if len(predictions) == 0:
        raise ValueError(f"{name} cannot be empty")
    if not np.issubdtype(predictions.dtype, np.floating):
        if not np.issubdtype(predictions.dtype, np.number):
            raise ValueError(
                f"{name} must be numeric, got dtype {predictions.dtype}"
            )
        predictions = predictions.astype(np.float64)
    if not np.isfinite(predictions).all():
        raise ValueError(f"{name} contains non-finite values")
    return predictions


def validate_samples(samples: np.ndarray, name: str = "samples") -> np.ndarray:
    """
    Ensure ``samples`` is a usable structured sample array.

    Checks the record fields, the dataset size bounds and the field values.
    The array is returned unchanged.
    """
    if not isinstance(samples, np.ndarray) or samples.dtype.names is None:
        raise TypeError(f"{name} must be a structured sample array")
    missing = {LABEL_FIELD, PREDICTION_FIELD} - set(samples.dtype.names)
    if missing:
        raise ValueError(f"{name} is missing fields {sorted(missing)}")
    if samples.ndim != 1:
        raise ValueError(f"{name} must be 1D array, got shape {samples.shape}")
    if len(samples) < MIN_SAMPLES:
        raise ValueError(
            f"need at least {MIN_SAMPLES} data points to calculate AUC, "
            f"got {len(samples)}"
        )
    if len(samples) > MAX_SAMPLES:
        raise ValueError(
            f"{name} has {len(samples)} data points, at most {MAX_SAMPLES} "
            "are supported"
        )
    validate_labels(samples[LABEL_FIELD], LABEL_FIELD)
    validate_predictions(samples[PREDICTION_FIELD], PREDICTION_FIELD)
    return samples
