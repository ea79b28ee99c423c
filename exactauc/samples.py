"""Sample record type and conversions into sample arrays."""

import numpy as np
from typing import Optional
from .config import LABEL_DTYPE, PREDICTION_DTYPE, LABEL_FIELD, PREDICTION_FIELD
from .utils.validation import validate_labels, validate_predictions


def sample_dtype(prediction_dtype=PREDICTION_DTYPE) -> np.dtype:
    """Structured dtype of one sample: ``(ground_truth, prediction)``."""
    return np.dtype(
        [(LABEL_FIELD, LABEL_DTYPE), (PREDICTION_FIELD, np.dtype(prediction_dtype))]
    )


SAMPLE_DTYPE = sample_dtype()


def make_samples(
    ground_truth: np.ndarray,
    prediction: np.ndarray,
    prediction_dtype: Optional[np.dtype] = None,
) -> np.ndarray:
    """
    Build a sample array from parallel label and prediction arrays.

    Parameters
    ----------
    ground_truth : array-like of shape (n_samples,)
        Binary labels, each 0 or 1.
    prediction : array-like of shape (n_samples,)
        Prediction scores. Ties are allowed.
    prediction_dtype : dtype, optional
        Floating dtype of the stored predictions. Defaults to the dtype of
        ``prediction`` (float64 for integer input).

    Returns
    -------
    np.ndarray
        Structured array of shape (n_samples,) with fields ``ground_truth``
        and ``prediction``.

    Examples
    --------
    >>> make_samples([0, 0, 1], [0.1, 3.0, 0.8])["ground_truth"]
    array([0, 0, 1], dtype=uint32)
    """
    labels = validate_labels(ground_truth, LABEL_FIELD)
    scores = validate_predictions(prediction, PREDICTION_FIELD)

    if len(labels) != len(scores):
        raise ValueError(
            f"Length mismatch: {len(labels)} labels vs {len(scores)} predictions"
        )

    dtype = sample_dtype(prediction_dtype or scores.dtype)
    # Narrowing (e.g. to float32) can overflow finite values to inf
    with np.errstate(over="ignore"):
        narrowed = scores.astype(dtype[PREDICTION_FIELD])
    scores = validate_predictions(narrowed, PREDICTION_FIELD)

    samples = np.empty(len(labels), dtype=dtype)
    samples[LABEL_FIELD] = labels
    samples[PREDICTION_FIELD] = scores
    return samples


def as_samples(data) -> np.ndarray:
    """
    Convert a plain array or a sequence of ``(label, prediction)`` pairs.

    Structured arrays that already carry both fields are returned as is
    (the caller's array is never copied or reordered here).
    """
    if isinstance(data, np.ndarray) and data.dtype.names is not None:
        if {LABEL_FIELD, PREDICTION_FIELD} <= set(data.dtype.names):
            return data
        raise ValueError(
            f"structured array must have fields '{LABEL_FIELD}' and "
            f"'{PREDICTION_FIELD}', got {data.dtype.names}"
        )

    pairs = np.asarray(data)
    if pairs.ndim != 2 or pairs.shape[1] != 2:
        raise ValueError(
            f"samples must have shape (n_samples, 2), got {pairs.shape}"
        )
    return make_samples(pairs[:, 0], pairs[:, 1])
