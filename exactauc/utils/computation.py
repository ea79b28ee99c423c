"""Floating-point curve integration and threshold grouping."""

import numpy as np
from typing import Tuple


def trapezoid_area(x: np.ndarray, y: np.ndarray) -> float:
    """Compute area under curve using trapezoidal rule."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    # Sort by x values for proper integration (stable keeps vertical steps in order)
    idx = np.argsort(x, kind="stable")
    return float(np.trapezoid(y[idx], x[idx]))


def threshold_groups(
    sorted_labels: np.ndarray, sorted_predictions: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Group samples that share a prediction value.

    Parameters
    ----------
    sorted_labels : array-like of shape (n_samples,)
        0/1 labels, ordered by prediction ascending.
    sorted_predictions : array-like of shape (n_samples,)
        Predictions in ascending order.

    Returns
    -------
    values : np.ndarray of shape (n_groups,)
        Distinct prediction values, ascending.
    positives : np.ndarray of shape (n_groups,), uint64
        Number of 1-labels in each group.
    negatives : np.ndarray of shape (n_groups,), uint64
        Number of 0-labels in each group.

    Examples
    --------
    >>> threshold_groups(np.array([0, 1, 1, 0]), np.array([0.1, 0.5, 0.5, 0.9]))
    (array([0.1, 0.5, 0.9]), array([0, 2, 0], dtype=uint64), array([1, 0, 1], dtype=uint64))
    """
    n_samples = len(sorted_predictions)

    # A new group starts wherever the prediction changes
    starts = np.flatnonzero(
        np.concatenate(([True], sorted_predictions[1:] != sorted_predictions[:-1]))
    )
    sizes = np.diff(np.append(starts, n_samples)).astype(np.uint64)

    positives = np.add.reduceat(sorted_labels.astype(np.uint64), starts)
    negatives = sizes - positives

    return sorted_predictions[starts], positives, negatives
