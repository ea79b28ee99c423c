"""Exact ROC AUC by integer trapezoidal integration.

The ROC curve of a binary scorer is piecewise linear between the points
produced at each distinct prediction value. Its area is a sum of trapezoids
whose heights are true-positive counts and whose widths are false-positive
counts, so twice the un-normalized area is an integer:

    area2 = sum_k (TP(k-1) + TP(k)) * dTN(k)
    AUC   = 0.5 * area2 / (N_pos * N_neg)

``area2`` is accumulated in unsigned 64-bit integers, which cannot overflow
for datasets of up to 2**32 samples. The final division is the only
floating-point step.
"""

import numpy as np
from typing import Dict, Tuple
from .config import ACCUMULATOR_DTYPE, LABEL_FIELD, PREDICTION_FIELD
from .errors import AllNegativesError, AllPositivesError, InternalConsistencyError
from .samples import make_samples
from .utils.computation import threshold_groups, trapezoid_area
from .utils.decorator import as_sample_array
from .utils.validation import validate_samples


def _count_labels(samples: np.ndarray) -> Tuple[int, int]:
    """Return ``(n_positive, n_negative)``, rejecting single-class datasets."""
    n_samples = len(samples)
    n_positive = int(samples[LABEL_FIELD].sum(dtype=ACCUMULATOR_DTYPE))
    n_negative = n_samples - n_positive

    if n_positive == 0:
        raise AllNegativesError(n_samples)
    if n_negative == 0:
        raise AllPositivesError(n_samples)

    return n_positive, n_negative


def _sorted_groups(samples: np.ndarray):
    # Index permutation instead of an in-place sort; the caller's order survives
    order = np.argsort(samples[PREDICTION_FIELD], kind="stable")
    return threshold_groups(
        samples[LABEL_FIELD][order], samples[PREDICTION_FIELD][order]
    )


def _doubled_area(
    positives: np.ndarray, negatives: np.ndarray, n_positive: int
) -> int:
    """
    Twice the un-normalized ROC area, scanning groups by prediction ascending.

    ``tp`` counts the positives at or above the current threshold. Each group
    lowers it by its positives and contributes one trapezoid spanning its
    negatives, between the ``tp`` level before and after the group.
    """
    tp_after = ACCUMULATOR_DTYPE(n_positive) - np.cumsum(
        positives, dtype=ACCUMULATOR_DTYPE
    )
    tp_before = tp_after + positives

    # uint64 wraps instead of going negative, so compare against the total
    if positives.sum(dtype=ACCUMULATOR_DTYPE) != n_positive or tp_after[-1] != 0:
        raise InternalConsistencyError(
            f"{int(tp_after[-1])} positives left after the threshold scan, "
            "expected 0"
        )

    area2 = np.sum((tp_before + tp_after) * negatives, dtype=ACCUMULATOR_DTYPE)
    return int(area2)


@as_sample_array("samples")
def exact_auc(samples: np.ndarray) -> float:
    """
    Compute ROC AUC with integer-only trapezoidal integration.

    Samples are ordered by prediction ascending and scanned once. Samples
    sharing a prediction value are treated as one threshold step, so the
    result does not depend on the order of ties (or on input order at all).
    The caller's data is never reordered or modified.

    Parameters
    ----------
    samples : array-like
        Structured sample array (see ``make_samples``), a sequence or
        ``(n_samples, 2)`` array of ``(ground_truth, prediction)`` pairs, or a
        pandas/polars DataFrame with ``ground_truth`` and ``prediction``
        columns. Needs at least 2 samples; labels must be 0 or 1.

    Returns
    -------
    float
        AUC in [0, 1].

    Raises
    ------
    AllNegativesError
        Every ground truth is 0.
    AllPositivesError
        Every ground truth is 1.
    ValueError
        Fewer than 2 samples, labels outside {0, 1} or non-finite predictions.

    Examples
    --------
    >>> exact_auc([(0, 0.1), (0, 3.0), (1, 0.8)])
    0.5
    """
    samples = validate_samples(samples)
    n_positive, n_negative = _count_labels(samples)

    _, positives, negatives = _sorted_groups(samples)
    area2 = _doubled_area(positives, negatives, n_positive)

    return 0.5 * area2 / n_positive / n_negative


def roc_auc(y_true: np.ndarray, y_score: np.ndarray) -> float:
    """
    Compute exact ROC AUC from parallel label and score arrays.

    Parameters
    ----------
    y_true : array-like of shape (n_samples,)
        Binary labels, each 0 or 1.
    y_score : array-like of shape (n_samples,)
        Prediction scores, higher meaning more likely positive.

    Returns
    -------
    float
        AUC in [0, 1].
    """
    return exact_auc(make_samples(y_true, y_score))


@as_sample_array("samples")
def auc_summary(samples: np.ndarray) -> Dict[str, float]:
    """
    Compute the AUC together with the counts it was derived from.

    Returns
    -------
    dict with keys:
        - 'auc': AUC in [0, 1]
        - 'n_samples': Number of samples
        - 'n_positive': Number of 1-labels
        - 'n_negative': Number of 0-labels
        - 'n_thresholds': Number of distinct prediction values
        - 'area2': Twice the un-normalized area, an exact integer
    """
    samples = validate_samples(samples)
    n_positive, n_negative = _count_labels(samples)

    values, positives, negatives = _sorted_groups(samples)
    area2 = _doubled_area(positives, negatives, n_positive)

    return {
        "auc": 0.5 * area2 / n_positive / n_negative,
        "n_samples": len(samples),
        "n_positive": n_positive,
        "n_negative": n_negative,
        "n_thresholds": len(values),
        "area2": area2,
    }


@as_sample_array("samples")
def roc_curve(samples: np.ndarray) -> Dict[str, np.ndarray]:
    """
    Compute the threshold-grouped ROC curve.

    One point is produced per distinct prediction value; a sample counts as
    predicted positive when its prediction is greater than or equal to the
    threshold. The first point, at threshold ``+inf``, is (0, 0) and the last
    one is (1, 1).

    Returns
    -------
    dict with keys:
        - 'thresholds': ``+inf`` followed by distinct predictions, descending
        - 'tps': Positives at or above each threshold (int64)
        - 'fps': Negatives at or above each threshold (int64)
        - 'tpr': True positive rate at each threshold
        - 'fpr': False positive rate at each threshold
        - 'auc': Floating-point trapezoid area under (fpr, tpr)
    """
    samples = validate_samples(samples)
    n_positive, n_negative = _count_labels(samples)

    values, positives, negatives = _sorted_groups(samples)

    # Sweep from the highest prediction down
    tps = np.concatenate(([0], np.cumsum(positives[::-1]))).astype(np.int64)
    fps = np.concatenate(([0], np.cumsum(negatives[::-1]))).astype(np.int64)
    thresholds = np.concatenate(([np.inf], values[::-1].astype(np.float64)))

    tpr = tps / n_positive
    fpr = fps / n_negative

    return {
        "thresholds": thresholds,
        "tps": tps,
        "fps": fps,
        "tpr": tpr,
        "fpr": fpr,
        "auc": trapezoid_area(fpr, tpr),
    }
