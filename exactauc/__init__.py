"""Exact ROC AUC for binary classifiers.

This package computes the Area Under the ROC Curve with integer-only
trapezoidal integration:
- exact_auc / roc_auc: AUC of labeled predictions, ties grouped per threshold
- roc_curve: ROC vertices of the same threshold grouping
- ExactAUC: fit/score wrapper
- load_samples: reader for text files of ``ground_truth,prediction`` records

Degenerate inputs (all labels 0 or all labels 1) raise AllNegativesError or
AllPositivesError instead of returning a score.
"""

from .auc import exact_auc, roc_auc, roc_curve, auc_summary
from .base import BinaryRankingMetric, ExactAUC
from .errors import (
    DegenerateLabelsError,
    AllNegativesError,
    AllPositivesError,
    InternalConsistencyError,
)
from .io import load_samples
from .samples import SAMPLE_DTYPE, make_samples, sample_dtype

__version__ = "0.1.0"

__all__ = [
    # Core metric
    "exact_auc",
    "roc_auc",
    "roc_curve",
    "auc_summary",
    "BinaryRankingMetric",
    "ExactAUC",
    # Errors
    "DegenerateLabelsError",
    "AllNegativesError",
    "AllPositivesError",
    "InternalConsistencyError",
    # Data
    "SAMPLE_DTYPE",
    "make_samples",
    "sample_dtype",
    "load_samples",
]
