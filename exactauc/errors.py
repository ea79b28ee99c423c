"""Exceptions raised by the AUC engine."""

from .config import ALL_NEGATIVES_SENTINEL, ALL_POSITIVES_SENTINEL


class DegenerateLabelsError(ValueError):
    """
    All samples carry the same ground truth, so no AUC is defined.

    Attributes
    ----------
    kind : str
        ``"all_negatives"`` or ``"all_positives"``.
    sentinel : float
        Out-of-range value the reference command-line tool reported for this
        case (-1.0 or -2.0).
    n_samples : int
        Size of the rejected dataset.
    """

    kind = None
    sentinel = None

    def __init__(self, n_samples: int, message: str):
        super().__init__(message)
        self.n_samples = n_samples


class AllNegativesError(DegenerateLabelsError):
    kind = "all_negatives"
    sentinel = ALL_NEGATIVES_SENTINEL

    def __init__(self, n_samples: int):
        super().__init__(
            n_samples,
            f"ground truth are all zeros ({n_samples} samples), can't calc AUC",
        )


class AllPositivesError(DegenerateLabelsError):
    kind = "all_positives"
    sentinel = ALL_POSITIVES_SENTINEL

    def __init__(self, n_samples: int):
        super().__init__(
            n_samples,
            f"ground truth are all ones ({n_samples} samples), can't calc AUC",
        )


class InternalConsistencyError(RuntimeError):
    """Positive counter did not reach zero after the threshold scan."""
