"""Abstract base class for binary ranking metrics."""

from abc import ABC, abstractmethod
import numpy as np
from typing import Dict, Any
from .auc import auc_summary


class BinaryRankingMetric(ABC):
    """
    Abstract base class for metrics over binary labels and prediction scores.

    This class provides a common fit/score interface; results of the last
    ``fit`` are kept on the instance, the computation itself is stateless.
    """

    def __init__(self):
        self.results_ = None

    @abstractmethod
    def compute(self, samples: np.ndarray) -> Dict[str, Any]:
        """
        Compute the metric.

        Parameters
        ----------
        samples : array-like
            Samples with ``ground_truth`` and ``prediction`` fields.

        Returns
        -------
        dict
            Dictionary containing metric results.
        """
        pass

    def fit(self, samples: np.ndarray) -> "BinaryRankingMetric":
        """
        Compute and store the metric results.

        Returns
        -------
        self
        """
        self.results_ = self.compute(samples)
        return self

    def score(self) -> float:
        """
        Get the primary metric score.

        Returns
        -------
        float
            Primary metric score.
        """
        if self.results_ is None:
            raise ValueError("Must call fit() first")
        return self._get_primary_score()

    @abstractmethod
    def _get_primary_score(self) -> float:
        pass

    def get_results(self) -> Dict[str, Any]:
        """
        Get all metric results.

        Returns
        -------
        dict
            Dictionary containing all metric results.
        """
        if self.results_ is None:
            raise ValueError("Must call fit() first")
        return self.results_


class ExactAUC(BinaryRankingMetric):
    """ROC AUC computed with integer trapezoidal integration."""

    def compute(self, samples: np.ndarray) -> Dict[str, Any]:
        return auc_summary(samples)

    def _get_primary_score(self) -> float:
        return self.results_["auc"]
