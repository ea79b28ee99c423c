"""Generate synthetic labeled scores for testing the AUC engine."""
import numpy as np
from typing import Tuple, Optional


def make_scored_labels(
    n_samples: int = 200,
    positive_rate: float = 0.3,
    separation: float = 1.0,
    n_levels: Optional[int] = None,
    random_state: Optional[int] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate binary labels with Gaussian scores shifted for positives.
    
    Parameters
    ----------
    n_samples : int, default=200
        Number of samples, at least 2.
    positive_rate : float, default=0.3
        Probability of a label being 1.
    separation : float, default=1.0
        Mean score shift of positives over negatives.
    n_levels : int, optional
        If given, scores are rounded to a grid of ``1 / n_levels`` so that
        many predictions tie.
        
    Returns
    -------
    y : array of shape (n_samples,)
        Labels where 0=negative, 1=positive. Both classes are present.
    scores : array of shape (n_samples,)
        Prediction scores (higher = more likely positive).
    """
    rng = np.random.default_rng(random_state)
    
    y = (rng.random(n_samples) < positive_rate).astype(int)
    # Make sure both classes exist
    y[0], y[1] = 0, 1
    
    scores = rng.normal(separation * y, 1.0)
    
    if n_levels is not None:
        scores = np.round(scores * n_levels) / n_levels
    
    return y, scores


def shuffle_within_ties(
    y: np.ndarray,
    scores: np.ndarray,
    random_state: Optional[int] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sort by score and randomly reorder samples that share a score.
    
    Returns
    -------
    y, scores : arrays ordered by score, tie order randomized
    """
    rng = np.random.default_rng(random_state)
    
    # Primary key is the score, random secondary key breaks ties
    order = np.lexsort((rng.random(len(scores)), scores))
    return y[order], scores[order]
