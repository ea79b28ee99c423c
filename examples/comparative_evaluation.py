"""Compare exact AUC with scikit-learn's floating-point roc_auc_score."""

import time
import numpy as np
import pandas as pd
from sklearn.metrics import roc_auc_score

import exactauc


def evaluate(n_samples, n_levels, rng):
    """Time both implementations on one random dataset."""
    y = (rng.random(n_samples) < 0.3).astype(int)
    y[:2] = [0, 1]
    scores = rng.normal(y, 1.0)
    if n_levels is not None:
        scores = np.round(scores * n_levels) / n_levels

    start = time.perf_counter()
    exact = exactauc.roc_auc(y, scores)
    exact_time = time.perf_counter() - start

    start = time.perf_counter()
    reference = roc_auc_score(y, scores)
    reference_time = time.perf_counter() - start

    return {
        "n_samples": n_samples,
        "n_levels": n_levels if n_levels is not None else "none",
        "exact_auc": exact,
        "sklearn_auc": reference,
        "abs_diff": abs(exact - reference),
        "exact_ms": 1000 * exact_time,
        "sklearn_ms": 1000 * reference_time,
    }


def main():
    rng = np.random.default_rng(42)

    results = []
    for n_samples in [1_000, 100_000, 1_000_000]:
        for n_levels in [None, 10]:
            print(f"Evaluating n={n_samples}, levels={n_levels}...")
            results.append(evaluate(n_samples, n_levels, rng))

    df = pd.DataFrame(results)
    print("\n" + "=" * 80)
    print("COMPARISON RESULTS")
    print("=" * 80)
    print(df.to_string(index=False))


if __name__ == "__main__":
    main()
