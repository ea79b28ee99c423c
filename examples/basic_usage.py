"""Basic usage example of exact AUC."""
import numpy as np
from sklearn.datasets import make_classification
from sklearn.linear_model import LogisticRegression

import exactauc


def main():
    # Generate synthetic data
    print("Generating synthetic data...")
    X, y = make_classification(
        n_samples=1000, n_features=8, weights=[0.7, 0.3], random_state=42
    )
    print(f"Dataset: {X.shape[0]} samples, {int(y.sum())} positives")

    # Train a classifier
    print("\nTraining logistic regression...")
    model = LogisticRegression(max_iter=1000).fit(X, y)
    scores = model.predict_proba(X)[:, 1]

    print("\n=== Exact AUC ===")
    print(f"AUC: {exactauc.roc_auc(y, scores):.6f}")

    # Coarse scores create ties; each tied group is one threshold step
    print("\n=== Rounded scores (ties) ===")
    rounded = np.round(scores, 1)
    summary = exactauc.auc_summary(exactauc.make_samples(y, rounded))
    print(f"AUC: {summary['auc']:.6f} over {summary['n_thresholds']} thresholds")
    print(f"Doubled integer area: {summary['area2']}")

    # Degenerate labels are reported, not scored
    print("\n=== Single-class input ===")
    try:
        exactauc.roc_auc(np.zeros(10, dtype=int), scores[:10])
    except exactauc.DegenerateLabelsError as e:
        print(f"{e.kind}: {e}")


if __name__ == "__main__":
    main()
