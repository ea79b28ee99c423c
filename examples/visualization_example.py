"""Visualization example for the threshold-grouped ROC curve."""
import numpy as np
import matplotlib.pyplot as plt

import exactauc


def plot_roc_curve(samples, title="ROC Curve"):
    """Plot the ROC curve with its exact AUC."""
    curve = exactauc.roc_curve(samples)
    auc = exactauc.exact_auc(samples)

    plt.figure(figsize=(6, 6))
    plt.plot(curve["fpr"], curve["tpr"], "b-", marker="o", markersize=3,
             linewidth=2, label=f"ROC (AUC={auc:.4f})")
    plt.plot([0, 1], [0, 1], "r--", alpha=0.5, label="Random Ranking")
    plt.xlabel("False Positive Rate")
    plt.ylabel("True Positive Rate")
    plt.title(title)
    plt.legend(loc="lower right")
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.show()


def main():
    rng = np.random.default_rng(42)
    y = (rng.random(300) < 0.4).astype(int)
    scores = rng.normal(y, 1.0)

    plot_roc_curve(exactauc.make_samples(y, scores), "Continuous scores")

    # Ties collapse into single diagonal steps
    plot_roc_curve(
        exactauc.make_samples(y, np.round(scores)), "Scores rounded to integers"
    )


if __name__ == "__main__":
    main()
