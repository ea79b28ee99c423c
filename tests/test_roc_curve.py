import numpy as np
import pytest
from sklearn.metrics import roc_curve as sklearn_roc_curve
from exactauc import roc_curve, roc_auc, make_samples, AllPositivesError
from .synthetic_data import make_scored_labels


class TestROCCurve:
    """Test suite for the threshold-grouped ROC curve."""

    def test_documented_example(self):
        """One point per distinct prediction, highest threshold first."""
        result = roc_curve(make_samples([0, 0, 1], [0.1, 3.0, 0.8]))

        assert set(result.keys()) == {"thresholds", "tps", "fps", "tpr", "fpr", "auc"}
        np.testing.assert_array_equal(result["thresholds"], [np.inf, 3.0, 0.8, 0.1])
        np.testing.assert_array_equal(result["tps"], [0, 0, 1, 1])
        np.testing.assert_array_equal(result["fps"], [0, 1, 1, 2])
        np.testing.assert_allclose(result["tpr"], [0.0, 0.0, 1.0, 1.0])
        np.testing.assert_allclose(result["fpr"], [0.0, 0.5, 0.5, 1.0])
        assert result["auc"] == pytest.approx(0.5)

    def test_curve_endpoints_and_monotonicity(self):
        y, scores = make_scored_labels(n_samples=300, n_levels=8, random_state=42)

        result = roc_curve(make_samples(y, scores))

        assert result["fpr"][0] == 0.0 and result["tpr"][0] == 0.0
        assert result["fpr"][-1] == 1.0 and result["tpr"][-1] == 1.0
        assert np.all(np.diff(result["fpr"]) >= 0)
        assert np.all(np.diff(result["tpr"]) >= 0)
        # Thresholds strictly descending, one per distinct score
        assert np.all(np.diff(result["thresholds"]) < 0)
        assert len(result["thresholds"]) == len(np.unique(scores)) + 1

    def test_matches_sklearn_vertices(self):
        """Same vertices as sklearn when collinear points are kept."""
        y, scores = make_scored_labels(n_samples=250, n_levels=6, random_state=7)

        result = roc_curve(make_samples(y, scores))
        fpr, tpr, thresholds = sklearn_roc_curve(y, scores, drop_intermediate=False)

        np.testing.assert_allclose(result["fpr"], fpr)
        np.testing.assert_allclose(result["tpr"], tpr)
        np.testing.assert_allclose(result["thresholds"][1:], thresholds[1:])

    @pytest.mark.parametrize("seed", range(10))
    def test_float_area_matches_integer_auc(self, seed):
        y, scores = make_scored_labels(n_samples=200, n_levels=4, random_state=seed)

        result = roc_curve(make_samples(y, scores))

        assert result["auc"] == pytest.approx(roc_auc(y, scores), abs=1e-12)

    def test_degenerate_labels(self):
        with pytest.raises(AllPositivesError):
            roc_curve(make_samples([1, 1, 1], [0.1, 0.2, 0.3]))
