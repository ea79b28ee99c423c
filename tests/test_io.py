import numpy as np
import pytest
from exactauc import load_samples, exact_auc


def write_lines(tmp_path, text, name="scores.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadSamples:
    """Test suite for reading ground_truth,prediction text files."""

    def test_documented_format(self, tmp_path):
        path = write_lines(tmp_path, "0, 0.1\n0, 3\n1, 0.8\n")

        samples = load_samples(path)

        np.testing.assert_array_equal(samples["ground_truth"], [0, 0, 1])
        np.testing.assert_allclose(samples["prediction"], [0.1, 3.0, 0.8], rtol=1e-6)
        assert samples["prediction"].dtype == np.float32
        assert exact_auc(samples) == 0.5

    def test_whitespace_and_blank_lines(self, tmp_path):
        path = write_lines(tmp_path, "\n  0 ,0.25\n\n1 ,  0.75  \n\n")

        samples = load_samples(path)

        assert len(samples) == 2
        np.testing.assert_array_equal(samples["ground_truth"], [0, 1])

    def test_custom_delimiter(self, tmp_path):
        path = write_lines(tmp_path, "0\t0.25\n1\t0.75\n", name="scores.tsv")

        samples = load_samples(path, delimiter="\t")

        assert exact_auc(samples) == 1.0

    def test_no_line_limit(self, tmp_path):
        n = 5000
        lines = "".join(f"{i % 2},{i / n}\n" for i in range(n))
        path = write_lines(tmp_path, lines)

        assert len(load_samples(path)) == n

    def test_stop_at_malformed_record(self, tmp_path):
        path = write_lines(tmp_path, "0,0.1\n1,0.9\nabc\n0,0.5\n")

        with pytest.warns(UserWarning, match="Ignored 2 of 4 records"):
            samples = load_samples(path)

        np.testing.assert_array_equal(samples["ground_truth"], [0, 1])

    def test_skip_malformed_records(self, tmp_path):
        path = write_lines(tmp_path, "0,0.1\n1,0.9\n1\n0,0.5,7\n0,0.5\n")

        with pytest.warns(UserWarning, match="first malformed record at line 3"):
            samples = load_samples(path, on_malformed="skip")

        np.testing.assert_array_equal(samples["ground_truth"], [0, 1, 0])

    def test_raise_on_malformed_record(self, tmp_path):
        path = write_lines(tmp_path, "0,0.1\n1,zero\n")

        with pytest.raises(ValueError, match="malformed record at line 2"):
            load_samples(path, on_malformed="raise")

    def test_invalid_ground_truth(self, tmp_path):
        path = write_lines(tmp_path, "0,0.1\n2,0.9\n")

        with pytest.raises(ValueError, match="either 0 or 1"):
            load_samples(path)

    def test_too_few_records(self, tmp_path):
        path = write_lines(tmp_path, "1,0.9\n")

        with pytest.raises(ValueError, match="at least 2"):
            load_samples(path)

    def test_empty_file(self, tmp_path):
        path = write_lines(tmp_path, "")

        with pytest.raises(ValueError, match="read 0"):
            load_samples(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_samples(tmp_path / "does_not_exist.csv")

    def test_unknown_policy(self, tmp_path):
        path = write_lines(tmp_path, "0,0.1\n1,0.9\n")

        with pytest.raises(ValueError, match="Unknown malformed-record policy"):
            load_samples(path, on_malformed="ignore")

    def test_prediction_beyond_single_precision(self, tmp_path):
        """Finite text values that overflow float32 are rejected, not stored as inf."""
        path = write_lines(tmp_path, "0,0.1\n1,1e39\n")

        with pytest.raises(ValueError, match="non-finite"):
            load_samples(path)

    def test_fractional_ground_truth_is_malformed(self, tmp_path):
        """Ground truth must be integer text."""
        path = write_lines(tmp_path, "0,0.1\n1.0,0.9\n1e0,0.7\n1,0.8\n")

        with pytest.raises(ValueError, match="malformed record at line 2"):
            load_samples(path, on_malformed="raise")

        with pytest.warns(UserWarning, match="Ignored 2 of 4 records"):
            samples = load_samples(path, on_malformed="skip")

        np.testing.assert_array_equal(samples["ground_truth"], [0, 1])

    def test_utf8_decoding(self, tmp_path):
        """Decoding does not depend on the locale."""
        path = tmp_path / "scores.csv"
        path.write_bytes("0,0.1\n1,0.9\né,0.5\n".encode("utf-8"))

        with pytest.warns(UserWarning, match="first malformed record at line 3"):
            samples = load_samples(path, on_malformed="skip")
        assert len(samples) == 2

        path.write_bytes(b"0,0.1\n1,0.9\n\xe9,0.5\n")
        with pytest.raises(UnicodeDecodeError):
            load_samples(path)
