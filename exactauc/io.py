"""Reading sample files.

Input files are plain text with one record per line::

    ground truth value (integer 0 or 1), floating point prediction

for example::

    0, 0.1
    0, 3
    1, 0.8
"""

import warnings
import numpy as np
import pandas as pd
from typing import Literal, Union
from os import PathLike
from .config import (
    DEFAULT_DELIMITER,
    DEFAULT_MALFORMED_POLICY,
    FILE_ENCODING,
    LABEL_FIELD,
    MALFORMED_POLICIES,
    MIN_SAMPLES,
    PREDICTION_DTYPE,
    PREDICTION_FIELD,
)
from .samples import make_samples


def _to_number(field) -> float:
    try:
        return float(field)
    except (TypeError, ValueError):
        return np.nan


def _to_label(field) -> float:
    # Labels are unsigned integer text; "1.0" or "1e0" do not parse
    try:
        return float(int(field))
    except (TypeError, ValueError):
        return np.nan


def read_records(
    path: Union[str, PathLike], delimiter: str = DEFAULT_DELIMITER
) -> pd.DataFrame:
    """
    Read raw records as strings, one row per non-blank line.

    The returned frame is indexed by 1-based line number and has the columns
    ``ground_truth``, ``prediction`` and ``extra`` (text after a second
    delimiter, missing for well-formed lines).
    Files are decoded as UTF-8 (ASCII files included).

    Raises
    ------
    OSError
        The file cannot be opened.
    """
    with open(path, "rt", encoding=FILE_ENCODING) as fh:
        lines = pd.Series(fh.read().splitlines(), dtype=object)

    lines.index = lines.index + 1
    lines = lines[lines.str.strip() != ""]

    fields = lines.str.split(delimiter, n=2, expand=True)
    fields = fields.reindex(columns=range(3))
    fields.columns = [LABEL_FIELD, PREDICTION_FIELD, "extra"]
    return fields


def load_samples(
    path: Union[str, PathLike],
    delimiter: str = DEFAULT_DELIMITER,
    on_malformed: Literal["stop", "skip", "raise"] = DEFAULT_MALFORMED_POLICY,
) -> np.ndarray:
    """
    Load a sample array from a text file of ``ground_truth,prediction`` lines.

    Parameters
    ----------
    path : str or path-like
        Input file.
    delimiter : str, default=","
        Field separator. Whitespace around fields is ignored, blank lines
        are skipped.
    on_malformed : {"stop", "skip", "raise"}, default="stop"
        What to do with a record that does not consist of exactly two
        fields, an integer ground truth and a floating point prediction
        (ground truths written as "1.0" or "1e0" are malformed):
        - "stop": keep the records before the first malformed one
        - "skip": drop malformed records and keep reading
        - "raise": raise ValueError
        Dropped records are reported with a warning.

    Returns
    -------
    np.ndarray
        Structured sample array with float32 predictions, in file order.

    Raises
    ------
    ValueError
        A ground truth is not 0 or 1, a record is malformed under
        ``on_malformed="raise"``, or fewer than 2 valid records were read.
    OSError
        The file cannot be opened.
    UnicodeDecodeError
        The file is not UTF-8 text.

    Examples
    --------
    >>> samples = load_samples("scores.csv")
    >>> exact_auc(samples)
    0.5
    """
    if on_malformed not in MALFORMED_POLICIES:
        raise ValueError(
            f"Unknown malformed-record policy: {on_malformed}. "
            f"Supported: {list(MALFORMED_POLICIES)}"
        )

    records = read_records(path, delimiter)

    labels = records[LABEL_FIELD].map(_to_label)
    predictions = records[PREDICTION_FIELD].map(_to_number)
    malformed = (
        labels.isna() | predictions.isna() | records["extra"].notna()
    ).to_numpy()

    if malformed.any():
        first_bad = int(np.argmax(malformed))
        line_no = records.index[first_bad]
        if on_malformed == "raise":
            raise ValueError(f"malformed record at line {line_no} of {path}")
        if on_malformed == "stop":
            keep = np.arange(len(records)) < first_bad
        else:
            keep = ~malformed
        warnings.warn(
            f"Ignored {len(records) - int(keep.sum())} of {len(records)} records "
            f"in {path} (first malformed record at line {line_no})"
        )
        labels, predictions = labels[keep], predictions[keep]

    if len(labels) < MIN_SAMPLES:
        raise ValueError(
            f"need at least {MIN_SAMPLES} data points to calculate AUC, "
            f"read {len(labels)} from {path}"
        )

    return make_samples(
        labels.to_numpy(dtype=np.float64),
        predictions.to_numpy(dtype=np.float64),
        prediction_dtype=PREDICTION_DTYPE,
    )
