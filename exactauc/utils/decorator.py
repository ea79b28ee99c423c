import numpy as np
import pandas as pd
import polars as pl
from functools import wraps
import inspect
from typing import Callable, Any, TypeVar, Union

from ..config import LABEL_FIELD, PREDICTION_FIELD

# For more precise type hints
PandasDataFrame = TypeVar("pd.DataFrame")
PolarsDataFrame = TypeVar("pl.DataFrame")
NumpyArray = TypeVar("np.ndarray")
InputDataType = Union[PandasDataFrame, PolarsDataFrame, NumpyArray, list]
OutputDataType = Any  # The wrapped function can return various types


def _frame_to_samples(frame_columns, label_column, prediction_column):
    # Late import, samples imports validation from this package
    from ..samples import make_samples

    missing = [
        c for c in (LABEL_FIELD, PREDICTION_FIELD) if c not in list(frame_columns)
    ]
    if missing:
        raise ValueError(
            f"DataFrame is missing columns {missing}, got {list(frame_columns)}"
        )
    return make_samples(label_column(), prediction_column())


def as_sample_array(param_name: str) -> Callable:
    """
    A decorator that converts a specified argument of a function into a
    structured sample array before the function runs.

    Accepted argument types:
        - structured numpy array with ``ground_truth`` and ``prediction`` fields
          (passed through untouched)
        - numpy array or list of ``(ground_truth, prediction)`` pairs
        - pandas DataFrame with ``ground_truth`` and ``prediction`` columns
        - polars DataFrame with ``ground_truth`` and ``prediction`` columns

    Args:
        param_name (str): The name of the function parameter to convert.

    Returns:
        Callable: The wrapper function.
    """

    def decorator(func: Callable[..., OutputDataType]) -> Callable[..., OutputDataType]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> OutputDataType:
            from ..samples import as_samples

            sig = inspect.signature(func)
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()

            if param_name not in bound_args.arguments:
                raise ValueError(
                    f"Parameter '{param_name}' not found in function signature: {list(bound_args.arguments.keys())}."
                )

            input_arg = bound_args.arguments[param_name]

            # Convert to a structured sample array
            if isinstance(input_arg, pd.DataFrame):
                samples = _frame_to_samples(
                    input_arg.columns,
                    lambda: input_arg[LABEL_FIELD].to_numpy(),
                    lambda: input_arg[PREDICTION_FIELD].to_numpy(),
                )
            elif isinstance(input_arg, pl.DataFrame):
                # Polars .to_numpy() might not be zero-copy in all cases, but it's the standard way
                samples = _frame_to_samples(
                    input_arg.columns,
                    lambda: input_arg.get_column(LABEL_FIELD).to_numpy(),
                    lambda: input_arg.get_column(PREDICTION_FIELD).to_numpy(),
                )
            elif isinstance(input_arg, (np.ndarray, list, tuple)):
                samples = as_samples(input_arg)
            else:
                raise TypeError(
                    f"Input type {type(input_arg)} for parameter '{param_name}' "
                    "is not a sample array, a sequence of (ground_truth, prediction) "
                    "pairs, a pandas DataFrame or a polars DataFrame."
                )

            # Replace the parameter with the sample array
            bound_args.arguments[param_name] = samples

            return func(*bound_args.args, **bound_args.kwargs)

        return wrapper

    return decorator
