"""
Scores the held-out cases with the fitted forest.
"""

import pandas as pd
from pandas.api.types import is_numeric_dtype

from ..errors import SchemaMismatchError


def predict_cases(model, scoring: pd.DataFrame) -> pd.Series:
    """
    Predicts one label per scoring row, keeping the row order and index.

    The columns must cover the predictors the model was fitted on and be
    numeric; extra columns are ignored.
    """
    expected = list(model.feature_names_in_)

    missing = [c for c in expected if c not in scoring.columns]
    if missing:
        raise SchemaMismatchError(f"Scoring table is missing predictors: {missing}")

    X = scoring.loc[:, expected]
    non_numeric = [c for c in expected if not is_numeric_dtype(X[c])]
    if non_numeric:
        raise SchemaMismatchError(f"Non-numeric predictors in scoring table: {non_numeric}")

    preds = pd.Series(model.predict(X), index=scoring.index, name="prediction")
    print(f"[predict_cases] {len(preds)} cases scored")
    return preds
