"""
cleaning.py — Column filtering, target relabeling and scoring alignment.

This module provides:
- drop_sparse_columns: removes columns that are mostly missing and text
  columns that are mostly empty strings.
- drop_excluded_columns: removes identifier / timestamp / window columns
  by name.
- relabel_target: maps the raw class letters (A-E) to readable names.
- clean_training: the three steps above, in order, for the training table.
- align_scoring: restricts the scoring table to the training predictors,
  in training order, checking names and types.

Every function returns a new DataFrame; inputs are never modified in place.
"""

import pandas as pd
from pandas.api.types import is_numeric_dtype

from ..errors import SchemaMismatchError, MissingTargetError, UnknownLabelError
from .config import (
    NA_THRESHOLD,
    EMPTY_THRESHOLD,
    EXCLUDED_COLUMNS,
    TARGET_COLUMN,
    CLASS_LABELS,
)


def _is_text(series: pd.Series) -> bool:
    return series.dtype == object or pd.api.types.is_string_dtype(series.dtype)


def drop_sparse_columns(df: pd.DataFrame,
                        na_threshold=NA_THRESHOLD,
                        empty_threshold=EMPTY_THRESHOLD):
    """
    Drops every column whose missing-value fraction is >= na_threshold and
    every text column whose empty-string fraction is >= empty_threshold.

    A table without rows has no measurable sparseness and keeps all of its
    columns.
    """
    if len(df) == 0:
        return df.copy()

    na_frac = df.isna().mean()
    keep = []
    for col in df.columns:
        if na_frac[col] >= na_threshold:
            continue
        if _is_text(df[col]):
            empty_frac = df[col].astype(object).eq("").mean()
            if empty_frac >= empty_threshold:
                continue
        keep.append(col)

    print(f"[drop_sparse_columns] kept {len(keep)} of {df.shape[1]} columns")
    return df.loc[:, keep].copy()


def drop_excluded_columns(df: pd.DataFrame, excluded=EXCLUDED_COLUMNS):
    """Drops the named non-predictive columns that are present."""
    present = [c for c in excluded if c in df.columns]
    return df.drop(columns=present)


def relabel_target(df: pd.DataFrame, target=TARGET_COLUMN, labels=CLASS_LABELS):
    """
    Maps the target letters through `labels` (A -> Correct, ...).

    Values that are already readable names are left alone, so relabeling an
    already relabeled table changes nothing.
    """
    if target not in df.columns:
        raise MissingTargetError(f"Target column '{target}' not found")

    readable = set(labels.values())
    mapped = df[target].map(lambda v: labels.get(v, v))

    unknown = mapped[~mapped.isin(readable)]
    if len(unknown) > 0:
        raise UnknownLabelError(
            f"Unexpected values in '{target}': {sorted(map(str, unknown.unique()))}"
        )

    out = df.copy()
    out[target] = mapped.astype(object)
    return out


def clean_training(raw: pd.DataFrame,
                   na_threshold=NA_THRESHOLD,
                   empty_threshold=EMPTY_THRESHOLD,
                   excluded=EXCLUDED_COLUMNS,
                   target=TARGET_COLUMN,
                   labels=CLASS_LABELS):
    """
    Full cleaning of the training table: sparse columns, excluded names,
    then target relabeling.
    """
    if target not in raw.columns:
        raise MissingTargetError(f"Target column '{target}' not found")

    df = drop_sparse_columns(raw, na_threshold, empty_threshold)
    if target not in df.columns:
        raise MissingTargetError(
            f"Target column '{target}' was removed as sparse; check the thresholds"
        )
    df = drop_excluded_columns(df, excluded)
    df = relabel_target(df, target, labels)

    print(f"[clean_training] {len(df)} rows, {df.shape[1] - 1} predictors")
    return df


def align_scoring(raw_scoring: pd.DataFrame,
                  cleaned_training: pd.DataFrame,
                  target=TARGET_COLUMN):
    """
    Restricts the scoring table to the training predictors, in training order.

    Columns not used by the model (problem_id, the sparse ones...) are
    dropped. A missing predictor, or a predictor whose type cannot be
    reconciled with the training one, raises SchemaMismatchError.

    Type policy: a numeric training column accepts any scoring column that
    converts cleanly with pandas.to_numeric (an all-NA column read as float,
    int vs float...); a text training column requires a text scoring column.
    """
    predictors = [c for c in cleaned_training.columns if c != target]

    missing = [c for c in predictors if c not in raw_scoring.columns]
    if missing:
        raise SchemaMismatchError(f"Scoring table is missing predictors: {missing}")

    scoring = raw_scoring.loc[:, predictors].copy()

    for col in predictors:
        train_numeric = is_numeric_dtype(cleaned_training[col])
        if train_numeric and not is_numeric_dtype(scoring[col]):
            try:
                scoring[col] = pd.to_numeric(scoring[col])
            except (ValueError, TypeError) as e:
                raise SchemaMismatchError(
                    f"Column '{col}' is numeric in training but not in scoring"
                ) from e
        elif not train_numeric and not _is_text(scoring[col]):
            raise SchemaMismatchError(
                f"Column '{col}' is text in training but {scoring[col].dtype} in scoring"
            )

    print(f"[align_scoring] {len(scoring)} rows aligned on {len(predictors)} predictors")
    return scoring
