from dataclasses import dataclass

import pandas as pd
from sklearn.ensemble import RandomForestClassifier

from ...dataset_preparation.config import TARGET_COLUMN
from . import config
from . import random_forest as RF


@dataclass
class TrainingResult:
    baseline: RandomForestClassifier
    folds: pd.DataFrame
    summary: pd.DataFrame
    best_mtry: int
    model: RandomForestClassifier
    oob_error: float
    oob_confusion: pd.DataFrame


def train_random_forest(cleaned: pd.DataFrame,
                        target=TARGET_COLUMN,
                        mtry_grid=config.MTRY_GRID,
                        n_folds=config.CV_FOLDS,
                        n_estimators=config.RF_N_ESTIMATORS,
                        tie_policy=config.TIE_POLICY,
                        random_state=config.RANDOM_STATE,
                        n_jobs=config.RF_JOBS):
    """
    Trains the Random Forest on the cleaned training table.

    1. baseline forest with the library default mtry (OOB error only)
    2. k-fold cross-validation over mtry_grid
    3. final forest refit on the whole table with the selected mtry
    """
    X, y = RF.split_xy(cleaned, target)

    # Baseline
    baseline = RF.fit_forest(
        X, y,
        n_estimators=n_estimators,
        random_state=random_state,
        n_jobs=n_jobs,
    )
    print(f"[train_random_forest] Baseline OOB error: {RF.oob_error(baseline):.4%}")

    # Cross-validation
    folds, summary = RF.cross_validate_mtry(
        X, y,
        mtry_grid=mtry_grid,
        n_folds=n_folds,
        n_estimators=n_estimators,
        random_state=random_state,
        n_jobs=n_jobs,
    )
    best_mtry = RF.select_mtry(summary, tie_policy=tie_policy)
    print(f"[train_random_forest] Selected mtry = {best_mtry}")

    # Final model
    model = RF.fit_forest(
        X, y,
        max_features=best_mtry,
        n_estimators=n_estimators,
        random_state=random_state,
        n_jobs=n_jobs,
    )
    error = RF.oob_error(model)
    print(f"[train_random_forest] Final OOB error: {error:.4%}")

    return TrainingResult(
        baseline=baseline,
        folds=folds,
        summary=summary,
        best_mtry=best_mtry,
        model=model,
        oob_error=error,
        oob_confusion=RF.oob_confusion(model, y),
    )
