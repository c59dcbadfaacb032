import numpy as np
import pandas as pd
from tqdm import tqdm
from sklearn.ensemble import RandomForestClassifier
from sklearn.metrics import cohen_kappa_score, make_scorer
from sklearn.model_selection import StratifiedKFold, cross_validate

from ...errors import FitError, MissingTargetError
from ...dataset_preparation.config import TARGET_COLUMN
from . import config


def split_xy(df: pd.DataFrame, target=TARGET_COLUMN):
    """Separates predictors and target."""
    if target not in df.columns:
        raise MissingTargetError(f"Target column '{target}' not found")
    X = df.drop(columns=[target])
    y = df[target]
    return X, y


def _check_trainable(X, y):
    if len(X) == 0 or X.shape[1] == 0:
        raise FitError(f"Cannot fit on an empty table (shape {X.shape})")
    if y.nunique() < 2:
        raise FitError(f"Target has a single class: {list(y.unique())}")


def fit_forest(X, y,
               max_features="sqrt",
               n_estimators=config.RF_N_ESTIMATORS,
               random_state=config.RANDOM_STATE,
               n_jobs=config.RF_JOBS):
    """
    Fits a Random Forest with out-of-bag scoring enabled.

    max_features is the number of predictors sampled at each split (mtry).
    """
    _check_trainable(X, y)

    rf = RandomForestClassifier(
        n_estimators=n_estimators,
        max_features=max_features,
        oob_score=True,
        n_jobs=n_jobs,
        random_state=random_state,
    )
    try:
        rf.fit(X, y)
    except ValueError as e:
        raise FitError(f"Random Forest fit failed: {e}") from e

    print(f"[fit_forest] {n_estimators} trees, max_features={max_features}, OOB error {oob_error(rf):.4f}")
    return rf


def oob_error(model):
    return 1.0 - model.oob_score_


def oob_confusion(model, y):
    """
    Out-of-bag confusion table (rows: true class, columns: predicted class)
    with the per-class error rate in a 'class_error' column.

    Rows that were never left out of a bootstrap sample have no OOB vote
    (their row of oob_decision_function_ is all zeros) and are skipped.
    """
    votes = model.oob_decision_function_
    has_vote = votes.sum(axis=1) > 0
    predicted = model.classes_[np.argmax(votes[has_vote], axis=1)]
    observed = np.asarray(y)[has_vote]

    classes = list(model.classes_)
    table = pd.crosstab(
        pd.Series(observed, name="observed"),
        pd.Series(predicted, name="predicted"),
    ).reindex(index=classes, columns=classes, fill_value=0)
    totals = table.sum(axis=1)
    correct = pd.Series(np.diag(table.to_numpy()), index=table.index)
    table["class_error"] = (1 - correct / totals.replace(0, np.nan)).fillna(0.0)
    return table


def cross_validate_mtry(X, y,
                        mtry_grid=config.MTRY_GRID,
                        n_folds=config.CV_FOLDS,
                        n_estimators=config.RF_N_ESTIMATORS,
                        random_state=config.RANDOM_STATE,
                        n_jobs=config.RF_JOBS):
    """
    k-fold cross-validation of the forest over candidate mtry values.

    All candidates are scored on the same stratified folds.

    Returns
    -------
    folds : pandas.DataFrame
        One row per (mtry, fold): accuracy and Cohen's kappa.
    summary : pandas.DataFrame
        Indexed by mtry in grid order: mean accuracy / kappa and their
        standard deviations across folds.
    """
    _check_trainable(X, y)

    if len(set(mtry_grid)) != len(mtry_grid):
        raise ValueError(f"Duplicated values in mtry grid: {list(mtry_grid)}")

    n_features = X.shape[1]
    bad = [m for m in mtry_grid if not 1 <= m <= n_features]
    if bad:
        raise FitError(f"mtry values {bad} outside 1..{n_features}")

    cv = StratifiedKFold(n_splits=n_folds, shuffle=True, random_state=random_state)
    scoring = {
        "accuracy": "accuracy",
        "kappa": make_scorer(cohen_kappa_score),
    }

    rows = []
    for mtry in tqdm(mtry_grid, desc="mtry grid"):
        rf = RandomForestClassifier(
            n_estimators=n_estimators,
            max_features=mtry,
            n_jobs=n_jobs,
            random_state=random_state,
        )
        try:
            scores = cross_validate(rf, X, y, cv=cv, scoring=scoring, error_score="raise")
        except ValueError as e:
            raise FitError(f"Cross-validation failed for mtry={mtry}: {e}") from e

        for fold, (acc, kappa) in enumerate(zip(scores["test_accuracy"], scores["test_kappa"]), start=1):
            rows.append({"mtry": mtry, "fold": fold, "accuracy": acc, "kappa": kappa})

        print(f"[cross_validate_mtry] mtry={mtry} accuracy={scores['test_accuracy'].mean():.4f} kappa={scores['test_kappa'].mean():.4f}")

    folds = pd.DataFrame(rows, columns=["mtry", "fold", "accuracy", "kappa"])
    grouped = folds.groupby("mtry", sort=False)
    summary = pd.DataFrame({
        "accuracy": grouped["accuracy"].mean(),
        "kappa": grouped["kappa"].mean(),
        "accuracy_sd": grouped["accuracy"].std(),
        "kappa_sd": grouped["kappa"].std(),
    }).reindex(list(mtry_grid))
    summary.index.name = "mtry"
    return folds, summary


def select_mtry(summary: pd.DataFrame, tie_policy=config.TIE_POLICY):
    """
    Picks the mtry with the highest mean accuracy.

    Exact ties are settled by tie_policy: "first" keeps grid order,
    "smallest" / "largest" compare the mtry values themselves.
    """
    if tie_policy not in config.TIE_POLICIES:
        raise ValueError(f"Unknown tie policy '{tie_policy}', expected one of {config.TIE_POLICIES}")

    best_acc = summary["accuracy"].max()
    tied = [m for m, acc in summary["accuracy"].items() if acc == best_acc]

    if tie_policy == "smallest":
        best = min(tied)
    elif tie_policy == "largest":
        best = max(tied)
    else:
        best = tied[0]

    if len(tied) > 1:
        print(f"[select_mtry] tie between {tied}, kept {best} ({tie_policy})")
    return int(best)
