"""
run_all.py — Builds the full exercise-quality report:

1. Download training and scoring CSVs
2. Clean the training table and align the scoring table on it
3. Exploratory figures
4. Train the Random Forest (baseline, mtry cross-validation, final fit)
5. Predict the scoring cases
"""

import time
from pathlib import Path

import pandas as pd

from weightlifting.config import REPORT_DIR, EXPLORE_GROUP
from weightlifting.dataset_preparation.config import TARGET_COLUMN, ID_COLUMN
from weightlifting.dataset_preparation.loader import load_datasets
from weightlifting.dataset_preparation.cleaning import clean_training, align_scoring
from weightlifting.exploration.plots import (
    plot_class_counts,
    plot_group_histograms,
    plot_predictions,
    save_figure,
)
from weightlifting.modeling.Random_forest.main import train_random_forest
from weightlifting.modeling.predict import predict_cases


def banner(title):
    print("\n===========================================")
    print(f" {title} ")
    print("===========================================\n")


def main(report_dir=REPORT_DIR, explore_group=EXPLORE_GROUP, **training_options):
    """
    Runs every stage once and writes figures (HTML) and tables (CSV) to
    report_dir. training_options are forwarded to train_random_forest.

    Returns the predictions table (problem_id, prediction).
    """
    out = Path(report_dir)
    out.mkdir(parents=True, exist_ok=True)

    banner("STEP 1 — Loading datasets")
    start = time.time()
    raw_training, raw_scoring = load_datasets()
    print(f"Training: {raw_training.shape}, scoring: {raw_scoring.shape}")
    print(f"\n[OK] Step 1 done in {time.time() - start:.1f} seconds.\n")

    banner("STEP 2 — Cleaning")
    start = time.time()
    training = clean_training(raw_training)
    scoring = align_scoring(raw_scoring, training)
    print(f"Cleaned training: {training.shape}, aligned scoring: {scoring.shape}")
    print(f"\n[OK] Step 2 done in {time.time() - start:.1f} seconds.\n")

    banner("STEP 3 — Exploratory figures")
    start = time.time()
    save_figure(plot_class_counts(training), out / "class_counts.html")
    save_figure(plot_group_histograms(training, group=explore_group),
                out / f"{explore_group}_histograms.html")
    print(training[TARGET_COLUMN].value_counts().to_string())
    print(f"\n[OK] Step 3 done in {time.time() - start:.1f} seconds.\n")

    banner("STEP 4 — Training Random Forest model")
    start = time.time()
    result = train_random_forest(training, **training_options)
    result.folds.to_csv(out / "cv_folds.csv", index=False)
    result.summary.to_csv(out / "cv_summary.csv")
    result.oob_confusion.to_csv(out / "oob_confusion.csv")
    print(result.summary.to_string())
    print(f"\nOOB error of the final model (mtry={result.best_mtry}): {result.oob_error:.4%}")
    print(result.oob_confusion.to_string())
    print(f"\n[OK] Random Forest trained in {(time.time() - start)/60:.2f} minutes.\n")

    banner("STEP 5 — Predicting scoring cases")
    predictions = predict_cases(result.model, scoring)
    ids = raw_scoring[ID_COLUMN] if ID_COLUMN in raw_scoring.columns else pd.Series(
        range(1, len(predictions) + 1), index=predictions.index
    )
    table = pd.DataFrame({ID_COLUMN: ids, "prediction": predictions})
    table.to_csv(out / "predictions.csv", index=False)
    save_figure(plot_predictions(predictions), out / "predictions.html")
    print(table.to_string(index=False))

    banner("REPORT FINISHED SUCCESSFULLY")
    print(f"Outputs written to {out.resolve()}")
    return table


if __name__ == "__main__":
    main()
