import pytest

from weightlifting.dataset_preparation.cleaning import clean_training, align_scoring
from weightlifting.dataset_preparation.config import CLASS_LABELS
from weightlifting.errors import SchemaMismatchError
from weightlifting.modeling.Random_forest import random_forest as RF
from weightlifting.modeling.predict import predict_cases

from .conftest import LETTERS


@pytest.fixture
def fitted(raw_training, small_forest):
    training = clean_training(raw_training)
    X, y = RF.split_xy(training)
    return training, RF.fit_forest(X, y, max_features=2, **small_forest)


def test_one_prediction_per_row(fitted, raw_scoring):
    training, model = fitted
    scoring = align_scoring(raw_scoring, training)

    preds = predict_cases(model, scoring)

    assert len(preds) == len(scoring) == 20
    assert list(preds.index) == list(scoring.index)
    expected = [CLASS_LABELS[LETTERS[i % 5]] for i in range(20)]
    assert list(preds) == expected


def test_prediction_order_follows_input(fitted, raw_scoring):
    training, model = fitted
    scoring = align_scoring(raw_scoring, training)
    shuffled = scoring.sample(frac=1, random_state=0)

    preds = predict_cases(model, scoring)
    preds_shuffled = predict_cases(model, shuffled)

    assert list(preds_shuffled.index) == list(shuffled.index)
    assert (preds_shuffled == preds.loc[shuffled.index]).all()


def test_missing_predictor_fails(fitted, raw_scoring):
    training, model = fitted
    scoring = align_scoring(raw_scoring, training).drop(columns=["yaw_belt"])

    with pytest.raises(SchemaMismatchError, match="yaw_belt"):
        predict_cases(model, scoring)


def test_non_numeric_predictor_fails(fitted, raw_scoring):
    training, model = fitted
    scoring = align_scoring(raw_scoring, training)
    scoring["roll_arm"] = "high"

    with pytest.raises(SchemaMismatchError, match="roll_arm"):
        predict_cases(model, scoring)


def test_extra_columns_are_ignored(fitted, raw_scoring):
    training, model = fitted
    scoring = align_scoring(raw_scoring, training)
    scoring["problem_id"] = range(1, 21)

    assert len(predict_cases(model, scoring)) == 20
