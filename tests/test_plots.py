import pandas as pd
import pytest

from weightlifting.dataset_preparation.cleaning import clean_training
from weightlifting.exploration.plots import (
    measurement_group,
    select_columns,
    plot_class_counts,
    plot_group_histograms,
    plot_predictions,
    save_figure,
)


def test_measurement_group_predicate():
    is_belt = measurement_group("belt")

    assert is_belt("roll_belt")
    assert is_belt("total_accel_belt")
    assert not is_belt("roll_arm")


def test_measurement_group_matches_whole_name_parts():
    is_arm = measurement_group("arm")

    assert is_arm("roll_arm")
    assert is_arm("gyros_arm_x")
    assert not is_arm("magnet_forearm_y")
    assert not is_arm("roll_forearm")


def test_select_columns_skips_target(raw_training):
    training = clean_training(raw_training)

    cols = select_columns(training, measurement_group("belt"))

    assert cols == ["roll_belt", "pitch_belt", "yaw_belt", "total_accel_belt"]


def test_plot_class_counts(raw_training):
    training = clean_training(raw_training)

    fig = plot_class_counts(training)

    assert len(fig.data) == 5
    assert sum(sum(trace.y) for trace in fig.data) == len(training)


def test_plot_group_histograms_one_trace_per_class_and_column(raw_training):
    training = clean_training(raw_training)

    assert select_columns(training, measurement_group("arm")) == ["roll_arm", "pitch_arm"]

    fig = plot_group_histograms(training, group="arm")

    assert len(fig.data) == 5 * 2


def test_plot_group_histograms_unknown_group(raw_training):
    with pytest.raises(ValueError):
        plot_group_histograms(clean_training(raw_training), group="glove")


def test_plot_predictions_and_save(tmp_path):
    preds = pd.Series(["Correct", "ElbowThrow", "Correct"], name="prediction")

    fig = plot_predictions(preds)
    path = save_figure(fig, tmp_path / "nested" / "predictions.html")

    assert path.exists()
    assert sum(sum(trace.y) for trace in fig.data) == 3
