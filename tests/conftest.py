import numpy as np
import pandas as pd
import pytest

SENSORS = [
    "roll_belt",
    "pitch_belt",
    "yaw_belt",
    "total_accel_belt",
    "roll_arm",
    "pitch_arm",
    "gyros_dumbbell_x",
    "magnet_forearm_y",
]
LETTERS = np.array(list("ABCDE"))


def make_raw(n, with_target=True, seed=0):
    """
    Synthetic table shaped like pml-training.csv / pml-testing.csv:
    identifier and window columns, well separated sensor columns, one
    mostly-NA summary column and one mostly-empty text summary column.
    Row i belongs to class LETTERS[i % 5].
    """
    rng = np.random.default_rng(seed)
    codes = np.arange(n) % 5

    data = {
        "user_name": rng.choice(["carlitos", "pedro", "adelmo"], n),
        "raw_timestamp_part_1": 1323084231 + np.arange(n),
        "raw_timestamp_part_2": rng.integers(0, 999999, n),
        "cvtd_timestamp": ["05/12/2011 11:23"] * n,
        "new_window": ["no"] * n,
        "num_window": 11 + np.arange(n) // 10,
    }
    for i, name in enumerate(SENSORS):
        data[name] = codes * 10.0 * (i + 1) + rng.normal(0, 1, n)

    if with_target:
        max_roll = np.full(n, np.nan)
        max_roll[::50] = -94.3
        kurtosis = np.array([""] * n, dtype=object)
        kurtosis[::50] = "#DIV/0!"
        data["max_roll_belt"] = max_roll
        data["kurtosis_roll_belt"] = kurtosis
        data["classe"] = LETTERS[codes]
    else:
        data["max_roll_belt"] = np.full(n, np.nan)
        data["kurtosis_roll_belt"] = np.full(n, np.nan)
        data["problem_id"] = np.arange(1, n + 1)

    return pd.DataFrame(data, index=pd.RangeIndex(1, n + 1))


@pytest.fixture
def raw_training():
    return make_raw(200)


@pytest.fixture
def raw_scoring():
    return make_raw(20, with_target=False, seed=1)


@pytest.fixture
def small_forest():
    """Keyword arguments for quick forests in tests."""
    return {"n_estimators": 30, "random_state": 7, "n_jobs": 1}
