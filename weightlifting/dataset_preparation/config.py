"""
Configuration file for dataset preparation.

Centralizes the remote locations of the Weight Lifting Exercises CSVs,
the sparseness thresholds and the column names used by the cleaner.
"""

# -------------------------
# INPUT LOCATIONS
# -------------------------
TRAINING_URL = "https://d396qusza40orc.cloudfront.net/predmachlearn/pml-training.csv"
SCORING_URL = "https://d396qusza40orc.cloudfront.net/predmachlearn/pml-testing.csv"
FETCH_TIMEOUT = 60  # seconds

# only the literal "NA" is missing; "" and "#DIV/0!" stay as text
NA_VALUES = ["NA"]

# -------------------------
# CLEANING PARAMETERS
# -------------------------
NA_THRESHOLD = 0.5      # drop column if >= 50% of the values are missing
EMPTY_THRESHOLD = 0.5   # drop text column if >= 50% of the values are ""

EXCLUDED_COLUMNS = [
    "user_name",
    "raw_timestamp_part_1",
    "raw_timestamp_part_2",
    "cvtd_timestamp",
    "new_window",
    "num_window",
    "problem_id",
]

# -------------------------
# TARGET
# -------------------------
TARGET_COLUMN = "classe"
ID_COLUMN = "problem_id"

CLASS_LABELS = {
    "A": "Correct",
    "B": "ElbowThrow",
    "C": "HalfLift",
    "D": "HalfLower",
    "E": "HipThrow",
}
