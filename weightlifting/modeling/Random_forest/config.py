"""
Configuration file for the Random Forest.

Centralizes the forest size, the cross-validation grid over mtry
(max_features) and the seed threaded into every stochastic step.
"""

# -------------------------
# Model Settings
# -------------------------
RF_N_ESTIMATORS = 500
RF_JOBS = -1
RANDOM_STATE = 42

# -------------------------
# Cross-validation Settings
# -------------------------
CV_FOLDS = 10
MTRY_GRID = (2, 27, 52)

# how an exact tie in mean CV accuracy is settled:
#   "first"    -> earliest candidate in MTRY_GRID order
#   "smallest" -> smallest mtry among the tied ones
#   "largest"  -> largest mtry among the tied ones
TIE_POLICY = "first"
TIE_POLICIES = ("first", "smallest", "largest")
