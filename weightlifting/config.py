"""
Report-level settings used by run_all.py.
"""

REPORT_DIR = "reports"

# measurement group shown in the exploratory histograms
EXPLORE_GROUP = "belt"
