"""
loader.py — Downloads the Weight Lifting Exercises CSVs into DataFrames.

Both files carry an unnamed leading row-number column, read here as the
index. Only the literal "NA" counts as missing so that the sparse
summary-statistic columns (mostly "" with some "#DIV/0!") load as text and
can be filtered by their empty-string ratio later on.
"""

from io import StringIO

import pandas as pd
import requests

from ..errors import DataFetchError
from .config import TRAINING_URL, SCORING_URL, FETCH_TIMEOUT, NA_VALUES


def fetch_csv(url: str, timeout: float = FETCH_TIMEOUT) -> pd.DataFrame:
    """
    Fetches one CSV over HTTP and parses it. No retries.
    """
    print(f"[fetch_csv] Fetching {url}")
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise DataFetchError(f"Error downloading {url}: {e}") from e

    try:
        df = pd.read_csv(
            StringIO(resp.text),
            index_col=0,
            na_values=NA_VALUES,
            keep_default_na=False,
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise DataFetchError(f"Error reading CSV from {url}: {e}") from e

    print(f"[fetch_csv] Loaded {len(df)} rows x {df.shape[1]} columns")
    return df


def load_datasets(training_url=TRAINING_URL, scoring_url=SCORING_URL):
    """
    Fetches the training table, then the scoring table.

    Returns
    -------
    (training, scoring) : tuple of pandas.DataFrame
    """
    training = fetch_csv(training_url)
    scoring = fetch_csv(scoring_url)
    return training, scoring
