"""
Exploratory figures for the report.

Nothing produced here is consumed by the modelling stages.
"""

from pathlib import Path

import pandas as pd
import plotly.express as px

from ..dataset_preparation.config import TARGET_COLUMN, CLASS_LABELS

LABEL_ORDER = list(CLASS_LABELS.values())


def measurement_group(name):
    """
    Predicate: True for column names having `name` as one of their
    underscore-separated parts, so "arm" matches roll_arm but not
    magnet_forearm_y.
    """
    def predicate(column):
        return name in column.split("_")
    return predicate


def select_columns(df, predicate, exclude=(TARGET_COLUMN,)):
    return [c for c in df.columns if c not in exclude and predicate(c)]


def plot_class_counts(df: pd.DataFrame, target=TARGET_COLUMN):
    counts = (
        df[target].value_counts()
        .reindex(LABEL_ORDER)
        .dropna()
        .astype(int)
        .rename_axis(target)
        .reset_index(name="count")
    )
    fig = px.bar(
        counts,
        x=target,
        y="count",
        color=target,
        category_orders={target: LABEL_ORDER},
        title="Observations per exercise class",
    )
    fig.update_layout(showlegend=False)
    return fig


def plot_group_histograms(df: pd.DataFrame, group="belt", target=TARGET_COLUMN, facet_col_wrap=4):
    """
    Faceted histograms (one panel per sensor column of `group`), coloured
    by class.
    """
    cols = select_columns(df, measurement_group(group), exclude=(target,))
    if not cols:
        raise ValueError(f"No columns match measurement group '{group}'")

    long_df = df[cols + [target]].melt(id_vars=target, var_name="variable", value_name="value")

    fig = px.histogram(
        long_df,
        x="value",
        color=target,
        facet_col="variable",
        facet_col_wrap=facet_col_wrap,
        category_orders={target: LABEL_ORDER, "variable": cols},
        opacity=0.6,
        barmode="overlay",
        title=f"Distribution of '{group}' measurements by class",
    )
    # every sensor has its own scale
    fig.update_xaxes(matches=None, showticklabels=True)
    fig.update_yaxes(matches=None)
    fig.for_each_annotation(lambda a: a.update(text=a.text.split("=")[-1]))
    return fig


def plot_predictions(predictions: pd.Series):
    counts = (
        predictions.value_counts()
        .reindex(LABEL_ORDER)
        .fillna(0)
        .astype(int)
        .rename_axis("prediction")
        .reset_index(name="count")
    )
    fig = px.bar(
        counts,
        x="prediction",
        y="count",
        color="prediction",
        category_orders={"prediction": LABEL_ORDER},
        title=f"Predicted class of the {len(predictions)} scoring cases",
    )
    fig.update_layout(showlegend=False)
    return fig


def save_figure(fig, path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(path))
    return path
