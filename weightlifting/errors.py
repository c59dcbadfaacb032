"""
Exceptions raised by the report pipeline.

All of them are fatal: nothing in the pipeline retries or recovers, they
propagate up to run_all.main().
"""


class PipelineError(Exception):
    """Base class for every pipeline failure."""


class DataFetchError(PipelineError):
    """A remote CSV could not be downloaded or parsed."""


class SchemaMismatchError(PipelineError):
    """Columns (names or types) do not line up with the training schema."""


class MissingTargetError(SchemaMismatchError):
    """The target column is absent from a table that needs it."""


class UnknownLabelError(PipelineError):
    """A target value outside both the raw and the readable label alphabets."""


class FitError(PipelineError):
    """The Random Forest could not be fitted (degenerate data, bad mtry...)."""
