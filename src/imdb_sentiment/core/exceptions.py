# exceptions.py
"""Errors and warnings raised by the sentiment pipeline."""


class SentimentPipelineError(Exception):
    """Base class for fatal pipeline errors."""


class DataLoadError(SentimentPipelineError):
    """Input file is missing or does not have the expected columns/labels."""


class SamplingError(SentimentPipelineError):
    """A label has fewer rows than the requested per-class sample size."""


class ColumnAlignmentError(SentimentPipelineError):
    """Train and test feature matrices do not expose the same columns."""


class EmptyDocumentWarning(UserWarning):
    """A review has no tokens left after normalization."""


class SplitIntegrityError(SentimentPipelineError):
    """Train and test row positions overlap or do not cover the matrix."""
