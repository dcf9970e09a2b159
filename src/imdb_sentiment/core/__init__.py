# Core components for sentiment analysis

from .exceptions import (
    SentimentPipelineError,
    DataLoadError,
    SamplingError,
    ColumnAlignmentError,
    SplitIntegrityError,
    EmptyDocumentWarning,
)
from .text_normalizer import NormalizerConfig, NormalizedCorpus, normalize_text, normalize_reviews
from .metrics import (
    ConfusionCounts,
    confusion_matrix,
    confusion_counts,
    accuracy_score,
    cohen_kappa,
    sensitivity,
    specificity,
    roc_points,
    compute_all_metrics,
)
from .splitting import DataSplit, stratified_train_test_split, check_column_alignment, check_partition

__all__ = [
    "SentimentPipelineError",
    "DataLoadError",
    "SamplingError",
    "ColumnAlignmentError",
    "SplitIntegrityError",
    "EmptyDocumentWarning",
    "NormalizerConfig",
    "NormalizedCorpus",
    "normalize_text",
    "normalize_reviews",
    "ConfusionCounts",
    "confusion_matrix",
    "confusion_counts",
    "accuracy_score",
    "cohen_kappa",
    "sensitivity",
    "specificity",
    "roc_points",
    "compute_all_metrics",
    "DataSplit",
    "stratified_train_test_split",
    "check_column_alignment",
    "check_partition",
]
