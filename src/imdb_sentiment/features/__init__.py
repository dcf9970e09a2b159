# Descriptive and modeling features

from .frequency import term_frequency, tf_idf, top_terms
from .topic_model import TopicModelResult, document_term_matrix, fit_topic_model, top_topic_terms
from .feature_matrix import FeatureMatrix, assemble_feature_matrix, build_feature_matrix

__all__ = [
    "term_frequency",
    "tf_idf",
    "top_terms",
    "TopicModelResult",
    "document_term_matrix",
    "fit_topic_model",
    "top_topic_terms",
    "FeatureMatrix",
    "assemble_feature_matrix",
    "build_feature_matrix",
]
