# Experimental components for sentiment analysis

from .experimental_pipeline import ExperimentalPipeline

__all__ = [
    "ExperimentalPipeline",
]
