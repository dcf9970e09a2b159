"""
Exploratory analysis and model comparison for binary sentiment classification
of IMDB movie reviews.

Key modules:
- prepare_dataset: Corpus loading, stratified sampling, imdb_clean.csv
- core.text_normalizer: Tokenization, stop-word/artifact filtering, stemming
- core.metrics: Confusion-matrix metrics, kappa, ROC
- core.splitting: Stratified train/test split with column alignment checks
- features: Term frequency / TF-IDF, LDA topics, document-feature matrix
- models: Random Forest and Gradient Boosting wrappers
- experiments: Pipeline orchestration and visualization
"""

__version__ = "0.1.0"
