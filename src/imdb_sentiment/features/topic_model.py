#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
LDA topic modeling over normalized reviews.

The document-term matrix has one row per review and one column per word. The
topic inference itself is gensim's LdaModel, seeded so repeated runs give the
same topic-term weights.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
import pandas as pd
from gensim.matutils import Sparse2Corpus
from gensim.models import LdaModel
from scipy.sparse import csr_matrix
from sklearn.feature_extraction.text import CountVectorizer

from ..config import DEFAULT_SEED, LDA_PASSES, N_TOPICS


@dataclass
class TopicModelResult:
    model: LdaModel
    topic_terms: pd.DataFrame
    vocabulary: Tuple[str, ...]


def _identity(doc):
    return doc


def document_term_matrix(
    tokens: pd.DataFrame, id_col: str = "review_id"
) -> Tuple[csr_matrix, Tuple[str, ...], List[int]]:
    """
    Build a reviews x words count matrix from the token table.

    Returns:
        (sparse count matrix, vocabulary in column order, review ids in row order)
    """
    if tokens.empty:
        raise ValueError("cannot build a document-term matrix from an empty token table")

    docs = tokens.groupby(id_col, sort=True)["word"].apply(list)
    # tokens are already normalized, so the vectorizer only counts
    vectorizer = CountVectorizer(analyzer=_identity)
    dtm = vectorizer.fit_transform(docs.tolist())
    vocabulary = tuple(vectorizer.get_feature_names_out())
    return dtm.tocsr(), vocabulary, [int(i) for i in docs.index]


def fit_topic_model(
    tokens: pd.DataFrame,
    n_topics: int = N_TOPICS,
    random_state: int = DEFAULT_SEED,
    passes: int = LDA_PASSES,
) -> TopicModelResult:
    """
    Fit an LDA model with ``n_topics`` topics.

    Args:
        tokens: Token table (review_id, sentiment, word)
        n_topics: Number of latent topics
        random_state: Seed for gensim
        passes: Passes over the corpus

    Returns:
        TopicModelResult with the fitted model and a tidy table of
        per-topic word weights (topic, word, beta)
    """
    dtm, vocabulary, _ = document_term_matrix(tokens)
    corpus = Sparse2Corpus(dtm, documents_columns=False)
    id2word = dict(enumerate(vocabulary))

    model = LdaModel(
        corpus=corpus,
        id2word=id2word,
        num_topics=n_topics,
        random_state=random_state,
        passes=passes,
    )

    beta = model.get_topics()  # (n_topics, n_words)
    topic_terms = pd.DataFrame(
        {
            "topic": np.repeat(np.arange(1, n_topics + 1), len(vocabulary)),
            "word": np.tile(np.asarray(vocabulary, dtype=object), n_topics),
            "beta": beta.ravel(),
        }
    )
    return TopicModelResult(model=model, topic_terms=topic_terms, vocabulary=vocabulary)


def top_topic_terms(topic_terms: pd.DataFrame, n: int = 10) -> pd.DataFrame:
    """Top ``n`` words per topic by beta; ties broken alphabetically."""
    ranked = topic_terms.sort_values(
        ["topic", "beta", "word"], ascending=[True, False, True], kind="mergesort"
    )
    top = ranked.groupby("topic", sort=True).head(n).reset_index(drop=True)
    top["rank"] = top.groupby("topic").cumcount() + 1
    return top
