#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Text Normalization for IMDB reviews

Turns review text into tidy token records (review_id, sentiment, word):
- Lowercase word tokenization (punctuation is never a token)
- Stop-word removal (NLTK English list by default)
- Removal of the "br" residue left by <br /> tags
- Removal of tokens containing anything but letters
- Optional Snowball stemming

The stop-word set travels inside an immutable NormalizerConfig that is passed
to every call; every pass returns its own vocabulary.
"""
from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

import nltk
import pandas as pd
from nltk.stem.snowball import SnowballStemmer
from nltk.tokenize import RegexpTokenizer

from ..config import ARTIFACT_TOKENS
from .exceptions import EmptyDocumentWarning

TOKEN_PATTERN = r"\w+(?:'\w+)*"
TOKEN_COLUMNS = ["review_id", "sentiment", "word"]

_tokenizer = RegexpTokenizer(TOKEN_PATTERN)


def ensure_nltk(resource: str = "corpora/stopwords", package: str = "stopwords"):
    """Download an NLTK resource if it is not available yet."""
    try:
        nltk.data.find(resource)
    except LookupError:
        print(f"[info] downloading NLTK resource: {package}")
        nltk.download(package, quiet=True)


def english_stop_words(language: str = "english") -> frozenset:
    ensure_nltk()
    from nltk.corpus import stopwords

    return frozenset(stopwords.words(language))


@dataclass(frozen=True)
class NormalizerConfig:
    """
    Settings for one normalization pass.

    Args:
        stop_words: Exact (lowercase) tokens to drop
        artifact_tokens: Markup residue tokens to drop
        stem: Whether surviving tokens are reduced to Snowball stems
        language: Stemmer language
    """

    stop_words: frozenset = field(default_factory=frozenset)
    artifact_tokens: frozenset = frozenset(ARTIFACT_TOKENS)
    stem: bool = True
    language: str = "english"

    @classmethod
    def default(cls, stem: bool = True, language: str = "english") -> "NormalizerConfig":
        return cls(stop_words=english_stop_words(language), stem=stem, language=language)

    def with_stemming(self, stem: bool) -> "NormalizerConfig":
        return NormalizerConfig(
            stop_words=self.stop_words,
            artifact_tokens=self.artifact_tokens,
            stem=stem,
            language=self.language,
        )


@dataclass(frozen=True)
class NormalizedCorpus:
    tokens: pd.DataFrame
    vocabulary: Tuple[str, ...]
    empty_review_ids: Tuple[int, ...]


@lru_cache(maxsize=None)
def _stemmer(language: str) -> SnowballStemmer:
    return SnowballStemmer(language)


def tokenize(text: str) -> List[str]:
    """Split text into lowercase word tokens."""
    return _tokenizer.tokenize(str(text).lower())


def is_alphabetic(token: str) -> bool:
    return token.isalpha()


def stem_token(token: str, language: str = "english") -> str:
    return _stemmer(language).stem(token)


def normalize_text(text: str, config: NormalizerConfig) -> List[str]:
    """Tokenize one review and apply every filter of ``config``."""
    words = [
        w
        for w in tokenize(text)
        if w not in config.stop_words
        and w not in config.artifact_tokens
        and is_alphabetic(w)
    ]
    if config.stem:
        words = [stem_token(w, config.language) for w in words]
    return words


def normalize_reviews(
    reviews: pd.DataFrame,
    config: NormalizerConfig,
    text_col: str = "review",
    label_col: str = "sentiment",
    id_col: str = "review_id",
    warn_empty: bool = False,
) -> NormalizedCorpus:
    """
    Normalize every review into token records.

    Args:
        reviews: DataFrame of reviews (left untouched)
        config: Normalization settings
        text_col, label_col, id_col: Column names in ``reviews``
        warn_empty: Emit EmptyDocumentWarning for reviews with no tokens left

    Returns:
        NormalizedCorpus with the token table, its sorted vocabulary and the
        ids of reviews that produced no tokens
    """
    ids = reviews[id_col] if id_col in reviews.columns else pd.Series(range(len(reviews)))

    rows = []
    empty: List[int] = []
    for review_id, text, label in zip(ids, reviews[text_col], reviews[label_col]):
        words = normalize_text(text, config)
        if not words:
            empty.append(int(review_id))
            continue
        rows.extend((int(review_id), label, w) for w in words)

    if empty and warn_empty:
        warnings.warn(
            f"{len(empty)} review(s) have no tokens after normalization: {empty[:10]}",
            EmptyDocumentWarning,
            stacklevel=2,
        )

    tokens = pd.DataFrame(rows, columns=TOKEN_COLUMNS)
    return NormalizedCorpus(
        tokens=tokens,
        vocabulary=build_vocabulary(tokens["word"]),
        empty_review_ids=tuple(empty),
    )


def build_vocabulary(words: Iterable[str]) -> Tuple[str, ...]:
    return tuple(sorted(set(words)))


def normalize_documents(
    texts: Iterable[str], config: NormalizerConfig, stem: Optional[bool] = None
) -> List[List[str]]:
    """Normalize a sequence of raw texts, keeping one token list per text."""
    if stem is not None:
        config = config.with_stemming(stem)
    return [normalize_text(t, config) for t in texts]
