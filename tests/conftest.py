import random

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from imdb_sentiment.core.text_normalizer import NormalizerConfig

MINIMAL_STOP_WORDS = frozenset({"the", "a", "an", "and", "of", "is", "it", "this", "was"})

POSITIVE_WORDS = ["great", "wonderful", "excellent", "loved", "brilliant", "enjoyed", "moving"]
NEGATIVE_WORDS = ["terrible", "awful", "boring", "waste", "bad", "worst", "dull"]
NEUTRAL_WORDS = ["film", "movie", "plot", "acting", "story", "scenes", "director"]


@pytest.fixture
def stop_config():
    """Normalizer with a small fixed stop-word list, no NLTK download needed."""
    return NormalizerConfig(stop_words=MINIMAL_STOP_WORDS, stem=True)


@pytest.fixture
def toy_reviews():
    return pd.DataFrame(
        {
            "review_id": [0, 1, 2, 3],
            "review": ["great film", "wonderful acting", "terrible waste", "bad plot"],
            "sentiment": ["positive", "positive", "negative", "negative"],
        }
    )


def make_reviews(n_per_class: int, seed: int = 0) -> pd.DataFrame:
    """Synthetic, clearly separable reviews with markup and digits sprinkled in."""
    rng = random.Random(seed)
    rows = []
    for label, vocab in (("positive", POSITIVE_WORDS), ("negative", NEGATIVE_WORDS)):
        for _ in range(n_per_class):
            words = rng.sample(vocab, 3) + rng.sample(NEUTRAL_WORDS, 3)
            rng.shuffle(words)
            text = (
                f"This {words[0]} {words[1]} was {words[2]}.<br /><br />"
                f"The {words[3]}, {words[4]} and {words[5]} in {rng.randint(1950, 2020)}!"
            )
            rows.append((text, label))
    rng.shuffle(rows)
    df = pd.DataFrame(rows, columns=["review", "sentiment"])
    df.insert(0, "review_id", range(len(df)))
    return df


@pytest.fixture
def synthetic_reviews():
    return make_reviews(60)


@pytest.fixture
def reviews_csv(tmp_path):
    df = make_reviews(30, seed=1)
    path = tmp_path / "IMDB Dataset.csv"
    df[["review", "sentiment"]].to_csv(path, index=False)
    return path
