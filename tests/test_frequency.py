import math

import pandas as pd
import pytest

from imdb_sentiment.features.frequency import term_frequency, tf_idf, top_terms


@pytest.fixture
def tokens():
    rows = [
        (0, "positive", "great"),
        (0, "positive", "film"),
        (1, "positive", "great"),
        (1, "positive", "act"),
        (2, "negative", "film"),
        (2, "negative", "bad"),
        (3, "negative", "bad"),
        (3, "negative", "plot"),
    ]
    return pd.DataFrame(rows, columns=["review_id", "sentiment", "word"])


def _lookup(table, label, word, col):
    row = table[(table["sentiment"] == label) & (table["word"] == word)]
    assert len(row) == 1
    return row[col].iloc[0]


def test_term_frequency_counts_per_label(tokens):
    tf = term_frequency(tokens)
    assert _lookup(tf, "positive", "great", "n") == 2
    assert _lookup(tf, "negative", "film", "n") == 1
    assert tf["n"].sum() == len(tokens)


def test_tf_idf_uses_labels_as_documents(tokens):
    table = tf_idf(tokens)
    # "film" appears under both labels
    assert _lookup(table, "positive", "film", "idf") == 0.0
    assert _lookup(table, "negative", "film", "tf_idf") == 0.0
    # "great" only under positive: tf = 2/4, idf = ln(2)
    assert _lookup(table, "positive", "great", "tf") == pytest.approx(0.5)
    assert _lookup(table, "positive", "great", "idf") == pytest.approx(math.log(2))
    assert _lookup(table, "positive", "great", "tf_idf") == pytest.approx(0.5 * math.log(2))


def test_tf_idf_empty_tokens():
    empty = pd.DataFrame(columns=["review_id", "sentiment", "word"])
    assert tf_idf(empty).empty


def test_top_terms_breaks_ties_alphabetically(tokens):
    top = top_terms(tf_idf(tokens), "tf_idf", n=2)
    negative = top[top["sentiment"] == "negative"]
    # bad = 2/4 * ln2, plot = 1/4 * ln2, film = 0
    assert negative["word"].tolist() == ["bad", "plot"]
    positive = top[top["sentiment"] == "positive"]
    assert positive["word"].tolist() == ["great", "act"]
    assert positive["rank"].tolist() == [1, 2]


def test_top_terms_ties_on_count(tokens):
    top = top_terms(term_frequency(tokens), "n", n=3)
    negative = top[top["sentiment"] == "negative"]["word"].tolist()
    assert negative == ["bad", "film", "plot"]
