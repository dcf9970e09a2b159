# frequency.py
"""Per-label term frequency and label-as-document TF-IDF tables."""
import numpy as np
import pandas as pd


def term_frequency(tokens: pd.DataFrame, label_col: str = "sentiment") -> pd.DataFrame:
    """Count of each word per label: columns [label_col, word, n]."""
    if tokens.empty:
        return pd.DataFrame({label_col: [], "word": [], "n": []}).astype({"n": int})
    return (
        tokens.groupby([label_col, "word"], sort=True)
        .size()
        .reset_index(name="n")
    )


def tf_idf(tokens: pd.DataFrame, label_col: str = "sentiment") -> pd.DataFrame:
    """
    TF-IDF with each label treated as one document.

    tf = n / words in the label, idf = ln(labels / labels containing the word).
    With two labels a word used by both gets idf 0.
    """
    counts = term_frequency(tokens, label_col)
    if counts.empty:
        return counts.assign(tf=[], idf=[], tf_idf=[])

    n_docs = counts[label_col].nunique()
    totals = counts.groupby(label_col)["n"].transform("sum")
    doc_freq = counts.groupby("word")[label_col].transform("nunique")

    out = counts.copy()
    out["tf"] = out["n"] / totals
    out["idf"] = np.log(n_docs / doc_freq)
    out["tf_idf"] = out["tf"] * out["idf"]
    return out


def top_terms(
    table: pd.DataFrame, score_col: str = "n", n: int = 10, label_col: str = "sentiment"
) -> pd.DataFrame:
    """
    Top ``n`` words per label by ``score_col`` (descending).

    Ties are broken alphabetically on the word so the result is deterministic.
    """
    ranked = table.sort_values(
        [label_col, score_col, "word"], ascending=[True, False, True], kind="mergesort"
    )
    top = ranked.groupby(label_col, sort=True).head(n).reset_index(drop=True)
    top["rank"] = top.groupby(label_col).cumcount() + 1
    return top
