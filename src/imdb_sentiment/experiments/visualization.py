# visualization.py
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

METRIC_COLUMNS = ["accuracy", "kappa", "sensitivity", "specificity", "auc"]


def _save(fig, save_dir: Path, filename: str) -> Path:
    save_dir = Path(save_dir)
    save_dir.mkdir(parents=True, exist_ok=True)
    out = save_dir / filename
    fig.tight_layout()
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_label_distribution(reviews: pd.DataFrame, save_dir: Path) -> Path:
    fig, ax = plt.subplots(figsize=(6, 4))
    sns.countplot(data=reviews, x="sentiment", order=["negative", "positive"], ax=ax)
    ax.set_title("sentiment label distribution")
    return _save(fig, save_dir, "sentiment_distribution.png")


def plot_review_lengths(reviews: pd.DataFrame, save_dir: Path) -> Path:
    lengths = reviews.assign(length=reviews["review"].astype(str).str.split().str.len())
    fig, ax = plt.subplots(figsize=(6, 4))
    sns.histplot(data=lengths, x="length", hue="sentiment", bins=50, ax=ax)
    ax.set_title("review length distribution (words)")
    return _save(fig, save_dir, "review_length_distribution.png")


def plot_top_terms(
    top: pd.DataFrame,
    score_col: str,
    save_dir: Path,
    filename: str,
    title: str,
    group_col: str = "sentiment",
) -> Path:
    """One horizontal bar panel per group (label or topic) of a ranked term table."""
    groups = list(pd.unique(top[group_col]))
    n_cols = min(len(groups), 4) or 1
    n_rows = int(np.ceil(len(groups) / n_cols)) or 1
    fig, axes = plt.subplots(
        n_rows, n_cols, figsize=(4.5 * n_cols, 3.5 * n_rows), squeeze=False
    )

    for ax, group in zip(axes.ravel(), groups):
        sub = top[top[group_col] == group].sort_values("rank")
        sns.barplot(data=sub, x=score_col, y="word", ax=ax, color="steelblue")
        ax.set_title(f"{group_col} {group}" if group_col == "topic" else str(group))
        ax.set_xlabel(score_col)
        ax.set_ylabel("")
    for ax in axes.ravel()[len(groups):]:
        ax.set_visible(False)

    fig.suptitle(title)
    return _save(fig, save_dir, filename)


def plot_confusion_matrices(model_results: dict, save_dir: Path):
    """Plot confusion matrices for all models"""
    n_models = len(model_results)
    if n_models == 0:
        return None

    fig, axes = plt.subplots(1, n_models, figsize=(5 * n_models, 4))
    if n_models == 1:
        axes = [axes]

    for ax, (model_name, res) in zip(axes, model_results.items()):
        cm = np.asarray(res["metrics"]["confusion_matrix"])
        sns.heatmap(
            cm.astype(int),
            annot=True,
            fmt="d",
            cmap="Blues",
            ax=ax,
            cbar=True,
            square=True,
        )
        ax.set_title(f"{model_name}\nConfusion Matrix")
        ax.set_xlabel("Predicted")
        ax.set_ylabel("Actual")
        ax.set_xticklabels(["Negative", "Positive"])
        ax.set_yticklabels(["Negative", "Positive"])

    out = _save(fig, save_dir, "confusion_matrices.png")
    print(f"✓ Confusion matrices saved to {out}")
    return out


def plot_roc_curves(model_results: dict, save_dir: Path) -> Path:
    fig, ax = plt.subplots(figsize=(6, 6))
    for model_name, res in model_results.items():
        roc = res["roc"]
        auc = res["metrics"].get("auc")
        label = f"{model_name} (AUC={auc:.3f})" if auc is not None else model_name
        ax.plot(roc["fpr"], roc["tpr"], label=label, linewidth=2)
    ax.plot([0, 1], [0, 1], linestyle="--", color="grey", linewidth=1)
    ax.set_xlabel("False positive rate (1 - specificity)")
    ax.set_ylabel("True positive rate (sensitivity)")
    ax.set_title("ROC curves")
    ax.legend(loc="lower right")
    ax.grid(True, alpha=0.3)
    return _save(fig, save_dir, "roc_curves.png")


def plot_model_performance(model_results: dict, save_dir: Path) -> Path:
    rows = []
    for model, res in model_results.items():
        for metric in METRIC_COLUMNS:
            rows.append({"Model": model, "Metric": metric, "Value": res["metrics"].get(metric)})
    df = pd.DataFrame(rows)
    fig, ax = plt.subplots(figsize=(8, 5))
    sns.barplot(data=df, x="Metric", y="Value", hue="Model", ax=ax)
    ax.set_ylim(min(0.0, df["Value"].min(skipna=True)), 1.0)
    ax.set_title("Model Comparison (test set)")
    return _save(fig, save_dir, "model_performance_bar.png")


def export_summary_table(model_results: dict, save_dir: Path) -> pd.DataFrame:
    rows = []
    for model, res in model_results.items():
        m = res.get("metrics", {})
        rows.append(
            {
                "Model": model,
                "Accuracy": m.get("accuracy"),
                "Kappa": m.get("kappa"),
                "Sensitivity": m.get("sensitivity"),
                "Specificity": m.get("specificity"),
                "AUC": m.get("auc"),
                "Params": str(res.get("params")),
            }
        )
    df = pd.DataFrame(rows)
    save_dir = Path(save_dir)
    save_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(save_dir / "model_summary.csv", index=False)
    (save_dir / "model_summary.md").write_text(
        df.to_markdown(index=False, floatfmt=".4f"), encoding="utf-8"
    )
    return df
