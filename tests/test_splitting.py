import pytest

from imdb_sentiment.core import splitting
from imdb_sentiment.core.exceptions import ColumnAlignmentError, SplitIntegrityError
from imdb_sentiment.core.splitting import (
    check_column_alignment,
    check_partition,
    stratified_train_test_split,
)
from imdb_sentiment.features.feature_matrix import assemble_feature_matrix, build_feature_matrix


@pytest.fixture
def feature_matrix(synthetic_reviews, stop_config):
    return build_feature_matrix(synthetic_reviews, stop_config, n_per_class=50, random_state=2)


def test_split_is_disjoint_and_complete(feature_matrix):
    split = stratified_train_test_split(feature_matrix, train_fraction=0.8, random_state=2)

    train, test = set(split.train_rows), set(split.test_rows)
    assert not train & test
    assert train | test == set(range(feature_matrix.n_rows))
    assert len(split.train_rows) == 80
    assert len(split.test_rows) == 20


def test_split_preserves_label_ratio(feature_matrix):
    split = stratified_train_test_split(feature_matrix, random_state=9)
    overall = feature_matrix.y.mean()
    assert split.train.y.mean() == pytest.approx(overall, abs=0.05)
    assert split.test.y.mean() == pytest.approx(overall, abs=0.05)


def test_split_parts_share_columns(feature_matrix):
    split = stratified_train_test_split(feature_matrix)
    assert list(split.train.frame.columns) == list(split.test.frame.columns)
    assert split.train.X.shape[1] == split.test.X.shape[1] == len(feature_matrix.vocabulary)


def test_split_keeps_review_identity(feature_matrix):
    split = stratified_train_test_split(feature_matrix)
    ids = set(split.train.review_ids) | set(split.test.review_ids)
    assert ids == set(feature_matrix.review_ids)


def test_split_rejects_bad_fraction(feature_matrix):
    with pytest.raises(ValueError):
        stratified_train_test_split(feature_matrix, train_fraction=1.0)


def test_alignment_check_detects_different_vocabularies():
    a = assemble_feature_matrix(["positive"], [["great", "film"]], [0])
    b = assemble_feature_matrix(["negative"], [["bad", "film"]], [1])
    with pytest.raises(ColumnAlignmentError, match="train only"):
        check_column_alignment(a, b)


def test_alignment_check_detects_reordered_columns():
    a = assemble_feature_matrix(["positive"], [["great", "film"]], [0])
    frame = a.frame[[a.frame.columns[0], "great", "film"]]
    b = type(a)(frame=frame, vocabulary=("great", "film"), review_ids=(0,))
    with pytest.raises(ColumnAlignmentError):
        check_column_alignment(a, b)


def test_alignment_check_detects_different_label_column():
    a = assemble_feature_matrix(["positive"], [["great", "film"]], [0])
    frame = a.frame.rename(columns={a.frame.columns[0]: "label"})
    b = type(a)(frame=frame, vocabulary=a.vocabulary, review_ids=(0,))
    with pytest.raises(ColumnAlignmentError, match="label columns differ"):
        check_column_alignment(a, b)


def test_feature_columns_follow_label_column(feature_matrix):
    assert feature_matrix.feature_columns == list(feature_matrix.vocabulary)
    assert feature_matrix.frame.columns[0] not in feature_matrix.feature_columns


def test_partition_check_rejects_overlap_and_gaps():
    check_partition([0, 2], [1, 3], 4)
    with pytest.raises(SplitIntegrityError, match="both train and test"):
        check_partition([0, 1, 2], [2, 3], 4)
    with pytest.raises(SplitIntegrityError, match="missing"):
        check_partition([0, 1], [3], 4)


def test_split_raises_when_splitter_overlaps(feature_matrix, monkeypatch):
    def overlapping_split(positions, **kwargs):
        return positions[:60], positions[40:]

    monkeypatch.setattr(splitting, "train_test_split", overlapping_split)
    with pytest.raises(SplitIntegrityError):
        stratified_train_test_split(feature_matrix)
