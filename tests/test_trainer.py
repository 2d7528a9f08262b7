from __future__ import annotations

from pathlib import Path

import joblib
import pandas as pd
import pytest

from sentimentai.config import Settings
from sentimentai.training.dataset import read_tsv
from sentimentai.training.trainer import (
    build_metadata,
    build_pipeline,
    compute_metrics,
    evaluate,
    evaluate_scored,
    load_model,
    save_model,
    score_frame,
    train,
)

from .conftest import write_tsv


def test_build_pipeline_maps_tree_settings() -> None:
    settings = Settings(data_dir=Path("."), num_trees=50, num_leaves=50, min_datapoints_in_leaves=20, seed=0)

    clf = build_pipeline(settings).named_steps["clf"]

    assert clf.n_estimators == 50
    assert clf.max_leaf_nodes == 50
    assert clf.min_samples_leaf == 20
    assert clf.random_state == 0


def test_training_and_evaluation_are_deterministic(settings: Settings) -> None:
    train_df = read_tsv(settings.train_path)
    test_df = read_tsv(settings.test_path)

    first = evaluate(train(train_df, settings), test_df)
    second = evaluate(train(train_df, settings), test_df)

    assert first == second
    assert first.rows == len(test_df)
    for value in (first.accuracy, first.auc, first.f1, first.auprc):
        assert 0.0 <= value <= 1.0


def test_trained_model_separates_obvious_comments(settings: Settings) -> None:
    model = train(read_tsv(settings.train_path), settings)
    frame = pd.DataFrame({"SentimentText": ["You are a stupid idiot", "Thanks, great and helpful work"]})

    scored = score_frame(model, frame, text_column="SentimentText")

    assert list(scored.columns) == ["SentimentText", "Probability", "Score", "PredictedLabel"]
    assert scored["Probability"].iloc[0] > scored["Probability"].iloc[1]


def test_train_rejects_single_class(settings: Settings) -> None:
    df = pd.DataFrame({"Label": [1.0, 1.0, 1.0], "SentimentText": ["a", "b", "c"]})

    with pytest.raises(ValueError, match="both label classes"):
        train(df, settings)


def test_train_skips_unlabeled_rows(settings: Settings) -> None:
    df = read_tsv(settings.train_path)
    df.loc[len(df)] = [float("nan"), "row without a label"]

    model = train(df, settings)

    assert list(model.classes_) == [0, 1]


def test_compute_metrics_on_single_class_test_set() -> None:
    metrics = compute_metrics(pd.Series([1, 1]), [0.9, 0.2])

    assert metrics.auc == 0.0
    assert metrics.auprc == 0.0
    assert metrics.accuracy == 0.5
    assert (metrics.tp, metrics.fn) == (1, 1)


def test_save_then_load_reproduces_predictions(settings: Settings) -> None:
    train_df = read_tsv(settings.train_path)
    test_df = read_tsv(settings.test_path)
    model = train(train_df, settings)

    path = save_model(model, settings.model_path, build_metadata(settings, train_rows=len(train_df)))
    bundle = load_model(path)

    expected = score_frame(model, test_df, text_column="SentimentText")
    actual = score_frame(bundle.model, test_df, text_column="SentimentText")
    pd.testing.assert_frame_equal(expected, actual)
    assert bundle.threshold == 0.5
    assert bundle.metadata["train_rows"] == len(train_df)
    assert bundle.loader == settings.loader


def test_load_model_rejects_foreign_file(tmp_path: Path) -> None:
    path = tmp_path / "other.joblib"
    joblib.dump({"weights": [1, 2, 3]}, path)

    with pytest.raises(ValueError, match="not a sentimentai model"):
        load_model(path)


def test_load_model_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_model(tmp_path / "Model.joblib")


@pytest.mark.parametrize("rows", [[], [("", "you idiot"), ("", "thanks")]])
def test_evaluate_without_labeled_rows_reports_zero_metrics(settings: Settings, tmp_path: Path, rows) -> None:
    model = train(read_tsv(settings.train_path), settings)
    test_df = read_tsv(write_tsv(tmp_path / "blank.tsv", rows))

    metrics, scored = evaluate_scored(model, test_df)

    assert scored.empty
    assert list(scored.columns) == ["Label", "SentimentText", "Probability", "Score", "PredictedLabel"]
    assert metrics.rows == 0
    assert (metrics.accuracy, metrics.auc, metrics.f1, metrics.log_loss) == (0.0, 0.0, 0.0, 0.0)
    assert (metrics.tn, metrics.fp, metrics.fn, metrics.tp) == (0, 0, 0, 0)
    assert metrics.threshold == 0.5


def test_evaluate_scored_returns_the_scored_test_rows(settings: Settings) -> None:
    model = train(read_tsv(settings.train_path), settings)
    test_df = read_tsv(settings.test_path)

    metrics, scored = evaluate_scored(model, test_df)

    assert metrics == evaluate(model, test_df)
    pd.testing.assert_frame_equal(scored, score_frame(model, test_df, text_column="SentimentText"))
