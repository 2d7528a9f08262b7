# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import joblib
import numpy as np
import pandas as pd
from sklearn.ensemble import GradientBoostingClassifier
from sklearn.metrics import (
    accuracy_score,
    average_precision_score,
    confusion_matrix,
    f1_score,
    log_loss,
    precision_score,
    recall_score,
    roc_auc_score,
)
from sklearn.pipeline import Pipeline

from ..config import Settings, TextLoaderOptions, loader_from_dict, loader_to_dict
from ..console import MLConsole
from ..features import build_featurizer
from ..schemas import BinaryMetrics
from .dataset import drop_unlabeled

BUNDLE_FORMAT = "sentimentai.model/1"


@dataclass(slots=True)
class ModelBundle:
    model: Pipeline
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def threshold(self) -> float:
        return float(self.metadata.get("threshold", 0.5))

    @property
    def model_version(self) -> str:
        return str(self.metadata.get("model_version") or "unknown")

    @property
    def loader(self) -> TextLoaderOptions:
        raw = self.metadata.get("loader")
        if not isinstance(raw, dict):
            return TextLoaderOptions()
        return loader_from_dict(raw)


def _timestamp_key() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _safe_auc(y_true: pd.Series, y_prob: list[float]) -> float:
    try:
        value = float(roc_auc_score(y_true, y_prob))
        if value != value:  # NaN
            return 0.0
        return value
    except ValueError:
        return 0.0


def _safe_auprc(y_true: pd.Series, y_prob: list[float]) -> float:
    if y_true.nunique() < 2:
        return 0.0
    return float(average_precision_score(y_true, y_prob))


def _safe_log_loss(y_true: pd.Series, y_prob: list[float]) -> float:
    return float(log_loss(y_true, y_prob, labels=[0, 1]))


def build_pipeline(settings: Settings) -> Pipeline:
    return Pipeline(
        steps=[
            ("features", build_featurizer(settings.loader.text_column)),
            (
                "clf",
                GradientBoostingClassifier(
                    n_estimators=settings.num_trees,
                    max_leaf_nodes=settings.num_leaves,
                    min_samples_leaf=settings.min_datapoints_in_leaves,
                    learning_rate=settings.learning_rate,
                    random_state=settings.seed,
                ),
            ),
        ]
    )


def _labels(df: pd.DataFrame, label_column: str) -> pd.Series:
    return df[label_column].astype(float).astype(int)


def train(df: pd.DataFrame, settings: Settings, console: MLConsole | None = None) -> Pipeline:
    console = console or MLConsole(enabled=False)
    label_column = settings.loader.label_column
    labeled, dropped = drop_unlabeled(df, label_column)
    if dropped:
        console.warn(f"{dropped} training rows without a label were skipped")
    y_train = _labels(labeled, label_column)
    if y_train.nunique() < 2:
        raise ValueError(f"Training data needs both label classes, got {sorted(y_train.unique().tolist())}")

    pipeline = build_pipeline(settings)
    console.section("Create and Train the Model")
    pipeline.fit(labeled[[settings.loader.text_column]], y_train)
    console.section("End of training")
    return pipeline


def _positive_proba(model: Pipeline, x: pd.DataFrame) -> np.ndarray:
    classes = list(model.classes_)
    return model.predict_proba(x)[:, classes.index(1)]


def score_frame(model: Pipeline, df: pd.DataFrame, *, text_column: str, threshold: float = 0.5) -> pd.DataFrame:
    out = df.copy()
    x = out[[text_column]]
    if out.empty:
        out["Probability"] = pd.Series(dtype=float)
        out["Score"] = pd.Series(dtype=float)
        out["PredictedLabel"] = pd.Series(dtype=bool)
        return out
    probabilities = _positive_proba(model, x)
    out["Probability"] = probabilities.astype(float)
    out["Score"] = np.asarray(model.decision_function(x), dtype=float).reshape(-1)
    out["PredictedLabel"] = out["Probability"] >= threshold
    return out


def compute_metrics(y_true: pd.Series, y_prob: list[float], threshold: float = 0.5) -> BinaryMetrics:
    if len(y_true) == 0:
        return BinaryMetrics(
            accuracy=0.0,
            auc=0.0,
            auprc=0.0,
            f1=0.0,
            positive_precision=0.0,
            positive_recall=0.0,
            negative_precision=0.0,
            negative_recall=0.0,
            log_loss=0.0,
            tn=0,
            fp=0,
            fn=0,
            tp=0,
            threshold=float(threshold),
            rows=0,
        )
    y_pred = [1 if score >= threshold else 0 for score in y_prob]
    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=[0, 1]).ravel()
    return BinaryMetrics(
        accuracy=float(accuracy_score(y_true, y_pred)),
        auc=_safe_auc(y_true, y_prob),
        auprc=_safe_auprc(y_true, y_prob),
        f1=float(f1_score(y_true, y_pred, zero_division=0)),
        positive_precision=float(precision_score(y_true, y_pred, zero_division=0)),
        positive_recall=float(recall_score(y_true, y_pred, zero_division=0)),
        negative_precision=float(precision_score(y_true, y_pred, pos_label=0, zero_division=0)),
        negative_recall=float(recall_score(y_true, y_pred, pos_label=0, zero_division=0)),
        log_loss=_safe_log_loss(y_true, y_prob),
        tn=int(tn),
        fp=int(fp),
        fn=int(fn),
        tp=int(tp),
        threshold=float(threshold),
        rows=int(len(y_pred)),
    )


def evaluate_scored(
    model: Pipeline,
    df: pd.DataFrame,
    *,
    loader: TextLoaderOptions | None = None,
    threshold: float = 0.5,
    console: MLConsole | None = None,
) -> tuple[BinaryMetrics, pd.DataFrame]:
    """Score the labeled rows of ``df`` once and compute metrics on them.

    Returns the metrics together with the scored frame so callers can export it.
    """
    console = console or MLConsole(enabled=False)
    loader = loader or TextLoaderOptions()
    labeled, dropped = drop_unlabeled(df, loader.label_column)
    if dropped:
        console.warn(f"{dropped} test rows without a label were skipped")
    if labeled.empty:
        console.warn("no labeled test rows left, metrics are reported as zero")

    console.section("Evaluating Model accuracy with Test data")
    scored = score_frame(model, labeled, text_column=loader.text_column, threshold=threshold)
    metrics = compute_metrics(_labels(scored, loader.label_column), scored["Probability"].tolist(), threshold=threshold)

    console.info("Model quality metrics evaluation")
    console.headline_metrics(accuracy=metrics.accuracy, auc=metrics.auc, f1=metrics.f1)
    console.metrics_table(metrics.as_dict(), title="Binary classification metrics")
    console.section("End of model evaluation")
    return metrics, scored


def evaluate(
    model: Pipeline,
    df: pd.DataFrame,
    *,
    loader: TextLoaderOptions | None = None,
    threshold: float = 0.5,
    console: MLConsole | None = None,
) -> BinaryMetrics:
    metrics, _scored = evaluate_scored(model, df, loader=loader, threshold=threshold, console=console)
    return metrics


def build_metadata(settings: Settings, *, train_rows: int, metrics: BinaryMetrics | None = None) -> dict[str, Any]:
    metadata: dict[str, Any] = {
        "model_version": _timestamp_key(),
        "created_at_utc": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "train_rows": int(train_rows),
        "threshold": float(settings.threshold),
        "hyperparameters": settings.hyperparameters(),
        "loader": loader_to_dict(settings.loader),
    }
    if metrics is not None:
        metadata["metrics"] = metrics.as_dict()
    return metadata


def save_model(model: Pipeline, path: Path, metadata: dict[str, Any] | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    joblib.dump({"format": BUNDLE_FORMAT, "model": model, "metadata": dict(metadata or {})}, path)
    return path


def load_model(path: Path) -> ModelBundle:
    payload = joblib.load(path)
    if not isinstance(payload, dict) or payload.get("format") != BUNDLE_FORMAT:
        raise ValueError(f"{path} is not a sentimentai model file")
    return ModelBundle(model=payload["model"], metadata=dict(payload.get("metadata") or {}))
