# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from sklearn.metrics import f1_score, precision_score, recall_score

from ..console import MLConsole
from ..schemas import BinaryMetrics
from ..training.dataset import read_tsv
from ..training.trainer import evaluate, load_model


def evaluate_saved_model(
    *,
    model_path: Path,
    test_path: Path,
    threshold: float | None = None,
    console: MLConsole | None = None,
) -> BinaryMetrics:
    bundle = load_model(model_path)
    df = read_tsv(test_path, bundle.loader)
    return evaluate(
        bundle.model,
        df,
        loader=bundle.loader,
        threshold=bundle.threshold if threshold is None else threshold,
        console=console,
    )


def threshold_report(y_true: Sequence[int], probabilities: Sequence[float]) -> list[dict[str, float]]:
    rows: list[dict[str, float]] = []
    for raw in range(5, 96, 5):
        thr = raw / 100.0
        y_pred = [1 if score >= thr else 0 for score in probabilities]
        rows.append(
            {
                "threshold": float(thr),
                "precision": float(precision_score(y_true, y_pred, zero_division=0)),
                "recall": float(recall_score(y_true, y_pred, zero_division=0)),
                "f1": float(f1_score(y_true, y_pred, zero_division=0)),
            }
        )
    return rows
