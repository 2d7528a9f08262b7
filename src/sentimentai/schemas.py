# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class SentimentData:
    sentiment_text: str
    label: float | None = None


@dataclass(frozen=True, slots=True)
class SentimentPrediction:
    prediction: bool
    probability: float
    score: float

    @property
    def verdict(self) -> str:
        return "Toxic" if self.prediction else "Not Toxic"


@dataclass(frozen=True, slots=True)
class BinaryMetrics:
    accuracy: float
    auc: float
    auprc: float
    f1: float
    positive_precision: float
    positive_recall: float
    negative_precision: float
    negative_recall: float
    log_loss: float
    tn: int
    fp: int
    fn: int
    tp: int
    threshold: float
    rows: int

    def as_dict(self) -> dict[str, float]:
        return {key: float(value) for key, value in asdict(self).items()}


def pair_predictions(
    samples: Sequence[SentimentData], predictions: Sequence[SentimentPrediction]
) -> list[tuple[SentimentData, SentimentPrediction]]:
    if len(samples) != len(predictions):
        raise ValueError(f"{len(samples)} samples but {len(predictions)} predictions")
    return list(zip(samples, predictions))
