# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd
from sklearn.pipeline import Pipeline

from ..config import TextLoaderOptions
from ..schemas import SentimentData, SentimentPrediction
from ..training.trainer import load_model, score_frame


class SentimentPredictor:
    def __init__(
        self,
        model: Pipeline,
        *,
        threshold: float = 0.5,
        model_version: str = "unknown",
        loader: TextLoaderOptions | None = None,
    ) -> None:
        self.model = model
        self.threshold = threshold
        self.model_version = model_version
        self.loader = loader or TextLoaderOptions()

    @classmethod
    def from_file(cls, model_path: Path) -> SentimentPredictor:
        bundle = load_model(model_path)
        return cls(
            bundle.model,
            threshold=bundle.threshold,
            model_version=bundle.model_version,
            loader=bundle.loader,
        )

    def predict(self, text: str) -> SentimentPrediction:
        return self.predict_many([SentimentData(sentiment_text=text)])[0]

    def predict_many(self, samples: Sequence[SentimentData]) -> list[SentimentPrediction]:
        if not samples:
            return []
        frame = pd.DataFrame({self.loader.text_column: [sample.sentiment_text or "" for sample in samples]})
        scored = score_frame(self.model, frame, text_column=self.loader.text_column, threshold=self.threshold)
        return [
            SentimentPrediction(
                prediction=bool(row["PredictedLabel"]),
                probability=float(row["Probability"]),
                score=float(row["Score"]),
            )
            for row in scored.to_dict(orient="records")
        ]


_CACHE: dict[Path, SentimentPredictor] = {}


def load_predictor(model_path: Path) -> SentimentPredictor:
    key = Path(model_path).resolve()
    cached = _CACHE.get(key)
    if cached is not None:
        return cached
    predictor = SentimentPredictor.from_file(key)
    _CACHE[key] = predictor
    return predictor


def clear_cache() -> None:
    _CACHE.clear()
