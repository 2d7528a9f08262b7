# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Toxic comment sentiment classifier."""

from .inference.predictor import SentimentPredictor, load_predictor
from .schemas import BinaryMetrics, SentimentData, SentimentPrediction

__all__ = ["SentimentData", "SentimentPrediction", "BinaryMetrics", "SentimentPredictor", "load_predictor"]
