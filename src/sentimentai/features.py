# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re
import unicodedata

from sklearn.compose import ColumnTransformer
from sklearn.feature_extraction.text import TfidfVectorizer

LABEL_COLUMN = "Label"
TEXT_COLUMN = "SentimentText"

WHITESPACE_RE = re.compile(r"\s+")


def _safe_text(value: object) -> str:
    if value is None or value != value:  # NaN
        return ""
    return str(value)


def normalize_text(value: object) -> str:
    text = unicodedata.normalize("NFKD", _safe_text(value))
    text = "".join(char for char in text if not unicodedata.combining(char))
    return WHITESPACE_RE.sub(" ", text.lower()).strip()


def build_featurizer(text_column: str = TEXT_COLUMN) -> ColumnTransformer:
    """Word uni/bi-grams plus char tri-grams, each block L2-normalized."""
    return ColumnTransformer(
        transformers=[
            (
                "word_tfidf",
                TfidfVectorizer(analyzer="word", ngram_range=(1, 2), preprocessor=normalize_text, norm="l2"),
                text_column,
            ),
            (
                "char_tfidf",
                TfidfVectorizer(analyzer="char_wb", ngram_range=(3, 3), preprocessor=normalize_text, norm="l2"),
                text_column,
            ),
        ],
        sparse_threshold=1.0,
    )
