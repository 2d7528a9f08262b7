# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import csv
from pathlib import Path

import pandas as pd

from ..config import TextLoaderOptions
from ..schemas import SentimentData

TRUE_LABELS = {"1", "1.0", "true", "yes"}
FALSE_LABELS = {"0", "0.0", "false", "no"}


def _safe_text(value: object) -> str:
    if value is None or value != value:  # NaN
        return ""
    return str(value)


def parse_label(value: object) -> float:
    """Map a raw label cell to 1.0/0.0, or NaN when it cannot be read."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    text = _safe_text(value).strip().lower()
    if text in TRUE_LABELS:
        return 1.0
    if text in FALSE_LABELS:
        return 0.0
    return float("nan")


def read_tsv(path: Path, options: TextLoaderOptions | None = None) -> pd.DataFrame:
    options = options or TextLoaderOptions()
    ordered = sorted(options.columns, key=lambda column: column.index)
    frame = pd.read_csv(
        path,
        sep=options.separator,
        header=0 if options.has_header else None,
        usecols=[column.index for column in ordered],
        dtype=str,
        keep_default_na=False,
        quoting=csv.QUOTE_NONE,
        encoding="utf-8",
    )
    frame.columns = [column.name for column in ordered]
    for column in ordered:
        if column.kind == "bool":
            frame[column.name] = frame[column.name].map(parse_label)
        else:
            frame[column.name] = frame[column.name].map(_safe_text)
    return frame


def drop_unlabeled(df: pd.DataFrame, label_column: str) -> tuple[pd.DataFrame, int]:
    kept = df.dropna(subset=[label_column]).reset_index(drop=True)
    return kept, int(len(df) - len(kept))


def to_samples(df: pd.DataFrame, options: TextLoaderOptions | None = None) -> list[SentimentData]:
    options = options or TextLoaderOptions()
    label_column = options.label_column
    text_column = options.text_column
    rows: list[SentimentData] = []
    for item in df.to_dict(orient="records"):
        raw_label = item.get(label_column)
        label = None if raw_label is None or raw_label != raw_label else float(raw_label)
        rows.append(SentimentData(sentiment_text=_safe_text(item.get(text_column)), label=label))
    return rows


def to_dataframe(rows: list[SentimentData], options: TextLoaderOptions | None = None) -> pd.DataFrame:
    options = options or TextLoaderOptions()
    data = [
        {
            options.label_column: float("nan") if row.label is None else float(row.label),
            options.text_column: row.sentiment_text,
        }
        for row in rows
    ]
    return pd.DataFrame(data, columns=[options.label_column, options.text_column])
