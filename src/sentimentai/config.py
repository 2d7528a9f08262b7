# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Column schema of the TSV datasets and run settings."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any

from .env import get_env, get_float_env, get_int_env

ENV_PREFIX = "SENTIMENT_"

DEFAULT_TRAIN_FILE = "wikipedia-detox-250-line-data.tsv"
DEFAULT_TEST_FILE = "wikipedia-detox-250-line-test.tsv"
DEFAULT_MODEL_FILE = "Model.joblib"


@dataclass(frozen=True, slots=True)
class TextColumn:
    name: str
    kind: str
    index: int


@dataclass(frozen=True, slots=True)
class TextLoaderOptions:
    """How a dataset file is laid out on disk.

    ``kind`` is either ``"bool"`` (label column) or ``"text"``.
    """

    has_header: bool = True
    separator: str = "\t"
    columns: tuple[TextColumn, ...] = (
        TextColumn("Label", "bool", 0),
        TextColumn("SentimentText", "text", 1),
    )

    @property
    def label_column(self) -> str:
        return next(column.name for column in self.columns if column.kind == "bool")

    @property
    def text_column(self) -> str:
        return next(column.name for column in self.columns if column.kind == "text")


@dataclass(frozen=True, slots=True)
class Settings:
    data_dir: Path
    train_file: str = DEFAULT_TRAIN_FILE
    test_file: str = DEFAULT_TEST_FILE
    model_file: str = DEFAULT_MODEL_FILE
    seed: int = 0
    num_leaves: int = 50
    num_trees: int = 50
    min_datapoints_in_leaves: int = 20
    learning_rate: float = 0.2
    threshold: float = 0.5
    loader: TextLoaderOptions = field(default_factory=TextLoaderOptions)

    @property
    def train_path(self) -> Path:
        return self.data_dir / self.train_file

    @property
    def test_path(self) -> Path:
        return self.data_dir / self.test_file

    @property
    def model_path(self) -> Path:
        return self.data_dir / self.model_file

    def replace(self, **overrides: Any) -> Settings:
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)

    def hyperparameters(self) -> dict[str, Any]:
        payload = asdict(self)
        for key in ("data_dir", "train_file", "test_file", "model_file", "loader"):
            payload.pop(key, None)
        return payload


def load_settings(cwd: Path | None = None) -> Settings:
    base = cwd or Path.cwd()
    data_dir = Path(get_env(f"{ENV_PREFIX}DATA_DIR", str(base / "Data")) or base / "Data")
    threshold = min(max(get_float_env(f"{ENV_PREFIX}THRESHOLD", 0.5), 0.0), 1.0)
    return Settings(
        data_dir=data_dir,
        train_file=get_env(f"{ENV_PREFIX}TRAIN_FILE", DEFAULT_TRAIN_FILE) or DEFAULT_TRAIN_FILE,
        test_file=get_env(f"{ENV_PREFIX}TEST_FILE", DEFAULT_TEST_FILE) or DEFAULT_TEST_FILE,
        model_file=get_env(f"{ENV_PREFIX}MODEL_FILE", DEFAULT_MODEL_FILE) or DEFAULT_MODEL_FILE,
        seed=get_int_env(f"{ENV_PREFIX}SEED", 0),
        num_leaves=max(get_int_env(f"{ENV_PREFIX}NUM_LEAVES", 50), 2),
        num_trees=max(get_int_env(f"{ENV_PREFIX}NUM_TREES", 50), 1),
        min_datapoints_in_leaves=max(get_int_env(f"{ENV_PREFIX}MIN_DATAPOINTS_IN_LEAVES", 20), 1),
        learning_rate=get_float_env(f"{ENV_PREFIX}LEARNING_RATE", 0.2),
        threshold=threshold,
    )


def loader_to_dict(options: TextLoaderOptions) -> dict[str, Any]:
    return {
        "has_header": options.has_header,
        "separator": options.separator,
        "columns": [[column.name, column.kind, column.index] for column in options.columns],
    }


def loader_from_dict(payload: dict[str, Any]) -> TextLoaderOptions:
    defaults = TextLoaderOptions()
    raw_columns = payload.get("columns")
    columns = defaults.columns
    if isinstance(raw_columns, list) and raw_columns:
        columns = tuple(TextColumn(str(name), str(kind), int(index)) for name, kind, index in raw_columns)
    return TextLoaderOptions(
        has_header=bool(payload.get("has_header", defaults.has_header)),
        separator=str(payload.get("separator", defaults.separator)),
        columns=columns,
    )
