from __future__ import annotations

from pathlib import Path

import pytest

from sentimentai.config import Settings

TOXIC_WORDS = ["idiot", "stupid", "moron", "dumb", "loser", "pathetic", "useless", "rude"]
NICE_WORDS = ["thanks", "great", "helpful", "wonderful", "appreciate", "good", "kind", "best"]
FILLERS = ["the article", "this edit", "your change", "that page", "the section"]


def _rows(offset: int, count: int) -> list[tuple[int, str]]:
    rows: list[tuple[int, str]] = []
    for idx in range(offset, offset + count):
        filler = FILLERS[idx % len(FILLERS)]
        toxic = TOXIC_WORDS[idx % len(TOXIC_WORDS)]
        nice = NICE_WORDS[idx % len(NICE_WORDS)]
        rows.append((1, f"You are a {toxic} {TOXIC_WORDS[(idx + 3) % len(TOXIC_WORDS)]}, {filler} is {toxic}"))
        rows.append((0, f"{nice.capitalize()} work on {filler}, really {NICE_WORDS[(idx + 3) % len(NICE_WORDS)]}"))
    return rows


def write_tsv(path: Path, rows: list[tuple[object, str]]) -> Path:
    lines = ["Sentiment\tSentimentText"]
    lines.extend(f"{label}\t{text}" for label, text in rows)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    write_tsv(tmp_path / "wikipedia-detox-250-line-data.tsv", _rows(0, 30))
    write_tsv(tmp_path / "wikipedia-detox-250-line-test.tsv", _rows(100, 10))
    return tmp_path


@pytest.fixture
def settings(data_dir: Path) -> Settings:
    return Settings(data_dir=data_dir, num_trees=10, num_leaves=8, min_datapoints_in_leaves=2)
