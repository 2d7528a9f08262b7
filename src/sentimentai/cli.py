# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Train, evaluate, save and query the toxic comment classifier."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from .config import Settings, load_settings
from .console import MLConsole
from .env import get_bool_env
from .evaluation.evaluate import threshold_report
from .inference.predictor import SentimentPredictor
from .schemas import SentimentData, pair_predictions
from .training.dataset import read_tsv
from .training.trainer import build_metadata, evaluate_scored, save_model, train

SAMPLE_COMMENTS = (
    "This is a very rude movie",
    "He is the best, and the article should say that.",
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sentimentai", description=__doc__)
    parser.add_argument("--data-dir", type=Path, default=None, help="Folder holding the datasets and the model (default: ./Data)")
    parser.add_argument("--train", default=None, help="Training TSV file name inside the data folder")
    parser.add_argument("--test", default=None, help="Test TSV file name inside the data folder")
    parser.add_argument("--model", default=None, help="Model file name inside the data folder")
    parser.add_argument("--seed", type=int, default=None, help="Random seed of the tree trainer")
    parser.add_argument("--no-evaluate", action="store_true", help="Skip evaluation on the test file")
    parser.add_argument("--scored-output", type=Path, default=None, help="Write the scored test rows to this parquet file")
    parser.add_argument("--thresholds", action="store_true", help="Print precision/recall/F1 for several thresholds")
    parser.add_argument(
        "--predict",
        action="append",
        default=None,
        metavar="TEXT",
        help="Comment to classify after training (repeatable)",
    )
    parser.add_argument("--quiet", action="store_true", help="Plain output without colours (default: SENTIMENT_QUIET)")
    return parser.parse_args(argv)


def _settings_from_args(args: argparse.Namespace) -> Settings:
    return load_settings().replace(
        data_dir=args.data_dir,
        train_file=args.train,
        test_file=args.test,
        model_file=args.model,
        seed=args.seed,
    )


def run(settings: Settings, *, console: MLConsole, args: argparse.Namespace) -> int:
    loader = settings.loader
    train_df = read_tsv(settings.train_path, loader)
    console.info(f"Loaded {len(train_df)} training rows from {settings.train_path}")
    model = train(train_df, settings, console=console)

    metrics = None
    if not args.no_evaluate:
        test_df = read_tsv(settings.test_path, loader)
        metrics, scored = evaluate_scored(model, test_df, loader=loader, threshold=settings.threshold, console=console)
        if args.scored_output is not None:
            args.scored_output.parent.mkdir(parents=True, exist_ok=True)
            scored.to_parquet(args.scored_output, index=False)
            console.success(f"scored test rows written to {args.scored_output}")
        if args.thresholds:
            if scored.empty:
                console.warn("threshold sweep skipped, no labeled test rows")
            else:
                y_true = scored[loader.label_column].astype(int).tolist()
                console.threshold_table(threshold_report(y_true, scored["Probability"].tolist()))

    labeled_rows = int(train_df[loader.label_column].notna().sum())
    save_model(model, settings.model_path, build_metadata(settings, train_rows=labeled_rows, metrics=metrics))
    console.success(f"the model is saved to {settings.model_path}")

    texts = tuple(args.predict) if args.predict else SAMPLE_COMMENTS

    in_memory = SentimentPredictor(model, threshold=settings.threshold, loader=loader)
    console.section("Prediction Test of model with a single sample and test dataset")
    console.prediction_line(texts[0], in_memory.predict(texts[0]))
    console.section("End of Predictions")

    samples = [SentimentData(sentiment_text=text) for text in texts]
    loaded = SentimentPredictor.from_file(settings.model_path)
    console.section("Prediction Test of loaded model with a multiple samples")
    for sample, prediction in pair_predictions(samples, loaded.predict_many(samples)):
        console.prediction_line(sample.sentiment_text, prediction)
    console.section("End of predictions")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    quiet = args.quiet or get_bool_env("SENTIMENT_QUIET", False)
    console = MLConsole(enabled=not quiet)
    console.banner()
    return run(_settings_from_args(args), console=console, args=args)


if __name__ == "__main__":
    raise SystemExit(main())
