# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .schemas import SentimentPrediction

ASCII_BANNER = r"""
  ___  ___ _ __ | |_(_)_ __ ___   ___ _ __ | |_
 / __|/ _ \ '_ \| __| | '_ ` _ \ / _ \ '_ \| __|
 \__ \  __/ | | | |_| | | | | | |  __/ | | | |_
 |___/\___|_| |_|\__|_|_| |_| |_|\___|_| |_|\__|
"""


@dataclass
class MLConsole:
    enabled: bool = True

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True) if self.enabled else None

    def banner(self) -> None:
        if self._console:
            self._console.print(Panel.fit(ASCII_BANNER.strip("\n"), title="Sentiment ML", border_style="cyan"))
            return
        print(ASCII_BANNER)

    def section(self, title: str) -> None:
        line = f"=============== {title} ==============="
        if self._console:
            self._console.print(f"[bold magenta]{escape(line)}[/bold magenta]")
        else:
            print(line)

    def info(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold cyan]INFO[/bold cyan] {escape(text)}")
        else:
            print(f"[INFO] {text}")

    def warn(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold yellow]WARN[/bold yellow] {escape(text)}")
        else:
            print(f"[WARN] {text}")

    def success(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold green]OK[/bold green] {escape(text)}")
        else:
            print(f"[OK] {text}")

    def metrics_table(self, metrics: dict[str, float], *, title: str) -> None:
        if self._console:
            table = Table(title=title, show_lines=True)
            table.add_column("Metric", style="bold")
            table.add_column("Value", justify="right")
            for key in sorted(metrics.keys()):
                table.add_row(key, f"{float(metrics[key]):.4f}")
            self._console.print(table)
            return

        print(title)
        for key in sorted(metrics.keys()):
            print(f"- {key}: {float(metrics[key]):.4f}")

    def headline_metrics(self, *, accuracy: float, auc: float, f1: float) -> None:
        for name, value in (("Accuracy", accuracy), ("Auc", auc), ("F1Score", f1)):
            line = f"{name}: {value:.2%}"
            if self._console:
                self._console.print(f"[bold]{line}[/bold]")
            else:
                print(line)

    def prediction_line(self, text: str, prediction: SentimentPrediction) -> None:
        line = f"Sentiment: {text} | Prediction: {prediction.verdict} | Probability: {prediction.probability:.4f}"
        if self._console:
            colour = "red" if prediction.prediction else "green"
            self._console.print(f"[{colour}]{escape(line)}[/{colour}]")
        else:
            print(line)

    def threshold_table(self, rows: list[dict[str, float]]) -> None:
        if self._console:
            table = Table(title="Threshold sweep")
            for column in ("threshold", "precision", "recall", "f1"):
                table.add_column(column, justify="right")
            for row in rows:
                table.add_row(*(f"{row[column]:.3f}" for column in ("threshold", "precision", "recall", "f1")))
            self._console.print(table)
            return

        for row in rows:
            print(
                f"thr={row['threshold']:.2f} "
                f"prec={row['precision']:.3f} rec={row['recall']:.3f} f1={row['f1']:.3f}"
            )
