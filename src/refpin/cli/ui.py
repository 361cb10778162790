"""Reusable UI helpers for refpin CLI output."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.tree import Tree

console = Console()
err_console = Console(stderr=True)


class StepTracker:
    """Track and render per-file steps with Rich trees."""

    def __init__(self, title: str):
        self.title = title
        self.steps = []  # list of dicts: {key, label, status, detail}

    def add(self, key: str, label: str):
        if key not in [s["key"] for s in self.steps]:
            self.steps.append({"key": key, "label": label, "status": "pending", "detail": ""})

    def complete(self, key: str, detail: str = ""):
        self._update(key, status="done", detail=detail)

    def skip(self, key: str, detail: str = ""):
        self._update(key, status="skipped", detail=detail)

    def _update(self, key: str, status: str, detail: str):
        for s in self.steps:
            if s["key"] == key:
                s["status"] = status
                if detail:
                    s["detail"] = detail
                return

    def render(self) -> Tree:
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        for step in self.steps:
            label = step["label"]
            detail_text = step["detail"].strip() if step["detail"] else ""

            status = step["status"]
            if status == "done":
                symbol = "[green]●[/green]"
            elif status == "pending":
                symbol = "[green dim]○[/green dim]"
            elif status == "skipped":
                symbol = "[yellow]○[/yellow]"
            else:
                symbol = " "

            if status == "pending":
                if detail_text:
                    line = f"{symbol} [bright_black]{label} ({detail_text})[/bright_black]"
                else:
                    line = f"{symbol} [bright_black]{label}[/bright_black]"
            else:
                if detail_text:
                    line = f"{symbol} [white]{label}[/white] [bright_black]({detail_text})[/bright_black]"
                else:
                    line = f"{symbol} [white]{label}[/white]"

            tree.add(line)
        return tree


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route ``refpin`` log records to stderr through Rich.

    Replaces any handler installed by a previous call so repeated
    invocations in one process do not duplicate output.
    """
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    package_logger = logging.getLogger("refpin")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.addHandler(
        RichHandler(console=err_console, show_time=False, show_path=False, markup=False)
    )
    package_logger.setLevel(level)


__all__ = ["StepTracker", "configure_logging", "console", "err_console"]
