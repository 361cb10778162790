"""Pin repository references inside files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from refpin.cli import StepTracker, configure_logging, console, err_console
from refpin.core.config import effective_freeze_command, github_token, load_config
from refpin.core.exceptions import RefpinError
from refpin.core.remote import GitRemoteLister
from refpin.core.rewriter import FileOutcome, PinReport, pin_files
from refpin.core.spec import parse_spec

_OUTCOME_DETAIL = {
    FileOutcome.REWRITTEN: "updated and frozen",
    FileOutcome.WOULD_REWRITE: "would update",
    FileOutcome.UNCHANGED: "unchanged",
}


def _version_callback(value: bool) -> None:
    if value:
        from refpin import __version__

        console.print(f"refpin {__version__}")
        raise typer.Exit()


def _render_report(report: PinReport) -> None:
    tracker = StepTracker("Pinned files")
    for item in report.files:
        key = str(item.path)
        tracker.add(key, key)
        detail = _OUTCOME_DETAIL[item.outcome]
        if item.specs:
            detail = f"{detail}: {', '.join(item.specs)}"
        if item.outcome is FileOutcome.UNCHANGED:
            tracker.skip(key, detail)
        else:
            tracker.complete(key, detail)
    err_console.print(tracker.render())
    err_console.print(f"[bold]{len(report.changed)} of {len(report.files)} file(s) changed[/bold]")
    if report.unused:
        err_console.print(f"[yellow]Unused spec(s):[/yellow] {', '.join(report.unused)}")


def pin(
    files: List[Path] = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Files whose repository references should be pinned",
    ),
    spec: Optional[List[str]] = typer.Option(
        None,
        "--spec",
        "-s",
        help="Repository to pin as REPO or REPO:REF (repeatable). Guessed from the files when omitted.",
    ),
    allow_unused: Optional[bool] = typer.Option(
        None,
        "--allow-unused/--no-allow-unused",
        help="Do not fail when an explicit spec matches nothing",
    ),
    freeze_command: Optional[str] = typer.Option(
        None,
        "--freeze-command",
        help="Command run on each rewritten file (the file path is appended)",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Settings file (defaults to .refpin.yaml when present)",
    ),
    token: Optional[str] = typer.Option(
        None,
        "--github-token",
        help="GitHub token for the ref listing (defaults to GH_TOKEN or GITHUB_TOKEN)",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report changes without writing files"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show subprocess detail"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show warnings and errors"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Resolve repository refs and pin every matching URL in FILES."""
    configure_logging(verbose=verbose, quiet=quiet)

    try:
        config = load_config(config_path)
        raw_specs = list(spec) if spec else list(config.specs)
        specs = [parse_spec(text) for text in raw_specs]
        lister = GitRemoteLister(token=github_token(token), host=config.host)
        report = pin_files(
            files,
            specs,
            lister,
            effective_freeze_command(freeze_command, config),
            allow_unused=config.allow_unused if allow_unused is None else allow_unused,
            dry_run=dry_run,
            guess_prefixes=config.guess_prefixes,
        )
    except RefpinError as exc:
        if json_output:
            print(json.dumps({"error": str(exc), "error_type": type(exc).__name__}))
        else:
            console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, emoji=False)
        raise typer.Exit(1)

    if json_output:
        print(json.dumps(report.to_dict(), indent=2))
        return

    _render_report(report)


__all__ = ["pin"]
