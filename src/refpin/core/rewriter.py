"""Rewrite pinned repository references inside files.

Each spec is applied as a global substitution of
``/<repository>/<segment>/`` by ``/<repository>/<resolved value>/``.
Resolution happens from inside the substitution, so a spec only queries
the remote when the file actually mentions its repository.

A changed file is written to a temporary sibling, the freeze command runs
on that temporary path, and the result replaces the original with
``os.replace``. Files are handled one at a time; there is no rollback of
files already rewritten when a later one fails.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
import tempfile
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Sequence

from .constants import DEFAULT_GUESS_PREFIXES
from .exceptions import FileAccessError, FreezeError, UnusedSpecError
from .guesser import guess_specs
from .remote import RemoteLister
from .spec import Spec

logger = logging.getLogger(__name__)


class FileOutcome(str, Enum):
    UNCHANGED = "unchanged"
    REWRITTEN = "rewritten"
    WOULD_REWRITE = "would-rewrite"


@dataclass
class FileResult:
    path: Path
    outcome: FileOutcome
    specs: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "path": str(self.path),
            "outcome": self.outcome.value,
            "specs": list(self.specs),
        }


@dataclass
class PinReport:
    """Outcome of a whole pinning run."""

    files: list[FileResult] = field(default_factory=list)
    resolved: dict[str, str] = field(default_factory=dict)
    unused: list[str] = field(default_factory=list)

    @property
    def changed(self) -> list[FileResult]:
        return [item for item in self.files if item.outcome is not FileOutcome.UNCHANGED]

    def to_dict(self) -> dict[str, object]:
        return {
            "files": [item.to_dict() for item in self.files],
            "resolved": dict(self.resolved),
            "unused": list(self.unused),
        }


def _reference_pattern(repository: str) -> re.Pattern[str]:
    return re.compile(rf"/{re.escape(repository)}/[^/\s]+(?=/)")


def _apply_specs(
    text: str, specs: Sequence[Spec], lister: RemoteLister
) -> tuple[str, list[Spec]]:
    matched: list[Spec] = []
    for spec in specs:
        text, count = _reference_pattern(spec.repository).subn(
            lambda _match, spec=spec: f"/{spec.repository}/{spec.resolved(lister)}",
            text,
        )
        if count:
            matched.append(spec)
    return text, matched


def rewrite_text(text: str, specs: Sequence[Spec], lister: RemoteLister) -> str:
    """Apply every spec to ``text`` in order and return the new text."""
    return _apply_specs(text, specs, lister)[0]


def run_freeze(freeze_command: Sequence[str], path: Path) -> None:
    """Run the freeze command with ``path`` appended, raising on failure."""
    cmd = [*freeze_command, str(path)]
    logger.debug("Running %s", " ".join(cmd))
    try:
        completed = subprocess.run(cmd, check=False)
    except FileNotFoundError as exc:
        raise FreezeError(path, 127, f"{freeze_command[0]} not found on PATH") from exc
    except OSError as exc:
        raise FreezeError(path, 126, f"cannot run {freeze_command[0]}: {exc}") from exc
    if completed.returncode != 0:
        raise FreezeError(path, completed.returncode)


def _write_and_freeze(path: Path, text: str, freeze_command: Sequence[str]) -> None:
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.stem}.",
            suffix=path.suffix or ".tmp",
        )
    except OSError as exc:
        raise FileAccessError(path, f"cannot create temporary file: {exc}") from exc

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        shutil.copymode(path, tmp_path)
        run_freeze(freeze_command, tmp_path)
        os.replace(tmp_path, path)
    except Exception as exc:
        if tmp_path.exists():
            tmp_path.unlink()
        if isinstance(exc, OSError):
            raise FileAccessError(path, str(exc)) from exc
        raise


def process_file(
    path: Path,
    specs: Sequence[Spec],
    lister: RemoteLister,
    freeze_command: Sequence[str],
    *,
    dry_run: bool = False,
) -> FileResult:
    """Pin the references in one file.

    The file is left untouched, and no freeze runs, when no substitution
    changed its content.
    """
    return _pin_text(path, _read(path), specs, lister, freeze_command, dry_run=dry_run)


def _read(path: Path) -> str:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise FileAccessError(path, f"not valid UTF-8 (byte {exc.start})") from exc
    except OSError as exc:
        raise FileAccessError(path, exc.strerror or str(exc)) from exc


def _pin_text(
    path: Path,
    original: str,
    specs: Sequence[Spec],
    lister: RemoteLister,
    freeze_command: Sequence[str],
    *,
    dry_run: bool,
) -> FileResult:
    updated, matched = _apply_specs(original, specs, lister)
    result = FileResult(path=path, outcome=FileOutcome.UNCHANGED, specs=[str(spec) for spec in matched])
    if updated == original:
        logger.debug("%s: no changes", path)
        return result

    if dry_run:
        logger.info("Would update %s", path)
        result.outcome = FileOutcome.WOULD_REWRITE
        return result

    _write_and_freeze(path, updated, freeze_command)
    logger.info("Updated %s", path)
    result.outcome = FileOutcome.REWRITTEN
    return result


def pin_files(
    paths: Iterable[Path],
    specs: Sequence[Spec],
    lister: RemoteLister,
    freeze_command: Sequence[str],
    *,
    allow_unused: bool = False,
    dry_run: bool = False,
    guess_prefixes: Iterable[str] = DEFAULT_GUESS_PREFIXES,
) -> PinReport:
    """Run the full pipeline over ``paths``.

    With no explicit ``specs``, each file's specs are guessed from its own
    content. Explicit specs that never resolved are reported together as
    an ``UnusedSpecError`` unless ``allow_unused`` is set.
    """
    report = PinReport()
    explicit = list(specs)
    prefixes = tuple(guess_prefixes)

    for path in paths:
        original = _read(path)
        file_specs = explicit or guess_specs(original, prefixes)
        report.files.append(
            _pin_text(path, original, file_specs, lister, freeze_command, dry_run=dry_run)
        )
        for spec in file_specs:
            if spec.is_resolved:
                report.resolved[str(spec)] = spec.resolved(lister)

    unused = [spec for spec in explicit if spec.unresolved]
    report.unused = [str(spec) for spec in unused]
    if unused and not allow_unused:
        raise UnusedSpecError(unused)
    return report


__all__ = [
    "FileOutcome",
    "FileResult",
    "PinReport",
    "pin_files",
    "process_file",
    "rewrite_text",
    "run_freeze",
]
