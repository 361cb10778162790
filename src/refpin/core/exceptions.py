"""Exception hierarchy for reference resolution and file pinning."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .listing import ReferenceListing
    from .spec import Spec


class RefpinError(Exception):
    """Base exception for all refpin failures."""
    pass


class SpecFormatError(RefpinError):
    """Raised when a ``repo[:ref]`` argument cannot be parsed."""


class ConfigError(RefpinError):
    """Raised when the settings file is unreadable or malformed."""


class AmbiguousRefError(RefpinError):
    """An explicit ref matched zero or several remote listings."""

    def __init__(self, ref: str, listings: Sequence["ReferenceListing"]):
        self.ref = ref
        self.listings = list(listings)
        rendered = ", ".join(f"{item.id} {item.symbolic_ref}" for item in self.listings) or "none"
        super().__init__(
            f"Ambiguous or missing ref '{ref}': expected exactly one listing, "
            f"got {len(self.listings)} ({rendered})"
        )


class NoResolvableRefError(RefpinError):
    """Neither a tag nor HEAD was found in the remote listing."""


class RemoteQueryError(RefpinError):
    """Raised when the remote listing query exits unsuccessfully."""

    def __init__(self, repository: str, returncode: int, stderr: str = ""):
        self.repository = repository
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr.strip() else ""
        super().__init__(
            f"Listing refs for {repository} failed with exit code {returncode}{detail}"
        )


class FreezeError(RefpinError):
    """Raised when the freeze command fails on a rewritten file."""

    def __init__(self, path: Path, returncode: int, detail: str = ""):
        self.path = path
        self.returncode = returncode
        suffix = f": {detail}" if detail else ""
        super().__init__(f"Freeze command failed for {path} with exit code {returncode}{suffix}")


class FileAccessError(RefpinError):
    """Raised when a target file cannot be read, decoded or replaced."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot process {path}: {detail}")


class UnusedSpecError(RefpinError):
    """One or more explicit specs matched nothing in any processed file."""

    def __init__(self, specs: Sequence["Spec"]):
        self.specs = list(specs)
        names = ", ".join(str(spec) for spec in self.specs)
        super().__init__(f"Unused spec(s): {names}. Pass --allow-unused to ignore.")


__all__ = [
    "RefpinError",
    "SpecFormatError",
    "ConfigError",
    "AmbiguousRefError",
    "NoResolvableRefError",
    "RemoteQueryError",
    "FreezeError",
    "FileAccessError",
    "UnusedSpecError",
]
