"""Remote ref listing via ``git ls-remote``."""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol, Sequence

from .constants import DEFAULT_HOST
from .exceptions import RemoteQueryError
from .listing import ReferenceListing, parse_listing_output

logger = logging.getLogger(__name__)


class RemoteLister(Protocol):
    """Anything that can list the refs of a repository."""

    def list_refs(self, repository: str, ref_args: Sequence[str]) -> list[ReferenceListing]:
        """Return listings for ``ref_args`` (all refs when empty)."""
        ...


class GitRemoteLister:
    """Query GitHub with ``git ls-remote``.

    The credential is passed in by the caller; nothing here reads the
    environment. Calls block until git returns, with no timeout.
    """

    def __init__(self, token: str | None = None, host: str = DEFAULT_HOST, git: str = "git") -> None:
        self.token = token
        self.host = host
        self.git = git

    def remote_url(self, repository: str) -> str:
        credentials = f"{self.token}@" if self.token else ""
        return f"https://{credentials}{self.host}/{repository}"

    def _redact(self, text: str) -> str:
        if not self.token:
            return text
        return text.replace(self.token, "***")

    def list_refs(self, repository: str, ref_args: Sequence[str]) -> list[ReferenceListing]:
        cmd = [self.git, "ls-remote", self.remote_url(repository), *ref_args]
        logger.debug("Running %s", self._redact(" ".join(cmd)))
        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError as exc:
            raise RemoteQueryError(repository, 127, f"{self.git} executable not found on PATH") from exc

        if completed.returncode != 0:
            raise RemoteQueryError(repository, completed.returncode, self._redact(completed.stderr or ""))

        listings = parse_listing_output(completed.stdout or "")
        logger.debug("%s: %d listing(s)", repository, len(listings))
        return listings


__all__ = ["RemoteLister", "GitRemoteLister"]
