"""Reference resolution and file pinning engine."""

from .exceptions import (
    AmbiguousRefError,
    ConfigError,
    FileAccessError,
    FreezeError,
    NoResolvableRefError,
    RefpinError,
    RemoteQueryError,
    SpecFormatError,
    UnusedSpecError,
)
from .guesser import guess_specs
from .listing import ReferenceListing, parse_listing_line, parse_listing_output
from .remote import GitRemoteLister, RemoteLister
from .rewriter import FileOutcome, FileResult, PinReport, pin_files, process_file, rewrite_text
from .selectors import ExplicitRef, LatestTagRef, RefSelector
from .spec import Spec, parse_spec
from .versioning import version_key

__all__ = [
    "AmbiguousRefError",
    "ConfigError",
    "ExplicitRef",
    "FileAccessError",
    "FileOutcome",
    "FileResult",
    "FreezeError",
    "GitRemoteLister",
    "LatestTagRef",
    "NoResolvableRefError",
    "PinReport",
    "RefSelector",
    "ReferenceListing",
    "RefpinError",
    "RemoteLister",
    "RemoteQueryError",
    "Spec",
    "SpecFormatError",
    "UnusedSpecError",
    "guess_specs",
    "parse_listing_line",
    "parse_listing_output",
    "parse_spec",
    "pin_files",
    "process_file",
    "rewrite_text",
    "version_key",
]
