"""CLI command modules for refpin."""

from .pin import pin

__all__ = ["pin"]
