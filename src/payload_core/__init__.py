"""build-payload core - Compressed block framing and name resolution."""
from .compress import compress
from .names import basename, resolve_prefix

__all__ = ["compress", "basename", "resolve_prefix"]
