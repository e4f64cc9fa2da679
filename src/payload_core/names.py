"""build-payload - Identifier prefixes derived from file paths."""
from __future__ import annotations


def basename(path: str) -> str:
    """Return the part of path after the last '/' or '\\', whichever is later."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1:]


def resolve_prefix(path: str) -> str:
    """Derive an identifier fragment from a path: 'dir/foo.bin' -> 'foo_bin'."""
    return basename(path).replace(".", "_")
