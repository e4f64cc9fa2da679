"""build-payload - Binary files to compilable array declarations."""
from .banner import format_banner
from .builder import BuildOptions, BuildResult, build_payload, write_payload
from .formatter import OutputRecord, format_array
from .layout import LayoutConfig

__all__ = [
    "BuildOptions",
    "BuildResult",
    "LayoutConfig",
    "OutputRecord",
    "build_payload",
    "format_array",
    "format_banner",
    "write_payload",
]
