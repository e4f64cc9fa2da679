"""build-payload - Declaration layout."""
from __future__ import annotations

from dataclasses import dataclass

from payload_core.protocol import (
    DEFAULT_INDENTATION,
    DEFAULT_SIZE_NAME,
    DEFAULT_SIZE_TYPE,
    DEFAULT_VARIABLE_NAME,
    DEFAULT_VARIABLE_TYPE,
    DEFAULT_WIDTH,
    TOKEN_WIDTH,
)

from .errors import InvalidConfigurationError


@dataclass(frozen=True)
class LayoutConfig:
    """Formatting parameters for one array declaration.

    Construction fails with InvalidConfigurationError unless
    max_width > indentation + left_indentation.
    """

    left_indentation: int = 0
    indentation: int = DEFAULT_INDENTATION
    max_width: int = DEFAULT_WIDTH
    variable_prefix: str = ""
    variable_name: str = DEFAULT_VARIABLE_NAME
    variable_type: str = DEFAULT_VARIABLE_TYPE
    size_name: str = DEFAULT_SIZE_NAME
    size_type: str = DEFAULT_SIZE_TYPE

    def __post_init__(self) -> None:
        if self.indentation < 1:
            raise InvalidConfigurationError(f"indentation {self.indentation}")
        if self.left_indentation < 0:
            raise InvalidConfigurationError(f"left indentation {self.left_indentation}")
        if self.max_width <= self.indentation + self.left_indentation:
            raise InvalidConfigurationError(
                f"width {self.max_width} (must exceed indentation {self.indentation + self.left_indentation})"
            )

    @property
    def left_pad(self) -> str:
        return " " * self.left_indentation

    @property
    def content_pad(self) -> str:
        return " " * (self.left_indentation + self.indentation)

    @property
    def values_per_line(self) -> int:
        # Layouts too narrow for a full token still get one token per line.
        usable = self.max_width - self.indentation - self.left_indentation + 1
        return max(1, usable // TOKEN_WIDTH)

    @property
    def full_variable_name(self) -> str:
        return self.variable_prefix + self.variable_name

    @property
    def full_size_name(self) -> str:
        return self.variable_prefix + self.size_name
