"""build-payload - Byte sequence to array declaration."""
from __future__ import annotations

from dataclasses import dataclass

from .layout import LayoutConfig


@dataclass(frozen=True)
class OutputRecord:
    variable_name: str
    size_variable_name: str
    text: str


def hex_tokens(data: bytes) -> list[str]:
    return [f"0x{b:02X}" for b in data]


def format_array(data: bytes, layout: LayoutConfig) -> OutputRecord:
    """Render data as a wrapped array declaration followed by its size constant.

    Tokens are wrapped every layout.values_per_line entries, with a line break
    before the first one. An empty payload yields an empty initializer.
    """
    number_bytes = len(data)
    per_line = layout.values_per_line
    tokens = hex_tokens(data)

    rows = [
        ", ".join(tokens[i:i + per_line])
        for i in range(0, number_bytes, per_line)
    ]

    parts = [
        f"{layout.left_pad}{layout.variable_type} {layout.full_variable_name}[{number_bytes}] = {{",
    ]
    if rows:
        # Wrapped lines keep their trailing separator.
        parts.append(", \n".join(layout.content_pad + row for row in rows))
    parts.append(f"{layout.left_pad}}};")
    parts.append("")
    parts.append(f"{layout.left_pad}{layout.size_type} {layout.full_size_name} = {number_bytes};")
    parts.append("")

    return OutputRecord(
        variable_name=layout.full_variable_name,
        size_variable_name=layout.full_size_name,
        text="\n".join(parts) + "\n",
    )
