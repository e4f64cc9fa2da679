"""build-payload - License and description banner.

The banner is a block comment whose rule rows are padded with '*' to a fixed
column count. It has nothing to do with how array tokens are wrapped.
"""
from __future__ import annotations

BANNER_OPEN = "/*-*-c++-*-*"
SECTION_RULE_END = "//**"


def _lines(text: str) -> list[str]:
    """Split text the way a line reader does: no phantom last line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def format_banner(
    description: str,
    copyright_message: str,
    include_copyright: bool,
    width: int,
) -> str:
    """Render the banner, or an empty string when there is nothing to show."""
    if not include_copyright and not description:
        return ""

    out = [BANNER_OPEN + "*" * (width - len(BANNER_OPEN))]

    if include_copyright:
        out.extend(f"* {line}" for line in _lines(copyright_message))

    if include_copyright and description:
        out.append("*" * (width - len(SECTION_RULE_END)) + SECTION_RULE_END)

    if description:
        out.append("* \\file")
        out.append("*")
        out.extend(f"* {line}" for line in _lines(description))

    out.append("*" * (width - 1) + "/")
    out.append("")
    return "\n".join(out) + "\n"
