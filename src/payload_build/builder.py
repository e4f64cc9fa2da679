"""build-payload - Inputs to one generated source stream."""
from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import BinaryIO, Callable, Sequence
from warnings import warn

from payload_core.compress import compress
from payload_core.names import resolve_prefix
from payload_core.protocol import (
    DEFAULT_COPYRIGHT,
    DEFAULT_INDENTATION,
    DEFAULT_SIZE_NAME,
    DEFAULT_SIZE_TYPE,
    DEFAULT_VARIABLE_NAME,
    DEFAULT_VARIABLE_TYPE,
    DEFAULT_WIDTH,
)

from .banner import format_banner
from .errors import InputOpenError, OutputOpenError, PayloadError, PayloadTooLargeError
from .formatter import format_array
from .layout import LayoutConfig

STDIN_NAME = "<stdin>"


@dataclass(frozen=True)
class BuildOptions:
    """Everything one invocation needs. Built once and passed down."""

    description: str = ""
    copyright_message: str = DEFAULT_COPYRIGHT
    include_copyright: bool = True
    indentation: int = DEFAULT_INDENTATION
    width: int = DEFAULT_WIDTH
    namespace: str = ""
    close_namespace: bool = True
    variable_name: str = DEFAULT_VARIABLE_NAME
    variable_type: str = DEFAULT_VARIABLE_TYPE
    size_name: str = DEFAULT_SIZE_NAME
    size_type: str = DEFAULT_SIZE_TYPE
    compress: bool = True

    def layout(self) -> LayoutConfig:
        """Layout shared by every input; validates width and indentation."""
        return LayoutConfig(
            left_indentation=self.indentation if self.namespace else 0,
            indentation=self.indentation,
            max_width=self.width,
            variable_name=self.variable_name,
            variable_type=self.variable_type,
            size_name=self.size_name,
            size_type=self.size_type,
        )


@dataclass(frozen=True)
class BuildResult:
    """Generated text plus the error that stopped the build, if any.

    On failure, text still holds everything produced before the failing input.
    """

    text: str
    error: PayloadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_input(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise InputOpenError(path) from e


def read_stream(stream: BinaryIO) -> bytes:
    try:
        return stream.read()
    except OSError as e:
        raise InputOpenError(STDIN_NAME) from e


def build_payload(
    inputs: Sequence[str],
    options: BuildOptions,
    stdin: BinaryIO | None = None,
    progress: Callable[[str, int], None] | None = None,
) -> BuildResult:
    """Build the generated source for inputs.

    No inputs means the payload is read from stdin. With two or more inputs,
    each payload is preceded by a comment naming its file and its variables
    are prefixed with a name derived from the path.
    """
    try:
        layout = options.layout()
    except PayloadError as e:
        return BuildResult("", e)

    out: list[str] = [format_banner(
        options.description,
        options.copyright_message,
        options.include_copyright,
        options.width,
    )]

    if options.namespace:
        out.append(f"namespace {options.namespace}{{\n")

    def emit(data: bytes, name: str, file_layout: LayoutConfig) -> None:
        if progress is not None:
            progress(name, len(data))
        try:
            block = compress(data, options.compress)
        except ValueError as e:
            raise PayloadTooLargeError(name) from e
        out.append(format_array(block, file_layout).text)

    try:
        if not inputs:
            emit(read_stream(stdin if stdin is not None else sys.stdin.buffer), STDIN_NAME, layout)
        elif len(inputs) == 1:
            emit(read_input(inputs[0]), inputs[0], layout)
        else:
            for path in inputs:
                data = read_input(path)
                out.append(f"// Contents of {path}:\n")
                emit(data, path, replace(layout, variable_prefix=resolve_prefix(path)))
    except PayloadError as e:
        return BuildResult("".join(out), e)

    if options.namespace:
        if options.close_namespace:
            out.append("}\n")
        else:
            warn(f"Namespace {options.namespace} is left open")

    return BuildResult("".join(out))


def encode_text(text: str) -> bytes:
    # Paths that are not valid UTF-8 come back from the OS as surrogate escapes.
    return text.encode("utf-8", "surrogateescape")


def write_payload(
    inputs: Sequence[str],
    output: str | None,
    options: BuildOptions,
    stdin: BinaryIO | None = None,
    progress: Callable[[str, int], None] | None = None,
) -> None:
    """Build the payload and write it to output (stdout when None or empty).

    Whatever was generated is written even when an input fails; the error is
    raised afterwards.
    """
    # Surface bad width/indentation before touching any file.
    options.layout()

    if not output:
        result = build_payload(inputs, options, stdin=stdin, progress=progress)
        sys.stdout.flush()
        sys.stdout.buffer.write(encode_text(result.text))
        sys.stdout.buffer.flush()
    else:
        try:
            f = open(Path(output), "wb")
        except OSError as e:
            raise OutputOpenError(output) from e
        with f:
            result = build_payload(inputs, options, stdin=stdin, progress=progress)
            f.write(encode_text(result.text))

    if result.error is not None:
        raise result.error
