"""build-payload - Embed binary files as C/C++ array declarations."""
from __future__ import annotations

import click

from payload_core.protocol import (
    DEFAULT_COPYRIGHT,
    DEFAULT_INDENTATION,
    DEFAULT_SIZE_NAME,
    DEFAULT_SIZE_TYPE,
    DEFAULT_VARIABLE_NAME,
    DEFAULT_VARIABLE_TYPE,
    DEFAULT_WIDTH,
)

from .builder import BuildOptions, write_payload
from .errors import PayloadError

HELP_EPILOG = """\b
Copyright 2020 Inesonic, LLC
This software is licensed under two terms:
  * The Inesonic Commercial License, Version 1
  * GNU Public License, Version 2
"""


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=HELP_EPILOG,
)
@click.argument("inputs", nargs=-1)
@click.option("-o", "--output", default="", help="Output file. Output goes to stdout when omitted.")
@click.option("-d", "--description", default="", help="Description placed in the banner below the copyright.")
@click.option("-c", "--copyright", "copyright_message", default=DEFAULT_COPYRIGHT, show_default=True,
              help="Copyright message for the banner.")
@click.option("-C", "--no-copyright", is_flag=True, help="Leave the copyright message out. Overrides --copyright.")
@click.option("-i", "--indentation", type=int, default=DEFAULT_INDENTATION, show_default=True,
              help="Indentation in spaces.")
@click.option("-w", "--width", type=int, default=DEFAULT_WIDTH, show_default=True,
              help="Maximum line length of the array declarations.")
@click.option("-n", "--namespace", default="", help="Namespace to place the generated content under.")
@click.option("--close-namespace/--no-close-namespace", default=True, show_default=True,
              help="Emit the closing brace of --namespace.")
@click.option("-v", "--variable", default=DEFAULT_VARIABLE_NAME, show_default=True,
              help="Payload variable name, or suffix when several files are given.")
@click.option("-t", "--type", "variable_type", default=DEFAULT_VARIABLE_TYPE, show_default=True,
              help="Type of the payload array.")
@click.option("-V", "--size-variable", default=DEFAULT_SIZE_NAME, show_default=True,
              help="Payload size variable name, or suffix when several files are given.")
@click.option("-T", "--size-type", default=DEFAULT_SIZE_TYPE, show_default=True,
              help="Type of the payload size.")
@click.option("-z/-Z", "--zlib/--no-zlib", "use_zlib", default=True, show_default=True,
              help="Compress the payload into a qCompress compatible block.")
@click.option("--verbose", is_flag=True, help="Report each embedded file on stderr.")
def main(
    inputs: tuple[str, ...],
    output: str,
    description: str,
    copyright_message: str,
    no_copyright: bool,
    indentation: int,
    width: int,
    namespace: str,
    close_namespace: bool,
    variable: str,
    variable_type: str,
    size_variable: str,
    size_type: str,
    use_zlib: bool,
    verbose: bool,
) -> None:
    """Convert files, in raw binary form, to C99 or C++ arrays.

    Each file becomes an array declaration plus a size constant. With no
    files the payload is read from stdin.
    """
    options = BuildOptions(
        description=description,
        copyright_message=copyright_message,
        include_copyright=not no_copyright,
        indentation=indentation,
        width=width,
        namespace=namespace,
        close_namespace=close_namespace,
        variable_name=variable,
        variable_type=variable_type,
        size_name=size_variable,
        size_type=size_type,
        compress=use_zlib,
    )

    def report(name: str, size: int) -> None:
        click.echo(f"Embedding {name} ({size} bytes)", err=True)

    try:
        write_payload(list(inputs), output, options, progress=report if verbose else None)
    except PayloadError as e:
        # Fail closed with a single-line reason on stderr; stdout may hold the payload.
        click.echo(f"FATAL: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
