import os
import struct
import subprocess
import sys
import zlib
from pathlib import Path

from click.testing import CliRunner

from payload_build.cli import main

REPO = Path(__file__).resolve().parents[1]


def run(args, input=None):
    env = dict(os.environ)
    env["PYTHONPATH"] = str(REPO / "src") + os.pathsep + env.get("PYTHONPATH", "")
    return subprocess.run(
        [sys.executable, "-m", "payload_build.cli", *args],
        cwd=REPO,
        env=env,
        input=input,
        check=False,
        capture_output=True,
    )


def test_uncompressed_file_to_stdout(tmp_path):
    p = tmp_path / "data.bin"
    p.write_bytes(bytes([0xDE, 0xAD, 0xBE, 0xEF]))

    result = CliRunner().invoke(main, ["-Z", "-C", str(p)])
    assert result.exit_code == 0, result.output
    assert result.stdout == (
        "static const unsigned char declarations[4] = {\n"
        "    0xDE, 0xAD, 0xBE, 0xEF\n"
        "};\n"
        "\n"
        "static const unsigned long declarationsSize = 4;\n"
        "\n"
    )


def test_all_layout_options(tmp_path):
    p = tmp_path / "data.bin"
    p.write_bytes(bytes(range(8)))
    out = tmp_path / "data.h"

    result = CliRunner().invoke(main, [
        "--no-zlib", "--no-copyright",
        "-o", str(out),
        "-i", "2",
        "-w", "20",
        "-n", "Assets",
        "-v", "Blob",
        "-t", "const char",
        "-V", "BlobSize",
        "-T", "const int",
        str(p),
    ])
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == (
        "namespace Assets{\n"
        "  const char Blob[8] = {\n"
        "    0x00, 0x01, \n"
        "    0x02, 0x03, \n"
        "    0x04, 0x05, \n"
        "    0x06, 0x07\n"
        "  };\n"
        "\n"
        "  const int BlobSize = 8;\n"
        "\n"
        "}\n"
    )


def test_default_banner_and_compression(tmp_path):
    p = tmp_path / "data.bin"
    p.write_bytes(b"hello")
    out = tmp_path / "data.h"

    result = CliRunner().invoke(main, ["-d", "Greeting", "-o", str(out), str(p)])
    assert result.exit_code == 0, result.output

    text = out.read_text(encoding="utf-8")
    assert text.startswith("/*-*-c++-*-*")
    assert "* Copyright 2020 Inesonic, LLC.\n* All rights reserved.\n" in text
    assert "* \\file\n*\n* Greeting\n" in text

    body = text.split("= {\n")[1].split("};")[0]
    block = bytes(int(t, 16) for t in body.replace(",", " ").split())
    assert struct.unpack(">I", block[:4]) == (5,)
    assert zlib.decompress(block[4:]) == b"hello"


def test_help():
    result = CliRunner().invoke(main, ["-h"])
    assert result.exit_code == 0
    assert "--no-zlib" in result.output
    assert "Inesonic" in result.output


def test_stdin_subprocess():
    r = run(["-Z", "-C"], input=bytes([0xDE, 0xAD, 0xBE, 0xEF]))
    assert r.returncode == 0, r.stderr
    assert b"    0xDE, 0xAD, 0xBE, 0xEF\n" in r.stdout
    assert b"declarationsSize = 4;" in r.stdout


def test_multiple_files_subprocess(tmp_path):
    a = tmp_path / "a.bin"
    b = tmp_path / "b.bin"
    a.write_bytes(b"\x01\x02")
    b.write_bytes(b"\x03")

    r = run(["-Z", "-C", "--verbose", str(a), str(b)])
    assert r.returncode == 0, r.stderr
    out = r.stdout.decode()
    assert f"// Contents of {a}:" in out
    assert f"// Contents of {b}:" in out
    assert "a_bindeclarations[2]" in out
    assert "b_bindeclarations[1]" in out
    err = r.stderr.decode()
    assert f"Embedding {a} (2 bytes)" in err
    assert f"Embedding {b} (1 bytes)" in err


def test_missing_input_fails_after_partial_output(tmp_path):
    a = tmp_path / "a.bin"
    a.write_bytes(b"\x01")
    missing = tmp_path / "missing.bin"
    out = tmp_path / "out.h"

    r = run(["-Z", "-C", "-o", str(out), str(a), str(missing)])
    assert r.returncode == 1
    assert r.stderr.decode().strip() == f"FATAL: Could not open input file {missing}"
    assert "a_bindeclarations" in out.read_text(encoding="utf-8")


def test_unwritable_output(tmp_path):
    a = tmp_path / "a.bin"
    a.write_bytes(b"\x01")

    r = run(["-o", str(tmp_path), str(a)])
    assert r.returncode == 1
    assert r.stderr.decode().startswith(f"FATAL: Could not open output file {tmp_path}")


def test_invalid_width():
    r = run(["-w", "4"], input=b"")
    assert r.returncode == 1
    assert r.stderr.decode().startswith("FATAL: Invalid configuration value width 4")
    assert r.stdout == b""


def test_invalid_indentation():
    r = run(["-i", "0"], input=b"")
    assert r.returncode == 1
    assert "FATAL: Invalid configuration value indentation 0" in r.stderr.decode()


def test_non_utf8_file_name_subprocess(tmp_path):
    a = tmp_path / "a.bin"
    a.write_bytes(b"\x01")
    raw_name = os.path.join(os.fsencode(tmp_path), b"\xff.bin")
    with open(raw_name, "wb") as f:
        f.write(b"\x02")
    out = tmp_path / "out.h"

    r = run(["-Z", "-C", "-o", str(out), str(a), raw_name])
    assert r.returncode == 0, r.stderr
    written = out.read_bytes()
    assert b"a_bindeclarations[1]" in written
    assert b"// Contents of " + raw_name + b":\n" in written
    assert b"\xff_bindeclarations[1]" in written
