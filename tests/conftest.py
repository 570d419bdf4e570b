"""Shared fixtures: stand-in JDK tools written as shell scripts."""

import shlex
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures" / "javap"


def write_script(path: Path, body: str) -> Path:
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return path


@pytest.fixture
def fake_javap(tmp_path):
    """javap that records its arguments and prints a captured report."""

    def make(report: str = "callbacks.txt", exit_code: int = 0) -> Path:
        args_file = tmp_path / "javap-args.txt"
        report_file = shlex.quote(str(FIXTURES / report))
        return write_script(
            tmp_path / "javap",
            f'printf "%s\\n" "$@" > {shlex.quote(str(args_file))}\n'
            f"pwd >> {shlex.quote(str(args_file))}\n"
            f"cat {report_file}\n"
            f"exit {exit_code}\n",
        )

    return make


@pytest.fixture
def fake_javah(tmp_path):
    """javah that writes a stub header to the path given with -o."""

    def make(exit_code: int = 0) -> Path:
        return write_script(
            tmp_path / "javah",
            'while [ "$#" -gt 0 ]; do\n'
            '  if [ "$1" = "-o" ]; then out="$2"; fi\n'
            "  shift\n"
            "done\n"
            'echo "/* javah stub */" > "$out"\n'
            'echo "[Creating file $out]" >&2\n'
            f"exit {exit_code}\n",
        )

    return make
