"""Static type-flow checks for ``pipe`` using mypy."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

mypy_api = pytest.importorskip("mypy.api")

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"

SNIPPET = textwrap.dedent(
    """\
    from pipekit.functional import pipe


    def dbl(x: int) -> int:
        return x * 2


    def bang(s: str) -> str:
        return s + "!"


    reveal_type(pipe(5, dbl, str, bang))
    reveal_type(pipe(42))
    pipe(5, str, dbl)
    """
)


def _line_of(fragment: str) -> int:
    for number, line in enumerate(SNIPPET.splitlines(), start=1):
        if fragment in line:
            return number
    raise AssertionError(f"{fragment!r} not in snippet")


@pytest.fixture
def mypy_report(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MYPYPATH", str(SRC_ROOT))
    (tmp_path / "snippet.py").write_text(SNIPPET, encoding="utf-8")

    stdout, _stderr, status = mypy_api.run(
        ["--no-error-summary", "--cache-dir", str(tmp_path / ".mypy_cache"), "snippet.py"]
    )
    lines = [line for line in stdout.splitlines() if line.startswith("snippet.py:")]
    return lines, status


def _lines_at(lines, number):
    return [line for line in lines if line.startswith(f"snippet.py:{number}:")]


def test_stage_types_flow_through_chain(mypy_report):
    lines, _ = mypy_report

    revealed = _lines_at(lines, _line_of("pipe(5, dbl, str, bang)"))
    assert len(revealed) == 1
    assert 'Revealed type is "builtins.str"' in revealed[0]

    identity = _lines_at(lines, _line_of("pipe(42)"))
    assert len(identity) == 1
    assert 'Revealed type is "builtins.int"' in identity[0]


def test_mismatched_stage_is_reported(mypy_report):
    lines, status = mypy_report

    errors = [line for line in _lines_at(lines, _line_of("pipe(5, str, dbl)")) if ": error:" in line]
    assert errors
    assert status == 1


def test_package_ships_py_typed_marker():
    import pipekit

    assert (Path(pipekit.__file__).parent / "py.typed").is_file()
