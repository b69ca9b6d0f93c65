"""Checks for the generated ``pipe`` overload ladder."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

import pipekit.functional as functional
from pipekit.codegen import (
    BEGIN_MARKER,
    END_MARKER,
    MAX_TYPED_ARITY,
    extract_generated_block,
    render_fallback_overload,
    render_overload,
    render_overloads,
    replace_generated_block,
)

FUNCTIONAL_PATH = Path(functional.__file__)


def test_render_overload_zero_stages():
    assert render_overload(0) == "@overload\ndef pipe(\n    value: A,\n    /,\n) -> A: ..."


def test_render_overload_chains_type_variables():
    text = render_overload(2)
    assert "    fn1: Callable[[A], B]," in text
    assert "    fn2: Callable[[B], C]," in text
    assert text.endswith(") -> C: ...")


def test_render_overloads_covers_every_arity():
    text = render_overloads()
    assert MAX_TYPED_ARITY == 25
    assert text.count("@overload") == MAX_TYPED_ARITY + 2
    assert "fn25: Callable[[Y], Z]," in text
    assert "fn26: Callable[[Any], Any]," in text
    assert "fn27" not in text


def test_fallback_overload_starts_past_typed_ladder():
    fallback = render_overloads().split("\n\n\n")[-1]
    assert fallback == render_fallback_overload(MAX_TYPED_ARITY + 1)
    assert "    value: Any,\n    fn1: Callable[[Any], Any]," in fallback
    assert fallback.endswith("    /,\n    *fns: Callable[[Any], Any],\n) -> Any: ...")
    assert render_fallback_overload(2).count("Callable[[Any], Any],") == 3

    with pytest.raises(ValueError):
        render_fallback_overload(0)


@pytest.mark.parametrize("arity", [-1, MAX_TYPED_ARITY + 1])
def test_render_overload_rejects_out_of_range_arity(arity):
    with pytest.raises(ValueError):
        render_overload(arity)


def test_rendered_overloads_compile():
    header = "from typing import Any, Callable, TypeVar, overload\n"
    header += "".join(f"{name} = TypeVar({name!r})\n" for name in "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    compile(header + render_overloads(), "<overloads>", "exec")


def test_functional_module_is_up_to_date():
    source = FUNCTIONAL_PATH.read_text(encoding="utf-8")
    assert extract_generated_block(source) == render_overloads()


def test_replace_generated_block_is_idempotent_on_module():
    source = FUNCTIONAL_PATH.read_text(encoding="utf-8")
    assert replace_generated_block(source, render_overloads()) == source


def test_replace_generated_block_swaps_content():
    source = f"head\n{BEGIN_MARKER}\nold\n{END_MARKER}\ntail\n"
    updated = replace_generated_block(source, "new")
    assert extract_generated_block(updated) == "new"
    assert updated.startswith("head\n") and updated.endswith("tail\n")
    assert "old" not in updated


def test_extract_requires_markers():
    with pytest.raises(ValueError):
        extract_generated_block("no markers here")
    with pytest.raises(ValueError):
        extract_generated_block(f"{END_MARKER}\n{BEGIN_MARKER}\n")


@pytest.mark.skipif(sys.version_info < (3, 11), reason="typing.get_overloads requires Python 3.11")
def test_pipe_registers_all_overloads():
    from typing import get_overloads

    assert len(get_overloads(functional.pipe)) == MAX_TYPED_ARITY + 2
