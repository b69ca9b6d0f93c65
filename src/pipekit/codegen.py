"""Render the fixed-arity ``pipe`` overload ladder.

The ladder in :mod:`pipekit.functional` is generated text kept between two
marker comments. ``scripts/generate_pipe_overloads.py`` rewrites it with
:func:`replace_generated_block`; the test-suite checks it is up to date.
"""

from __future__ import annotations

import string

BEGIN_MARKER = "# BEGIN GENERATED OVERLOADS"
END_MARKER = "# END GENERATED OVERLOADS"

TYPE_VARS = string.ascii_uppercase
MAX_TYPED_ARITY = len(TYPE_VARS) - 1


def _check_arity(arity: int) -> None:
    if not 0 <= arity <= MAX_TYPED_ARITY:
        raise ValueError(f"arity must be within [0, {MAX_TYPED_ARITY}], got {arity}")


def render_overload(arity: int) -> str:
    """Return the ``@overload`` stub of ``pipe`` taking ``arity`` stages."""

    _check_arity(arity)
    lines = ["@overload", "def pipe(", f"    value: {TYPE_VARS[0]},"]
    for i in range(1, arity + 1):
        lines.append(f"    fn{i}: Callable[[{TYPE_VARS[i - 1]}], {TYPE_VARS[i]}],")
    lines.append("    /,")
    lines.append(f") -> {TYPE_VARS[arity]}: ...")
    return "\n".join(lines)


def render_fallback_overload(min_stages: int) -> str:
    """Return the untyped overload accepting ``min_stages`` or more stages."""

    if min_stages < 1:
        raise ValueError(f"min_stages must be positive, got {min_stages}")
    lines = ["@overload", "def pipe(", "    value: Any,"]
    for i in range(1, min_stages + 1):
        lines.append(f"    fn{i}: Callable[[Any], Any],")
    lines.append("    /,")
    lines.append("    *fns: Callable[[Any], Any],")
    lines.append(") -> Any: ...")
    return "\n".join(lines)


def render_overloads(max_arity: int = MAX_TYPED_ARITY) -> str:
    """Return the overloads for arities ``0..max_arity`` and the longer-chain fallback.

    The fallback only matches chains longer than ``max_arity`` so a stage
    type mismatch within the typed range is reported instead of widened to
    ``Any``.
    """

    _check_arity(max_arity)
    stubs = [render_overload(arity) for arity in range(max_arity + 1)]
    stubs.append(render_fallback_overload(max_arity + 1))
    return "\n\n\n".join(stubs)


def _marker_bounds(source: str) -> tuple[int, int]:
    start = source.find(BEGIN_MARKER)
    end = source.find(END_MARKER)
    if start < 0 or end < 0:
        raise ValueError("source does not contain the generated overload markers")
    if end < start:
        raise ValueError("generated overload markers are out of order")
    return start + len(BEGIN_MARKER), end


def extract_generated_block(source: str) -> str:
    """Return the text between the markers, without surrounding blank lines."""

    start, end = _marker_bounds(source)
    return source[start:end].strip("\n")


def replace_generated_block(source: str, block: str) -> str:
    """Return ``source`` with the marked region replaced by ``block``."""

    start, end = _marker_bounds(source)
    return source[:start] + "\n\n\n" + block.strip("\n") + "\n\n\n" + source[end:]


__all__ = [
    "BEGIN_MARKER",
    "END_MARKER",
    "MAX_TYPED_ARITY",
    "TYPE_VARS",
    "render_overload",
    "render_fallback_overload",
    "render_overloads",
    "extract_generated_block",
    "replace_generated_block",
]
