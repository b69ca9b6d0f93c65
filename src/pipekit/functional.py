"""Left-to-right function composition helpers.

:func:`pipe` threads a value through unary callables in order::

    >>> pipe(5, lambda x: x * 2, str, lambda s: s + "!")
    '10!'

The overloads below let a type checker follow the value's type through up
to :data:`MAX_TYPED_ARITY` stages; longer chains fall back to ``Any``. The
ladder is generated by ``scripts/generate_pipe_overloads.py``, do not edit it
by hand.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar, overload

from .codegen import MAX_TYPED_ARITY
from .typing import Stage

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")
H = TypeVar("H")
I = TypeVar("I")  # noqa: E741
J = TypeVar("J")
K = TypeVar("K")
L = TypeVar("L")
M = TypeVar("M")
N = TypeVar("N")
O = TypeVar("O")  # noqa: E741
P = TypeVar("P")
Q = TypeVar("Q")
R = TypeVar("R")
S = TypeVar("S")
T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
W = TypeVar("W")
X = TypeVar("X")
Y = TypeVar("Y")
Z = TypeVar("Z")

# BEGIN GENERATED OVERLOADS


@overload
def pipe(
    value: A,
    /,
) -> A: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    /,
) -> B: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    /,
) -> C: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    /,
) -> D: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    /,
) -> E: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    /,
) -> F: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    /,
) -> G: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    /,
) -> H: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    /,
) -> I: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    /,
) -> J: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    /,
) -> K: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    /,
) -> L: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    /,
) -> M: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    /,
) -> N: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    /,
) -> O: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    fn15: Callable[[O], P],
    /,
) -> P: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    fn15: Callable[[O], P],
    fn16: Callable[[P], Q],
    /,
) -> Q: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    fn15: Callable[[O], P],
    fn16: Callable[[P], Q],
    fn17: Callable[[Q], R],
    /,
) -> R: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    fn15: Callable[[O], P],
    fn16: Callable[[P], Q],
    fn17: Callable[[Q], R],
    fn18: Callable[[R], S],
    /,
) -> S: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    fn15: Callable[[O], P],
    fn16: Callable[[P], Q],
    fn17: Callable[[Q], R],
    fn18: Callable[[R], S],
    fn19: Callable[[S], T],
    /,
) -> T: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    fn15: Callable[[O], P],
    fn16: Callable[[P], Q],
    fn17: Callable[[Q], R],
    fn18: Callable[[R], S],
    fn19: Callable[[S], T],
    fn20: Callable[[T], U],
    /,
) -> U: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    fn15: Callable[[O], P],
    fn16: Callable[[P], Q],
    fn17: Callable[[Q], R],
    fn18: Callable[[R], S],
    fn19: Callable[[S], T],
    fn20: Callable[[T], U],
    fn21: Callable[[U], V],
    /,
) -> V: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    fn15: Callable[[O], P],
    fn16: Callable[[P], Q],
    fn17: Callable[[Q], R],
    fn18: Callable[[R], S],
    fn19: Callable[[S], T],
    fn20: Callable[[T], U],
    fn21: Callable[[U], V],
    fn22: Callable[[V], W],
    /,
) -> W: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    fn15: Callable[[O], P],
    fn16: Callable[[P], Q],
    fn17: Callable[[Q], R],
    fn18: Callable[[R], S],
    fn19: Callable[[S], T],
    fn20: Callable[[T], U],
    fn21: Callable[[U], V],
    fn22: Callable[[V], W],
    fn23: Callable[[W], X],
    /,
) -> X: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    fn15: Callable[[O], P],
    fn16: Callable[[P], Q],
    fn17: Callable[[Q], R],
    fn18: Callable[[R], S],
    fn19: Callable[[S], T],
    fn20: Callable[[T], U],
    fn21: Callable[[U], V],
    fn22: Callable[[V], W],
    fn23: Callable[[W], X],
    fn24: Callable[[X], Y],
    /,
) -> Y: ...


@overload
def pipe(
    value: A,
    fn1: Callable[[A], B],
    fn2: Callable[[B], C],
    fn3: Callable[[C], D],
    fn4: Callable[[D], E],
    fn5: Callable[[E], F],
    fn6: Callable[[F], G],
    fn7: Callable[[G], H],
    fn8: Callable[[H], I],
    fn9: Callable[[I], J],
    fn10: Callable[[J], K],
    fn11: Callable[[K], L],
    fn12: Callable[[L], M],
    fn13: Callable[[M], N],
    fn14: Callable[[N], O],
    fn15: Callable[[O], P],
    fn16: Callable[[P], Q],
    fn17: Callable[[Q], R],
    fn18: Callable[[R], S],
    fn19: Callable[[S], T],
    fn20: Callable[[T], U],
    fn21: Callable[[U], V],
    fn22: Callable[[V], W],
    fn23: Callable[[W], X],
    fn24: Callable[[X], Y],
    fn25: Callable[[Y], Z],
    /,
) -> Z: ...


@overload
def pipe(
    value: Any,
    fn1: Callable[[Any], Any],
    fn2: Callable[[Any], Any],
    fn3: Callable[[Any], Any],
    fn4: Callable[[Any], Any],
    fn5: Callable[[Any], Any],
    fn6: Callable[[Any], Any],
    fn7: Callable[[Any], Any],
    fn8: Callable[[Any], Any],
    fn9: Callable[[Any], Any],
    fn10: Callable[[Any], Any],
    fn11: Callable[[Any], Any],
    fn12: Callable[[Any], Any],
    fn13: Callable[[Any], Any],
    fn14: Callable[[Any], Any],
    fn15: Callable[[Any], Any],
    fn16: Callable[[Any], Any],
    fn17: Callable[[Any], Any],
    fn18: Callable[[Any], Any],
    fn19: Callable[[Any], Any],
    fn20: Callable[[Any], Any],
    fn21: Callable[[Any], Any],
    fn22: Callable[[Any], Any],
    fn23: Callable[[Any], Any],
    fn24: Callable[[Any], Any],
    fn25: Callable[[Any], Any],
    fn26: Callable[[Any], Any],
    /,
    *fns: Callable[[Any], Any],
) -> Any: ...


# END GENERATED OVERLOADS


def pipe(value: Any, /, *fns: Stage) -> Any:
    """Apply ``fns`` to ``value`` from left to right and return the last output.

    Each stage receives the previous stage's output. With no stages the
    value is returned unchanged. Exceptions raised by a stage propagate as-is
    and the remaining stages are not called.
    """

    acc = value
    for fn in fns:
        acc = fn(acc)
    return acc


def flow(*fns: Stage) -> Stage:
    """Compose unary callables from left to right."""

    stages = tuple(fns)

    def _inner(value: Any) -> Any:
        return pipe(value, *stages)

    return _inner


def compose(*fns: Callable[[T], T]) -> Callable[[T], T]:
    """Compose unary callables from right to left."""

    stages = tuple(reversed(fns))

    def _inner(value: T) -> T:
        return pipe(value, *stages)

    return _inner


def foreach(iterable: Iterable[T], fn: Callable[[T], U]) -> list[U]:
    """Apply ``fn`` to each element and return a list."""

    return [fn(item) for item in iterable]


__all__ = ["MAX_TYPED_ARITY", "pipe", "flow", "compose", "foreach"]
