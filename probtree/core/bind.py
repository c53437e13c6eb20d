"""Sequencing for the probtree language."""

from typing import Any, Callable

from .base import Computation, ForcedNode, Val, Susp


# Continuations of a Bind are kept in a catenable queue: a binary tree whose
# leaves, read left to right, are the continuations from innermost to
# outermost. Joining two queues is one new node; taking either end rotates
# the tree in a loop, so left-nested binds never recurse.

class _Leaf:
    __slots__ = ("f",)

    def __init__(self, f):
        self.f = f


class _Node:
    __slots__ = ("left", "right")

    def __init__(self, left, right):
        self.left = left
        self.right = right


def _uncons(q):
    """Split q into its first continuation and the rest (None if empty)."""
    while isinstance(q, _Node):
        left = q.left
        if isinstance(left, _Leaf):
            return left.f, q.right
        q = _Node(left.left, _Node(left.right, q.right))
    return q.f, None


def _unsnoc(q):
    """Split q into everything but its last continuation (None if empty) and the last."""
    while isinstance(q, _Node):
        right = q.right
        if isinstance(right, _Leaf):
            return q.left, right.f
        q = _Node(_Node(q.left, right.left), right.right)
    return None, q.f


def _apply(f: Callable[[Any], Computation], x: Any) -> Computation:
    result = f(x)
    if not isinstance(result, Computation):
        raise TypeError(
            f"Continuation {f!r} returned {result!r} for {x!r}, expected a computation"
        )
    return result


class Bind(Computation):
    """
    Run m, then the computation f returns for m's result.

    Forcing a Bind forces m by one layer and re-wraps every case as a
    suspension: a resolved value x becomes f(x), a suspended n becomes
    Bind(n, f). Local probabilities pass through unchanged; the search
    multiplies them along the path.

    Nested binds are stored flat, as the innermost non-Bind computation and
    the queue of continuations around it. Forcing Bind(Bind(n, g), f) gives
    the same cases as forcing the nesting would, without descending
    through it.
    """

    def __init__(self, m: Computation, f: Callable[[Any], Computation]):
        if not isinstance(m, Computation):
            raise TypeError(f"Can only bind a computation, got {m!r}")
        if not callable(f):
            raise TypeError(f"Continuation must be callable, got {f!r}")
        self._m = m
        self._f = f
        if isinstance(m, Bind):
            self._root = m._root
            self._conts = _Node(m._conts, _Leaf(f))
        else:
            self._root = m
            self._conts = _Leaf(f)

    @classmethod
    def _chain(cls, m: Computation, conts) -> 'Bind':
        """Bind m to a whole queue of continuations."""
        node = cls.__new__(cls)
        node._m = None
        node._f = None
        if isinstance(m, Bind):
            node._root = m._root
            node._conts = _Node(m._conts, conts)
        else:
            node._root = m
            node._conts = conts
        return node

    @property
    def m(self) -> Computation:
        if self._m is not None:
            return self._m
        rest, _ = _unsnoc(self._conts)
        return self._root if rest is None else Bind._chain(self._root, rest)

    @property
    def f(self) -> Callable[[Any], Computation]:
        if self._f is not None:
            return self._f
        return _unsnoc(self._conts)[1]

    def force(self) -> ForcedNode:
        forced = []
        head = None
        for case, p in self._root.force():
            if isinstance(case, Val):
                if head is None:
                    head = _uncons(self._conts)
                f, rest = head
                result = _apply(f, case.value)
                if rest is not None:
                    result = Bind._chain(result, rest)
                forced.append((Susp(result), p))
            else:
                forced.append((Susp(Bind._chain(case.computation, self._conts)), p))
        return forced

    def __str__(self) -> str:
        return f"Bind({self.m}, λ)"


def bind(m: Computation, f: Callable[[Any], Computation]) -> Computation:
    """Sequence m with the continuation f."""
    return Bind(m, f)
