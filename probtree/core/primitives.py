"""Primitive computations for the probtree language."""

from typing import Any

from .base import (
    Computation, Distribution, ForcedNode, Val, Susp,
    PROB_TOLERANCE, check_prob,
)


class Return(Computation):
    """A deterministic value. Resolves immediately with probability 1."""

    def __init__(self, x: Any):
        self.val = x

    def force(self) -> ForcedNode:
        return [(Val(self.val), 1.0)]

    def __str__(self) -> str:
        return f"Return({self.val!r})"


class Primitive(Computation):
    """
    An explicit distribution lifted into a computation.

    Every listed value resolves in a single forcing step with its listed
    probability. Probabilities must lie in [0, 1] and may sum to less than
    1, in which case the missing mass is lost as if the branch failed.
    """

    def __init__(self, dist: Distribution):
        entries = []
        total = 0.0
        for entry in dist:
            try:
                value, p = entry
            except (TypeError, ValueError):
                raise TypeError(
                    f"Distribution entries must be (value, probability) pairs, got {entry!r}"
                ) from None
            p = check_prob(p, f"probability of {value!r}")
            entries.append((value, p))
            total += p
        if total > 1.0 + PROB_TOLERANCE:
            raise ValueError(f"Probabilities sum to {total}, which exceeds 1")
        self.dist = entries

    def force(self) -> ForcedNode:
        return [(Val(x), p) for x, p in self.dist]

    def __str__(self) -> str:
        parts = ", ".join(f"{x!r}: {p:g}" for x, p in self.dist)
        return f"Primitive({{{parts}}})"


class Branch(Computation):
    """
    Weighted choice between two computations.

    Forcing yields both alternatives as suspended cases: a with probability
    p and b with probability 1 - p. Neither is resolved in this step.
    """

    def __init__(self, p: float, a: Computation, b: Computation):
        self.p = check_prob(p)
        if not isinstance(a, Computation) or not isinstance(b, Computation):
            raise TypeError("Branch alternatives must be computations")
        self.a = a
        self.b = b

    def force(self) -> ForcedNode:
        return [(Susp(self.a), self.p), (Susp(self.b), 1.0 - self.p)]

    def __str__(self) -> str:
        return f"Branch({self.p:g}, {self.a}, {self.b})"


class Fail(Computation):
    """Failure. Forcing yields no cases, so this branch's mass vanishes."""

    def force(self) -> ForcedNode:
        return []

    def __str__(self) -> str:
        return "Fail()"


def ret(x: Any) -> Computation:
    """Computation that returns x with probability 1."""
    return Return(x)


def distribution_of(dist: Distribution) -> Computation:
    """Lift a list of (value, probability) pairs into a computation."""
    return Primitive(dist)


def choose(p: float, a: Computation, b: Computation) -> Computation:
    """Behave like a with probability p and like b with probability 1 - p."""
    return Branch(p, a, b)


def fail() -> Computation:
    return Fail()


def observe(cond: bool) -> Computation:
    """
    Conditioning. Continues with () if cond holds, otherwise fails.

    Paths where the observation fails are dropped entirely: their mass is
    neither resolved nor unknown, and disappears when the result is
    normalized.
    """
    return Return(()) if cond else Fail()
