"""Base types for the probtree choice-tree language."""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, List, Tuple

Prob = float

# A distribution is a list of (value, probability) pairs. Duplicates are
# allowed until remove_dups collapses them.
Distribution = List[Tuple[Any, Prob]]

# Tolerance used when validating probabilities and their sums
PROB_TOLERANCE = 1e-9


def check_prob(p, what: str = "probability") -> float:
    """Validate that p is a real number in [0, 1] and return it as a float."""
    if isinstance(p, bool) or not isinstance(p, Real):
        raise TypeError(f"{what} must be a real number, got {p!r}")
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"{what} must lie in [0, 1], got {p}")
    return float(p)


@dataclass(frozen=True)
class Val:
    """A resolved case: a concrete value."""

    value: Any


@dataclass(frozen=True)
class Susp:
    """A suspended case: a computation still to be forced."""

    computation: 'Computation'


# A forced node: every case of one layer with its local probability
Case = Val | Susp
ForcedNode = List[Tuple[Case, Prob]]


class Computation:
    """
    Base class for all probtree computations.

    A computation is an immutable, lazy description of a probabilistic
    process. Nothing is evaluated until force() is called, and each call
    re-derives the layer from the description.
    """

    def force(self) -> ForcedNode:
        """
        Evaluate exactly one layer.

        Returns the cases of this node, each paired with the probability of
        reaching it given that this node was reached.
        """
        raise NotImplementedError

    def bind(self, f: Callable[[Any], 'Computation']) -> 'Computation':
        """Run this computation, then f applied to its result."""
        from .bind import Bind
        return Bind(self, f)

    def __rshift__(self, f: Callable[[Any], 'Computation']) -> 'Computation':
        return self.bind(f)

    def map(self, g: Callable[[Any], Any]) -> 'Computation':
        """Apply a deterministic function to every outcome."""
        from .primitives import Return
        return self.bind(lambda x: Return(g(x)))

    def filter(self, pred: Callable[[Any], bool]) -> 'Computation':
        """Discard the outcomes for which pred is false."""
        from .primitives import Return, observe
        return self.bind(lambda x: observe(pred(x)).bind(lambda _: Return(x)))

    def run(self, max_depth: int | None = None, stats=None):
        """Explore this computation; see probtree.search.run."""
        from ..search import run, DEFAULT_MAX_DEPTH
        if max_depth is None:
            max_depth = DEFAULT_MAX_DEPTH
        return run(max_depth, self, stats=stats)

    def __str__(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return str(self)
