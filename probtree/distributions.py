"""Built-in probability distributions for probtree."""

from typing import Any, Sequence

import numpy as np

from .core import Computation, distribution_of, ret, check_prob


def flip(p: float) -> Computation:
    """
    Coin flip.

    Args:
        p: Probability of returning True

    Raises:
        ValueError: if p is outside [0, 1]
    """
    p = check_prob(p)
    return distribution_of([(True, p), (False, 1.0 - p)])


def bernoulli(p: float) -> Computation:
    """Bernoulli trial returning 1 with probability p and 0 otherwise."""
    p = check_prob(p)
    return distribution_of([(1, p), (0, 1.0 - p)])


def uniform(lo: int, hi: int) -> Computation:
    """
    Uniform distribution over the integers lo..hi, both included.

    Args:
        lo: Smallest value
        hi: Largest value

    Raises:
        ValueError: if hi < lo
    """
    if hi < lo:
        raise ValueError(f"invalid range for uniform: hi ({hi}) < lo ({lo})")
    p = 1.0 / (hi - lo + 1)
    return distribution_of([(n, p) for n in range(lo, hi + 1)])


def weighted(values: Sequence[Any], weights: Sequence[float]) -> Computation:
    """
    Categorical distribution with weights rescaled to sum to 1.

    Args:
        values: The possible outcomes
        weights: Non-negative relative weights, one per value
    """
    w = np.asarray(weights, dtype=float)
    if w.ndim != 1 or len(w) != len(values):
        raise ValueError(
            f"Expected one weight per value, got {len(values)} values and weights of shape {w.shape}"
        )
    if len(w) == 0:
        raise ValueError("weighted needs at least one value")
    if np.any(w < 0) or not np.all(np.isfinite(w)):
        raise ValueError(f"Weights must be finite and non-negative, got {list(weights)}")
    total = w.sum()
    if total <= 0:
        raise ValueError("Weights must not all be zero")
    probs = w / total
    return distribution_of([(v, float(p)) for v, p in zip(values, probs)])


# Native implementations (built from the monad primitives)

def binomial(n: int, p: float) -> Computation:
    """Number of successes in n independent flips, built by chaining binds."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"binomial needs a non-negative integer count, got {n!r}")
    p = check_prob(p)
    if n == 0:
        return ret(0)
    return bernoulli(p).bind(lambda k: binomial(n - 1, p).map(lambda rest: k + rest))


def geometric(p: float) -> Computation:
    """
    Number of failed flips before the first success.

    The support is unbounded: the computation refers to itself through its
    continuation, so only a finite depth of it is ever explored.
    """
    p = check_prob(p)

    def step(success: bool) -> Computation:
        if success:
            return ret(0)
        return geometric(p).map(lambda k: k + 1)

    return flip(p).bind(step)
