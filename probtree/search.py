"""
Depth-bounded search over choice trees.

The search unfolds a computation layer by layer, multiplying local
probabilities along each path. A path that is still suspended once it has
used up its depth budget is abandoned and its probability is counted as
unknown mass.
"""

import logging
from typing import NamedTuple

from .core import Computation, Distribution, Prob, Val, Susp
from .core.base import ForcedNode
from .normalize import normalize, remove_dups

logger = logging.getLogger(__name__)

# Depth used by Computation.run() when none is given
DEFAULT_MAX_DEPTH = 100


class RunResult(NamedTuple):
    """Outcome of a search: resolved distribution and unexplored mass."""

    distribution: Distribution
    unknown: Prob


class SearchStats:
    """Counters collected while searching a single computation."""

    def __init__(self):
        self.forcings = 0  # number of force() calls
        self.pruned = 0  # suspended paths cut off by the depth bound
        self.resolved = 0  # resolved leaves, before deduplication
        self.dead_ends = 0  # forcings that produced no case at all

    def merge(self, other: 'SearchStats'):
        """Add another SearchStats' counters into this one."""
        self.forcings += other.forcings
        self.pruned += other.pruned
        self.resolved += other.resolved
        self.dead_ends += other.dead_ends

    def summary(self) -> str:
        return (
            f"forcings={self.forcings} pruned={self.pruned} "
            f"resolved={self.resolved} dead_ends={self.dead_ends}"
        )

    def __repr__(self) -> str:
        return f"SearchStats({self.summary()})"


def _check_depth(max_depth) -> int:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise TypeError(f"max_depth must be an integer, got {max_depth!r}")
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")
    return max_depth


def _force(m: Computation, stats: SearchStats) -> ForcedNode:
    stats.forcings += 1
    forced = m.force()
    if not forced:
        stats.dead_ends += 1
    return forced


def flatten(max_depth: int, m: Computation, stats: SearchStats | None = None) -> ForcedNode:
    """
    Unfold m up to max_depth layers along every path.

    The root is forced once without using up depth. Returns the leaves of
    the explored tree with their path probabilities: resolved Val cases, and
    the Susp cases that reached the depth bound.
    """
    max_depth = _check_depth(max_depth)
    if stats is None:
        stats = SearchStats()

    leaves = []
    # Reversed so that popping from the end visits cases left to right
    worklist = [(case, p, max_depth) for case, p in reversed(_force(m, stats))]
    while worklist:
        case, p, depth = worklist.pop()
        if isinstance(case, Val):
            stats.resolved += 1
            leaves.append((case, p))
        elif depth == 0:
            stats.pruned += 1
            leaves.append((case, p))
        else:
            children = _force(case.computation, stats)
            worklist.extend(
                (child, p * q, depth - 1) for child, q in reversed(children)
            )
    return leaves


def run(max_depth: int, m: Computation, stats: SearchStats | None = None) -> RunResult:
    """
    Explore m to depth max_depth and return its approximate distribution.

    Args:
        max_depth: Number of forcing rounds allowed along any single path
        m: The computation to explore
        stats: Optional SearchStats filled in while searching

    Returns:
        RunResult(distribution, unknown), normalized so that the
        probabilities and the unknown mass sum to 1. If every path failed,
        the distribution is empty and unknown is 0.
    """
    if not isinstance(m, Computation):
        raise TypeError(f"Can only run a computation, got {m!r}")
    local = SearchStats()
    resolved = []
    unknown = 0.0
    for case, p in flatten(max_depth, m, local):
        if isinstance(case, Susp):
            unknown += p
        else:
            resolved.append((case.value, p))

    logger.debug(
        "run(max_depth=%d): %s, raw unknown mass %g",
        max_depth, local.summary(), unknown,
    )
    if stats is not None:
        stats.merge(local)

    dist, unknown = normalize((remove_dups(resolved), unknown))
    return RunResult(dist, unknown)
