"""
probtree: lazy probabilistic choice trees.

probtree describes discrete probabilistic programs as lazily-unfolding
choice trees and explores them to a bounded depth, recovering an
approximate distribution over outcomes plus the probability mass that
was left unexplored.
"""

# Core language types
from .core import (
    Computation,
    Val,
    Susp,
    Return,
    Primitive,
    Branch,
    Fail,
    Bind,
    ret,
    distribution_of,
    choose,
    fail,
    observe,
    bind,
)

# Built-in distributions
from .distributions import (
    flip,
    bernoulli,
    uniform,
    weighted,
    binomial,
    geometric,
)

# Search and post-processing
from .search import (
    run,
    flatten,
    RunResult,
    SearchStats,
    DEFAULT_MAX_DEPTH,
)
from .normalize import remove_dups, normalize

# Utilities
from .utils import (
    pretty,
    summarize,
    is_stochastic,
)

__version__ = "0.1.0"

__all__ = [
    # Core types
    "Computation",
    "Val",
    "Susp",
    "Return",
    "Primitive",
    "Branch",
    "Fail",
    "Bind",
    "ret",
    "distribution_of",
    "choose",
    "fail",
    "observe",
    "bind",
    # Distributions
    "flip",
    "bernoulli",
    "uniform",
    "weighted",
    "binomial",
    "geometric",
    # Search
    "run",
    "flatten",
    "RunResult",
    "SearchStats",
    "DEFAULT_MAX_DEPTH",
    "remove_dups",
    "normalize",
    # Utilities
    "pretty",
    "summarize",
    "is_stochastic",
]
