"""Post-processing of search results: deduplication and normalization."""

import logging
from typing import Tuple

from .core import Distribution, Prob

logger = logging.getLogger(__name__)


def remove_dups(dist: Distribution) -> Distribution:
    """
    Collapse equal values, summing their probabilities.

    Values are sorted when they form a total order; otherwise (mixed types,
    or partial orders such as sets) they keep the order in which they were
    first seen.
    """
    merged = []
    index = {}
    unhashable = []  # positions in merged of values that cannot be hashed
    for x, p in dist:
        try:
            i = index.get(x)
        except TypeError:
            i = next((j for j, (y, _) in enumerate(merged) if y == x), None)
            if i is None:
                unhashable.append(len(merged))
        else:
            if i is None:
                # an equal value may already be stored without a hash
                i = next((j for j in unhashable if merged[j][0] == x), None)
                index[x] = len(merged) if i is None else i
        if i is None:
            merged.append((x, p))
        else:
            merged[i] = (merged[i][0], merged[i][1] + p)
    try:
        ordered = sorted(merged, key=lambda xp: xp[0])
        if all(a[0] < b[0] for a, b in zip(ordered, ordered[1:])):
            return ordered
    except TypeError:
        pass
    return merged


def normalize(result: Tuple[Distribution, Prob]) -> Tuple[Distribution, Prob]:
    """
    Rescale a distribution and its unknown mass so that they sum to 1.

    If every path failed there is nothing to rescale: the result is an
    empty distribution with no unknown mass.
    """
    dist, unknown = result
    total = unknown + sum(p for _, p in dist)
    if total <= 0.0:
        logger.warning("All paths failed; returning an empty distribution")
        return [], 0.0
    return [(x, p / total) for x, p in dist], unknown / total
