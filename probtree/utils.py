"""Utility functions for probtree."""

from typing import Dict

import numpy as np

from .core import PROB_TOLERANCE


def pretty(node, indent: int = 0, is_last: bool = True, prefix: str = "") -> str:
    """
    Pretty-print a computation as an indented tree.

    Only the construction is shown; nothing is forced. Continuations of a
    Bind are opaque and appear as λ.

    Example output:
        Bind
        ├─ Branch(0.3)
        │  ├─ Return(1)
        │  └─ Return(2)
        └─ λ
    """
    from .core import Return, Primitive, Branch, Fail, Bind

    if indent == 0:
        connector = ""
        child_prefix = ""
    else:
        connector = "└─ " if is_last else "├─ "
        child_prefix = prefix + ("   " if is_last else "│  ")

    current_line = f"{prefix}{connector}"

    # Leaf nodes
    if isinstance(node, (Return, Primitive, Fail)):
        return f"{current_line}{node}"

    if isinstance(node, Branch):
        lines = [f"{current_line}Branch({node.p:g})"]
        lines.append(pretty(node.a, indent + 1, False, child_prefix))
        lines.append(pretty(node.b, indent + 1, True, child_prefix))
        return "\n".join(lines)

    if isinstance(node, Bind):
        lines = [f"{current_line}Bind"]
        lines.append(pretty(node.m, indent + 1, False, child_prefix))
        lines.append(f"{child_prefix}└─ λ")
        return "\n".join(lines)

    # Fallback
    return f"{current_line}{node}"


def summarize(result) -> Dict[str, float]:
    """
    Moments of a numeric search result.

    The mean and variance are taken over the resolved outcomes only,
    conditioned on the search having resolved them.

    Returns:
        Dict with mean, variance, std, known (resolved mass), unknown and
        support (number of distinct outcomes).
    """
    dist, unknown = result
    if not dist:
        return {
            "mean": float("nan"), "variance": float("nan"), "std": float("nan"),
            "known": 0.0, "unknown": float(unknown), "support": 0,
        }
    values = np.array([x for x, _ in dist], dtype=float)
    probs = np.array([p for _, p in dist], dtype=float)
    known = probs.sum()
    weights = probs / known
    mean = float(np.dot(weights, values))
    variance = float(np.dot(weights, (values - mean) ** 2))
    return {
        "mean": mean,
        "variance": variance,
        "std": float(np.sqrt(variance)),
        "known": float(known),
        "unknown": float(unknown),
        "support": len(dist),
    }


def is_stochastic(dist, unknown: float = 0.0, precision: float = PROB_TOLERANCE) -> bool:
    """Returns whether the probabilities plus the unknown mass sum to 1."""
    total = np.sum([p for _, p in dist]) + unknown
    return bool(np.isclose(total, 1.0, rtol=0.0, atol=precision))
