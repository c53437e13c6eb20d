# Core language types
from .base import Computation, Val, Susp, Prob, Distribution, PROB_TOLERANCE, check_prob
from .primitives import Return, Primitive, Branch, Fail, ret, distribution_of, choose, fail, observe
from .bind import Bind, bind

__all__ = [
    "Computation", "Val", "Susp", "Prob", "Distribution",
    "PROB_TOLERANCE", "check_prob",
    "Return", "Primitive", "Branch", "Fail",
    "ret", "distribution_of", "choose", "fail", "observe",
    "Bind", "bind",
]
