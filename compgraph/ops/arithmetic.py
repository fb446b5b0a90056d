# compgraph/ops/arithmetic.py
from __future__ import annotations
import numpy as np
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..core.handle import NodeHandle
from ..core.node import Constant, Node, Sum

# A Polynomial term: (coefficient, ((handle, exponent), ...))
Term = Tuple[float, Tuple[Tuple[NodeHandle, float], ...]]


@dataclass(frozen=True)
class Polynomial(Node):
    """
    Sum of monomials over node values:

        value = Σ coeff * Π values[h] ** k      for (coeff, ((h, k), ...)) in terms

    Exponents are real constants and a handle may repeat inside a term.
    The derivative of a Polynomial is again a Polynomial (product rule across
    factors, power rule per factor), so it can be differentiated repeatedly.
    """
    terms: Tuple[Term, ...]
    op_tag = "poly"

    def __post_init__(self):
        terms = tuple(
            (float(coeff), tuple((h, float(k)) for h, k in factors))
            for coeff, factors in self.terms
        )
        object.__setattr__(self, "terms", terms)

    @property
    def children(self):
        # every factor occurrence, like Sum and Product list repeated children
        return tuple(h for _, factors in self.terms for h, _ in factors)

    def value(self, my_handle, values):
        total = np.float64(0.0)
        for coeff, factors in self.terms:
            total += coeff * np.prod([values[h] ** k for h, k in factors])
        return total

    def derivative(self, my_handle, wrt, derivatives):
        terms = []
        for coeff, factors in self.terms:
            for i, (h, k) in enumerate(factors):
                if coeff == 0.0 or k == 0.0:
                    continue
                rest = factors[:i] + factors[i + 1:]
                if k != 1.0:
                    rest = rest + ((h, k - 1.0),)
                terms.append((coeff * k, rest + ((derivatives[h], 1.0),)))
        return Polynomial(tuple(terms))


@dataclass(frozen=True)
class Product(Node):
    children: Tuple[NodeHandle, ...]
    op_tag = "mul"

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))

    def value(self, my_handle, values):
        return np.float64(np.prod([values[c] for c in self.children]))

    def derivative(self, my_handle, wrt, derivatives):
        # d(c0*c1*...) = Σ_i dc_i * Π_{j != i} c_j
        terms = []
        for i, c in enumerate(self.children):
            others = tuple((o, 1.0) for j, o in enumerate(self.children) if j != i)
            terms.append((1.0, others + ((derivatives[c], 1.0),)))
        return Polynomial(tuple(terms))


@dataclass(frozen=True)
class Power(Node):
    """base ** exponent for a constant real exponent."""
    base: NodeHandle
    exponent: float
    op_tag = "pow"

    @property
    def children(self):
        return (self.base,)

    def value(self, my_handle, values):
        return np.float64(values[self.base] ** self.exponent)

    def derivative(self, my_handle, wrt, derivatives):
        p = float(self.exponent)
        if p == 0.0:
            return Constant(0.0)
        factors = ((self.base, p - 1.0),) if p != 1.0 else ()
        return Polynomial(((p, factors + ((derivatives[self.base], 1.0),)),))


# ---------------- builders: append to a graph, return handles ---------------- #
def _as_handle(graph, x) -> NodeHandle:
    """Ensure x is a handle; otherwise append it as a Constant."""
    return x if isinstance(x, NodeHandle) else graph.append(Constant(float(x)))


def add(graph, *xs) -> NodeHandle:
    return graph.append(Sum(tuple(_as_handle(graph, x) for x in xs)))


def neg(graph, x) -> NodeHandle:
    return graph.append(Polynomial(((-1.0, ((_as_handle(graph, x), 1.0),)),)))


def sub(graph, x, y) -> NodeHandle:
    x, y = _as_handle(graph, x), _as_handle(graph, y)
    return graph.append(Polynomial(((1.0, ((x, 1.0),)), (-1.0, ((y, 1.0),)))))


def mul(graph, *xs) -> NodeHandle:
    return graph.append(Product(tuple(_as_handle(graph, x) for x in xs)))


def div(graph, x, y) -> NodeHandle:
    x, y = _as_handle(graph, x), _as_handle(graph, y)
    return graph.append(Polynomial(((1.0, ((x, 1.0), (y, -1.0))),)))


def pow(graph, x, exponent: float) -> NodeHandle:
    return graph.append(Power(_as_handle(graph, x), float(exponent)))


def scale(graph, x, factor: float) -> NodeHandle:
    return graph.append(Polynomial(((float(factor), ((_as_handle(graph, x), 1.0),)),)))


def linear_combination(graph, pairs: Sequence[Tuple[float, NodeHandle]]) -> NodeHandle:
    """Append Σ coeff * x over (coeff, x) pairs."""
    return graph.append(Polynomial(tuple(
        (float(coeff), ((_as_handle(graph, x), 1.0),)) for coeff, x in pairs
    )))
