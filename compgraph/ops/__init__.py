# compgraph/ops/__init__.py

# Extension node kinds built on the Node contract
from .arithmetic import Polynomial, Product, Power
from .transcendental import Exp, Log

# Convenience builders so users can do: from compgraph.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, pow, scale, linear_combination
from .transcendental import exp, log, sqrt

__all__ = [
    "Polynomial", "Product", "Power", "Exp", "Log",
    "add", "sub", "mul", "div", "neg", "pow", "scale", "linear_combination",
    "exp", "log", "sqrt",
]
