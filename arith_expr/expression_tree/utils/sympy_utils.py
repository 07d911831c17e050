import sympy as sp
from ..core.node import Node


def to_sympy(node: Node) -> sp.Expr:
  """Convert a tree to a SymPy expression over integer symbols"""
  return node.to_sympy()


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the tree"""
  return sp.latex(to_sympy(node))


def are_equivalent(first: Node, second: Node) -> bool:
  """
  Check symbolic equality over the integers.

  Wraparound is not modelled, so trees that only agree modulo 2**32
  are reported as different.
  """
  difference = sp.expand(to_sympy(first) - to_sympy(second))
  return sp.simplify(difference) == 0
