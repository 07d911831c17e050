import numpy as np
import sympy as sp
from typing import Dict, List, Mapping, Sequence, Tuple
from .core.node import Node
from .core.operators import INT_DTYPE, resolve_variable
from .utils.tree_utils import calculate_tree_depth, get_variable_names
from .utils.sympy_utils import latex_representation
from ..logging_system import LogLevel, log_debug, should_log


def build_sample_matrix(envs: Sequence[Mapping[str, int]],
                        names: Sequence[str]) -> Tuple[np.ndarray, Dict[str, int]]:
  """Stack the bindings of each environment into one row of an int32 matrix"""
  columns = {name: i for i, name in enumerate(names)}
  rows = [[resolve_variable(env, name) for name in names] for env in envs]
  X = np.array(rows, dtype=INT_DTYPE).reshape(len(envs), len(names))
  return np.ascontiguousarray(X), columns


class Expression:
  """Immutable handle on an expression tree with a cached display string"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    object.__setattr__(self, 'root', root)
    object.__setattr__(self, '_string_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError(f"Expression is immutable; cannot set '{name}'")

  def evaluate(self, env: Mapping[str, int]) -> int:
    return self.root.evaluate(env)

  def evaluate_batch(self, envs: Sequence[Mapping[str, int]]) -> np.ndarray:
    """Evaluate once per environment, returning an int32 array"""
    X, columns = build_sample_matrix(envs, self.variables())
    return self.root.evaluate_batch(X, columns)

  def display(self) -> str:
    if self._string_cache is None:
      object.__setattr__(self, '_string_cache', self.root.to_string())
    return self._string_cache

  def format(self, env: Mapping[str, int]) -> str:
    return self.root.format(env)

  def simplify(self) -> 'Expression':
    simplified = self.root.simplify()
    if should_log(LogLevel.VERBOSE):
      log_debug(f"simplify {self.display()} -> {simplified.to_string()} "
                f"({self.size()} -> {simplified.size()} nodes)")
    return Expression(simplified)

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> List[str]:
    return get_variable_names(self.root)

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def latex(self) -> str:
    return latex_representation(self.root)

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  def __str__(self) -> str:
    return self.display()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"

  def __reduce__(self):
    return (Expression, (self.root,))

