import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Dict, Mapping, Tuple, Type
from .operators import (
  NodeType, BINARY_OP_MAP, INT_MIN, INT_MAX,
  is_native_int, fits_native_width, resolve_variable,
  evaluate_binary_scalar, evaluate_variable, evaluate_constant, evaluate_binary_op
)
from ...exceptions import UnboundVariableError

# operator symbol -> concrete binary node class
_BINARY_NODE_CLASSES: Dict[str, Type['BinaryOpNode']] = {}


def fold_tree(node: 'Node', on_leaf: Callable[['Node'], Any],
              on_binary: Callable[['BinaryOpNode', Any, Any], Any]) -> Any:
  """Post-order fold over the tree using an explicit stack instead of recursion"""
  results = []
  stack = [(node, False)]
  while stack:
    current, expanded = stack.pop()
    if not isinstance(current, BinaryOpNode):
      results.append(on_leaf(current))
    elif expanded:
      right = results.pop()
      left = results.pop()
      results.append(on_binary(current, left, right))
    else:
      stack.append((current, True))
      stack.append((current.right, False))
      stack.append((current.left, False))
  return results[0]


class Node(ABC):
  """Immutable base node with structural hashing and size caching"""

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)
    object.__setattr__(self, '_size_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable; cannot set '{name}'")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable; cannot delete '{name}'")

  @abstractmethod
  def evaluate(self, env: Mapping[str, int]) -> int:
    pass

  @abstractmethod
  def evaluate_batch(self, X: np.ndarray, columns: Mapping[str, int]) -> np.ndarray:
    """Evaluate over every row of X; columns maps variable names to column indices"""
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  def display(self) -> str:
    return self.to_string()

  @abstractmethod
  def format(self, env: Mapping[str, int]) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def simplify(self) -> 'Node':
    # Import here to avoid circular imports
    from ..utils.simplifier import ExpressionSimplifier
    return ExpressionSimplifier.simplify_expression(self)

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      object.__setattr__(self, '_size_cache', self._compute_size())
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  @abstractmethod
  def _fields(self) -> Tuple:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      object.__setattr__(self, '_hash_cache', self._compute_hash())
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    if hash(self) != hash(other):
      return False
    pairs = [(self, other)]
    while pairs:
      first, second = pairs.pop()
      if first is second:
        continue
      if type(first) is not type(second):
        return False
      if isinstance(first, BinaryOpNode):
        pairs.append((first.right, second.right))
        pairs.append((first.left, second.left))
      elif first._fields() != second._fields():
        return False
    return True

  def __reduce__(self):
    return (type(self), self._fields())

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return fold_tree(
      self,
      lambda leaf: f"{type(leaf).__name__}({leaf._fields()[0]!r})",
      lambda node, left, right: f"{type(node).__name__}({left}, {right})"
    )


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    if not isinstance(name, str):
      raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
    if not name:
      raise ValueError("Variable name must not be empty")
    super().__init__()
    object.__setattr__(self, 'name', name)

  def evaluate(self, env: Mapping[str, int]) -> int:
    return resolve_variable(env, self.name)

  def evaluate_batch(self, X: np.ndarray, columns: Mapping[str, int]) -> np.ndarray:
    if self.name not in columns:
      raise UnboundVariableError(self.name)
    return evaluate_variable(X, columns[self.name])

  def to_string(self) -> str:
    return self.name

  def format(self, env: Mapping[str, int]) -> str:
    return str(resolve_variable(env, self.name))

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name, integer=True)

  def _compute_size(self) -> int:
    return 1

  def _fields(self) -> Tuple:
    return (self.name,)

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: int):
    if not is_native_int(value):
      raise TypeError(f"Constant value must be an integer, got {type(value).__name__}")
    if not fits_native_width(value):
      raise ValueError(f"Constant {value} is outside [{INT_MIN}, {INT_MAX}]")
    super().__init__()
    object.__setattr__(self, 'value', int(value))

  def evaluate(self, env: Mapping[str, int]) -> int:
    return self.value

  def evaluate_batch(self, X: np.ndarray, columns: Mapping[str, int]) -> np.ndarray:
    return evaluate_constant(X.shape[0], self.value)

  def to_string(self) -> str:
    return str(self.value)

  def format(self, env: Mapping[str, int]) -> str:
    return str(self.value)

  def to_sympy(self) -> sp.Expr:
    return sp.Integer(self.value)

  def _compute_size(self) -> int:
    return 1

  def _fields(self) -> Tuple:
    return (self.value,)

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value))


class BinaryOpNode(Node):
  """Binary operation over two exclusively owned children.

  The set of subclasses is closed: one per symbol in BINARY_OP_MAP.
  """

  __slots__ = ('left', 'right')

  operator: str = ''

  def __init_subclass__(cls, **kwargs):
    super().__init_subclass__(**kwargs)
    if cls.operator not in BINARY_OP_MAP:
      raise TypeError(f"Unknown binary operator {cls.operator!r} for {cls.__name__}")
    if cls.operator in _BINARY_NODE_CLASSES:
      raise TypeError(f"Operator {cls.operator!r} is already implemented by "
                      f"{_BINARY_NODE_CLASSES[cls.operator].__name__}")
    _BINARY_NODE_CLASSES[cls.operator] = cls

  def __init__(self, left: Node, right: Node):
    if type(self) is BinaryOpNode:
      raise TypeError("BinaryOpNode is abstract; use AddNode, MultiplyNode or SubtractNode")
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise TypeError(f"{type(self).__name__} children must be Node instances")
    super().__init__()
    object.__setattr__(self, 'left', left)
    object.__setattr__(self, 'right', right)

  def evaluate(self, env: Mapping[str, int]) -> int:
    return fold_tree(
      self,
      lambda leaf: leaf.evaluate(env),
      lambda node, left_val, right_val: evaluate_binary_scalar(left_val, right_val, node.operator)
    )

  def evaluate_batch(self, X: np.ndarray, columns: Mapping[str, int]) -> np.ndarray:
    return fold_tree(
      self,
      lambda leaf: leaf.evaluate_batch(X, columns),
      lambda node, left_val, right_val: evaluate_binary_op(left_val, right_val, node.operator)
    )

  def to_string(self) -> str:
    return fold_tree(
      self,
      lambda leaf: leaf.to_string(),
      lambda node, left, right: f"({left} {node.operator} {right})"
    )

  def format(self, env: Mapping[str, int]) -> str:
    return fold_tree(
      self,
      lambda leaf: leaf.format(env),
      lambda node, left, right: f"({left} {node.operator} {right})"
    )

  def to_sympy(self) -> sp.Expr:
    return fold_tree(self, lambda leaf: leaf.to_sympy(), BinaryOpNode._combine_sympy)

  @staticmethod
  def _combine_sympy(node: 'BinaryOpNode', left: sp.Expr, right: sp.Expr) -> sp.Expr:
    if node.operator == '+':
      return sp.Add(left, right)
    elif node.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif node.operator == '*':
      return sp.Mul(left, right)
    else:
      raise RuntimeError(f"to_sympy reached unexpected operation at node {type(node).__name__}")

  def _compute_size(self) -> int:
    return fold_tree(self, lambda leaf: leaf.size(), lambda node, left, right: 1 + left + right)

  def _fields(self) -> Tuple:
    return (self.left, self.right)

  def _compute_hash(self) -> int:
    return fold_tree(
      self,
      hash,
      lambda node, left_hash, right_hash: hash((NodeType.BINARY_OP, node.operator, left_hash, right_hash))
    )


class AddNode(BinaryOpNode):
  __slots__ = ()
  operator = '+'


class MultiplyNode(BinaryOpNode):
  __slots__ = ()
  operator = '*'


class SubtractNode(BinaryOpNode):
  __slots__ = ()
  operator = '-'


def make_binary_node(operator: str, left: Node, right: Node) -> BinaryOpNode:
  """Build the binary node class registered for an operator symbol"""
  node_cls: Optional[Type[BinaryOpNode]] = _BINARY_NODE_CLASSES.get(operator)
  if node_cls is None:
    raise ValueError(f"Unknown binary operator: {operator}")
  return node_cls(left, right)


# Short aliases for the variant names
Constant = ConstantNode
Variable = VariableNode
Add = AddNode
Multiply = MultiplyNode
Subtract = SubtractNode
