"""Arithmetic Expression Package

Integer expression trees with evaluation, formatting and simplification,
plus a merge routine for sorted sequences.
"""

from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode, BinaryOpNode,
  AddNode, MultiplyNode, SubtractNode, make_binary_node,
  Constant, Variable, Add, Multiply, Subtract,
  ExpressionSimplifier, ExpressionValidator, are_equivalent
)
from .exceptions import ExpressionError, UnboundVariableError, InvalidBindingError
from .merge import merge_sorted
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "VariableNode", "ConstantNode", "BinaryOpNode",
  "AddNode", "MultiplyNode", "SubtractNode", "make_binary_node",
  "Constant", "Variable", "Add", "Multiply", "Subtract",
  "ExpressionSimplifier", "ExpressionValidator", "are_equivalent",
  "ExpressionError", "UnboundVariableError", "InvalidBindingError",
  "merge_sorted",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
