"""Core expression tree components."""

from .node import (
    Node, VariableNode, ConstantNode, BinaryOpNode,
    AddNode, MultiplyNode, SubtractNode, make_binary_node, fold_tree,
    Constant, Variable, Add, Multiply, Subtract
)
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, INT_DTYPE, INT_MIN, INT_MAX,
    wrap_int, resolve_variable, evaluate_binary_scalar,
    evaluate_variable, evaluate_constant, evaluate_binary_op
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode',
    'AddNode', 'MultiplyNode', 'SubtractNode', 'make_binary_node', 'fold_tree',
    'Constant', 'Variable', 'Add', 'Multiply', 'Subtract',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'INT_DTYPE', 'INT_MIN', 'INT_MAX',
    'wrap_int', 'resolve_variable', 'evaluate_binary_scalar',
    'evaluate_variable', 'evaluate_constant', 'evaluate_binary_op'
]
