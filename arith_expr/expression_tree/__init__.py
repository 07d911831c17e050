"""Expression Tree Module

Immutable integer expression trees with evaluation, formatting and simplification.
"""

from .expression import Expression, build_sample_matrix
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    AddNode,
    MultiplyNode,
    SubtractNode,
    make_binary_node,
    fold_tree,
    Constant,
    Variable,
    Add,
    Multiply,
    Subtract
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    INT_DTYPE,
    INT_MIN,
    INT_MAX,
    evaluate_variable,
    evaluate_constant,
    evaluate_binary_op
)
from .utils import ExpressionSimplifier, ExpressionValidator, are_equivalent

__all__ = [
    "Expression", "build_sample_matrix",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode",
    "AddNode", "MultiplyNode", "SubtractNode", "make_binary_node", "fold_tree",
    "Constant", "Variable", "Add", "Multiply", "Subtract",
    "NodeType", "OpType", "BINARY_OP_MAP", "INT_DTYPE", "INT_MIN", "INT_MAX",
    "evaluate_variable", "evaluate_constant", "evaluate_binary_op",
    "ExpressionSimplifier", "ExpressionValidator", "are_equivalent"
]
