"""
Tree Utility Functions

Read-only queries over expression trees. Walks use an explicit stack,
so they work on trees deeper than the interpreter recursion limit.
"""

from typing import List, Dict
from collections import Counter

from ..core.node import Node, BinaryOpNode, VariableNode, fold_tree


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    return fold_tree(node, lambda leaf: 1,
                     lambda _, left_depth, right_depth: 1 + max(left_depth, right_depth))


def get_variables(node: Node) -> List[VariableNode]:
    """Variable nodes in left-to-right order, repeats included."""
    variables = []
    pending = [node]

    while pending:
        current = pending.pop()
        if isinstance(current, BinaryOpNode):
            pending.append(current.right)
            pending.append(current.left)
        elif isinstance(current, VariableNode):
            variables.append(current)

    return variables


def get_variable_usage_counts(node: Node) -> Dict[str, int]:
    """
    Count how often each variable name occurs in the tree.

    Args:
        node: Root node of the tree

    Returns:
        Dictionary mapping variable names to their usage counts
    """
    return dict(Counter(var_node.name for var_node in get_variables(node)))


def get_variable_names(node: Node) -> List[str]:
    """Sorted unique variable names referenced by the tree."""
    return sorted(get_variable_usage_counts(node))
