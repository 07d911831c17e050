"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier
from .sympy_utils import to_sympy, latex_representation, are_equivalent
from .validator import ExpressionValidator
from .tree_utils import (
    calculate_tree_depth, get_variables,
    get_variable_usage_counts, get_variable_names
)

__all__ = [
    'ExpressionSimplifier', 'ExpressionValidator',
    'to_sympy', 'latex_representation', 'are_equivalent',
    'calculate_tree_depth', 'get_variables',
    'get_variable_usage_counts', 'get_variable_names'
]
