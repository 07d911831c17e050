"""Binding validation"""

from arith_expr import ExpressionValidator, Constant, Variable, Add, Multiply, Subtract
from arith_expr.expression_tree.core.operators import INT_MIN, INT_MAX

TREE = Add(Multiply(Variable('b'), Constant(9)), Variable('a'))


def test_every_constructed_node_is_valid_without_environment():
    for node in [TREE, Constant(0), Constant(INT_MIN), Constant(INT_MAX),
                 Variable('unbound'), Subtract(Variable('x'), Variable('x'))]:
        assert ExpressionValidator.is_valid_expression(node)


def test_non_nodes_are_invalid():
    assert not ExpressionValidator.is_valid_expression("(1 + 2)")
    assert not ExpressionValidator.is_valid_expression(None, {})
    assert not ExpressionValidator.is_valid_expression(3, {'a': 1})


def test_missing_variables():
    assert ExpressionValidator.missing_variables(TREE, {'a': 1}) == ['b']
    assert ExpressionValidator.missing_variables(TREE, {}) == ['a', 'b']
    assert ExpressionValidator.missing_variables(TREE, {'a': 1, 'b': 2, 'c': 3}) == []


def test_valid_with_environment():
    assert ExpressionValidator.is_valid_expression(TREE, {'a': 1, 'b': 2})
    assert not ExpressionValidator.is_valid_expression(TREE, {'a': 1})
    assert ExpressionValidator.is_valid_expression(Constant(4), {})
