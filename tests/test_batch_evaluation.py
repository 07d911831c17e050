"""Vectorised evaluation over many environments"""

import numpy as np
import pytest

from arith_expr import Expression, Constant, Variable, Add, Multiply, Subtract, UnboundVariableError
from arith_expr.expression_tree import INT_DTYPE, INT_MIN, INT_MAX, build_sample_matrix


ENVS = [
    {'a': 3, 'b': 111},
    {'a': -4, 'b': 0},
    {'a': INT_MAX, 'b': 1},
    {'a': INT_MIN, 'b': -1, 'unused': 5},
]


@pytest.mark.parametrize("root", [
    Add(Multiply(Variable('b'), Constant(9)), Variable('a')),
    Subtract(Variable('a'), Variable('b')),
    Multiply(Variable('a'), Variable('a')),
    Multiply(Constant(65536), Add(Variable('a'), Constant(65536))),
])
def test_batch_matches_scalar(root):
    expr = Expression(root)
    result = expr.evaluate_batch(ENVS)

    assert result.dtype == INT_DTYPE
    assert result.shape == (len(ENVS),)
    assert result.tolist() == [expr.evaluate(env) for env in ENVS]


def test_batch_constant_only_tree():
    expr = Expression(Subtract(Constant(10), Constant(4)))
    result = expr.evaluate_batch([{}, {'a': 1}, {}])
    assert result.tolist() == [6, 6, 6]


def test_batch_wraps_on_overflow():
    expr = Expression(Add(Variable('a'), Constant(1)))
    assert expr.evaluate_batch([{'a': INT_MAX}]).tolist() == [INT_MIN]


def test_batch_empty():
    expr = Expression(Add(Variable('a'), Constant(1)))
    assert expr.evaluate_batch([]).shape == (0,)


def test_batch_unbound_variable():
    expr = Expression(Add(Variable('a'), Variable('b')))
    with pytest.raises(UnboundVariableError) as excinfo:
        expr.evaluate_batch([{'a': 1, 'b': 2}, {'a': 1}])
    assert excinfo.value.name == 'b'


def test_node_batch_with_missing_column():
    X = np.zeros((2, 1), dtype=INT_DTYPE)
    with pytest.raises(UnboundVariableError):
        Variable('q').evaluate_batch(X, {'a': 0})


def test_build_sample_matrix():
    X, columns = build_sample_matrix(ENVS[:2], ['a', 'b'])
    assert columns == {'a': 0, 'b': 1}
    assert X.dtype == INT_DTYPE
    assert X.tolist() == [[3, 111], [-4, 0]]

    X, columns = build_sample_matrix([{}, {}], [])
    assert X.shape == (2, 0)
    assert columns == {}
