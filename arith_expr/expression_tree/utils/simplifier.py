from ..core.node import (
  Node, VariableNode, ConstantNode, BinaryOpNode,
  AddNode, MultiplyNode, SubtractNode, make_binary_node, fold_tree
)


class ExpressionSimplifier:
  """Folds additive and multiplicative identity and absorbing elements in one bottom-up pass"""

  @staticmethod
  def simplify_expression(node: Node) -> Node:
    """Return a new tree with children simplified before the rule at each node fires"""
    return fold_tree(node, ExpressionSimplifier._simplify_leaf, ExpressionSimplifier._apply_rule)

  @staticmethod
  def _simplify_leaf(node: Node) -> Node:
    if isinstance(node, (ConstantNode, VariableNode)):
      return node
    raise TypeError(f"simplify reached unexpected node type: {type(node).__name__}")

  @staticmethod
  def _apply_rule(node: BinaryOpNode, left: Node, right: Node) -> Node:
    if isinstance(node, AddNode):
      return ExpressionSimplifier._fold_add(left, right)
    elif isinstance(node, MultiplyNode):
      return ExpressionSimplifier._fold_multiply(left, right)
    elif isinstance(node, SubtractNode):
      return ExpressionSimplifier._fold_subtract(left, right)
    raise TypeError(f"simplify reached unexpected node type: {type(node).__name__}")

  @staticmethod
  def _is_constant(node: Node, value: int) -> bool:
    return isinstance(node, ConstantNode) and node.value == value

  @staticmethod
  def _fold_add(left: Node, right: Node) -> Node:
    if ExpressionSimplifier._is_constant(left, 0):
      return right  # 0 + x = x
    if ExpressionSimplifier._is_constant(right, 0):
      return left  # x + 0 = x
    return make_binary_node('+', left, right)

  @staticmethod
  def _fold_multiply(left: Node, right: Node) -> Node:
    # Left operand wins: 0 * 1 folds to 0
    if ExpressionSimplifier._is_constant(left, 0):
      return ConstantNode(0)  # 0 * x = 0
    if ExpressionSimplifier._is_constant(left, 1):
      return right  # 1 * x = x
    if ExpressionSimplifier._is_constant(right, 0):
      return ConstantNode(0)  # x * 0 = 0
    if ExpressionSimplifier._is_constant(right, 1):
      return left  # x * 1 = x
    return make_binary_node('*', left, right)

  @staticmethod
  def _fold_subtract(left: Node, right: Node) -> Node:
    if ExpressionSimplifier._is_constant(right, 0):
      return left  # x - 0 = x
    if (isinstance(left, ConstantNode) and isinstance(right, ConstantNode)
        and left.value == right.value):
      return ConstantNode(0)  # c - c = 0
    return make_binary_node('-', left, right)
