from typing import List, Mapping, Optional
from ..core.node import Node
from .tree_utils import get_variable_names


class ExpressionValidator:
  """Checks whether a tree can be evaluated under an environment.

  Node constructors already reject bad constants, names and operators,
  so any Node is structurally sound; what remains is binding coverage.
  """

  @staticmethod
  def is_valid_expression(node: Node, env: Optional[Mapping[str, int]] = None) -> bool:
    if not isinstance(node, Node):
      return False

    if env is not None:
      return not ExpressionValidator.missing_variables(node, env)

    return True

  @staticmethod
  def missing_variables(node: Node, env: Mapping[str, int]) -> List[str]:
    """Names referenced by the tree that the environment does not bind, sorted"""
    return [name for name in get_variable_names(node) if name not in env]
