"""Exception types raised by expression evaluation and formatting."""

from typing import Any


class ExpressionError(Exception):
  """Base class for expression tree errors"""


class UnboundVariableError(ExpressionError, LookupError):
  """A variable node was evaluated or formatted under an environment without its name"""

  def __init__(self, name: str):
    super().__init__(f"Variable '{name}' is not bound in the environment")
    self.name = name


class InvalidBindingError(ExpressionError, ValueError):
  """A bound value is not an integer of the native width"""

  def __init__(self, name: str, value: Any, reason: str):
    super().__init__(f"Invalid binding {name}={value!r}: {reason}")
    self.name = name
    self.value = value
