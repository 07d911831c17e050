import numpy as np
import numba
from enum import IntEnum
from typing import Any, Mapping

from ...exceptions import UnboundVariableError, InvalidBindingError

# Native integer width: signed 32-bit, two's-complement wraparound
INT_DTYPE = np.int32
INT_MIN = int(np.iinfo(INT_DTYPE).min)
INT_MAX = int(np.iinfo(INT_DTYPE).max)


class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2


class OpType(IntEnum):
  ADD = 0
  SUB = 1
  MUL = 2


BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL}


def is_native_int(value: Any) -> bool:
  if isinstance(value, (bool, np.bool_)):
    return False
  return isinstance(value, (int, np.integer))


def fits_native_width(value: int) -> bool:
  return INT_MIN <= int(value) <= INT_MAX


def wrap_int(value: int) -> int:
  """Reduce an integer to the native width, wrapping on overflow"""
  return int(np.array([value], dtype=np.int64).astype(INT_DTYPE)[0])


def resolve_variable(env: Mapping[str, int], name: str) -> int:
  """Look up a variable binding, raising typed errors instead of returning None"""
  if name not in env:
    raise UnboundVariableError(name)
  value = env[name]
  if not is_native_int(value):
    raise InvalidBindingError(name, value, "not an integer")
  if not fits_native_width(value):
    raise InvalidBindingError(name, value, f"outside [{INT_MIN}, {INT_MAX}]")
  return int(value)


def evaluate_binary_scalar(left_val: int, right_val: int, operator: str) -> int:
  # Operands are already within the native width, so every result fits in int64
  if operator == '+':
    result = left_val + right_val
  elif operator == '-':
    result = left_val - right_val
  elif operator == '*':
    result = left_val * right_val
  else:
    raise ValueError(f"Unknown binary operator: {operator}")
  return wrap_int(result)


@numba.njit(cache=True, inline='always')
def evaluate_variable(X, index):
  return X[:, index].astype(np.int32)


@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  out = np.empty(n_samples, dtype=np.int32)
  out[:] = value
  return out


@numba.njit(cache=True)
def evaluate_binary_op(left_val, right_val, operator):
  if operator == '+':
    return (left_val + right_val).astype(np.int32)
  elif operator == '-':
    return (left_val - right_val).astype(np.int32)
  elif operator == '*':
    return (left_val * right_val).astype(np.int32)
  return np.zeros_like(left_val)
