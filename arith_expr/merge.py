# merge.py
from typing import List, Sequence


def merge_sorted(list1: Sequence[int], list2: Sequence[int]) -> List[int]:
  """Merge two ascending sequences; on ties the element from list1 comes first"""
  merged = []
  i = j = 0
  while i < len(list1) and j < len(list2):
    if list1[i] <= list2[j]:
      merged.append(list1[i])
      i += 1
    else:
      merged.append(list2[j])
      j += 1

  # At most one of the inputs still has elements left
  merged.extend(list1[i:])
  merged.extend(list2[j:])
  return merged
