"""
Array Utility Answers.

All helpers accept any iterable (unless noted) and return new lists; inputs
are never mutated. Set-like operations preserve first-appearance order.
"""

import random
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

from interview_kit.catalogue.registry import answer
from interview_kit.enums import Section

T = TypeVar("T")
KeyType = Union[str, Callable[[Any], Hashable]]


def _key_func(key: KeyType) -> Callable[[Any], Hashable]:
  """Turns a property name into a getter that handles dicts and objects."""
  if callable(key):
    return key

  def getter(item: Any) -> Hashable:
    if isinstance(item, dict):
      return item.get(key)
    return getattr(item, key, None)

  return getter


@answer("chunk", "How do you split an array into chunks of a given size?", Section.ARRAYS)
def chunk(items: Sequence[T], size: int) -> List[List[T]]:
  """
  Splits `items` into consecutive slices of `size`; the last may be shorter.

  Raises:
      ValueError: If `size` is smaller than 1.
  """
  if size < 1:
    raise ValueError(f"Chunk size must be >= 1, got {size}")
  seq = list(items)
  return [seq[i : i + size] for i in range(0, len(seq), size)]


@answer("rotate", "How do you rotate an array by k positions?", Section.ARRAYS)
def rotate(items: Sequence[T], k: int) -> List[T]:
  """Rotates right by `k`; negative `k` rotates left."""
  seq = list(items)
  if not seq:
    return []
  k %= len(seq)
  return seq[-k:] + seq[:-k] if k else seq


@answer("intersection", "How do you find the intersection of several arrays?", Section.ARRAYS)
def intersection(*seqs: Iterable[T]) -> List[T]:
  if not seqs:
    return []
  first, *rest = seqs
  others = [set(s) for s in rest]
  return unique(x for x in first if all(x in other for other in others))


@answer("difference", "How do you find the elements of one array missing from others?", Section.ARRAYS)
def difference(first: Iterable[T], *others: Iterable[T]) -> List[T]:
  excluded = set().union(*others) if others else set()
  return unique(x for x in first if x not in excluded)


@answer("union", "How do you merge arrays keeping only unique values?", Section.ARRAYS)
def union(*seqs: Iterable[T]) -> List[T]:
  return unique(x for seq in seqs for x in seq)


@answer("unique", "How do you remove duplicates from an array while keeping order?", Section.ARRAYS)
def unique(items: Iterable[T]) -> List[T]:
  # dict keys keep insertion order
  return list(dict.fromkeys(items))


@answer("unique-by", "How do you remove duplicate objects by a property?", Section.ARRAYS)
def unique_by(items: Iterable[T], key: KeyType) -> List[T]:
  get = _key_func(key)
  seen = set()
  result = []
  for item in items:
    k = get(item)
    if k not in seen:
      seen.add(k)
      result.append(item)
  return result


@answer("duplicates", "How do you find the duplicated values in an array?", Section.ARRAYS)
def duplicates(items: Iterable[T]) -> List[T]:
  """Values seen more than once, in the order their first repeat occurs."""
  seen = set()
  repeated: Dict[T, None] = {}
  for item in items:
    if item in seen:
      repeated.setdefault(item, None)
    else:
      seen.add(item)
  return list(repeated)


@answer("group-by", "How do you group array elements by a property?", Section.ARRAYS)
def group_by(items: Iterable[T], key: KeyType) -> Dict[Hashable, List[T]]:
  """
  Partitions `items` into a mapping from key to matching elements.

  Keys appear in first-seen order and each group preserves the relative
  order of its elements.

  Args:
      items: Elements to group.
      key: A callable, or the name of a dict key / attribute.
  """
  get = _key_func(key)
  groups: Dict[Hashable, List[T]] = {}
  for item in items:
    groups.setdefault(get(item), []).append(item)
  return groups


@answer("count-by", "How do you count array elements by a property?", Section.ARRAYS)
def count_by(items: Iterable[T], key: KeyType) -> Dict[Hashable, int]:
  get = _key_func(key)
  counts: Dict[Hashable, int] = {}
  for item in items:
    k = get(item)
    counts[k] = counts.get(k, 0) + 1
  return counts


@answer("partition", "How do you split an array in two by a predicate?", Section.ARRAYS)
def partition(items: Iterable[T], predicate: Callable[[T], Any]) -> Tuple[List[T], List[T]]:
  passed: List[T] = []
  failed: List[T] = []
  for item in items:
    (passed if predicate(item) else failed).append(item)
  return passed, failed


@answer("flatten-array", "How do you flatten a nested array to a given depth?", Section.ARRAYS)
def flatten(items: Iterable[Any], depth: Optional[int] = None) -> List[Any]:
  """
  Flattens nested lists and tuples.

  Args:
      items: Possibly nested sequence.
      depth: Levels to flatten. `None` flattens completely, `0` copies.
  """
  result: List[Any] = []
  for item in items:
    if isinstance(item, (list, tuple)) and (depth is None or depth > 0):
      result.extend(flatten(item, None if depth is None else depth - 1))
    else:
      result.append(item)
  return result


@answer("shuffle", "How do you shuffle an array fairly?", Section.ARRAYS)
def shuffle(items: Iterable[T], rng: Optional[random.Random] = None) -> List[T]:
  """Fisher-Yates shuffle returning a new list."""
  rng = rng or random.Random()
  result = list(items)
  for i in range(len(result) - 1, 0, -1):
    j = rng.randint(0, i)
    result[i], result[j] = result[j], result[i]
  return result


@answer("binary-search", "How do you search a sorted array in logarithmic time?", Section.ARRAYS)
def binary_search(sorted_items: Sequence[Any], target: Any) -> int:
  """Returns the index of `target`, or -1 when absent."""
  lo, hi = 0, len(sorted_items) - 1
  while lo <= hi:
    mid = (lo + hi) // 2
    if sorted_items[mid] == target:
      return mid
    if sorted_items[mid] < target:
      lo = mid + 1
    else:
      hi = mid - 1
  return -1
