"""
Object Manipulation Answers.

Deep copy, equality, merging, flattening and path access over plain
containers (dicts, lists, tuples and sets). Other values are treated as
opaque leaves and shared by reference.
"""

import math
import re
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from interview_kit.catalogue.registry import answer
from interview_kit.enums import Section

PathType = Union[str, Sequence[Any]]

_PATH_TOKEN_RE = re.compile(r"[^.\[\]]+")


@answer("deep-copy", "How do you deep clone an object, including one with circular references?", Section.OBJECTS)
def deep_copy(value: Any, _memo: Optional[Dict[int, Any]] = None) -> Any:
  """
  Recursively copies containers, preserving shared and cyclic references.

  Args:
      value: Any value. Dicts, lists, tuples, sets and frozensets are copied.

  Returns:
      Any: A structurally equal value sharing no container with the input.
  """
  memo = {} if _memo is None else _memo
  if id(value) in memo:
    return memo[id(value)]

  if isinstance(value, dict):
    result: Any = {}
    memo[id(value)] = result
    for key, item in value.items():
      result[key] = deep_copy(item, memo)
    return result

  if isinstance(value, list):
    result = []
    memo[id(value)] = result
    result.extend(deep_copy(item, memo) for item in value)
    return result

  if isinstance(value, (tuple, set, frozenset)):
    items = [deep_copy(item, memo) for item in value]
    # A cycle through an inner list or dict may already have built this copy.
    if id(value) in memo:
      return memo[id(value)]
    copied = type(value)(items)
    memo[id(value)] = copied
    return copied

  return value


@answer("deep-equal", "How do you compare two nested objects for structural equality?", Section.OBJECTS)
def deep_equal(a: Any, b: Any, _seen: Optional[set] = None) -> bool:
  """
  Structural equality that terminates on cyclic input.

  Lists and tuples are order-sensitive and not interchangeable. Dicts compare
  key sets and values. `NaN` is considered equal to itself.
  """
  if a is b:
    return True
  if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
    return True
  if type(a) is not type(b):
    return False

  if isinstance(a, (dict, list, tuple)):
    seen = set() if _seen is None else _seen
    pair = (id(a), id(b))
    if pair in seen:
      return True
    seen.add(pair)

    if isinstance(a, dict):
      if a.keys() != b.keys():
        return False
      return all(deep_equal(a[k], b[k], seen) for k in a)

    if len(a) != len(b):
      return False
    return all(deep_equal(x, y, seen) for x, y in zip(a, b))

  return a == b


@answer("deep-merge", "How do you deep merge two or more objects without mutating them?", Section.OBJECTS)
def deep_merge(*sources: Mapping[str, Any], concat_lists: bool = False) -> Dict[str, Any]:
  """
  Merges mappings left to right into a new dict.

  Nested mappings merge recursively. Lists from later sources replace earlier
  ones, or are appended when `concat_lists` is set. Other values: last wins.
  """
  merged: Dict[str, Any] = {}
  for source in sources:
    for key, value in source.items():
      current = merged.get(key)
      if isinstance(current, dict) and isinstance(value, Mapping):
        merged[key] = deep_merge(current, value, concat_lists=concat_lists)
      elif concat_lists and isinstance(current, list) and isinstance(value, list):
        merged[key] = current + deep_copy(value)
      else:
        merged[key] = deep_copy(dict(value)) if isinstance(value, Mapping) else deep_copy(value)
  return merged


@answer("flatten-object", "How do you flatten a nested object into dot-separated keys?", Section.OBJECTS)
def flatten_object(obj: Union[Mapping[str, Any], Sequence[Any]], sep: str = ".", prefix: str = "") -> Dict[str, Any]:
  """
  Flattens nested dicts and lists into a single-level dict.

  List indices become key parts (`{"a": [1]}` -> `{"a.0": 1}`). Empty
  containers are kept as leaves so the shape can be rebuilt.
  """
  items = obj.items() if isinstance(obj, Mapping) else enumerate(obj)
  flat: Dict[str, Any] = {}
  for key, value in items:
    full_key = f"{prefix}{sep}{key}" if prefix else str(key)
    if isinstance(value, (Mapping, list)) and value:
      flat.update(flatten_object(value, sep, full_key))
    else:
      flat[full_key] = value
  return flat


@answer("unflatten-object", "How do you rebuild a nested object from dot-separated keys?", Section.OBJECTS)
def unflatten_object(flat: Mapping[str, Any], sep: str = ".") -> Dict[str, Any]:
  result: Dict[str, Any] = {}
  for key, value in flat.items():
    set_path(result, key.split(sep), value)
  return result


def _parse_path(path: PathType) -> List[Any]:
  if isinstance(path, str):
    return _PATH_TOKEN_RE.findall(path)
  return list(path)


@answer("get-path", "How do you safely read a deeply nested property by path?", Section.OBJECTS)
def get_path(obj: Any, path: PathType, default: Any = None) -> Any:
  """
  Reads `obj` along `path`, returning `default` on any missing step.

  Args:
      obj: Nested dicts, lists or objects.
      path: Either `"a.b[0].c"` or a sequence of keys.
      default: Value returned when the path does not resolve.
  """
  current = obj
  for key in _parse_path(path):
    if isinstance(current, Mapping):
      if key not in current:
        return default
      current = current[key]
    elif isinstance(current, (list, tuple)):
      try:
        current = current[int(key)]
      except (ValueError, IndexError):
        return default
    elif isinstance(key, str) and hasattr(current, key):
      current = getattr(current, key)
    else:
      return default
  return current


@answer("set-path", "How do you set a deeply nested property, creating missing levels?", Section.OBJECTS)
def set_path(obj: Dict[str, Any], path: PathType, value: Any) -> Dict[str, Any]:
  """
  Assigns `value` at `path`, creating intermediate dicts. Mutates `obj`.

  Raises:
      ValueError: If `path` is empty.
  """
  keys = _parse_path(path)
  if not keys:
    raise ValueError("Path must contain at least one key")

  current = obj
  for key in keys[:-1]:
    nxt = current.get(key)
    if not isinstance(nxt, dict):
      nxt = {}
      current[key] = nxt
    current = nxt
  current[keys[-1]] = value
  return obj


@answer("pick-keys", "How do you create an object with only a subset of keys?", Section.OBJECTS)
def pick(obj: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
  return {k: obj[k] for k in keys if k in obj}


@answer("omit-keys", "How do you create an object without certain keys?", Section.OBJECTS)
def omit(obj: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
  excluded = set(keys)
  return {k: v for k, v in obj.items() if k not in excluded}


@answer("deep-freeze", "How do you make a nested object immutable?", Section.OBJECTS)
def deep_freeze(value: Any) -> Any:
  """
  Returns a read-only view: dicts become `MappingProxyType`, lists become
  tuples, sets become frozensets. Applied recursively.
  """
  if isinstance(value, Mapping):
    return MappingProxyType({k: deep_freeze(v) for k, v in value.items()})
  if isinstance(value, (list, tuple)):
    return tuple(deep_freeze(v) for v in value)
  if isinstance(value, (set, frozenset)):
    return frozenset(deep_freeze(v) for v in value)
  return value


@answer("is-empty", "How do you check whether a value is empty?", Section.OBJECTS)
def is_empty(value: Any) -> bool:
  # Numbers and booleans are never empty, even when falsy.
  if value is None:
    return True
  if isinstance(value, (str, bytes, Mapping, list, tuple, set, frozenset)):
    return len(value) == 0
  return False
