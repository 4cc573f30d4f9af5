"""
Tests for Object Manipulation Answers.

Verifies:
1.  Deep copy independence, including shared and cyclic references.
2.  Structural equality semantics (ordering, types, NaN, cycles).
3.  Merge, flatten/unflatten and path access edge cases.
"""

import math
from types import MappingProxyType

import pytest

from interview_kit.objects import (
  deep_copy,
  deep_equal,
  deep_freeze,
  deep_merge,
  flatten_object,
  get_path,
  is_empty,
  omit,
  pick,
  set_path,
  unflatten_object,
)


def test_deep_copy_is_equal_but_not_identical():
  src = {"a": [1, {"b": 2}], "c": (3, [4]), "d": {5, 6}}
  copied = deep_copy(src)

  assert deep_equal(copied, src)
  assert copied is not src
  assert copied["a"] is not src["a"]
  assert copied["a"][1] is not src["a"][1]
  assert copied["c"][1] is not src["c"][1]

  copied["a"][1]["b"] = 99
  assert src["a"][1]["b"] == 2


def test_deep_copy_handles_cycles():
  """A self-referencing structure maps onto a self-referencing copy."""
  src = {"name": "root", "children": []}
  src["self"] = src
  src["children"].append(src)

  copied = deep_copy(src)

  assert copied is not src
  assert copied["self"] is copied
  assert copied["children"][0] is copied
  assert deep_equal(copied, src)


def test_deep_copy_cycle_through_tuple_keeps_identity():
  inner = []
  wrapper = (inner,)
  inner.append(wrapper)

  copied = deep_copy(wrapper)

  assert copied is not wrapper
  assert copied[0] is not inner
  assert copied[0][0] is copied


def test_deep_copy_preserves_shared_references():
  shared = [1, 2]
  copied = deep_copy({"x": shared, "y": shared})
  assert copied["x"] is copied["y"]
  assert copied["x"] is not shared


def test_deep_copy_shares_opaque_leaves():
  class Thing:
    pass

  leaf = Thing()
  assert deep_copy([leaf])[0] is leaf


def test_deep_equal_basics():
  assert deep_equal({"a": [1, 2]}, {"a": [1, 2]})
  assert not deep_equal({"a": [1, 2]}, {"a": [2, 1]})
  assert not deep_equal({"a": 1}, {"a": 1, "b": 2})
  assert not deep_equal([1, 2], (1, 2))
  assert deep_equal({1, 2}, {2, 1})


def test_deep_equal_nan():
  assert deep_equal([math.nan], [math.nan])


def test_deep_equal_cyclic_inputs_terminate():
  a = [1]
  a.append(a)
  b = [1]
  b.append(b)
  assert deep_equal(a, b)


def test_deep_merge_recurses_and_does_not_mutate():
  left = {"a": {"x": 1, "y": [1]}, "b": 1}
  right = {"a": {"y": [2], "z": 3}, "c": 4}

  merged = deep_merge(left, right)

  assert merged == {"a": {"x": 1, "y": [2], "z": 3}, "b": 1, "c": 4}
  assert left == {"a": {"x": 1, "y": [1]}, "b": 1}
  assert merged["a"] is not left["a"]


def test_deep_merge_concat_lists():
  merged = deep_merge({"tags": ["a"]}, {"tags": ["b"]}, concat_lists=True)
  assert merged == {"tags": ["a", "b"]}


def test_deep_merge_scalar_overrides_dict():
  assert deep_merge({"a": {"x": 1}}, {"a": 5}) == {"a": 5}


def test_flatten_object():
  nested = {"a": {"b": 1, "c": [10, {"d": 2}]}, "e": {}, "f": None}
  assert flatten_object(nested) == {
    "a.b": 1,
    "a.c.0": 10,
    "a.c.1.d": 2,
    "e": {},
    "f": None,
  }


def test_flatten_object_custom_separator():
  assert flatten_object({"a": {"b": 1}}, sep="/") == {"a/b": 1}


def test_unflatten_object_round_trip_for_dicts():
  nested = {"a": {"b": 1, "c": {"d": 2}}, "e": 3}
  assert unflatten_object(flatten_object(nested)) == nested


def test_get_path_variants():
  data = {"a": {"b": [{"c": 42}]}}
  assert get_path(data, "a.b[0].c") == 42
  assert get_path(data, ["a", "b", 0, "c"]) == 42
  assert get_path(data, "a.b[5].c", default="missing") == "missing"
  assert get_path(data, "a.x.y") is None
  assert get_path(data, "a.b.key", default=0) == 0


def test_get_path_reads_attributes():
  class Box:
    value = {"inner": 7}

  assert get_path(Box(), "value.inner") == 7


def test_set_path_creates_levels():
  data = {"a": 1}
  result = set_path(data, "b.c.d", 5)
  assert result is data
  assert data == {"a": 1, "b": {"c": {"d": 5}}}


def test_set_path_rejects_empty_path():
  with pytest.raises(ValueError):
    set_path({}, "", 1)


def test_pick_and_omit():
  data = {"a": 1, "b": 2, "c": 3}
  assert pick(data, ["a", "c", "zzz"]) == {"a": 1, "c": 3}
  assert omit(data, ["b"]) == {"a": 1, "c": 3}


def test_deep_freeze():
  frozen = deep_freeze({"a": [1, {"b": 2}], "s": {1}})
  assert isinstance(frozen, MappingProxyType)
  assert frozen["a"] == (1, frozen["a"][1])
  assert isinstance(frozen["a"][1], MappingProxyType)
  assert frozen["s"] == frozenset({1})
  with pytest.raises(TypeError):
    frozen["a"] = 1


@pytest.mark.parametrize(
  "value, expected",
  [
    (None, True),
    ("", True),
    ({}, True),
    ([], True),
    (set(), True),
    (0, False),
    (False, False),
    ("x", False),
    ([None], False),
  ],
)
def test_is_empty(value, expected):
  assert is_empty(value) is expected
