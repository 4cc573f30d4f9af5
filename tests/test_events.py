"""
Tests for the EventEmitter Answer.

Verifies:
1.  Registration-order dispatch and argument forwarding.
2.  `once` deregisters before its first invocation.
3.  Unsubscribe handles, `off` by original listener, and bulk removal.
4.  A throwing listener propagates and stops later listeners.
"""

import pytest

from interview_kit.events import EventEmitter


@pytest.fixture
def emitter():
  return EventEmitter()


def test_emit_calls_listeners_in_registration_order(emitter):
  calls = []
  emitter.on("tick", lambda n: calls.append(("a", n)))
  emitter.on("tick", lambda n: calls.append(("b", n)))

  assert emitter.emit("tick", 1) is True
  assert calls == [("a", 1), ("b", 1)]


def test_emit_without_listeners_returns_false(emitter):
  assert emitter.emit("nothing") is False


def test_kwargs_are_forwarded(emitter):
  seen = {}
  emitter.on("save", lambda **kw: seen.update(kw))
  emitter.emit("save", path="a.txt", force=True)
  assert seen == {"path": "a.txt", "force": True}


def test_unsubscribe_handle(emitter):
  calls = []
  unsubscribe = emitter.on("e", lambda: calls.append(1))
  unsubscribe()
  emitter.emit("e")
  assert calls == []
  assert emitter.listener_count("e") == 0
  assert "e" not in emitter.event_names()


def test_once_fires_a_single_time(emitter):
  calls = []
  emitter.once("ready", calls.append)

  emitter.emit("ready", 1)
  emitter.emit("ready", 2)

  assert calls == [1]
  assert emitter.listener_count("ready") == 0


def test_once_is_removed_before_reentrant_emit(emitter):
  calls = []

  def listener(n):
    calls.append(n)
    if n == 1:
      emitter.emit("loop", 2)

  emitter.once("loop", listener)
  emitter.emit("loop", 1)
  assert calls == [1]


def test_off_removes_once_listener_by_original(emitter):
  calls = []
  emitter.once("e", calls.append)
  assert emitter.off("e", calls.append) is True
  emitter.emit("e", 1)
  assert calls == []


def test_off_removes_only_one_registration(emitter):
  calls = []

  def listener():
    calls.append(1)

  emitter.on("e", listener)
  emitter.on("e", listener)
  emitter.off("e", listener)
  emitter.emit("e")
  assert calls == [1]
  assert emitter.off("missing", listener) is False


def test_listeners_added_during_emit_wait_for_next_emit(emitter):
  calls = []

  def first():
    calls.append("first")
    emitter.on("e", lambda: calls.append("late"))

  emitter.on("e", first)
  emitter.emit("e")
  assert calls == ["first"]


def test_throwing_listener_propagates_and_stops_dispatch(emitter):
  calls = []

  def bad():
    raise RuntimeError("listener failed")

  emitter.on("e", bad)
  emitter.on("e", lambda: calls.append("after"))

  with pytest.raises(RuntimeError):
    emitter.emit("e")
  assert calls == []


def test_remove_all_listeners(emitter):
  emitter.on("a", print)
  emitter.on("b", print)

  emitter.remove_all_listeners("a")
  assert emitter.event_names() == ["b"]

  emitter.remove_all_listeners()
  assert emitter.event_names() == []
