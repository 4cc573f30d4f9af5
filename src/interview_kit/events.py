"""
Event Emitter Answer.

A synchronous publish/subscribe hub. Listeners are keyed by event name and
run in registration order on `emit`. A listener that raises stops the
remaining listeners and the exception reaches the caller of `emit`.
"""

from typing import Any, Callable, Dict, List, Optional

from interview_kit.catalogue.registry import answer
from interview_kit.enums import Section

Listener = Callable[..., Any]


class _OnceWrapper:
  """Wraps a listener so it deregisters itself before its first call."""

  def __init__(self, emitter: "EventEmitter", event: str, listener: Listener) -> None:
    self.emitter = emitter
    self.event = event
    self.listener = listener

  def __call__(self, *args: Any, **kwargs: Any) -> Any:
    self.emitter.off(self.event, self)
    return self.listener(*args, **kwargs)


@answer("event-emitter", "How do you implement an event emitter with on, off, once and emit?", Section.EVENTS)
class EventEmitter:
  """
  Registers listeners per event name and invokes them on `emit`.

  Example:
      >>> bus = EventEmitter()
      >>> unsubscribe = bus.on("greet", lambda name: print(f"hi {name}"))
      >>> bus.emit("greet", "ada")
      hi ada
      True
      >>> unsubscribe()
      >>> bus.emit("greet", "ada")
      False
  """

  def __init__(self) -> None:
    self._listeners: Dict[str, List[Listener]] = {}

  def on(self, event: str, listener: Listener) -> Callable[[], None]:
    """
    Subscribes `listener` to `event`.

    Returns:
        Callable[[], None]: Removes this subscription when called.
    """
    self._listeners.setdefault(event, []).append(listener)
    return lambda: self.off(event, listener)

  def once(self, event: str, listener: Listener) -> Callable[[], None]:
    """Subscribes `listener` for a single invocation."""
    return self.on(event, _OnceWrapper(self, event, listener))

  def off(self, event: str, listener: Listener) -> bool:
    """
    Removes the earliest registration of `listener` for `event`.

    Listeners match by equality, so `obj.method` matches a fresh `obj.method`.

    `once` registrations can be removed by passing the original listener.

    Returns:
        bool: True if a registration was removed.
    """
    listeners = self._listeners.get(event, [])
    for idx, registered in enumerate(listeners):
      if registered == listener or (isinstance(registered, _OnceWrapper) and registered.listener == listener):
        del listeners[idx]
        if not listeners:
          del self._listeners[event]
        return True
    return False

  def emit(self, event: str, *args: Any, **kwargs: Any) -> bool:
    """
    Calls every listener of `event` with the given arguments.

    Listeners added or removed during the emit do not affect the current
    dispatch.

    Returns:
        bool: True if at least one listener was registered.
    """
    snapshot = list(self._listeners.get(event, []))
    for listener in snapshot:
      listener(*args, **kwargs)
    return bool(snapshot)

  def listener_count(self, event: str) -> int:
    return len(self._listeners.get(event, []))

  def event_names(self) -> List[str]:
    return list(self._listeners)

  def remove_all_listeners(self, event: Optional[str] = None) -> None:
    if event is None:
      self._listeners.clear()
    else:
      self._listeners.pop(event, None)
