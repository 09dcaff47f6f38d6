"""Per-hook callback container - WordPress-style priority buckets."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple


def _same_callback(stored: Callable, candidate: Callable) -> bool:
    # Bound methods are rebuilt on every attribute access; match their parts.
    if inspect.ismethod(stored) and inspect.ismethod(candidate):
        return stored.__self__ is candidate.__self__ and stored.__func__ is candidate.__func__
    return stored is candidate


@dataclass(frozen=True)
class _Callback:
    callback: Callable
    accepted_args: int


class HookBucket:
    """Callbacks registered for a single hook, grouped by priority."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._callbacks: Dict[int, List[_Callback]] = {}
        self._sorted = True

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._callbacks.values())

    def add(self, callback: Callable, priority: int, accepted_args: int) -> None:
        """
        Add a callback at the given priority.

        Args:
            callback: Function to call
            priority: Lower = earlier execution
            accepted_args: How many call-time arguments are forwarded
        """
        entry = _Callback(callback=callback, accepted_args=accepted_args)
        self._callbacks.setdefault(priority, []).append(entry)
        self._sorted = False

    def remove(self, callback: Callable, priority: Optional[int] = None) -> bool:
        """
        Remove the first registration of a callback.

        Without a priority, priorities are searched in their stored order
        and the search stops at the first match.
        """
        if priority is not None:
            return self._remove_from(priority, callback)
        for key in list(self._callbacks):
            if self._remove_from(key, callback):
                return True
        return False

    def _remove_from(self, priority: int, callback: Callable) -> bool:
        entries = self._callbacks.get(priority)
        if not entries:
            return False
        for index, entry in enumerate(entries):
            if _same_callback(entry.callback, callback):
                del entries[index]
                if not entries:
                    del self._callbacks[priority]
                return True
        return False

    def remove_all(self, priority: Optional[int] = None) -> None:
        """Remove every callback, or only those at one priority."""
        if priority is not None:
            self._callbacks.pop(priority, None)
        else:
            self._callbacks.clear()

    def has(self, callback: Optional[Callable] = None) -> bool:
        """Check for any callback, or for a specific one at any priority."""
        if not self._callbacks:
            return False
        if callback is None:
            return True
        return any(
            _same_callback(entry.callback, callback)
            for entries in self._callbacks.values()
            for entry in entries
        )

    def exec(self, *args: Any) -> None:
        """Run every callback for side effect, lowest priority first."""
        if not self._callbacks:
            return
        for entry in self._snapshot():
            entry.callback(*args[: entry.accepted_args])

    def apply(self, value: Any, *args: Any) -> Any:
        """
        Thread a value through every callback, lowest priority first.

        Each callback receives ``(value, *args)`` cut down to its
        ``accepted_args``; its return value replaces the running value,
        ``None`` included.
        """
        if not self._callbacks:
            return value
        current = value
        for entry in self._snapshot():
            current = entry.callback(*(current, *args)[: entry.accepted_args])
        return current

    def _snapshot(self) -> Tuple[_Callback, ...]:
        # Callbacks may add or remove registrations on this hook while a pass
        # runs; the pass itself always walks the state captured here.
        self._sort()
        return tuple(entry for entries in self._callbacks.values() for entry in entries)

    def _sort(self) -> None:
        if not self._sorted:
            self._callbacks = dict(sorted(self._callbacks.items()))
            self._sorted = True
