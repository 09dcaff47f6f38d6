"""Hook registry: actions, filters and execution bookkeeping for wphook."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

import structlog

from .hook import HookBucket

DEFAULT_PRIORITY = 10
DEFAULT_ACCEPTED_ARGS = 1


@contextmanager
def _running(stack: List[str], hook_name: str) -> Iterator[None]:
    stack.append(hook_name)
    try:
        yield
    finally:
        stack.pop()


class HookRegistry:
    """
    WordPress-style registry of named action and filter hooks.

    Every instance is fully isolated; the module-level ``hooks`` object is
    the shared default.
    """

    def __init__(
        self,
        default_priority: int = DEFAULT_PRIORITY,
        default_accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> None:
        self._hooks: Dict[str, HookBucket] = {}
        self._fire_counts: Dict[str, int] = {}
        self._current_actions: List[str] = []
        self._current_filters: List[str] = []
        self._default_priority = default_priority
        self._default_accepted_args = default_accepted_args
        self._logger = structlog.get_logger(__name__)

    def _get_hook(self, hook_name: str) -> HookBucket:
        bucket = self._hooks.get(hook_name)
        if bucket is None:
            bucket = self._hooks[hook_name] = HookBucket(hook_name)
        return bucket

    def __contains__(self, hook_name: str) -> bool:
        return self.has(hook_name)

    # -- registration -----------------------------------------------------

    def add(
        self,
        hook_name: str,
        callback: Callable,
        priority: Optional[int] = None,
        accepted_args: Optional[int] = None,
    ) -> None:
        """
        Register a callback for a hook.

        Args:
            hook_name: Name of the hook
            callback: Function to call
            priority: Lower = earlier execution (default: 10)
            accepted_args: Number of call-time arguments forwarded (default: 1)

        A non-callable ``callback`` or a negative ``accepted_args`` is logged
        as an error and nothing is registered.
        """
        if priority is None:
            priority = self._default_priority
        if accepted_args is None:
            accepted_args = self._default_accepted_args
        if not callable(callback):
            self._logger.error(
                "hook_callback_not_callable",
                hook_name=hook_name,
                callback_type=type(callback).__name__,
                message=f"The callback for hook '{hook_name}' must be callable.",
            )
            return
        if accepted_args < 0:
            self._logger.error(
                "hook_accepted_args_invalid",
                hook_name=hook_name,
                accepted_args=accepted_args,
                message=f"accepted_args for hook '{hook_name}' cannot be negative.",
            )
            return
        self._get_hook(hook_name).add(callback, priority, accepted_args)

    add_action = add
    add_filter = add

    def on(
        self,
        hook_name: str,
        priority: Optional[int] = None,
        accepted_args: Optional[int] = None,
    ):
        """Decorator form of ``add``; returns the function unchanged."""

        def decorator(func: Callable):
            self.add(hook_name, func, priority, accepted_args)
            return func

        return decorator

    def remove(self, hook_name: str, callback: Callable, priority: Optional[int] = None) -> bool:
        """Remove the first matching registration; True if one was removed."""
        bucket = self._hooks.get(hook_name)
        if bucket is None:
            return False
        return bucket.remove(callback, priority)

    remove_action = remove
    remove_filter = remove

    def remove_all(self, hook_name: str, priority: Optional[int] = None) -> None:
        """Remove every callback for a hook, optionally only at one priority."""
        bucket = self._hooks.get(hook_name)
        if bucket is not None:
            bucket.remove_all(priority)

    remove_all_actions = remove_all
    remove_all_filters = remove_all

    def has(self, hook_name: str, callback: Optional[Callable] = None) -> bool:
        """Check whether a hook has any callback, or a specific one."""
        bucket = self._hooks.get(hook_name)
        return bucket is not None and bucket.has(callback)

    has_action = has
    has_filter = has

    # -- execution --------------------------------------------------------

    def do_action(self, hook_name: str, *args: Any) -> None:
        """
        Execute all callbacks for an action hook.

        Unknown hooks are ignored and not counted. Exceptions raised by a
        callback propagate once the hook has left the running stack.
        """
        bucket = self._hooks.get(hook_name)
        if bucket is None:
            return
        self._fire_counts[hook_name] = self._fire_counts.get(hook_name, 0) + 1
        with _running(self._current_actions, hook_name):
            bucket.exec(*args)

    def do_action_ref_array(self, hook_name: str, args: Sequence[Any] = ()) -> None:
        self.do_action(hook_name, *args)

    def apply_filters(self, hook_name: str, value: Any = None, *args: Any) -> Any:
        """
        Pass a value through every filter registered for a hook.

        Args:
            hook_name: Filter name
            value: Initial value
            *args: Extra arguments offered to callbacks after the value

        Returns:
            Filtered value; ``value`` itself when the hook is unknown
        """
        bucket = self._hooks.get(hook_name)
        if bucket is None:
            return value
        with _running(self._current_filters, hook_name):
            return bucket.apply(value, *args)

    def apply_filters_ref_array(self, hook_name: str, args: Sequence[Any] = ()) -> Any:
        return self.apply_filters(hook_name, *args)

    # Legacy aliases
    exec = do_action
    apply = apply_filters
    filter = apply_filters

    # -- introspection ----------------------------------------------------

    def did_action(self, hook_name: str) -> int:
        """Number of times an action has been fired."""
        return self._fire_counts.get(hook_name, 0)

    def current_action(self) -> Optional[str]:
        return self._current_actions[-1] if self._current_actions else None

    def current_filter(self) -> Optional[str]:
        return self._current_filters[-1] if self._current_filters else None

    def doing_action(self, hook_name: Optional[str] = None) -> bool:
        """Check if an action, or any action when no name is given, is running."""
        if hook_name is None:
            return bool(self._current_actions)
        return hook_name in self._current_actions

    def doing_filter(self, hook_name: Optional[str] = None) -> bool:
        """Check if a filter, or any filter when no name is given, is running."""
        if hook_name is None:
            return bool(self._current_filters)
        return hook_name in self._current_filters

    def list_hooks(self) -> List[str]:
        return sorted(name for name, bucket in self._hooks.items() if bucket.has())

    def get_stats(self) -> Dict[str, int]:
        return {
            "total_hooks": len(self._hooks),
            "total_callbacks": sum(len(bucket) for bucket in self._hooks.values()),
            "total_fired": sum(self._fire_counts.values()),
        }


hooks = HookRegistry()

add = hooks.add
add_action = hooks.add_action
add_filter = hooks.add_filter
on = hooks.on
remove = hooks.remove
remove_action = hooks.remove_action
remove_filter = hooks.remove_filter
remove_all = hooks.remove_all
remove_all_actions = hooks.remove_all_actions
remove_all_filters = hooks.remove_all_filters
has = hooks.has
has_action = hooks.has_action
has_filter = hooks.has_filter
do_action = hooks.do_action
do_action_ref_array = hooks.do_action_ref_array
apply_filters = hooks.apply_filters
apply_filters_ref_array = hooks.apply_filters_ref_array
did_action = hooks.did_action
current_action = hooks.current_action
current_filter = hooks.current_filter
doing_action = hooks.doing_action
doing_filter = hooks.doing_filter
