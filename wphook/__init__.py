"""
wphook - WordPress-style actions and filters for Python
"""

from .hook import HookBucket
from .registry import (
    DEFAULT_ACCEPTED_ARGS,
    DEFAULT_PRIORITY,
    HookRegistry,
    add,
    add_action,
    add_filter,
    apply_filters,
    apply_filters_ref_array,
    current_action,
    current_filter,
    did_action,
    do_action,
    do_action_ref_array,
    doing_action,
    doing_filter,
    has,
    has_action,
    has_filter,
    hooks,
    on,
    remove,
    remove_action,
    remove_all,
    remove_all_actions,
    remove_all_filters,
    remove_filter,
)

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_ACCEPTED_ARGS",
    "DEFAULT_PRIORITY",
    "HookBucket",
    "HookRegistry",
    "hooks",
    "add",
    "add_action",
    "add_filter",
    "on",
    "remove",
    "remove_action",
    "remove_filter",
    "remove_all",
    "remove_all_actions",
    "remove_all_filters",
    "has",
    "has_action",
    "has_filter",
    "do_action",
    "do_action_ref_array",
    "apply_filters",
    "apply_filters_ref_array",
    "did_action",
    "current_action",
    "current_filter",
    "doing_action",
    "doing_filter",
]
