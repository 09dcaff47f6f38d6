"""
Basic wphook Example

Demonstrates actions, filters, priorities and introspection.
"""

import sys
sys.path.insert(0, '..')

import wphook


# Filters run lowest priority first
wphook.add_filter("title", lambda title: title.strip())
wphook.add_filter("title", lambda title: title.title(), 20)


# Extra arguments are only forwarded up to accepted_args
@wphook.on("title", priority=30, accepted_args=2)
def suffix(title, site):
    return f"{title} | {site}"


@wphook.on("init")
def announce(stage):
    print(f"   init fired during {wphook.current_action()!r} at stage {stage!r}")
    wphook.do_action("loaded")


@wphook.on("loaded", accepted_args=0)
def loaded():
    print(f"   loaded: doing init={wphook.doing_action('init')}, current={wphook.current_action()!r}")


def main():
    print("=== wphook Basic Example ===\n")

    print("1. Filter chain:")
    result = wphook.apply_filters("title", "  hello world  ", "My Site")
    print(f"   Result: {result}\n")

    print("2. Nested actions:")
    wphook.do_action("init", "boot")
    print(f"   init fired {wphook.did_action('init')} time(s)\n")

    print("3. Removal:")
    wphook.remove_action("loaded", loaded)
    print(f"   has loaded callback: {wphook.has_action('loaded', loaded)}")
    print(f"   hooks with callbacks: {wphook.hooks.list_hooks()}")


if __name__ == "__main__":
    main()
