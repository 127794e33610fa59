"""Example wiring drop zones, an observer and debug logging together."""

import logging

from rich.logging import RichHandler

from mindtree import TreeStore, apply_drop, diff, drop_zones, render_outline


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler()])

    store = TreeStore("Groceries")
    for text in ("Apples", "Bread", "Cheese"):
        store.add_node(store.root_id, text)
    store.select_node(None)

    store.subscribe(lambda previous, current: print("changed:", diff(previous, current).summary()))

    apples = store.snapshot.root.children[0]
    zones = drop_zones(store.layout(), store.root_id)
    after_bread = next(zone for zone in zones if zone.parent_id == store.root_id and zone.index == 2)

    apply_drop(store, apples, after_bread.token)
    print(render_outline(store.snapshot, store.layout()))

    cheese = store.snapshot.root.children[-1]
    apply_drop(store, apples, cheese)
    apply_drop(store, cheese, apples)
    print(render_outline(store.snapshot, store.layout()))


if __name__ == "__main__":
    main()
