from rich import print

from mindtree import TreeStore, handle_key, render_outline


def main() -> None:
    store = TreeStore("Weekend")
    store.select_node(store.root_id)

    for key in ("Tab", "Enter", "Enter", "ArrowUp", "Tab", "Escape", "ArrowLeft", "ArrowLeft", "ArrowRight"):
        handle_key(store, key)
        if store.editing_id is not None:
            store.update_node_text(store.editing_id, f"Item {len(store.nodes) - 1}")

    print(render_outline(store.snapshot))


if __name__ == "__main__":
    main()
