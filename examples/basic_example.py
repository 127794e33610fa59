from rich import print

from mindtree import TreeStore, estimate_node_size, render_outline


def main() -> None:
    store = TreeStore("Product Launch")

    research = store.add_node(store.root_id, "Research")
    store.add_node(research, "Competitor survey")
    store.add_node(research, "User interviews")

    build = store.add_node(store.root_id, "Build")
    store.add_node(build, "Backend API\nand storage")
    store.add_node(build, "Frontend")

    store.add_node(store.root_id, "Marketing")

    for node in store.snapshot.iter_preorder():
        store.update_node_size(node.id, *estimate_node_size(node.text))

    store.select_node(build)
    print(render_outline(store.snapshot, store.layout()))


if __name__ == "__main__":
    main()
