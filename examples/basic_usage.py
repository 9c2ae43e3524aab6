"""Basic usage example for linkstructs."""

from linkstructs import (
    LinkedList,
    ListNode,
    append_child,
    is_leaf,
    remove_child,
    tree_create,
    tree_depth,
    tree_iterator,
    tree_query,
)


def list_demo() -> None:
    """Demonstrate O(1) list splicing."""
    print("=== Linked List ===\n")

    tasks: LinkedList[ListNode] = LinkedList()
    send = ListNode(name="send_email")
    report = ListNode(name="generate_report")
    process = ListNode(name="process_data")

    tasks.append(send)
    tasks.append(report)
    tasks.insert_before(process, report)

    print(f"Tasks ({len(tasks)}): {[t.name for t in tasks]}")

    tasks.remove(process)
    print(f"After removing process_data: {[t.name for t in tasks]}")
    print(f"Backwards: {[t.name for t in tasks.iterate_from_last()]}\n")


def tree_demo() -> None:
    """Demonstrate a small directory-like tree."""
    print("=== Tree ===\n")

    root = tree_create(name="/")
    usr = tree_create(name="usr")
    home = tree_create(name="home")
    alice = tree_create(name="alice")
    bin_ = tree_create(name="bin")

    append_child(usr, root)
    append_child(home, root)
    append_child(alice, home)
    append_child(bin_, usr)

    for node in tree_iterator(root):
        print(f"{'  ' * tree_depth(node)}{node.name} (size={node.size})")

    leaves = tree_query(root, is_leaf)
    print(f"\nLeaves: {sorted(n.name for n in leaves)}")

    remove_child(home, root)
    print(f"Root size after removing home: {root.size}\n")


if __name__ == "__main__":
    list_demo()
    tree_demo()
