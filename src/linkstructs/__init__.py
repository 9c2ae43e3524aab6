"""linkstructs - Intrusive linked list, stack and tree structures with comparator-driven sorts."""

from linkstructs.compare import (
    identity_compare,
    numeric_compare,
    numeric_key_compare,
    string_compare,
    string_key_compare,
    value_compare,
)
from linkstructs.errors import (
    ConcurrentModificationError,
    InvalidArgumentError,
    InvariantViolationError,
    LinkStructsError,
)
from linkstructs.linkedlist import (
    LinkedList,
    ListNode,
    iterate_to_next,
    iterate_to_previous,
    list_node_create,
)
from linkstructs.sentinel import SENTINEL
from linkstructs.sort import insertion_sort, selection_sort
from linkstructs.stack import Stack, StackNode, depth, iterate_from, stack_node_create
from linkstructs.tree import (
    TreeNode,
    append_child,
    decrease_size,
    increase_size,
    insert_child,
    is_child,
    is_first_child,
    is_last_child,
    is_leaf,
    is_only_child,
    is_root,
    remove_child,
    tree_create,
    tree_depth,
    tree_iterator,
    tree_query,
)
from linkstructs.types import CompareFn, Listable, Predicate, Stackable, Treeable

__version__ = "0.0.1"

__all__ = [
    "SENTINEL",
    "LinkStructsError",
    "InvalidArgumentError",
    "InvariantViolationError",
    "ConcurrentModificationError",
    "CompareFn",
    "Predicate",
    "Listable",
    "Stackable",
    "Treeable",
    "ListNode",
    "LinkedList",
    "list_node_create",
    "iterate_to_next",
    "iterate_to_previous",
    "StackNode",
    "Stack",
    "stack_node_create",
    "iterate_from",
    "depth",
    "TreeNode",
    "tree_create",
    "insert_child",
    "append_child",
    "remove_child",
    "increase_size",
    "decrease_size",
    "tree_depth",
    "is_root",
    "is_leaf",
    "is_child",
    "is_first_child",
    "is_last_child",
    "is_only_child",
    "tree_iterator",
    "tree_query",
    "identity_compare",
    "value_compare",
    "string_compare",
    "numeric_compare",
    "string_key_compare",
    "numeric_key_compare",
    "selection_sort",
    "insertion_sort",
]
