from avltree.avl_tree import (
    AVLTree,
    create_tree,
    insert,
    remove,
    traverse_debug,
    traverse_sorted,
    destroy,
)
from avltree.node import Node
from avltree.results import (
    InsertResult,
    RemoveResult,
    DuplicateValueError,
    ValueNotFoundError,
)

__all__ = [
    "AVLTree",
    "Node",
    "InsertResult",
    "RemoveResult",
    "DuplicateValueError",
    "ValueNotFoundError",
    "create_tree",
    "insert",
    "remove",
    "traverse_debug",
    "traverse_sorted",
    "destroy",
]
