from typing import TypeVar, Generic, List, Iterator, Optional

from avltree import balancing
from avltree.node import Node
from avltree.results import (
    InsertResult,
    RemoveResult,
    DuplicateValueError,
    ValueNotFoundError,
)

T = TypeVar('T')


class AVLTree(Generic[T]):
    def __init__(self) -> None:
        self._root: Optional[Node[T]] = None
        self._size: int = 0

    def get_root(self) -> Optional[Node[T]]:
        return self._root

    def insert(self, value: T, strict: bool = False) -> InsertResult:
        self._root, result = balancing.insert_node(self._root, value)
        if result is InsertResult.INSERTED:
            self._size += 1
        elif strict:
            raise DuplicateValueError(value)
        return result

    def remove(self, value: T, strict: bool = False) -> RemoveResult:
        self._root, result = balancing.remove_node(self._root, value)
        if result is RemoveResult.REMOVED:
            self._size -= 1
        elif strict:
            raise ValueNotFoundError(value)
        return result

    def contains(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return balancing.smallest_in_subtree(self._root)

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return balancing.largest_in_subtree(self._root)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def destroy(self) -> None:
        """Release every node, children before parents, and leave the tree empty."""
        balancing.walk_destroy(self._root)
        self._root = None
        self._size = 0

    def clear(self) -> None:
        self.destroy()

    def height(self) -> int:
        return balancing.height(self._root)

    def in_order(self) -> List[T]:
        result: List[T] = []
        balancing.walk_in_order(self._root, result.append)
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        balancing.walk_pre_order(self._root, result.append)
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        balancing.walk_post_order(self._root, result.append)
        return result

    def traverse_debug(self) -> str:
        return "".join(line + "\n" for line in balancing.walk_debug(self._root))

    def traverse_sorted(self) -> str:
        return " ".join(str(value) for value in self.in_order())

    def copy(self) -> 'AVLTree[T]':
        clone: AVLTree[T] = AVLTree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def is_balanced(self) -> bool:
        return balancing.check_balanced(self._root)

    def heights_valid(self) -> bool:
        return balancing.check_heights(self._root)

    def is_ordered(self) -> bool:
        return balancing.check_order(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AVLTree):
            return NotImplemented
        return self.in_order() == other.in_order()

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"


def create_tree() -> AVLTree:
    return AVLTree()


def insert(tree: AVLTree[T], value: T) -> InsertResult:
    return tree.insert(value)


def remove(tree: AVLTree[T], value: T) -> RemoveResult:
    return tree.remove(value)


def traverse_debug(tree: AVLTree) -> str:
    return tree.traverse_debug()


def traverse_sorted(tree: AVLTree) -> str:
    return tree.traverse_sorted()


def destroy(tree: AVLTree) -> None:
    tree.destroy()
