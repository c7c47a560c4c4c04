"""
Balancing engine for the AVL tree.

Every mutating function here takes a subtree root and returns the root that
should replace it, so the caller relinks its child pointer on the way back up
the recursion. Heights are cached on the nodes with the convention that a
missing child has height -1, which makes a leaf height 0.
"""

from typing import Callable, List, Optional, Tuple, TypeVar

from avltree.node import Node
from avltree.results import InsertResult, RemoveResult

T = TypeVar('T')


# ---------------------------------------------------------------------------
# Height and balance primitives
# ---------------------------------------------------------------------------

def height(node: Optional[Node]) -> int:
    if node is None:
        return -1
    return node.height


def update_height(node: Node) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def balance_factor(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def is_unbalanced(node: Node) -> bool:
    balance = balance_factor(node)
    return balance * balance > 2


# ---------------------------------------------------------------------------
# Rotations
# ---------------------------------------------------------------------------

def rotate_left(a: Node) -> Node:
    """Lift the right child of ``a`` above it.

    Used when ``a`` is right heavy and its right child is not left heavy::

          a                 b
         / \\              / \\
        x   b      =>     a   z
           / \\           / \\
          y   z         x   y
    """
    b = a.right
    assert b is not None
    a.right = b.left
    b.left = a

    update_height(a)
    update_height(b)

    return b


def rotate_right(a: Node) -> Node:
    """Mirror of :func:`rotate_left`: lift the left child of ``a``."""
    b = a.left
    assert b is not None
    a.left = b.right
    b.right = a

    update_height(a)
    update_height(b)

    return b


def rotate_left_right(a: Node) -> Node:
    # left child leans right: straighten it first
    assert a.left is not None
    a.left = rotate_left(a.left)
    return rotate_right(a)


def rotate_right_left(a: Node) -> Node:
    assert a.right is not None
    a.right = rotate_right(a.right)
    return rotate_left(a)


def rebalance(a: Node) -> Node:
    """Pick and apply the rotation that restores balance at ``a``.

    Only meaningful when ``is_unbalanced(a)``. A left-heavy node whose left
    child leans right (opposite signs) needs the double rotation, otherwise a
    single rotation suffices; the right-heavy side is the mirror image.
    """
    if balance_factor(a) >= 0:
        if balance_factor(a.left) < 0:
            return rotate_left_right(a)
        return rotate_right(a)

    if balance_factor(a.right) > 0:
        return rotate_right_left(a)
    return rotate_left(a)


def _restore(node: Node) -> Node:
    update_height(node)
    if is_unbalanced(node):
        return rebalance(node)
    return node


# ---------------------------------------------------------------------------
# Insert / remove
# ---------------------------------------------------------------------------

def insert_node(node: Optional[Node], value: T) -> Tuple[Node, InsertResult]:
    if node is None:
        return Node(value), InsertResult.INSERTED

    if value < node.value:
        node.left, result = insert_node(node.left, value)
    elif value > node.value:
        node.right, result = insert_node(node.right, value)
    else:
        return node, InsertResult.DUPLICATE

    if result is InsertResult.DUPLICATE:
        return node, result
    return _restore(node), result


def smallest_in_subtree(node: Node) -> T:
    while node.left is not None:
        node = node.left
    return node.value


def largest_in_subtree(node: Node) -> T:
    while node.right is not None:
        node = node.right
    return node.value


def remove_node(node: Optional[Node], value: T) -> Tuple[Optional[Node], RemoveResult]:
    if node is None:
        return None, RemoveResult.NOT_FOUND

    if value < node.value:
        node.left, result = remove_node(node.left, value)
    elif value > node.value:
        node.right, result = remove_node(node.right, value)
    else:
        if node.right is None:
            return node.left, RemoveResult.REMOVED
        if node.left is None:
            return node.right, RemoveResult.REMOVED

        # two children: take over the in-order successor, then delete it below
        successor = smallest_in_subtree(node.right)
        node.value = successor
        node.right, result = remove_node(node.right, successor)

    if result is RemoveResult.NOT_FOUND:
        return node, result
    return _restore(node), result


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------

def walk_debug(node: Optional[Node], depth: int = 0, lines: Optional[List[str]] = None) -> List[str]:
    """Pre-order dump: ``depth`` tabs then ``[value]``, a blank line per missing child."""
    if lines is None:
        lines = []
    if node is None:
        lines.append("")
        return lines
    lines.append("\t" * depth + f"[{node.value}]")
    walk_debug(node.left, depth + 1, lines)
    walk_debug(node.right, depth + 1, lines)
    return lines


def walk_in_order(node: Optional[Node], visit: Callable[[T], None]) -> None:
    if node is None:
        return
    walk_in_order(node.left, visit)
    visit(node.value)
    walk_in_order(node.right, visit)


def walk_pre_order(node: Optional[Node], visit: Callable[[T], None]) -> None:
    if node is None:
        return
    visit(node.value)
    walk_pre_order(node.left, visit)
    walk_pre_order(node.right, visit)


def walk_post_order(node: Optional[Node], visit: Callable[[T], None]) -> None:
    if node is None:
        return
    walk_post_order(node.left, visit)
    walk_post_order(node.right, visit)
    visit(node.value)


def walk_destroy(node: Optional[Node]) -> int:
    """Detach every node bottom-up and return how many were released."""
    if node is None:
        return 0
    released = walk_destroy(node.left) + walk_destroy(node.right)
    node.left = None
    node.right = None
    return released + 1


# ---------------------------------------------------------------------------
# Invariant checks
# ---------------------------------------------------------------------------

def check_balanced(node: Optional[Node]) -> bool:
    if node is None:
        return True
    if abs(balance_factor(node)) > 1:
        return False
    return check_balanced(node.left) and check_balanced(node.right)


def check_heights(node: Optional[Node]) -> bool:
    if node is None:
        return True
    if not (check_heights(node.left) and check_heights(node.right)):
        return False
    return node.height == 1 + max(height(node.left), height(node.right))


def check_order(node: Optional[Node], low=None, high=None) -> bool:
    if node is None:
        return True
    if low is not None and not node.value > low:
        return False
    if high is not None and not node.value < high:
        return False
    return check_order(node.left, low, node.value) and check_order(node.right, node.value, high)
