import unittest

from avltree import balancing
from avltree.node import Node
from avltree.results import InsertResult, RemoveResult


def make(value, left=None, right=None):
    node = Node(value)
    node.left = left
    node.right = right
    balancing.update_height(node)
    return node


class TestHeightPrimitives(unittest.TestCase):
    def test_missing_node_has_height_minus_one(self):
        self.assertEqual(balancing.height(None), -1)

    def test_new_node_is_leaf_of_height_zero(self):
        node = Node(7)
        self.assertTrue(node.is_leaf())
        self.assertEqual(balancing.height(node), 0)

    def test_update_height_uses_taller_child(self):
        node = make(10, make(5, make(2)), make(15))
        self.assertEqual(node.height, 2)
        self.assertEqual(node.left.height, 1)
        self.assertEqual(node.right.height, 0)

    def test_balance_factor(self):
        self.assertEqual(balancing.balance_factor(None), 0)
        self.assertEqual(balancing.balance_factor(make(1)), 0)
        self.assertEqual(balancing.balance_factor(make(2, make(1))), 1)
        self.assertEqual(balancing.balance_factor(make(1, None, make(2))), -1)

    def test_is_unbalanced_only_beyond_one(self):
        self.assertFalse(balancing.is_unbalanced(make(2, make(1))))
        self.assertFalse(balancing.is_unbalanced(make(2, make(1), make(3))))
        self.assertTrue(balancing.is_unbalanced(make(3, make(2, make(1)))))
        self.assertTrue(balancing.is_unbalanced(make(1, None, make(2, None, make(3)))))


class TestRotations(unittest.TestCase):
    def test_rotate_left_lifts_right_child(self):
        a = make(10, make(5), make(20, make(15), make(30)))
        root = balancing.rotate_left(a)
        self.assertEqual(root.value, 20)
        self.assertIs(root.left, a)
        self.assertEqual(a.right.value, 15)
        self.assertEqual(root.right.value, 30)
        self.assertEqual(a.height, 1)
        self.assertEqual(root.height, 2)
        self.assertTrue(balancing.check_heights(root))
        self.assertTrue(balancing.check_order(root))

    def test_rotate_right_lifts_left_child(self):
        a = make(30, make(20, make(10), make(25)), make(40))
        root = balancing.rotate_right(a)
        self.assertEqual(root.value, 20)
        self.assertIs(root.right, a)
        self.assertEqual(a.left.value, 25)
        self.assertEqual(root.left.value, 10)
        self.assertTrue(balancing.check_heights(root))
        self.assertTrue(balancing.check_order(root))

    def test_rotate_left_right(self):
        a = make(30, make(10, None, make(20)))
        root = balancing.rotate_left_right(a)
        self.assertEqual(root.value, 20)
        self.assertEqual(root.left.value, 10)
        self.assertEqual(root.right.value, 30)
        self.assertEqual(root.height, 1)
        self.assertTrue(root.left.is_leaf() and root.right.is_leaf())

    def test_rotate_right_left(self):
        a = make(10, None, make(30, make(20)))
        root = balancing.rotate_right_left(a)
        self.assertEqual(root.value, 20)
        self.assertEqual(root.left.value, 10)
        self.assertEqual(root.right.value, 30)
        self.assertEqual(root.height, 1)


class TestRebalanceRule(unittest.TestCase):
    def test_left_left_uses_single_right_rotation(self):
        root = balancing.rebalance(make(30, make(20, make(10))))
        self.assertEqual([root.left.value, root.value, root.right.value], [10, 20, 30])

    def test_left_right_uses_double_rotation(self):
        root = balancing.rebalance(make(30, make(10, None, make(20))))
        self.assertEqual(root.value, 20)

    def test_right_right_uses_single_left_rotation(self):
        root = balancing.rebalance(make(10, None, make(20, None, make(30))))
        self.assertEqual(root.value, 20)

    def test_right_left_uses_double_rotation(self):
        root = balancing.rebalance(make(10, None, make(30, make(20))))
        self.assertEqual(root.value, 20)

    def test_left_heavy_with_even_left_child_uses_single_rotation(self):
        # only reachable through removal: left child has balance 0
        a = make(50, make(30, make(20), make(40)))
        self.assertEqual(balancing.balance_factor(a), 2)
        self.assertEqual(balancing.balance_factor(a.left), 0)
        root = balancing.rebalance(a)
        self.assertEqual(root.value, 30)
        self.assertEqual(root.right.value, 50)
        self.assertEqual(root.right.left.value, 40)
        self.assertEqual(balancing.balance_factor(root), -1)
        self.assertTrue(balancing.check_balanced(root))

    def test_right_heavy_with_even_right_child_uses_single_rotation(self):
        a = make(10, None, make(30, make(20), make(40)))
        root = balancing.rebalance(a)
        self.assertEqual(root.value, 30)
        self.assertEqual(root.left.value, 10)
        self.assertEqual(root.left.right.value, 20)
        self.assertEqual(balancing.balance_factor(root), 1)


class TestInsertNode(unittest.TestCase):
    def test_insert_into_empty_creates_leaf(self):
        root, result = balancing.insert_node(None, 5)
        self.assertEqual(result, InsertResult.INSERTED)
        self.assertEqual(root.value, 5)
        self.assertEqual(root.height, 0)

    def test_duplicate_returns_same_subtree_untouched(self):
        root = make(20, make(10), make(30))
        new_root, result = balancing.insert_node(root, 10)
        self.assertEqual(result, InsertResult.DUPLICATE)
        self.assertIs(new_root, root)
        self.assertEqual(root.height, 1)

    def test_insert_rotates_at_nearest_unbalanced_ancestor(self):
        root = None
        for v in [1, 2, 3]:
            root, _ = balancing.insert_node(root, v)
        self.assertEqual(root.value, 2)
        self.assertEqual(root.height, 1)


class TestRemoveNode(unittest.TestCase):
    def test_remove_from_empty_is_not_found(self):
        root, result = balancing.remove_node(None, 1)
        self.assertIsNone(root)
        self.assertEqual(result, RemoveResult.NOT_FOUND)

    def test_missing_value_leaves_subtree_untouched(self):
        root = make(20, make(10), make(30))
        new_root, result = balancing.remove_node(root, 25)
        self.assertEqual(result, RemoveResult.NOT_FOUND)
        self.assertIs(new_root, root)

    def test_remove_last_node(self):
        root, result = balancing.remove_node(make(1), 1)
        self.assertIsNone(root)
        self.assertEqual(result, RemoveResult.REMOVED)

    def test_single_child_is_spliced_in(self):
        child = make(30)
        root, _ = balancing.remove_node(make(20, None, child), 20)
        self.assertIs(root, child)

    def test_two_children_take_in_order_successor(self):
        root = make(20, make(10), make(30, make(25), make(40)))
        root, result = balancing.remove_node(root, 20)
        self.assertEqual(result, RemoveResult.REMOVED)
        self.assertEqual(root.value, 25)
        self.assertIsNone(root.right.left)
        self.assertTrue(balancing.check_heights(root))

    def test_removal_can_rotate_more_than_once(self):
        # sparsest AVL tree of height 4; removing 12 rotates at 11, then at the root
        left = make(5, make(3, make(2, make(1)), make(4)), make(6, None, make(7)))
        right = make(11, make(10, make(9)), make(12))
        root = make(8, left, right)
        self.assertEqual(root.height, 4)
        self.assertTrue(balancing.check_balanced(root))

        root, result = balancing.remove_node(root, 12)
        self.assertEqual(result, RemoveResult.REMOVED)
        self.assertEqual(root.value, 5)
        self.assertEqual(root.right.value, 8)
        self.assertEqual(root.right.right.value, 10)
        self.assertEqual(root.height, 3)
        self.assertTrue(balancing.check_balanced(root))
        self.assertTrue(balancing.check_heights(root))
        self.assertTrue(balancing.check_order(root))


class TestTraversals(unittest.TestCase):
    def test_walk_debug_marks_missing_children_with_blank_lines(self):
        root = make(2, make(1), make(3))
        self.assertEqual(
            balancing.walk_debug(root),
            ["[2]", "\t[1]", "", "", "\t[3]", "", ""],
        )

    def test_walk_debug_on_empty(self):
        self.assertEqual(balancing.walk_debug(None), [""])

    def test_orders(self):
        root = make(2, make(1), make(3))
        seen = []
        balancing.walk_in_order(root, seen.append)
        self.assertEqual(seen, [1, 2, 3])
        seen = []
        balancing.walk_pre_order(root, seen.append)
        self.assertEqual(seen, [2, 1, 3])
        seen = []
        balancing.walk_post_order(root, seen.append)
        self.assertEqual(seen, [1, 3, 2])

    def test_walk_destroy_detaches_every_node(self):
        left, right = make(1), make(3)
        root = make(2, left, right)
        self.assertEqual(balancing.walk_destroy(root), 3)
        self.assertIsNone(root.left)
        self.assertIsNone(root.right)
        self.assertEqual(balancing.walk_destroy(None), 0)


class TestInvariantChecks(unittest.TestCase):
    def test_check_order_rejects_misplaced_value(self):
        # 25 sits in the left subtree of 20
        root = make(20, make(10, None, make(25)), make(30))
        self.assertFalse(balancing.check_order(root))

    def test_check_order_rejects_duplicates(self):
        self.assertFalse(balancing.check_order(make(10, make(10))))

    def test_check_heights_rejects_stale_height(self):
        root = make(20, make(10), make(30))
        root.height = 5
        self.assertFalse(balancing.check_heights(root))

    def test_check_balanced_rejects_chain(self):
        self.assertFalse(balancing.check_balanced(make(3, make(2, make(1)))))


if __name__ == '__main__':
    unittest.main()
