import random
import unittest

from structures.bst import BinarySearchTree
from structures.errors import InvalidOperation


# ---------- Helpers for structural checks ----------
def in_order(tree):
    """Items of `tree` in in-order sequence (iterative walk over the nodes)."""
    out = []
    stack = []
    node = tree.root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        out.append(node.item)
        node = node.right
    return out

def assert_parent_links(testcase, tree):
    """Every child must point back at the node that owns it; the root at nothing."""
    if tree.root is None:
        return
    testcase.assertIsNone(tree.root.parent)
    stack = [tree.root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                testcase.assertIs(child.parent, node)
                stack.append(child)

def reverse_compare(lhs, rhs):
    return (rhs > lhs) - (rhs < lhs)


# ---------------------------------- Tests ----------------------------------
class TestInsertAndLookup(unittest.TestCase):
    def test_empty_tree(self):
        tree = BinarySearchTree()
        self.assertIsNone(tree.root)
        self.assertEqual(len(tree), 0)
        self.assertFalse(tree.has(1))
        self.assertIsNone(tree.get_minimum())
        self.assertIsNone(tree.get_maximum())

    def test_first_insert_becomes_root(self):
        tree = BinarySearchTree()
        tree.insert(10)
        self.assertEqual(tree.root.item, 10)
        self.assertIsNone(tree.root.parent)
        self.assertTrue(tree.has(10))

    def test_equal_items_go_left(self):
        tree = BinarySearchTree([10, 10, 12])
        self.assertEqual(tree.root.left.item, 10)
        self.assertIs(tree.root.left.parent, tree.root)
        self.assertEqual(tree.root.right.item, 12)
        self.assertEqual(len(tree), 3)

    def test_seeded_in_given_order(self):
        tree = BinarySearchTree([10, 5, 15, 8, 6, 9])
        self.assertEqual(tree.root.item, 10)
        self.assertEqual(tree.root.left.item, 5)
        self.assertEqual(tree.root.left.right.item, 8)
        self.assertEqual(tree.root.left.right.left.item, 6)
        self.assertEqual(tree.root.left.right.right.item, 9)
        assert_parent_links(self, tree)

    def test_min_and_max(self):
        tree = BinarySearchTree([10, 5, 15, 8, 6, 9, 20, 1])
        self.assertEqual(tree.get_minimum(), 1)
        self.assertEqual(tree.get_maximum(), 20)

    def test_in_order_is_sorted(self):
        rng = random.Random(1337)
        items = [rng.randint(0, 50) for _ in range(300)]
        tree = BinarySearchTree(items)
        self.assertEqual(in_order(tree), sorted(items))
        assert_parent_links(self, tree)

    def test_explicit_comparator_wins(self):
        tree = BinarySearchTree([3, 1, 2], comparator=reverse_compare)
        self.assertEqual(tree.get_minimum(), 3)
        self.assertEqual(tree.get_maximum(), 1)
        self.assertEqual(in_order(tree), [3, 2, 1])

    def test_comparator_on_unorderable_items(self):
        items = [{"k": 3}, {"k": 1}, {"k": 2}]
        tree = BinarySearchTree(items, comparator=lambda a, b: a["k"] - b["k"])
        self.assertEqual(tree.get_minimum(), {"k": 1})
        self.assertTrue(tree.has({"k": 2}))

    def test_missing_order_raises(self):
        tree = BinarySearchTree()
        tree.insert(object())
        with self.assertRaises(InvalidOperation):
            tree.insert(object())
        with self.assertRaises(TypeError):
            tree.has(object())

    def test_non_callable_comparator_raises(self):
        with self.assertRaises(InvalidOperation):
            BinarySearchTree(comparator=5)


class TestRemove(unittest.TestCase):
    def test_remove_two_children_successor_is_right_child(self):
        tree = BinarySearchTree([10, 5, 15, 8, 6, 9])
        tree.remove(8)
        self.assertFalse(tree.has(8))
        for item in (10, 5, 15, 6, 9):
            self.assertTrue(tree.has(item), item)
        promoted = tree.root.left.right
        self.assertEqual(promoted.item, 9)
        self.assertEqual(promoted.left.item, 6)
        self.assertIs(promoted.parent, tree.root.left)
        self.assertIs(promoted.left.parent, promoted)
        assert_parent_links(self, tree)

    def test_remove_two_children_deep_successor(self):
        tree = BinarySearchTree([50, 30, 70, 60, 80, 65])
        tree.remove(50)
        root = tree.root
        self.assertEqual(root.item, 60)
        self.assertIsNone(root.parent)
        self.assertEqual(root.left.item, 30)
        self.assertEqual(root.right.item, 70)
        self.assertEqual(root.right.left.item, 65)
        self.assertEqual(in_order(tree), [30, 60, 65, 70, 80])
        assert_parent_links(self, tree)

    def test_remove_leaf_and_single_child(self):
        tree = BinarySearchTree([10, 5, 15, 20])
        tree.remove(5)
        self.assertIsNone(tree.root.left)
        tree.remove(15)
        self.assertEqual(tree.root.right.item, 20)
        self.assertIs(tree.root.right.parent, tree.root)

    def test_remove_root_down_to_empty(self):
        tree = BinarySearchTree([2, 1, 3])
        tree.remove(2)
        self.assertEqual(tree.root.item, 3)
        self.assertIsNone(tree.root.parent)
        tree.remove(3)
        self.assertEqual(tree.root.item, 1)
        tree.remove(1)
        self.assertIsNone(tree.root)
        self.assertEqual(len(tree), 0)

    def test_remove_absent_is_noop(self):
        tree = BinarySearchTree()
        tree.remove(1)
        self.assertIsNone(tree.root)
        tree.insert(1)
        tree.remove(2)
        self.assertEqual(len(tree), 1)
        self.assertTrue(tree.has(1))

    def test_remove_duplicates_one_at_a_time(self):
        tree = BinarySearchTree([5, 5, 5])
        tree.remove(5)
        self.assertTrue(tree.has(5))
        self.assertEqual(len(tree), 2)
        tree.remove(5)
        tree.remove(5)
        self.assertFalse(tree.has(5))
        self.assertIsNone(tree.root)

    def test_random_insert_remove_roundtrip(self):
        rng = random.Random(42)
        items = rng.sample(range(10_000), 500)
        tree = BinarySearchTree(items)
        removed = set(rng.sample(items, 250))
        for item in removed:
            tree.remove(item)
        for item in items:
            self.assertEqual(tree.has(item), item not in removed, item)
        self.assertEqual(in_order(tree), sorted(set(items) - removed))
        assert_parent_links(self, tree)


class TestCopy(unittest.TestCase):
    def test_copy_is_independent(self):
        tree = BinarySearchTree([10, 5, 15], comparator=reverse_compare)
        clone = tree.copy()
        self.assertEqual(in_order(clone), in_order(tree))
        self.assertEqual(len(clone), 3)
        clone.remove(10)
        clone.insert(99)
        self.assertTrue(tree.has(10))
        self.assertFalse(tree.has(99))
        assert_parent_links(self, clone)

    def test_copy_constructor_shares_comparator(self):
        tree = BinarySearchTree([1, 2, 3], comparator=reverse_compare)
        clone = BinarySearchTree(tree)
        clone.insert(4)
        self.assertEqual(clone.get_minimum(), 4)

    def test_copy_with_new_comparator_reorders(self):
        tree = BinarySearchTree([2, 1, 3])
        clone = BinarySearchTree(tree, comparator=reverse_compare)
        self.assertEqual(clone.get_minimum(), 3)
        self.assertEqual(clone.get_maximum(), 1)
        self.assertTrue(clone.has(2))
        self.assertEqual(len(clone), 3)
        self.assertEqual(in_order(clone), [3, 2, 1])
        self.assertEqual(in_order(tree), [1, 2, 3])
        assert_parent_links(self, clone)

    def test_comparator_returning_non_number(self):
        tree = BinarySearchTree([1], comparator=lambda a, b: None)
        with self.assertRaises(InvalidOperation):
            tree.insert(2)


if __name__ == "__main__":
    unittest.main(verbosity=2)
