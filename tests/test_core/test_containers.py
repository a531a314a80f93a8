"""
Tests for Page and CompoundShape containers.

Covers set-like membership, the containment rule and
parent back-reference bookkeeping.
"""

import gc
import unittest

from scenegraph.core import (
    Point, Circle, Rectangle, CompoundShape, Page, InvalidChildError
)


class TestMembership(unittest.TestCase):
    """Test duplicate-free, ordered membership."""

    def test_fresh_containers_are_empty(self):
        self.assertEqual(Page().get_children(), ())
        self.assertEqual(CompoundShape().get_children(), ())
        self.assertFalse(Page().is_leaf)

    def test_nodes_are_added(self):
        page = Page()
        compound = CompoundShape()

        compound.add(Rectangle(Point(40, 50), 10, 50))
        compound.add(Circle(Point(80, 20), 20))
        page.add(compound)
        page.add(Rectangle(Point(10, 10), 20, 40))

        self.assertEqual(len(page.get_children()), 2)
        self.assertEqual(len(compound.get_children()), 2)

    def test_duplicate_add_is_noop(self):
        for container in (Page(), CompoundShape()):
            with self.subTest(container=container):
                rect = Rectangle(Point(0, 0), 1, 1)
                container.add(rect)
                container.add(rect)
                self.assertEqual(container.get_children(), (rect,))

    def test_children_keep_insertion_order(self):
        page = Page()
        shapes = [Rectangle(Point(i, i), 1, 1) for i in range(5)]
        for shape in shapes:
            page.add(shape)
        page.add(shapes[0])
        self.assertEqual(page.get_children(), tuple(shapes))

    def test_remove(self):
        page = Page()
        rect = Rectangle(Point(0, 0), 1, 1)
        circle = Circle(Point(0, 0), 1)
        page.add(rect)
        page.add(circle)

        page.remove(rect)

        self.assertEqual(page.get_children(), (circle,))
        self.assertFalse(page.contains(rect))
        self.assertTrue(page.contains(circle))

    def test_remove_absent_is_noop(self):
        compound = CompoundShape()
        rect = Rectangle(Point(0, 0), 1, 1)
        compound.add(rect)
        compound.remove(Circle(Point(0, 0), 1))
        self.assertEqual(compound.get_children(), (rect,))

    def test_children_snapshot_is_detached(self):
        page = Page()
        children = page.get_children()
        page.add(Rectangle(Point(0, 0), 1, 1))
        self.assertEqual(children, ())


class TestContainmentRule(unittest.TestCase):
    """CompoundShape refuses pages, Page accepts anything."""

    def test_compound_rejects_page(self):
        compound = CompoundShape()
        page = Page()
        with self.assertRaises(InvalidChildError) as ctx:
            compound.add(page)
        self.assertIn("CompoundShape", str(ctx.exception))
        self.assertIn("Page", str(ctx.exception))
        self.assertEqual(compound.get_children(), ())
        self.assertIsNone(page.get_parent())

    def test_invalid_child_is_value_error(self):
        with self.assertRaises(ValueError):
            CompoundShape().add(Page())

    def test_compound_accepts_other_kinds(self):
        compound = CompoundShape()
        for child in (CompoundShape(), Circle(Point(0, 0), 1),
                      Rectangle(Point(0, 0), 1, 1)):
            compound.add(child)
        self.assertEqual(len(compound.get_children()), 3)

    def test_page_accepts_every_kind(self):
        page = Page()
        for child in (Page(), CompoundShape(), Circle(Point(0, 0), 1),
                      Rectangle(Point(0, 0), 1, 1)):
            page.add(child)
        self.assertEqual(len(page.get_children()), 4)


class TestParentReference(unittest.TestCase):
    """Test the weak back-reference from child to container."""

    def test_add_sets_parent(self):
        page = Page()
        rect = Rectangle(Point(0, 0), 1, 1)
        self.assertIsNone(rect.get_parent())
        page.add(rect)
        self.assertIs(rect.get_parent(), page)

    def test_remove_clears_parent(self):
        compound = CompoundShape()
        rect = Rectangle(Point(0, 0), 1, 1)
        compound.add(rect)
        compound.remove(rect)
        self.assertIsNone(rect.get_parent())

    def test_add_to_second_container_overwrites_parent(self):
        first, second = Page(), CompoundShape()
        rect = Rectangle(Point(0, 0), 1, 1)
        first.add(rect)
        second.add(rect)

        self.assertIs(rect.get_parent(), second)
        # Membership is shared, not moved
        self.assertTrue(first.contains(rect))

        # Removing from the old container leaves the newer parent alone
        first.remove(rect)
        self.assertIs(rect.get_parent(), second)

    def test_readding_restores_parent(self):
        first, second = Page(), Page()
        rect = Rectangle(Point(0, 0), 1, 1)
        first.add(rect)
        second.add(rect)
        first.add(rect)
        self.assertIs(rect.get_parent(), first)

    def test_set_parent_directly(self):
        page = Page()
        circle = Circle(Point(0, 0), 1)
        circle.set_parent(page)
        self.assertIs(circle.get_parent(), page)
        circle.set_parent(None)
        self.assertIsNone(circle.get_parent())

    def test_parent_is_not_owned(self):
        page = Page()
        rect = Rectangle(Point(0, 0), 1, 1)
        page.add(rect)
        del page
        gc.collect()
        self.assertIsNone(rect.get_parent())


if __name__ == '__main__':
    unittest.main()
