"""Tests for per-node collectors and fold-based aggregate collectors."""

import unittest

from vfstree import (
    NameCollector,
    MetadataCollector,
    FullNodeCollector,
    ChildCountCollector,
    CustomCollector,
    CountCollector,
    SumCollector,
    ExtremesCollector,
    AggregateCollector,
    all_files,
    make_file,
    make_directory,
)
from vfstree.testing import small_disk


class TestNodeCollectors(unittest.TestCase):

    def setUp(self):
        self.root = small_disk()
        self.bin = self.root.children[0]

    def test_name_collector(self):
        self.assertEqual(NameCollector().collect(self.bin, 1), "bin")

    def test_metadata_collector(self):
        self.assertEqual(
            MetadataCollector().collect(self.bin, 1),
            {'name': 'bin', 'kind': 'directory', 'child_count': 2},
        )

    def test_full_node_collector(self):
        self.assertIs(FullNodeCollector().collect(self.bin, 1), self.bin)

    def test_child_count_collector(self):
        data = ChildCountCollector().collect(self.bin, 1)
        self.assertEqual(data, {'name': 'bin', 'depth': 1, 'child_count': 2, 'is_leaf': False})

        leaf = ChildCountCollector().collect(self.bin.children[0], 2)
        self.assertEqual(leaf['child_count'], 0)
        self.assertTrue(leaf['is_leaf'])

    def test_custom_collector(self):
        collector = CustomCollector(lambda node, depth: f"{depth}:{node.name}")
        self.assertEqual(collector.collect(self.bin, 1), "1:bin")


class TestAggregateCollectors(unittest.TestCase):

    def test_count(self):
        self.assertEqual(CountCollector().aggregate(all_files(small_disk())), 5)
        self.assertEqual(CountCollector().aggregate([]), 0)

    def test_sum_skips_nodes_without_property(self):
        self.assertEqual(SumCollector('size').aggregate(all_files(small_disk())), 35)

    def test_sum_empty(self):
        self.assertEqual(SumCollector().aggregate([]), 0)

    def test_sum_other_property(self):
        nodes = all_files(small_disk())
        self.assertEqual(SumCollector('child_count').aggregate(nodes), 4)

    def test_extremes_empty(self):
        self.assertEqual(ExtremesCollector().aggregate([]), [])
        self.assertEqual(ExtremesCollector().aggregate([make_directory("tmp")]), [])

    def test_extremes_single(self):
        f = make_file("only", 7)
        self.assertEqual(ExtremesCollector().aggregate([f]), [f])

    def test_extremes_ordering(self):
        a, b, c = make_file("a", 5), make_file("b", 1), make_file("c", 9)
        result = ExtremesCollector().aggregate([a, b, c])
        self.assertIs(result[0], b)
        self.assertIs(result[1], c)

    def test_extremes_ties_keep_first(self):
        first_small = make_file("a", 3)
        first_large = make_file("b", 9)
        later_small = make_file("c", 3)
        later_large = make_file("d", 9)
        result = ExtremesCollector().aggregate([first_small, first_large, later_small, later_large])
        self.assertIs(result[0], first_small)
        self.assertIs(result[1], first_large)

    def test_extremes_all_equal_returns_first_twice(self):
        a, b = make_file("a", 4), make_file("b", 4)
        result = ExtremesCollector().aggregate([a, b])
        self.assertEqual(len(result), 2)
        self.assertIs(result[0], a)
        self.assertIs(result[1], a)

    def test_custom_aggregate(self):
        class LongestNameCollector(AggregateCollector):
            def initial(self):
                return ""

            def combine(self, acc, node):
                return node.name if len(node.name) > len(acc) else acc

        self.assertEqual(LongestNameCollector().aggregate(all_files(small_disk())), "etc-note")


if __name__ == "__main__":
    unittest.main()
