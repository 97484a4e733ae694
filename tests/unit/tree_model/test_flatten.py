"""Visible-row flattening against expansion state."""

from __future__ import annotations

import random
import unittest

from termtree.tree_model import TreeNode, attach, visible_count, visible_nodes


def _random_forest(rng: random.Random, depth: int, width: int, prefix: str = "n") -> list[TreeNode]:
    nodes: list[TreeNode] = []
    for idx in range(rng.randint(0, width)):
        children = _random_forest(rng, depth - 1, width, f"{prefix}{idx}") if depth > 0 else []
        nodes.append(TreeNode(f"{prefix}{idx}", children=children, expanded=rng.random() < 0.5))
    return nodes


def _reachable(node: TreeNode) -> int:
    count = 1
    if node.expanded:
        count += sum(_reachable(child) for child in node.children)
    return count


class FlattenTests(unittest.TestCase):
    def test_preorder_with_collapsed_subtree_skipped(self) -> None:
        roots = [
            TreeNode(
                "Root",
                expanded=True,
                children=[
                    TreeNode("A", expanded=False, children=[TreeNode("hidden")]),
                    TreeNode("B", expanded=True, children=[TreeNode("B1"), TreeNode("B2")]),
                ],
            ),
            TreeNode("Second"),
        ]
        attach(roots)
        self.assertEqual(
            [node.id for node in visible_nodes(roots)],
            ["Root", "Root/A", "Root/B", "Root/B/B1", "Root/B/B2", "Second"],
        )

    def test_collapsed_root_hides_everything_below(self) -> None:
        roots = [TreeNode("Root", children=[TreeNode("Child1"), TreeNode("Child2"), TreeNode("Child3")])]
        attach(roots)
        self.assertEqual([node.label for node in visible_nodes(roots)], ["Root"])
        roots[0].expanded = True
        self.assertEqual(len(visible_nodes(roots)), 4)

    def test_expanded_leaf_contributes_only_itself(self) -> None:
        roots = [TreeNode("leaf", expanded=True)]
        self.assertEqual(len(visible_nodes(roots)), 1)

    def test_empty_forest(self) -> None:
        self.assertEqual(visible_nodes([]), [])
        self.assertEqual(visible_count([]), 0)

    def test_count_matches_reachable_nodes_for_random_forests(self) -> None:
        rng = random.Random(1234)
        for _ in range(50):
            roots = _random_forest(rng, depth=3, width=4)
            attach(roots)
            expected = sum(_reachable(root) for root in roots)
            self.assertEqual(len(visible_nodes(roots)), expected)
            self.assertEqual(visible_count(roots), expected)

    def test_flattening_is_restartable(self) -> None:
        roots = [TreeNode("Root", expanded=True, children=[TreeNode("x"), TreeNode("y")])]
        attach(roots)
        self.assertEqual(visible_nodes(roots), visible_nodes(roots))


if __name__ == "__main__":
    unittest.main()
