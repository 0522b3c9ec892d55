"""Guide tree built by average-linkage clustering of a distance matrix."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

_UNREACHABLE = 1e9


@dataclass
class TreeNode:
    """A leaf (sequence index) or an internal node joining two subtrees."""

    id: int
    size: int = 1
    left: TreeNode | None = None
    right: TreeNode | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_guide_tree(
    distances: Sequence[Sequence[float]],
) -> tuple[TreeNode, dict[int, float]]:
    """Cluster the rows of ``distances`` and return ``(root, merge_distances)``.

    Internal nodes are numbered from ``len(distances)`` upward; the mapping
    gives the distance at which each internal node was formed.
    """
    count = len(distances)
    if count == 0:
        raise ValueError("distance matrix is empty")

    nodes = [TreeNode(i) for i in range(count)]
    ids = list(range(count))
    dist = [list(row) for row in distances]
    merge_distances: dict[int, float] = {}
    next_id = count

    while len(nodes) > 1:
        best = _UNREACHABLE
        pair: tuple[int, int] | None = None
        for i in range(len(nodes)):
            for j in range(i + 1, len(nodes)):
                value = dist[ids[i]][ids[j]]
                if value < best:
                    best = value
                    pair = (i, j)
        if pair is None:
            raise ValueError("no pair of clusters is closer than the cut-off")
        a, b = pair

        node_a, node_b = nodes[a], nodes[b]
        merged = TreeNode(next_id, node_a.size + node_b.size, node_a, node_b)
        merge_distances[next_id] = best

        new_row = [0.0] * (len(dist) + 1)
        for k, row_id in enumerate(ids):
            if k in (a, b):
                continue
            wa = dist[ids[a]][row_id]
            wb = dist[ids[b]][row_id]
            new_row[row_id] = (wa * node_a.size + wb * node_b.size) / merged.size

        for index in (b, a):
            del nodes[index]
            del ids[index]
        nodes.append(merged)
        ids.append(len(dist))
        for row in dist:
            row.append(0.0)
        dist.append(new_row)
        next_id += 1

    return nodes[0], merge_distances


def format_ascii_tree(
    node: TreeNode | None,
    names: Sequence[str],
    node_distances: Mapping[int, float] | None = None,
) -> str:
    """Render the tree as indented text, one node per line."""
    distances = node_distances or {}
    lines: list[str] = []

    def walk(current: TreeNode | None, prefix: str, is_left: bool) -> None:
        if current is None:
            return
        branch = "|--" if is_left else "`--"
        if current.is_leaf() and current.id < len(names):
            label = names[current.id]
        else:
            label = f"Node_{current.id}"
            if current.id in distances:
                label += f" [dist = {distances[current.id]:g}]"
        lines.append(prefix + branch + label)
        if not current.is_leaf():
            child_prefix = prefix + ("|   " if is_left else "    ")
            walk(current.left, child_prefix, True)
            walk(current.right, child_prefix, False)

    walk(node, "", True)
    return "".join(line + "\n" for line in lines)