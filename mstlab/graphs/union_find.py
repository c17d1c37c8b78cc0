"""
Disjoint-set (union-find) structure.

Used by Kruskal's engine for cycle detection. The engine builds a fresh
instance on every step and replays the accepted edges into it, so the
structure never has to live inside an engine state.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

from typing import Dict, Hashable, Iterable, List

from .core import Node


class DisjointSet:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by rank.

    Elements are node ids. There is no removal operation.
    """

    def __init__(self, nodes: Iterable[Node]):
        """
        Initialize one singleton set per node.

        Args:
            nodes: Iterable of nodes; their ids become the elements.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}

        for node in nodes:
            self.parent[node.id] = node.id
            self.rank[node.id] = 0

    @classmethod
    def from_ids(cls, ids: Iterable[Hashable]) -> "DisjointSet":
        """Build a disjoint set directly from element ids."""
        ds = cls(())
        for x in ids:
            ds.parent[x] = x
            ds.rank[x] = 0
        return ds

    def find(self, x: Hashable) -> Hashable:
        """
        Find the representative of x with path compression.

        Args:
            x: Element to look up.

        Returns:
            Root element of x's set.
        """
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Union sets containing x and y using union by rank.

        Args:
            x: First element.
            y: Second element.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        """Return True if x and y share a representative."""
        return self.find(x) == self.find(y)

    def components(self) -> Dict[Hashable, List[Hashable]]:
        """
        Group elements by representative.

        Returns:
            Mapping root -> members, members in insertion order.
        """
        groups: Dict[Hashable, List[Hashable]] = {}
        for x in list(self.parent):
            groups.setdefault(self.find(x), []).append(x)
        return groups

    def __len__(self) -> int:
        return len(self.parent)
