"""Tests for the DisjointSet (union-find) structure."""

from mstlab.graphs import DisjointSet, Node


def _nodes(*ids):
    return [Node(i, i.upper()) for i in ids]


class TestDisjointSet:
    """Tests for DisjointSet."""

    def test_singletons(self):
        """Test that every node starts in its own set."""
        ds = DisjointSet(_nodes("a", "b", "c"))

        assert len(ds) == 3
        assert ds.find("a") == "a"
        assert not ds.connected("a", "b")

    def test_union_merges(self):
        """Test that union joins sets and reports whether it did."""
        ds = DisjointSet(_nodes("a", "b", "c"))

        assert ds.union("a", "b") is True
        assert ds.connected("a", "b")
        assert ds.union("b", "a") is False
        assert not ds.connected("a", "c")

    def test_union_is_transitive(self):
        """Test chains of unions."""
        ds = DisjointSet(_nodes("a", "b", "c", "d"))
        ds.union("a", "b")
        ds.union("c", "d")
        assert not ds.connected("a", "d")

        ds.union("b", "c")
        assert ds.connected("a", "d")
        assert ds.union("a", "d") is False

    def test_path_compression(self):
        """Test that find points elements directly at the root."""
        ds = DisjointSet.from_ids(range(6))
        for i in range(5):
            ds.union(i, i + 1)

        root = ds.find(5)
        for i in range(6):
            ds.find(i)
            assert ds.parent[i] == root

    def test_union_by_rank(self):
        """Test that the shallower tree is attached under the deeper one."""
        ds = DisjointSet(_nodes("a", "b", "c"))
        ds.union("a", "b")  # rank 1 tree rooted at a
        ds.union("c", "a")

        assert ds.find("c") == "a"
        assert ds.rank["a"] == 1

    def test_components(self):
        """Test grouping by representative."""
        ds = DisjointSet(_nodes("a", "b", "c", "d"))
        ds.union("a", "c")

        groups = sorted(sorted(members) for members in ds.components().values())
        assert groups == [["a", "c"], ["b"], ["d"]]
