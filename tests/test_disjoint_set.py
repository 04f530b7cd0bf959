"""Tests for disjoint_set module."""

import pytest

from site_percolation.percolation.disjoint_set import DisjointSet


class TestDisjointSet:
    """Tests for DisjointSet."""

    def test_starts_as_singletons(self):
        ds = DisjointSet(5)

        assert len(ds) == 5
        assert ds.count == 5
        assert all(ds.find(i) == i for i in range(5))
        assert not ds.connected(0, 1)

    def test_union_connects(self):
        ds = DisjointSet(6)
        ds.union(0, 1)
        ds.union(2, 3)
        ds.union(1, 3)

        assert ds.connected(0, 2)
        assert ds.connected(3, 0)
        assert not ds.connected(0, 4)
        assert ds.count == 3

    def test_union_is_noop_when_already_connected(self):
        ds = DisjointSet(3)
        ds.union(0, 1)
        ds.union(1, 0)
        ds.union(0, 0)

        assert ds.count == 2

    def test_find_returns_plain_int(self):
        ds = DisjointSet(3)
        ds.union(0, 2)

        assert type(ds.find(0)) is int

    def test_long_chain_compresses(self):
        n = 2000
        ds = DisjointSet(n)
        for i in range(n - 1):
            ds.union(i, i + 1)

        assert ds.count == 1
        assert ds.connected(0, n - 1)
        root = ds.find(n - 1)
        assert all(ds.find(i) == root for i in range(0, n, 97))

    @pytest.mark.parametrize("index", [-1, 4, 100])
    def test_out_of_range_raises(self, index):
        ds = DisjointSet(4)

        with pytest.raises(IndexError):
            ds.find(index)
        with pytest.raises(IndexError):
            ds.union(0, index)
        with pytest.raises(IndexError):
            ds.connected(index, 0)

    def test_negative_size_raises(self):
        with pytest.raises(ValueError):
            DisjointSet(-1)
