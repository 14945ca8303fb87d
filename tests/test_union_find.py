import pytest

from algorithms.union_find import DisjointSetForest, VertexOutOfRangeError


def test_new_forest_is_all_singletons():
    uf = DisjointSetForest(4)
    assert len(uf) == 4
    assert uf.num_components == 4
    assert [uf.find(i) for i in range(4)] == [0, 1, 2, 3]


def test_union_merges_and_reports_merge():
    uf = DisjointSetForest(5)
    assert uf.union(0, 1) is True
    assert uf.union(2, 3) is True
    assert uf.union(1, 3) is True
    assert uf.num_components == 2
    assert uf.connected(0, 2)
    assert not uf.connected(0, 4)

    # already joined: nothing changes
    assert uf.union(0, 3) is False
    assert uf.num_components == 2


def test_union_by_rank_attaches_lower_rank_root():
    uf = DisjointSetForest(3)
    uf.union(0, 1)  # equal ranks: 1 goes under 0, rank[0] == 1
    assert uf.parent[1] == 0
    assert uf.rank[0] == 1

    uf.union(2, 0)  # rank 0 root goes under rank 1 root
    assert uf.parent[2] == 0
    assert uf.rank[0] == 1


def test_find_compresses_path():
    uf = DisjointSetForest(4)
    # build the chain 3 -> 2 -> 1 -> 0 by hand
    uf.parent = [0, 0, 1, 2]
    assert uf.find(3) == 0
    assert uf.parent[3] == 0
    assert uf.parent[2] == 0


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_out_of_range_index_fails_loudly(index):
    uf = DisjointSetForest(3)
    with pytest.raises(VertexOutOfRangeError):
        uf.find(index)
    with pytest.raises(IndexError):
        uf.union(0, index)
    # no partial state change
    assert uf.num_components == 3


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSetForest(-1)


def test_empty_forest():
    uf = DisjointSetForest(0)
    assert uf.num_components == 0
    with pytest.raises(VertexOutOfRangeError):
        uf.find(0)
