import itertools
import os
import random
import sys

import networkx as nx
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from algorithms import KruskalMST, PrimMST
from model import Node, WeightedGraph


def reference_network():
    G = WeightedGraph()
    a = G.insert_vertex(Node('A', 0.0, 0.0))
    b = G.insert_vertex(Node('B', 0.0, 4.0))
    c = G.insert_vertex(Node('C', 0.0, 12.0))
    d = G.insert_vertex(Node('D', 3.0, 8.0))
    G.insert_edge(a, b)
    G.insert_edge(b, c)
    G.insert_edge(b, d)
    G.insert_edge(c, d)
    return G


def random_connected(seed: int, n: int, extra: int) -> WeightedGraph:
    rng = random.Random(seed)
    G = WeightedGraph()
    vs = [G.insert_vertex(Node(f'N{i}', rng.uniform(0, 10), rng.uniform(0, 10))) for i in range(n)]
    for i in range(1, n):
        G.insert_edge(vs[rng.randrange(i)], vs[i])
    pairs = [(u, v) for u, v in itertools.combinations(vs, 2) if not G.are_adjacent(u, v)]
    for u, v in rng.sample(pairs, min(extra, len(pairs))):
        G.insert_edge(u, v)
    return G


def brute_force_mst_weight(G: WeightedGraph) -> float:
    vs = G.vertices()
    best = float('inf')
    for combo in itertools.combinations(G.edges(), len(vs) - 1):
        parent = {v: v for v in vs}

        def find(x):
            while parent[x] != x:
                x = parent[x]
            return x

        acyclic = True
        for e in combo:
            u, v = G.end_vertices(e)
            ru, rv = find(u), find(v)
            if ru == rv:
                acyclic = False
                break
            parent[ru] = rv
        if acyclic:
            best = min(best, sum(G.weight(e) for e in combo))
    return best


def test_kruskal_reference_network():
    G = reference_network()
    mst = KruskalMST(G)
    assert mst.weight == pytest.approx(14.0)
    assert mst.is_spanning_tree
    assert sorted(G.edge(e).name for e in mst.tree_edges) == ['AB', 'BD', 'CD']
    assert mst.mst.num_vertices == 4
    assert mst.mst.num_edges == 3
    assert mst.mst.total_weight() == pytest.approx(14.0)


def test_kruskal_tie_broken_by_insertion_order():
    G = reference_network()
    mst = KruskalMST(G)
    # BD and CD both weigh 5; BD was inserted first
    names = [G.edge(e).name for e in mst.tree_edges]
    assert names == ['AB', 'BD', 'CD']


def test_mst_output_does_not_share_links():
    G = reference_network()
    mst = KruskalMST(G)
    input_links = {id(link) for _, link in G.iter_edges()}
    assert all(id(link) not in input_links for _, link in mst.mst.iter_edges())


@pytest.mark.parametrize('seed', range(8))
def test_mst_matches_brute_force(seed):
    G = random_connected(seed, n=6, extra=4)
    expected = brute_force_mst_weight(G)
    for algo in (KruskalMST, PrimMST):
        mst = algo(G)
        assert len(mst.tree_edges) == G.num_vertices - 1
        assert mst.weight == pytest.approx(expected)


def test_mst_matches_networkx():
    G = random_connected(99, n=20, extra=30)
    H = nx.Graph()
    for e, link in G.iter_edges():
        u, v = G.end_vertices(e)
        H.add_edge(u, v, weight=link.weight)
    expected = nx.minimum_spanning_tree(H).size(weight='weight')
    assert KruskalMST(G).weight == pytest.approx(expected)
    assert PrimMST(G).weight == pytest.approx(expected)


def test_disconnected_graph_gives_forest():
    G = reference_network()
    e = G.insert_vertex(Node('E', 50.0, 50.0))
    f = G.insert_vertex(Node('F', 53.0, 54.0))
    G.insert_edge(e, f)
    for algo in (KruskalMST, PrimMST):
        mst = algo(G)
        assert not mst.is_spanning_tree
        assert len(mst.tree_edges) == 4
        assert mst.weight == pytest.approx(19.0)
