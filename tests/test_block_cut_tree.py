"""Tests for the block-cut tree built from an analysis result."""

from __future__ import annotations

from graph_blocks import Graph, analyze, build_block_cut_tree


def _make_graph(n: int, edges: list[tuple[int, int]]) -> Graph:
    g = Graph()
    for _ in range(n):
        g.add_node()
    for a, b in edges:
        g.add_edge(a, b)
    return g


class TestBlockCutTree:
    def test_two_triangles_sharing_vertex(self) -> None:
        g = _make_graph(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)])
        tree = build_block_cut_tree(analyze(g))
        assert len(tree.blocks) == 2
        assert tree.cut_vertices == {2}
        assert sorted(tree.vertex_to_blocks[2]) == [0, 1]
        assert tree.block_adj == {0: {1}, 1: {0}}
        assert tree.tree_edges() == [(2, 0), (2, 1)]

    def test_cut_vertices_are_shared_vertices(self) -> None:
        g = _make_graph(6, [(0, 1), (1, 2), (2, 3), (3, 1), (3, 4), (4, 5)])
        result = analyze(g)
        tree = build_block_cut_tree(result)
        shared = {v for v, blocks in tree.vertex_to_blocks.items() if len(blocks) > 1}
        assert tree.cut_vertices == shared == result.articulation_points

    def test_path_blocks_form_chain(self) -> None:
        g = _make_graph(4, [(0, 1), (1, 2), (2, 3)])
        tree = build_block_cut_tree(analyze(g))
        assert len(tree.blocks) == 3
        degrees = sorted(len(adj) for adj in tree.block_adj.values())
        assert degrees == [1, 1, 2]

    def test_biconnected_graph_single_block(self) -> None:
        g = _make_graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
        tree = build_block_cut_tree(analyze(g))
        assert len(tree.blocks) == 1
        assert tree.cut_vertices == set()
        assert tree.block_adj == {0: set()}
        assert tree.blocks[0].vertices == {0, 1, 2, 3}

    def test_empty(self) -> None:
        tree = build_block_cut_tree(analyze(Graph()))
        assert tree.blocks == []
        assert tree.tree_edges() == []

    def test_block_index_matches_component(self) -> None:
        g = _make_graph(6, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)])
        result = analyze(g)
        bct = build_block_cut_tree(result)
        assert len(bct.blocks) == len(result.components) == 3
        for block in bct.blocks:
            comp = result.components[block.index]
            assert block.vertices == set(comp.vertices)
            assert block.edges == comp.edges
