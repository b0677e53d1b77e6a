"""Block-cut tree of an analyzed graph.

The tree is bipartite: one node per block found by the analysis and one
per cut vertex, with a cut vertex joined to every block it belongs to.
Isolated nodes belong to no block and do not appear. A graph with several
connected components yields a forest.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ._types import AnalysisResult


@dataclass
class Block:
    """
    One block of the tree, copied from an analysis Component.

    ``index`` is the Component.index it was built from, so
    ``result.components[block.index]`` is the same block. ``vertices`` is
    kept as a set for membership tests.
    """

    index: int
    vertices: set[int]
    edges: list[tuple[int, int]]


@dataclass
class BlockCutTree:
    """
    Blocks and cut vertices with their incidence.

    Attributes:
        blocks: One Block per analysis component, in component order
        cut_vertices: Articulation points of the analyzed graph
        vertex_to_blocks: Node id -> indices of the blocks it lies in
        block_adj: Block index -> indices of blocks sharing a cut vertex
    """

    blocks: list[Block]
    cut_vertices: set[int]
    vertex_to_blocks: dict[int, list[int]]
    block_adj: dict[int, set[int]] = field(default_factory=dict)

    def tree_edges(self) -> list[tuple[int, int]]:
        """Edges of the bipartite block-cut tree as (cut vertex, block index)."""
        return [
            (v, b) for v in sorted(self.cut_vertices) for b in self.vertex_to_blocks[v]
        ]


def build_block_cut_tree(result: AnalysisResult) -> BlockCutTree:
    """Build the block-cut tree from an analysis result.

    Cut vertices are the articulation points of the result; by definition
    they are exactly the vertices that belong to more than one block.

    Args:
        result: Output of analyze() or analyze_with_trace().

    Returns:
        BlockCutTree with blocks, cut vertices, and adjacency info.
    """
    blocks: list[Block] = []
    vertex_to_blocks: dict[int, list[int]] = {}

    for comp in result.components:
        block = Block(index=comp.index, vertices=set(comp.vertices), edges=list(comp.edges))
        blocks.append(block)
        for v in comp.vertices:
            vertex_to_blocks.setdefault(v, []).append(comp.index)

    cut_vertices = set(result.articulation_points)

    # Build block adjacency via shared cut vertices
    block_adj: dict[int, set[int]] = {b.index: set() for b in blocks}
    for v in cut_vertices:
        bi = vertex_to_blocks.get(v, [])
        for a in bi:
            for b in bi:
                if a != b:
                    block_adj[a].add(b)

    return BlockCutTree(
        blocks=blocks,
        cut_vertices=cut_vertices,
        vertex_to_blocks=vertex_to_blocks,
        block_adj=block_adj,
    )


__all__ = [
    "Block",
    "BlockCutTree",
    "build_block_cut_tree",
]
