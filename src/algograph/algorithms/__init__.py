from .bfs_paths import INFINITY, BreadthFirstDirectedPaths
from .depth_first_order import DepthFirstOrder
from .index_pq import IndexMinPQ
from .kosaraju_scc import KosarajuSharirSCC
from .prim_mst import PrimMST

__all__ = [
    "INFINITY",
    "BreadthFirstDirectedPaths",
    "DepthFirstOrder",
    "IndexMinPQ",
    "KosarajuSharirSCC",
    "PrimMST",
]
