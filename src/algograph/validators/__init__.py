from .bfs_validator import BFSPathsValidator
from .mst_validator import MSTValidator
from .scc_validator import SCCValidator, transitive_closure

__all__ = [
    "BFSPathsValidator",
    "MSTValidator",
    "SCCValidator",
    "transitive_closure",
]
