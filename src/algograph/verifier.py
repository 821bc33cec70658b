from typing import Iterable, List, Optional, Union

from algograph.algorithms import BreadthFirstDirectedPaths, KosarajuSharirSCC, PrimMST
from algograph.models import ValidationIssue
from algograph.validators import BFSPathsValidator, MSTValidator, SCCValidator


class ResultVerifier:
    """Routes an algorithm result to the validator that understands it."""

    def __init__(self, epsilon: float = 1e-12):
        self.mst_validator = MSTValidator(epsilon=epsilon)
        self.scc_validator = SCCValidator()
        self.bfs_validator = BFSPathsValidator()

    def verify(
        self,
        graph,
        result,
        sources: Optional[Union[int, Iterable[int]]] = None,
    ) -> List[ValidationIssue]:
        """Run the diagnostic checks for result against the graph it was built from."""
        if isinstance(result, PrimMST):
            return self.mst_validator.validate(graph, result)
        if isinstance(result, KosarajuSharirSCC):
            return self.scc_validator.validate(graph, result)
        if isinstance(result, BreadthFirstDirectedPaths):
            if sources is None:
                raise ValueError("sources are required to verify a breadth-first path tree")
            return self.bfs_validator.validate(graph, result, sources)
        raise TypeError(f"no validator for result of type {type(result).__name__}")
