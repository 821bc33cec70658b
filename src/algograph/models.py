from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Edge:
    """Weighted undirected edge between vertices v and w."""

    v: int
    w: int
    weight: float

    def __post_init__(self) -> None:
        if self.v < 0 or self.w < 0:
            raise ValueError(f"edge endpoints must be non-negative, got {self.v}-{self.w}")
        if not math.isfinite(self.weight):
            raise ValueError(f"edge weight must be finite, got {self.weight!r}")

    def either(self) -> int:
        return self.v

    def other(self, vertex: int) -> int:
        if vertex == self.v:
            return self.w
        if vertex == self.w:
            return self.v
        raise ValueError(f"vertex {vertex} is not an endpoint of edge {self}")

    def __str__(self) -> str:
        return f"{self.v}-{self.w} {self.weight:.5f}"


@dataclass(frozen=True)
class ValidationIssue:
    """A single diagnostic finding against an algorithm result."""

    severity: str  # "error" | "warning" | "info"
    issue_type: str
    message: str
    vertex: Optional[int] = None
    edge: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity,
            "type": self.issue_type,
            "message": self.message,
            "vertex": self.vertex,
            "edge": self.edge,
        }
