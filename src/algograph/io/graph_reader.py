from __future__ import annotations

from pathlib import Path
from typing import Iterator

from algograph.exceptions import GraphFormatError, InvalidVertexError
from algograph.models import Edge
from algograph.topology.graph import Digraph, EdgeWeightedGraph


class _Tokens:
    """Whitespace token stream over a graph description."""

    def __init__(self, text: str, source: str):
        self._it: Iterator[str] = iter(text.split())
        self.source = source

    def _next(self, what: str) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise GraphFormatError(f"{self.source}: unexpected end of input while reading {what}") from None

    def next_int(self, what: str) -> int:
        tok = self._next(what)
        try:
            return int(tok)
        except ValueError as e:
            raise GraphFormatError(f"{self.source}: invalid integer for {what}: {tok!r}") from e

    def next_float(self, what: str) -> float:
        tok = self._next(what)
        try:
            return float(tok)
        except ValueError as e:
            raise GraphFormatError(f"{self.source}: invalid number for {what}: {tok!r}") from e


def _read_header(tokens: _Tokens):
    V = tokens.next_int("number of vertices")
    if V < 0:
        raise GraphFormatError(f"{tokens.source}: number of vertices must be non-negative, got {V}")
    E = tokens.next_int("number of edges")
    if E < 0:
        raise GraphFormatError(f"{tokens.source}: number of edges must be non-negative, got {E}")
    return V, E


def parse_edge_weighted_graph(text: str, source: str = "<string>") -> EdgeWeightedGraph:
    """
    Edge-weighted graph text format:

        8          <- V
        16         <- E
        4 5 0.35   <- E lines of "v w weight"
        ...
    """
    tokens = _Tokens(text, source)
    V, E = _read_header(tokens)
    g = EdgeWeightedGraph(V)
    for i in range(E):
        v = tokens.next_int(f"edge {i} endpoint")
        w = tokens.next_int(f"edge {i} endpoint")
        weight = tokens.next_float(f"edge {i} weight")
        try:
            g.add_edge(Edge(v, w, weight))
        except (InvalidVertexError, ValueError) as e:
            raise GraphFormatError(f"{source}: edge {i}: {e}") from e
    return g


def parse_digraph(text: str, source: str = "<string>") -> Digraph:
    """Digraph text format: V, E, then E lines of "v w" (edge v->w)."""
    tokens = _Tokens(text, source)
    V, E = _read_header(tokens)
    g = Digraph(V)
    for i in range(E):
        v = tokens.next_int(f"edge {i} tail")
        w = tokens.next_int(f"edge {i} head")
        try:
            g.add_edge(v, w)
        except InvalidVertexError as e:
            raise GraphFormatError(f"{source}: edge {i}: {e}") from e
    return g


def _read_text(path: str) -> str:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Graph file not found: {p}")
    return p.read_text(encoding="utf-8")


def read_edge_weighted_graph(path: str) -> EdgeWeightedGraph:
    return parse_edge_weighted_graph(_read_text(path), source=str(path))


def read_digraph(path: str) -> Digraph:
    return parse_digraph(_read_text(path), source=str(path))

