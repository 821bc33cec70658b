import logging
from typing import List

import typer
from rich.console import Console

from algograph.algorithms import BreadthFirstDirectedPaths, KosarajuSharirSCC, PrimMST
from algograph.exceptions import AlgographError
from algograph.io import read_digraph, read_edge_weighted_graph
from algograph.reports import print_check_summary
from algograph.verifier import ResultVerifier

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console(stderr=True)


def _setup_logging(verbose: bool, quiet: bool) -> None:
    """Configure logging for CLI output."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)


def _load(reader, path: str):
    try:
        return reader(path)
    except FileNotFoundError as e:
        raise typer.BadParameter(str(e))
    except AlgographError as e:
        raise typer.BadParameter(f"Could not read graph: {e}")


def _finish_check(issues, check_name: str) -> None:
    print_check_summary(issues, check_name=check_name, console=console)
    if issues:
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output from the algorithms."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show errors."),
):
    """Classic graph algorithms over algs4-style graph text files."""
    if verbose and quiet:
        raise typer.BadParameter("--verbose and --quiet are mutually exclusive")
    _setup_logging(verbose, quiet)


@app.command("mst")
def mst(
    graph_file: str = typer.Argument(..., help="Edge-weighted graph file (V, E, then 'v w weight' lines)."),
    check: bool = typer.Option(False, "--check", help="Verify acyclicity, spanning and cut optimality."),
):
    """
    Minimum spanning forest by Prim's algorithm.

    Prints each forest edge, then the total weight to 5 decimal places.
    """
    graph = _load(read_edge_weighted_graph, graph_file)
    forest = PrimMST(graph)
    for e in forest.edges():
        typer.echo(str(e))
    typer.echo(f"{forest.weight():.5f}")

    if check:
        _finish_check(ResultVerifier().verify(graph, forest), "MST")


@app.command("scc")
def scc(
    digraph_file: str = typer.Argument(..., help="Digraph file (V, E, then 'v w' lines)."),
    check: bool = typer.Option(False, "--check", help="Verify components against the transitive closure."),
):
    """
    Strongly connected components by the Kosaraju-Sharir algorithm.

    Prints the component count, then the members of each component on one line.
    """
    digraph = _load(read_digraph, digraph_file)
    components = KosarajuSharirSCC(digraph)
    typer.echo(f"{components.count()} components")
    for members in components.components():
        typer.echo(" ".join(str(v) for v in members))

    if check:
        _finish_check(ResultVerifier().verify(digraph, components), "SCC")


@app.command("bfs")
def bfs(
    digraph_file: str = typer.Argument(..., help="Digraph file (V, E, then 'v w' lines)."),
    source: List[int] = typer.Option(..., "--source", "-s", help="Source vertex; repeat for multi-source search."),
    check: bool = typer.Option(False, "--check", help="Verify the shortest-path tree conditions."),
):
    """
    Breadth-first shortest paths from one or more source vertices.

    Prints, for every vertex, its path from the nearest source and the edge
    count, or 'not connected'.
    """
    digraph = _load(read_digraph, digraph_file)
    try:
        paths = BreadthFirstDirectedPaths(digraph, source)
    except (AlgographError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--source")

    first = source[0]
    for v in range(digraph.V):
        if paths.has_path_to(v):
            path = paths.path_to(v)
            typer.echo(f"{path[0]} to {v} ({paths.dist_to(v)}):  " + "->".join(str(x) for x in path))
        else:
            typer.echo(f"{first} to {v} (-):  not connected")

    if check:
        _finish_check(ResultVerifier().verify(digraph, paths, source), "BFS")


if __name__ == "__main__":
    app()
