import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, NamedTuple, Optional, Tuple, Union

import numpy as np

_VERTEX_TOKEN = re.compile(r"\+?[0-9]+")


class GraphParseError(ValueError):
    """A line of an edge-list file is not exactly two non-negative integers."""

    def __init__(self, message: str, line: str, line_number: Optional[int] = None):
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{message}: {line!r}")
        self.line = line
        self.line_number = line_number


class Edge(NamedTuple):
    v1: int
    v2: int


@dataclass(frozen=True)
class Graph:
    """
    Undirected multigraph given only by its edge list.
    Vertices exist only through the edges that touch them.
    """
    edges: Tuple[Edge, ...]

    @property
    def number_of_edges(self) -> int:
        return len(self.edges)

    @property
    def number_of_vertices(self) -> int:
        return len(self.vertices())

    def vertices(self) -> set:
        v = set()
        for edge in self.edges:
            v.add(edge.v1)
            v.add(edge.v2)
        return v

    def relabeled(self) -> "Graph":
        """
        Maps vertex ids onto 0..n in sorted order, keeping edge order.
        Needed for files with 1-based or sparse ids.
        """
        mapping = {v: i for i, v in enumerate(sorted(self.vertices()))}
        return Graph(tuple(Edge(mapping[e.v1], mapping[e.v2]) for e in self.edges))

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int]]) -> "Graph":
        return cls(tuple(Edge(int(v1), int(v2)) for v1, v2 in edges))

    @classmethod
    def from_adjacency(cls, matrix: np.ndarray) -> "Graph":
        """
        Builds the edge list of a symmetric (n, n) adjacency matrix.
        Entries above the diagonal give edge multiplicities.
        """
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError("adjacency matrix must be square")
        if not np.array_equal(matrix, matrix.T):
            raise ValueError("adjacency matrix must be symmetric (undirected)")

        rows, cols = np.where(np.triu(matrix, k=1) > 0)
        edges = []
        for u, v in zip(rows.tolist(), cols.tolist()):
            edges.extend([Edge(u, v)] * int(matrix[u, v]))
        return cls(tuple(edges))


def parse_edge_line(line: str, line_number: Optional[int] = None) -> Edge:
    parts = line.split()
    if len(parts) < 1:
        raise GraphParseError("missing first vertex", line, line_number)
    if len(parts) < 2:
        raise GraphParseError("missing second vertex", line, line_number)
    if len(parts) > 2:
        raise GraphParseError("too many parts in edge definition", line, line_number)

    for name, token in zip(("first", "second"), parts):
        if not _VERTEX_TOKEN.fullmatch(token):
            raise GraphParseError(
                f"failed to parse {name} vertex {token!r} as a non-negative integer",
                line, line_number)

    return Edge(int(parts[0]), int(parts[1]))


def parse_graph(text: str) -> Graph:
    # only \n (or \r\n) ends a line; a final newline does not add an empty edge line
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    return Graph(tuple(parse_edge_line(line, i)
                       for i, line in enumerate(lines, start=1)))


def parse_graph_file(path: Union[str, Path]) -> Graph:
    # read_bytes: no universal-newline translation of lone \r
    return parse_graph(Path(path).read_bytes().decode("utf-8"))


def write_graph_file(graph: Graph, path: Union[str, Path]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{e.v1} {e.v2}\n" for e in graph.edges), encoding="utf-8")
