import numpy as np

from graph_io import Graph


def generate_er(n: int, p: float, rng: np.random.Generator) -> Graph:
    """
    Generates an Erdős-Rényi (G(n, p)) random graph.

    Returns:
        Graph: Edge list of the sampled graph. Isolated vertices are dropped and the rest relabeled 0..n.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError("p must be in [0, 1]")

    matrix = np.zeros((n, n), dtype=int)

    # indices for the upper triangle (k=1 excludes the diagonal)
    rows, cols = np.triu_indices(n, k=1)

    edges = rng.random(rows.size) < p
    matrix[rows[edges], cols[edges]] = 1

    # mirror the matrix to make it symmetric (undirected)
    matrix[cols[edges], rows[edges]] = 1

    # isolated vertices are dropped, so ids are compacted to 0..n
    return Graph.from_adjacency(matrix).relabeled()
