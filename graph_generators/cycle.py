from graph_io import Edge, Graph


def generate_cycle(n: int) -> Graph:
    """Simple cycle 0-1-...-(n-1)-0. Its minimum cut is 2."""
    if n < 3:
        raise ValueError("a cycle needs n >= 3")
    return Graph(tuple(Edge(i, (i + 1) % n) for i in range(n)))
