from typing import Sequence, Tuple

import numpy as np

from algorithms.union_find import DisjointSetForest

REPETITION_LIMIT = 1000


def contraction_trial(edges: Sequence[Tuple[int, int]],
                      number_of_vertices: int,
                      rng: np.random.Generator) -> int:
    """
    One run of Karger's contraction. Returns the number of edges crossing
    between the two super-vertices that remain.

    All randomness comes from a single permutation of the edge order drawn
    from `rng`; the rest is deterministic.
    """
    order = rng.permutation(len(edges)).tolist()

    uf = DisjointSetForest(number_of_vertices)
    merges = 0
    # n <= 2 gives a target <= 0, so nothing is contracted
    target = number_of_vertices - 2

    for i in order:
        if merges >= target:
            break

        v1, v2 = edges[i]
        if uf.find(v1) != uf.find(v2):
            uf.union(v1, v2)
            merges += 1

    cut_edges = 0
    for i in order:
        v1, v2 = edges[i]
        if uf.find(v1) != uf.find(v2):
            cut_edges += 1

    return cut_edges


def karger_run_n(edges: Sequence[Tuple[int, int]],
                 number_of_vertices: int,
                 number_of_repeats: int,
                 rng: np.random.Generator) -> int:
    """
    Minimum cut seen over `number_of_repeats` independent trials.
    This is an upper bound on the true minimum cut, not a proof of it.
    """
    if number_of_repeats < 1:
        raise ValueError(
            f"number_of_repeats must be >= 1, got {number_of_repeats}")

    min_cut_edges = None
    for _ in range(number_of_repeats):
        cut_edges = contraction_trial(edges, number_of_vertices, rng)
        if min_cut_edges is None or cut_edges < min_cut_edges:
            min_cut_edges = cut_edges

    return min_cut_edges


def karger_run_until(edges: Sequence[Tuple[int, int]],
                     number_of_vertices: int,
                     opt: int,
                     rng: np.random.Generator,
                     repetition_limit: int = REPETITION_LIMIT) -> int:
    """
    Runs trials until one returns `opt` and reports how many it took.
    Gives up silently at `repetition_limit`, so a result equal to the limit
    may mean the target was never reached.
    """
    if repetition_limit < 1:
        raise ValueError(
            f"repetition_limit must be >= 1, got {repetition_limit}")

    repetitions = 0
    while repetitions < repetition_limit:
        cut_edges = contraction_trial(edges, number_of_vertices, rng)
        repetitions += 1
        if cut_edges == opt:
            break

    return repetitions
