import time
from dataclasses import asdict, dataclass
from typing import Any, Dict

import numpy as np
from tqdm import tqdm

from algorithms.karger import REPETITION_LIMIT, karger_run_n, karger_run_until
from graph_io import Graph

REPETITIONS_FOR_OPT = 200
REPETITIONS_FOR_AVG = 500

RESULT_HEADER = "filename, (vertices,edges), min_cut, avg_repetitions, opt_time, avg_time"


@dataclass(frozen=True)
class AnalysisConfig:
    repetitions_for_opt: int = REPETITIONS_FOR_OPT
    repetitions_for_avg: int = REPETITIONS_FOR_AVG
    repetition_limit: int = REPETITION_LIMIT

    def __post_init__(self):
        for name, value in asdict(self).items():
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class AnalysisResult:
    source: str
    number_of_vertices: int
    number_of_edges: int
    opt: int
    avg_repetitions: float
    opt_time: float
    avg_time: float

    def to_row(self) -> Dict[str, Any]:
        return asdict(self)

    def format_line(self) -> str:
        return (f"{self.source}, ({self.number_of_vertices},{self.number_of_edges}), "
                f"{self.opt}, {self.avg_repetitions:.2f}, "
                f"opt_time: {self.opt_time:.3f}s, avg_time: {self.avg_time:.3f}s")


def analyze_graph(graph: Graph,
                  config: AnalysisConfig,
                  rng: np.random.Generator,
                  source: str = "",
                  progress: bool = False) -> AnalysisResult:
    """
    Estimates the minimum cut of `graph`, then measures how many trials it
    takes on average to reproduce it.

    Args:
        graph (Graph): Parsed input graph, shared read-only by all trials.
        config (AnalysisConfig): Sample sizes for both phases.
        rng (np.random.Generator): Source of every trial's permutation.
        source (str): Identifier printed in the result line.
        progress (bool): Show a tqdm bar over the averaging phase.

    Returns:
        AnalysisResult: Sizes, optimum, mean attempts and phase timings.
    """
    edges = graph.edges
    number_of_vertices = graph.number_of_vertices

    start_opt = time.perf_counter()
    opt = karger_run_n(edges, number_of_vertices, config.repetitions_for_opt, rng)
    opt_time = time.perf_counter() - start_opt

    start_avg = time.perf_counter()
    sum_repetitions = 0
    for _ in tqdm(range(config.repetitions_for_avg),
                  desc=f"Averaging {source}".rstrip(), disable=not progress):
        sum_repetitions += karger_run_until(edges, number_of_vertices, opt, rng,
                                            repetition_limit=config.repetition_limit)
    avg_time = time.perf_counter() - start_avg

    return AnalysisResult(
        source=source,
        number_of_vertices=number_of_vertices,
        number_of_edges=graph.number_of_edges,
        opt=opt,
        avg_repetitions=sum_repetitions / config.repetitions_for_avg,
        opt_time=opt_time,
        avg_time=avg_time,
    )
