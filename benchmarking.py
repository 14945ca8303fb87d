import os
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from analysis import RESULT_HEADER, AnalysisConfig, analyze_graph
from graph_io import parse_graph_file

GRAPHS = [f"./grafi/g{i:02d}.graph" for i in range(1, 14)]


class BenchmarkRunner:
    """
    Runs the contraction analysis over a list of edge-list files.
    """

    def __init__(self,
                 config: Optional[AnalysisConfig] = None,
                 seed: Optional[int] = None,
                 relabel: bool = False,
                 progress: bool = False):
        """
        Args:
            config (Optional[AnalysisConfig]):
                Sample sizes for the optimum and averaging phases.
                Defaults to 200 / 500 runs with a 1000 attempt limit.

            seed (Optional[int]):
                Base seed for reproducibility. Each file gets its own
                generator spawned from it. If None, randomness is uncontrolled.

            relabel (bool):
                Compact vertex ids to 0..n before analysis.

            progress (bool):
                Show a tqdm bar during the averaging phase.
        """
        self.config = config if config is not None else AnalysisConfig()
        self.base_seed = seed
        self.relabel = relabel
        self.progress = progress

    def run(self, filenames: Sequence[str]) -> pd.DataFrame:
        """
        Prints the header, then one result line per existing file and a
        notice for every missing one.

        Parse errors and out-of-range vertex ids are not caught here; they
        abort the whole run.

        Returns:
            pd.DataFrame: One row per analyzed file.
        """
        print(RESULT_HEADER)

        # spawned per identifier so a file's result does not depend on its neighbours
        seeds = np.random.SeedSequence(self.base_seed).spawn(len(filenames))
        rows: List[dict] = []

        for filename, seed_seq in zip(filenames, seeds):
            if not os.path.exists(filename):
                print(f"File not found: {filename}")
                continue

            graph = parse_graph_file(filename)
            if self.relabel:
                graph = graph.relabeled()

            result = analyze_graph(graph, self.config, np.random.default_rng(seed_seq),
                                   source=filename, progress=self.progress)
            print(result.format_line())
            rows.append(result.to_row())

        return pd.DataFrame(rows, columns=[
            'source', 'number_of_vertices', 'number_of_edges', 'opt',
            'avg_repetitions', 'opt_time', 'avg_time'])
