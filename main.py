import argparse
import sys

import numpy as np

from algorithms.karger import REPETITION_LIMIT
from algorithms.union_find import VertexOutOfRangeError
from analysis import REPETITIONS_FOR_AVG, REPETITIONS_FOR_OPT, AnalysisConfig
from benchmarking import GRAPHS, BenchmarkRunner
from graph_generators.barabasi_albert import generate_ba
from graph_generators.cycle import generate_cycle
from graph_generators.erdos_renyi import generate_er
from graph_io import GraphParseError, write_graph_file


def analyze(args) -> int:
    try:
        config = AnalysisConfig(
            repetitions_for_opt=args.repetitions_for_opt,
            repetitions_for_avg=args.repetitions_for_avg,
            repetition_limit=args.repetition_limit,
        )
    except ValueError as exc:
        args.parser.error(str(exc))

    runner = BenchmarkRunner(config, seed=args.seed,
                             relabel=args.relabel, progress=args.progress)
    try:
        results_df = runner.run(args.files or GRAPHS)
    except (GraphParseError, VertexOutOfRangeError, OSError, UnicodeDecodeError) as exc:
        # unreadable or malformed input is fatal for the whole run, no partial results
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.csv:
        results_df.to_csv(args.csv, index=False)
        print(f"\nResults saved to {args.csv}")
    return 0


def generate(args) -> int:
    rng = np.random.default_rng(args.seed)
    try:
        if args.model == 'cycle':
            graph = generate_cycle(args.n)
        elif args.model == 'er':
            graph = generate_er(args.n, args.p, rng)
        else:
            graph = generate_ba(args.n, args.m, rng)
    except ValueError as exc:
        args.parser.error(str(exc))

    write_graph_file(graph, args.out)
    print(f"Wrote {args.out}: {graph.number_of_vertices} vertices, "
          f"{graph.number_of_edges} edges")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Karger min cut: estimate the optimum and the repetitions needed to hit it")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_analyze = subparsers.add_parser("analyze", help="Analyze edge-list files")
    p_analyze.add_argument("files", nargs="*",
                           help="Edge-list files (default: ./grafi/g01.graph .. g13.graph)")
    p_analyze.add_argument("--seed", type=int, default=None,
                           help="Base random seed. If omitted, runs are not reproducible")
    p_analyze.add_argument("--repetitions-for-opt", type=int, default=REPETITIONS_FOR_OPT,
                           help="Trials used to estimate the minimum cut")
    p_analyze.add_argument("--repetitions-for-avg", type=int, default=REPETITIONS_FOR_AVG,
                           help="Repetition runs averaged per graph")
    p_analyze.add_argument("--repetition-limit", type=int, default=REPETITION_LIMIT,
                           help="Attempt cap of a single repetition run")
    p_analyze.add_argument("--relabel", action="store_true",
                           help="Compact vertex ids to 0..n before analysis")
    p_analyze.add_argument("--progress", action="store_true",
                           help="Show a progress bar for the averaging phase")
    p_analyze.add_argument("--csv", type=str, default=None,
                           help="Also save the results table to this CSV file")
    p_analyze.set_defaults(func=analyze, parser=p_analyze)

    p_generate = subparsers.add_parser("generate", help="Write a generated edge-list file")
    p_generate.add_argument("model", choices=["cycle", "er", "ba"],
                            help="Graph model")
    p_generate.add_argument("n", type=int, help="Number of vertices")
    p_generate.add_argument("out", type=str, help="Output path")
    p_generate.add_argument("--p", type=float, default=0.1,
                            help="Edge probability for ER")
    p_generate.add_argument("--m", type=int, default=3,
                            help="Edges per new node for BA")
    p_generate.add_argument("--seed", type=int, default=None,
                            help="Random seed")
    p_generate.set_defaults(func=generate, parser=p_generate)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
