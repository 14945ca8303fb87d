import re

import numpy as np
import pytest

from analysis import RESULT_HEADER, AnalysisConfig, AnalysisResult, analyze_graph
from graph_generators.cycle import generate_cycle
from graph_io import Graph

FAST = AnalysisConfig(repetitions_for_opt=10, repetitions_for_avg=20, repetition_limit=50)


def test_default_config_values():
    config = AnalysisConfig()
    assert config.repetitions_for_opt == 200
    assert config.repetitions_for_avg == 500
    assert config.repetition_limit == 1000


@pytest.mark.parametrize("field", ["repetitions_for_opt", "repetitions_for_avg", "repetition_limit"])
def test_zero_counts_rejected(field):
    with pytest.raises(ValueError, match=field):
        AnalysisConfig(**{field: 0})


def test_cycle_analysis():
    result = analyze_graph(generate_cycle(6), FAST, np.random.default_rng(0), source="cycle6")
    assert result.number_of_vertices == 6
    assert result.number_of_edges == 6
    assert result.opt == 2
    # every trial on a cycle cuts exactly two edges
    assert result.avg_repetitions == 1.0
    assert result.opt_time >= 0.0
    assert result.avg_time >= 0.0


def test_empty_graph_analysis():
    result = analyze_graph(Graph(()), FAST, np.random.default_rng(0))
    assert result.opt == 0
    assert result.avg_repetitions == 1.0


def test_avg_repetitions_bounded_by_limit():
    graph = Graph.from_edges([(0, 1), (1, 2), (2, 3), (3, 0), (0, 2), (1, 3), (3, 4), (4, 5), (5, 3)])
    result = analyze_graph(graph, FAST, np.random.default_rng(1), progress=True)
    assert 1.0 <= result.avg_repetitions <= FAST.repetition_limit


def test_format_line():
    result = AnalysisResult("g.graph", 3, 3, 2, 1.0, 0.0123, 0.4567)
    assert result.format_line() == "g.graph, (3,3), 2, 1.00, opt_time: 0.012s, avg_time: 0.457s"


def test_result_line_shape():
    line = analyze_graph(generate_cycle(4), FAST, np.random.default_rng(2), source="c4").format_line()
    assert re.fullmatch(r"c4, \(4,4\), 2, 1\.00, opt_time: \d+\.\d{3}s, avg_time: \d+\.\d{3}s", line)


def test_header():
    assert RESULT_HEADER == "filename, (vertices,edges), min_cut, avg_repetitions, opt_time, avg_time"


@pytest.mark.parametrize("value", [True, 2.0, "3"])
def test_non_integer_counts_rejected(value):
    with pytest.raises(ValueError, match="repetitions_for_avg"):
        AnalysisConfig(repetitions_for_avg=value)
