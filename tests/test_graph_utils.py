"""
Test graph statistics, printers and path counting.
"""

import pytest

from compgraph import (
    Graph,
    Polynomial,
    Product,
    analyze_graph_complexity,
    count_paths,
    get_graph_stats,
    print_computation_graph,
    print_graph_summary,
)


@pytest.fixture
def diamond():
    # a -> b -> c -> d with every shortcut edge
    g = Graph()
    a = g.append_variable("a")
    b = g.append_sum([a])
    c = g.append_sum([a, b])
    d = g.append_sum([a, b, c])
    return g, (a, b, c, d)


class TestGraphStats:

    def test_empty_graph(self):
        stats = get_graph_stats(Graph())
        assert stats['nodes'] == 0
        assert stats['operations'] == {}

    def test_counts(self, diamond):
        g, _ = diamond
        stats = get_graph_stats(g)
        assert stats['nodes'] == 4
        assert stats['edges'] == 6
        assert stats['max_fan_in'] == 3
        assert stats['max_fan_out'] == 3
        assert stats['avg_fan_in'] == pytest.approx(1.5)
        assert stats['operations'] == {'var': 1, 'sum': 3}

    def test_derivative_nodes_are_counted(self, diamond):
        g, (a, b, c, d) = diamond
        g.derivative(d, {a})
        stats = get_graph_stats(g)
        assert stats['nodes'] == 8
        assert stats['operations'] == {'var': 1, 'sum': 6, 'const': 1}


class TestCountPaths:

    def test_diamond(self, diamond):
        g, (a, b, c, d) = diamond
        assert count_paths(g, a) == 1
        assert count_paths(g, b) == 1
        assert count_paths(g, c) == 2
        assert count_paths(g, d) == 4

    def test_repeated_child_counts_twice(self):
        g = Graph()
        x = g.append_variable()
        s = g.append_sum([x, x])
        assert count_paths(g, s) == 2


class TestPrinters:

    def test_summary(self, diamond, capsys):
        g, _ = diamond
        stats = print_graph_summary(g, detailed=True)
        out = capsys.readouterr().out
        assert "COMPUTATION GRAPH SUMMARY" in out
        assert "Node   3: sum          <- [Node0, Node1, Node2]" in out
        assert stats['nodes'] == 4

    def test_summary_empty(self, capsys):
        print_graph_summary(Graph())
        assert "Empty computation graph" in capsys.readouterr().out

    def test_structure_with_values(self, diamond, capsys):
        g, (a, b, c, d) = diamond
        values = g.evaluate({a: 1.0})
        print_computation_graph(g, max_nodes=2, values=values)
        out = capsys.readouterr().out
        assert "[leaf/input]" in out
        assert "... (2 more nodes)" in out
        assert "Node    2" not in out

    def test_complexity_report(self, diamond):
        g, _ = diamond
        report = analyze_graph_complexity(g)
        assert "Total operations: 4" in report
        assert "Complexity level: Low" in report
        assert "- sum: 75.0%" in report


class TestPolynomialEdges:
    """Polynomial factors count like Sum and Product children."""

    def test_repeated_factor_counts_twice(self):
        g = Graph()
        x = g.append_variable()
        prod = g.append(Product((x, x)))
        poly = g.append(Polynomial(((1.0, ((x, 1.0), (x, 1.0))),)))

        assert count_paths(g, prod) == 2
        assert count_paths(g, poly) == 2
        assert g[poly].children == (x, x)

    def test_edges_span_all_terms(self):
        g = Graph()
        x = g.append_variable()
        y = g.append_variable()
        g.append(Polynomial(((2.0, ((x, 2.0),)), (-1.0, ((x, 1.0), (y, 1.0))))))
        assert get_graph_stats(g)['edges'] == 3
