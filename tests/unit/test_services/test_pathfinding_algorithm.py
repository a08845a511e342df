"""
Unit tests for PathfindingAlgorithm.

Tests Dijkstra's search, not-found outcomes, path reconstruction and the
line-continuation tie-break.
"""

import pytest

from metroplanner.core.models import MetroNetwork, PathStep
from metroplanner.core.services.network_graph_builder import build_graph
from metroplanner.core.services.pathfinding_algorithm import PathfindingAlgorithm, shortest_path


class TestShortestPath:
    """Test shortest path search."""

    def test_scenario_path(self, scenario_network):
        """Test the path across an interchange carries arrival lines."""
        path = shortest_path(build_graph(scenario_network), "A", "E")

        assert path == [
            PathStep("A", "red"),
            PathStep("B", "red"),
            PathStep("C", "red"),
            PathStep("E", "blue"),
        ]

    def test_scenario_distance(self, scenario_network):
        """Test cumulative edge weight of the found path."""
        result = PathfindingAlgorithm().find_path(build_graph(scenario_network), "A", "E")

        assert result.distance == pytest.approx(12.0)
        assert result.nodes_explored >= 4

    def test_same_station(self, scenario_network):
        """Test the trivial one-station path has no line."""
        result = PathfindingAlgorithm().find_path(build_graph(scenario_network), "B", "B")

        assert result.steps == [PathStep("B", None)]
        assert result.distance == 0.0

    def test_first_step_takes_next_line(self, scenario_network):
        """Test the source step is labelled with the first edge's line."""
        path = shortest_path(build_graph(scenario_network), "E", "A")

        assert path[0] == PathStep("E", "blue")
        assert path[-1] == PathStep("A", "red")

    def test_missing_station_not_found(self, scenario_network):
        """Test stations absent from the graph give no path."""
        graph = build_graph(scenario_network)

        assert shortest_path(graph, "A", "Z") is None
        assert shortest_path(graph, "Z", "A") is None
        assert shortest_path(graph, "Z", "Z") is None

    def test_disconnected_not_found(self, disconnected_network):
        """Test that stations in different components give no path."""
        graph = build_graph(disconnected_network)

        assert shortest_path(graph, "A", "Y") is None
        assert shortest_path(graph, "X", "Y") == [PathStep("X", "green"), PathStep("Y", "green")]

    def test_prefers_shorter_detour(self, line_builder):
        """Test that the search minimises distance, not stop count."""
        network = MetroNetwork(lines=(
            line_builder("direct", [("S", 0, 0), ("T", 10, 0)]),
            line_builder("loop", [("S", 0, 0), ("M", 1, 0), ("N", 2, 0), ("T", 3, 0)]),
        ))
        # T is duplicated at two coordinates; each line weighs its own pair
        path = shortest_path(build_graph(network), "S", "T")

        assert [step.station_id for step in path] == ["S", "M", "N", "T"]
        assert {step.line_id for step in path} == {"loop"}


class TestTieBreaking:
    """Test consistent choice between equal-distance edges."""

    def test_parallel_edge_continues_arrival_line(self, parallel_network):
        """Test that the parallel edge on the current line is preferred."""
        path = shortest_path(build_graph(parallel_network), "P", "S")

        assert path == [
            PathStep("P", "red"),
            PathStep("Q", "red"),
            PathStep("R", "red"),
            PathStep("S", "blue"),
        ]

    def test_line_order_does_not_change_choice(self, parallel_network):
        """Test the same path is chosen when the other line is discovered first."""
        reversed_network = MetroNetwork(lines=tuple(reversed(parallel_network.lines)))

        path = shortest_path(build_graph(reversed_network), "P", "S")

        assert path == shortest_path(build_graph(parallel_network), "P", "S")

    def test_first_discovered_on_full_tie(self, line_builder):
        """Test that from the source the first discovered line wins."""
        network = MetroNetwork(lines=(
            line_builder("red", [("A", 0, 0), ("B", 1, 0)]),
            line_builder("blue", [("A", 0, 0), ("B", 1, 0)]),
        ))

        path = shortest_path(build_graph(network), "A", "B")

        assert path == [PathStep("A", "red"), PathStep("B", "red")]

    def test_source_tie_keeps_first_line_before_change(self, line_builder):
        """Test that a tie leaving the source takes the first line, then changes."""
        network = MetroNetwork(lines=(
            line_builder("red", [("A", 0, 0), ("B", 1, 0)]),
            line_builder("blue", [("A", 0, 0), ("B", 1, 0), ("C", 2, 0)]),
        ))

        path = shortest_path(build_graph(network), "A", "C")

        assert path == [PathStep("A", "red"), PathStep("B", "red"), PathStep("C", "blue")]

    def test_repeated_search_is_identical(self, parallel_network):
        """Test that searching twice returns identical paths."""
        graph = build_graph(parallel_network)

        assert shortest_path(graph, "S", "P") == shortest_path(graph, "S", "P")
