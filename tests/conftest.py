"""
Global pytest configuration and fixtures.
"""

import json
import pytest

from metroplanner.core.models import Station, MetroLine, MetroNetwork
from metroplanner.managers.config_manager import FareConfig


def make_line(line_id, stations, name=None, color="#000000"):
    """Build a line from (id, x, y) tuples; names default to the id."""
    return MetroLine(
        id=line_id,
        name=name or f"{line_id.title()} Line",
        color=color,
        stations=tuple(Station(id=sid, name=sid.upper(), x=x, y=y) for sid, x, y in stations),
    )


@pytest.fixture
def scenario_network():
    """Red A-B-C and Blue C-E sharing station C."""
    return MetroNetwork(lines=(
        make_line("red", [("A", 0, 0), ("B", 3, 0), ("C", 3, 4)], color="#FF0000"),
        make_line("blue", [("C", 3, 4), ("E", 3, 9)], color="#0000FF"),
    ))


@pytest.fixture
def scenario_fares():
    """Pricing used in the worked example: base 10, per station 5, interchange 5."""
    return FareConfig(base_fare=10, per_station_fare=5, interchange_fee=5)


@pytest.fixture
def disconnected_network():
    """Two lines sharing no station id."""
    return MetroNetwork(lines=(
        make_line("red", [("A", 0, 0), ("B", 1, 0), ("C", 2, 0)]),
        make_line("green", [("X", 10, 10), ("Y", 11, 10)]),
    ))


@pytest.fixture
def parallel_network():
    """Red P-Q-R and Blue Q-R-S run in parallel between Q and R."""
    return MetroNetwork(lines=(
        make_line("red", [("P", 0, 0), ("Q", 1, 0), ("R", 2, 0)]),
        make_line("blue", [("Q", 1, 0), ("R", 2, 0), ("S", 3, 0)]),
    ))


@pytest.fixture
def network_definition():
    """Network definition in the persisted JSON format."""
    return {
        "lines": [
            {
                "id": "red",
                "name": "Red Line",
                "color": "#FF0000",
                "stations": [
                    {"id": "A", "name": "Alpha", "x": 0, "y": 0},
                    {"id": "B", "name": "Bravo", "x": 3, "y": 0},
                    {"id": "C", "name": "Central", "x": 3, "y": 4},
                ],
            },
            {
                "id": "blue",
                "name": "Blue Line",
                "color": "#0000FF",
                "stations": [
                    {"id": "C", "name": "Central", "x": 3, "y": 4},
                    {"id": "E", "name": "Echo", "x": 3, "y": 9},
                ],
            },
        ]
    }


@pytest.fixture
def definition_file(tmp_path, network_definition):
    """Write the network definition to a temporary file."""
    path = tmp_path / "default_network.json"
    path.write_text(json.dumps(network_definition), encoding="utf-8")
    return path


@pytest.fixture
def line_builder():
    """Expose make_line to tests that build their own networks."""
    return make_line
