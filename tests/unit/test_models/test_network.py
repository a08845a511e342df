"""
Unit tests for Station, MetroLine and MetroNetwork models.

Tests the network snapshot data structures and the definition format codec.
"""

import math
import pytest

from metroplanner.core.exceptions import NetworkDefinitionError
from metroplanner.core.models import Station, MetroLine, MetroNetwork


class TestStation:
    """Test Station model."""

    def test_station_creation(self):
        """Test creating a station with valid data."""
        station = Station(id="C", name="Central", x=3, y=4)

        assert station.id == "C"
        assert station.name == "Central"
        assert station.coordinates == (3, 4)
        assert station.has_valid_coordinates

    def test_station_empty_id_rejected(self):
        """Test that an empty id is rejected."""
        with pytest.raises(ValueError):
            Station(id="", name="Nowhere", x=0, y=0)

    def test_station_is_immutable(self):
        """Test that stations cannot be modified."""
        station = Station(id="A", name="Alpha", x=0, y=0)
        with pytest.raises(AttributeError):
            station.x = 5

    def test_distance_to(self):
        """Test Euclidean distance between stations."""
        a = Station(id="A", name="Alpha", x=0, y=0)
        c = Station(id="C", name="Central", x=3, y=4)

        assert a.distance_to(c) == 5.0
        assert c.distance_to(a) == 5.0

    def test_malformed_coordinates(self):
        """Test detection of non-finite and non-numeric coordinates."""
        assert not Station(id="N", name="NaN", x=math.nan, y=0).has_valid_coordinates
        assert not Station(id="I", name="Inf", x=0, y=math.inf).has_valid_coordinates
        assert not Station(id="S", name="Str", x="1", y=0).has_valid_coordinates
        assert not Station(id="B", name="Bool", x=True, y=0).has_valid_coordinates


class TestMetroLine:
    """Test MetroLine model."""

    def test_line_accepts_list_of_stations(self):
        """Test that a list of stations is stored as a tuple."""
        line = MetroLine(id="red", name="Red", color="#FF0000",
                         stations=[Station(id="A", name="A", x=0, y=0)])

        assert isinstance(line.stations, tuple)
        assert line.station_count == 1
        assert len(line) == 1

    def test_short_line_is_allowed(self):
        """Test that lines with fewer than two stations can be constructed."""
        line = MetroLine(id="stub", name="Stub", color="#000000", stations=())
        assert line.station_count == 0
        assert line.terminus_stations == []

    def test_station_lookup(self, scenario_network):
        """Test station helpers on a line."""
        red = scenario_network.get_line("red")

        assert red.station_ids == ["A", "B", "C"]
        assert "B" in red
        assert "E" not in red
        assert red.get_station("C").coordinates == (3, 4)
        assert red.get_station("E") is None
        assert [s.id for s in red.get_adjacent_stations("B")] == ["A", "C"]
        assert [s.id for s in red.terminus_stations] == ["A", "C"]


class TestMetroNetwork:
    """Test MetroNetwork model and definition codec."""

    def test_routable(self, scenario_network):
        """Test that networks without a two-station line are not routable."""
        assert scenario_network.is_routable
        assert not MetroNetwork().is_routable
        single = MetroNetwork(lines=(MetroLine(id="x", name="X", color="#000000",
                                               stations=(Station(id="A", name="A", x=0, y=0),)),))
        assert not single.is_routable

    def test_get_all_stations_unique(self, scenario_network):
        """Test that shared ids are listed once, first record kept."""
        stations = scenario_network.get_all_stations()

        assert [s.id for s in stations] == ["A", "B", "C", "E"]

    def test_lines_serving_station(self, scenario_network):
        """Test finding lines that serve a station."""
        assert [l.id for l in scenario_network.get_lines_serving_station("C")] == ["red", "blue"]
        assert scenario_network.get_line_by_station("E").id == "blue"
        assert scenario_network.get_line_by_station("Z") is None
        assert not scenario_network.has_station("Z")

    def test_from_dict(self, network_definition):
        """Test parsing the persisted definition format."""
        network = MetroNetwork.from_dict(network_definition)

        assert network.line_ids == ["red", "blue"]
        assert network.get_line("red").color == "#FF0000"
        assert network.get_station_by_id("E").name == "Echo"

    def test_to_dict_matches_definition(self, network_definition):
        """Test that to_dict writes the same definition format back."""
        network = MetroNetwork.from_dict(network_definition)
        assert network.to_dict() == network_definition

    def test_from_dict_missing_lines(self):
        """Test that a definition without lines is rejected."""
        with pytest.raises(NetworkDefinitionError):
            MetroNetwork.from_dict({"stations": []})

    def test_from_dict_missing_station_field(self, network_definition):
        """Test that a station missing a coordinate is rejected."""
        del network_definition["lines"][0]["stations"][1]["y"]

        with pytest.raises(NetworkDefinitionError, match="missing 'y'"):
            MetroNetwork.from_dict(network_definition)

    def test_from_dict_non_numeric_coordinate(self, network_definition):
        """Test that a null coordinate is rejected."""
        network_definition["lines"][1]["stations"][0]["x"] = None

        with pytest.raises(NetworkDefinitionError, match="must be a number"):
            MetroNetwork.from_dict(network_definition)

    def test_from_dict_null_station_id(self, network_definition):
        """Test that a null station id is rejected rather than stringified."""
        network_definition["lines"][0]["stations"][0]["id"] = None

        with pytest.raises(NetworkDefinitionError, match="'id' must be a string"):
            MetroNetwork.from_dict(network_definition)

    def test_from_dict_numeric_line_id(self, network_definition):
        """Test that a non-string line id is rejected."""
        network_definition["lines"][1]["id"] = 7

        with pytest.raises(NetworkDefinitionError, match="'id' must be a string"):
            MetroNetwork.from_dict(network_definition)

    def test_from_dict_keeps_short_lines(self):
        """Test that the codec leaves minimum-station checks to the graph builder."""
        network = MetroNetwork.from_dict({
            "lines": [{"id": "solo", "name": "Solo", "color": "red",
                       "stations": [{"id": "Z", "name": "Zulu", "x": 1, "y": 1}]}]
        })

        assert network.get_line("solo").station_count == 1
        assert network.get_line("solo").color == "red"
