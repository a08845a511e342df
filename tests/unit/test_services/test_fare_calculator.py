"""
Unit tests for FareCalculator.

Tests the fare formula, default pricing, non-negativity and monotonicity.
"""

import pytest
from pydantic import ValidationError

from metroplanner.core.models import ComputedRoute, Station
from metroplanner.core.services.fare_calculator import FareCalculator, calculate_fare
from metroplanner.managers.config_manager import FareConfig


def make_route(total_stations, interchange_count):
    interchanges = tuple(Station(id=f"I{i}", name=f"I{i}", x=i, y=0) for i in range(interchange_count))
    return ComputedRoute(source_id="A", destination_id="B", segments=(),
                         total_stations=total_stations, total_distance=0.0,
                         interchanges=interchanges)


class TestFareCalculator:
    """Test fare calculation."""

    def test_worked_example(self, scenario_fares):
        """Test 10 + 4*5 + 1*5 = 35."""
        assert calculate_fare(make_route(4, 1), scenario_fares) == 35

    def test_default_pricing(self):
        """Test the default pricing constants."""
        fare = FareCalculator().calculate_fare(make_route(4, 1))

        assert fare == pytest.approx(1.5 + 4 * 0.15 + 0.25)

    def test_single_station_fare(self, scenario_fares):
        """Test a same-station journey costs base plus one station."""
        assert calculate_fare(make_route(1, 0), scenario_fares) == 15

    def test_monotonic_in_stations(self, scenario_fares):
        """Test the fare never decreases as stations are added."""
        calculator = FareCalculator(scenario_fares)
        fares = [calculator.fare_for(n, 2) for n in range(1, 20)]

        assert fares == sorted(fares)

    def test_monotonic_in_interchanges(self):
        """Test the fare never decreases as interchanges are added."""
        calculator = FareCalculator()
        fares = [calculator.fare_for(6, k) for k in range(0, 6)]

        assert fares == sorted(fares)

    def test_free_fares_are_zero(self):
        """Test zero pricing gives a zero fare, never negative."""
        calculator = FareCalculator(FareConfig(base_fare=0, per_station_fare=0, interchange_fee=0))

        assert calculator.calculate_fare(make_route(5, 2)) == 0

    def test_negative_constants_rejected(self):
        """Test the pricing policy cannot hold negative constants."""
        with pytest.raises(ValidationError):
            FareConfig(base_fare=-1)

    def test_pricing_is_frozen(self, scenario_fares):
        """Test the calculator's pricing cannot be changed after construction."""
        calculator = FareCalculator(scenario_fares)

        with pytest.raises(ValidationError):
            calculator.fare_config.base_fare = 0
