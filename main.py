"""
Main entry point for the Metro Planner command line.

Sets up logging, loads the configuration and the network, then plans a
route between two station ids or lists the network's interchanges.

Usage:
    python main.py FROM_ID TO_ID
    python main.py --interchanges
"""

import logging
import sys
from typing import List, Optional

from metroplanner import __app_name__, __version__
from metroplanner.core.exceptions import MetroPlannerError, UnknownStationError
from metroplanner.core.models.route import RouteNotFound
from metroplanner.core.services.service_factory import ServiceFactory
from metroplanner.managers.config_manager import ConfigData, ConfigManager, ConfigurationError
from metroplanner.utils.data_path_resolver import get_user_data_directory

USAGE = "Usage: main.py FROM_ID TO_ID | main.py --interchanges"


def setup_logging(level: str = "WARNING"):
    """Setup application logging with file and console output."""
    log_dir = get_user_data_directory() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "metroplanner.log"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(str(log_file)), logging.StreamHandler()],
    )


def print_route(route, fare: float):
    """Print a computed route for the terminal."""
    for step in route.get_detailed_description():
        print(f"  {step}")
    if route.interchanges:
        print(f"Interchanges: {', '.join(station.name for station in route.interchanges)}")
    print(f"Stations: {route.total_stations}")
    print(f"Distance: {route.total_distance:.1f}")
    print(f"Duration: {route.get_duration_display()}")
    print(f"Fare: ${fare:.2f}")


def run(args: List[str], config: ConfigData) -> int:
    """Run one command against the configured network."""
    factory = ServiceFactory(config)
    network = factory.get_network_store().load()

    if args == ["--interchanges"]:
        for interchange in factory.get_station_service(network).get_interchange_stations():
            print(f"{interchange.name} ({interchange.id}): {', '.join(interchange.lines)}")
        return 0

    if len(args) != 2:
        print(USAGE)
        return 2

    route_service = factory.get_route_service()
    try:
        result = route_service.plan_route(network, args[0], args[1])
    except UnknownStationError as e:
        print(f"No such station: {e.station_id}")
        return 1

    if isinstance(result, RouteNotFound):
        print(str(result))
        return 0

    print_route(result, route_service.calculate_fare(result))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = sys.argv[1:] if argv is None else argv

    try:
        config = ConfigManager().load_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1

    setup_logging(config.logging.level)
    logger = logging.getLogger(__name__)
    logger.info(f"Starting {__app_name__} {__version__}")

    try:
        return run(args, config)
    except MetroPlannerError as e:
        logger.error(f"Planning failed: {e}")
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
