"""
Metro Planner journey planning engine

Plans journeys across a multi-line metro network: shortest path by distance,
line segments with interchanges, estimated duration and fare.
"""

__version__ = "1.0.0"
__app_name__ = "MetroPlanner"
__description__ = "Metro journey planner with interchange detection and fares"
