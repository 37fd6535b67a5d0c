"""Mini README: Core package initializer for the flight planner.

The package computes great-circle flight plans between airports and, when
an aircraft lacks the range to fly direct, picks refueling stops greedily
from a pool of candidate airports. Convenience imports below let scripts
reach the planner without knowing the subpackage layout.
"""

from .logging_utils import get_logger
from .route_planning import RoutePlanner

__all__ = ["RoutePlanner", "get_logger"]
