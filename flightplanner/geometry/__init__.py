"""Mini README: Geometry subsystem for great-circle calculations.

Exports the distance and heading functions used by the route planner and the
statute-mile Earth radius they are calibrated against.
"""

from .great_circle import EARTH_RADIUS_MILES, great_circle_distance, initial_heading

__all__ = ["EARTH_RADIUS_MILES", "great_circle_distance", "initial_heading"]
