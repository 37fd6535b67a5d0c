"""Mini README: Utility helper functions for the flight planner.

Currently exports the GeoJSON route exporter used by the web service.
"""

from .geojson import route_to_geojson

__all__ = ["route_to_geojson"]
