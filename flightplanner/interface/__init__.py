"""Mini README: Interactive interfaces for the flight planner.

Exports the FastAPI application factory that serves planning requests. The
Typer CLI in ``main_flight_planner.py`` launches it.
"""

from .web_app import create_application

__all__ = ["create_application"]
