"""Mini README: Centralised configuration models and helpers for the planner.

Structure:
    * PlannerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``FLIGHTPLANNER_``), pick the routing policy for unreachable stops, tune
    the airspeed conversion constants, and specify service ports. The
    configuration is cached so validation happens only once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .route_planning.planner import CRUISE_EFFICIENCY, KNOTS_TO_MPH


class PlannerSettings(BaseSettings):
    """Runtime configuration for the flight planner."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the CLI and web entry points.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the planning service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the planning service exposes.",
        ge=1,
        le=65535,
    )
    knots_to_mph: float = Field(
        KNOTS_TO_MPH,
        description="Factor converting aircraft airspeed into the distance unit per hour.",
        gt=0,
    )
    cruise_efficiency: float = Field(
        CRUISE_EFFICIENCY,
        description="Fraction of theoretical airspeed achieved in cruise.",
        gt=0,
        le=1,
    )
    strict_routing: bool = Field(
        True,
        description=(
            "Raise an error when no refuel stop can be found. Disable to return"
            " the partial plan flagged as incomplete instead."
        ),
    )

    class Config:
        env_prefix = "FLIGHTPLANNER_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def _normalise_log_level(cls, value: str) -> str:
        """Reject level names the logging module does not know."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> PlannerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PlannerSettings()
