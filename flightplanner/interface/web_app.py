"""Mini README: FastAPI-powered planning service.

Structure:
    * AircraftPayload / PlanRequest - request bodies validated by Pydantic.
    * create_application - application factory wiring routes to the planner.

The service lists catalogue airports and plans flights between two ICAO
codes, returning the plan alongside a GeoJSON route for map previews.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..airports import AirportCatalogue
from ..configuration import get_settings
from ..errors import UnreachableRouteError
from ..logging_utils import configure_root_logger, get_logger
from ..models import Aircraft
from ..route_planning import RoutePlanner
from ..utils.geojson import route_to_geojson

LOGGER = get_logger(__name__)


class AircraftPayload(BaseModel):
    """Aircraft performance figures supplied by the client.

    Field constraints mirror the ``Aircraft`` record, so invalid figures are
    rejected with a 422 before the planner sees them.
    """

    airspeed_knots: float = Field(..., gt=0, allow_inf_nan=False)
    fuel_burn_rate: float = Field(..., gt=0, allow_inf_nan=False)
    max_range_miles: float = Field(..., gt=0, allow_inf_nan=False)
    fuel_type: int = Field(1, description="1 for Avgas, 2 for Jet A.")


class PlanRequest(BaseModel):
    """Origin and destination ICAO codes plus the aircraft to plan for."""

    origin: str
    destination: str
    aircraft: AircraftPayload


def create_application(
    catalogue: Optional[AirportCatalogue] = None,
    planner: Optional[RoutePlanner] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    app = FastAPI(title="Flight Planner", version="0.1.0")

    if catalogue is None:
        catalogue = AirportCatalogue()
    if planner is None:
        planner = RoutePlanner.from_settings(settings)

    @app.get("/airports")
    async def list_airports() -> JSONResponse:
        """Return every airport known to the catalogue."""

        airports = [airport.as_dict() for airport in catalogue.list_airports()]
        LOGGER.debug("Returning %s airports", len(airports))
        return JSONResponse({"airports": airports})

    @app.post("/plan-flight")
    async def plan_flight(request: PlanRequest) -> JSONResponse:
        """Plan a flight between two catalogue airports."""

        try:
            origin = catalogue.get_airport(request.origin)
            destination = catalogue.get_airport(request.destination)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error

        aircraft = Aircraft(**request.aircraft.model_dump())
        pool = catalogue.snapshot()
        try:
            plan = planner.plan(origin, destination, aircraft, pool)
        except UnreachableRouteError as error:
            raise HTTPException(
                status_code=409,
                detail={
                    "message": str(error),
                    "last_airport": error.last_airport,
                    "partial_stops": list(error.partial_stops),
                },
            ) from error

        LOGGER.info(
            "Planned %s -> %s with %s refuel stops",
            origin.icao,
            destination.icao,
            len(plan.refuel_stops),
        )
        return JSONResponse({"plan": plan.as_dict(), "route": route_to_geojson(plan, pool)})

    return app
