"""Mini README: Entry point CLI for the flight planner.

This script exposes a Typer CLI that plans flights between catalogue
airports from the terminal, lists the known airports, and starts the FastAPI
planning service with configurable host, port, and production flags. It
ensures consistent logging and draws settings from environment variables
when available.
"""

from __future__ import annotations

import typer
import uvicorn

from flightplanner.airports import AirportCatalogue
from flightplanner.configuration import get_settings
from flightplanner.errors import UnreachableRouteError
from flightplanner.logging_utils import configure_root_logger
from flightplanner.models import Aircraft
from flightplanner.route_planning import RoutePlanner

cli = typer.Typer(help="Plan flights and run the flight planning service.")


@cli.command()
def plan(
    origin: str = typer.Argument(..., help="ICAO code of the departure airport."),
    destination: str = typer.Argument(..., help="ICAO code of the arrival airport."),
    airspeed: float = typer.Option(..., help="Cruise airspeed in knots."),
    burn_rate: float = typer.Option(..., help="Fuel burned per hour."),
    max_range: float = typer.Option(..., help="Maximum range in statute miles."),
    fuel_type: int = typer.Option(1, help="Fuel selector: 1 for Avgas, 2 for Jet A."),
    lenient: bool = typer.Option(
        False, help="Print partial plans instead of failing on unreachable stops."
    ),
) -> None:
    """Plan a flight between two catalogue airports and print a summary."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    catalogue = AirportCatalogue()
    try:
        start = catalogue.get_airport(origin)
        end = catalogue.get_airport(destination)
        aircraft = Aircraft(
            airspeed_knots=airspeed,
            fuel_burn_rate=burn_rate,
            max_range_miles=max_range,
            fuel_type=fuel_type,
        )
    except (KeyError, ValueError) as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=2) from error

    planner = RoutePlanner(
        knots_to_mph=settings.knots_to_mph,
        cruise_efficiency=settings.cruise_efficiency,
        strict=settings.strict_routing and not lenient,
    )
    try:
        flight = planner.plan(start, end, aircraft, catalogue.snapshot())
    except UnreachableRouteError as error:
        stops = ", ".join(error.partial_stops) or "none"
        typer.echo(f"Route unreachable: {error} (stops so far: {stops})", err=True)
        raise typer.Exit(code=1) from error

    typer.echo(f"{flight.origin_name} -> {flight.destination_name}")
    typer.echo(f"Distance: {flight.distance_miles:.1f} mi")
    typer.echo(f"Heading: {flight.heading_degrees:.1f} deg")
    typer.echo(f"Estimated time: {flight.estimated_time_hours:.2f} h")
    typer.echo(f"Fuel required: {flight.fuel_required:.1f}")
    typer.echo(f"Destination frequency: {flight.destination_frequency:.2f}")
    typer.echo(f"Refuel stops: {', '.join(flight.refuel_stops) or 'none'}")
    if not flight.complete:
        typer.echo("Warning: route incomplete, destination not reachable from last stop.")


@cli.command()
def airports() -> None:
    """List the airports available for planning."""

    for airport in AirportCatalogue().list_airports():
        fuels = ", ".join(sorted(airport.fuel_types))
        typer.echo(f"{airport.icao}  {airport.name} ({airport.city}, {airport.region_abbr}) [{fuels}]")


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to the 0.0.0.0 / :: bind-all sentinels.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting flight planner on "
        f"{effective_host}:{effective_port}.\n"
        "Open the API docs at "
        f"http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "flightplanner.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
