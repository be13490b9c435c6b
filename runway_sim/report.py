"""Summarize the final state of a simulation run."""
from dataclasses import asdict

import pandas as pd

from runway_sim.simulation import SimulationResult, TickSnapshot
from runway_sim.types import Fuel, Plane, PlaneId

DEPARTED_TITLE = "Planes departed queue:"
INSUFFICIENT_FUEL_TITLE = "Planes not enough fuel queue:"


def summarize(result: SimulationResult) -> dict:
    """Collect the summary statistics of a run.

    Returns: a dictionary with the keys simulation_ticks, total_planes, departed,
        insufficient_fuel and still_waiting, in that order, followed by
        runway_plane_id (the plane left on the runway, or None).
    """
    airport = result.airport
    return {
        "simulation_ticks": result.config.simulation_ticks,
        "total_planes": airport.total_planes_created,
        "departed": airport.num_departed,
        "insufficient_fuel": airport.num_diverted,
        "still_waiting": airport.num_waiting,
        "runway_plane_id": None if airport.runway is None else airport.runway.plane_id,
    }


def queue_listing(planes: list[Plane]) -> list[tuple[PlaneId, Fuel]]:
    """List the (id, fuel) pair of each plane in queue order."""
    return [(plane.plane_id, plane.fuel) for plane in planes]


def queue_frame(planes: list[Plane]) -> pd.DataFrame:
    """Tabulate a queue as a dataframe with plane_id and fuel columns."""
    return pd.DataFrame(queue_listing(planes), columns=["plane_id", "fuel"])


def history_frame(history: list[TickSnapshot]) -> pd.DataFrame:
    """Tabulate per-tick snapshots as a dataframe, one row per tick."""
    columns = [
        "tick",
        "num_waiting",
        "runway_plane_id",
        "num_departed",
        "num_diverted",
        "total_planes_created",
    ]
    return pd.DataFrame([asdict(snapshot) for snapshot in history], columns=columns)


def format_summary(result: SimulationResult) -> str:
    summary = summarize(result)
    lines = [
        "",
        f"Simulation time: {summary['simulation_ticks']}",
        f"Total Planes: {summary['total_planes']}",
        f"Planes that departed: {summary['departed']}",
        f"Planes that don't have enough fuel: {summary['insufficient_fuel']}",
        # Counts the waiting queue
        f"Planes still on the runway: {summary['still_waiting']}",
    ]
    return "\n".join(lines)


def format_queue(title: str, planes: list[Plane]) -> str:
    """Render a queue as its title line followed by [id, fuel]-> entries."""
    entries = "".join(f"{plane}->" for plane in planes)
    return f"{title}\n{entries}"


def format_report(result: SimulationResult) -> str:
    """Render the summary and both terminal queues as console text."""
    airport = result.airport
    return "\n".join(
        [
            format_summary(result),
            format_queue(DEPARTED_TITLE, airport.departed_queue),
            format_queue(INSUFFICIENT_FUEL_TITLE, airport.insufficient_fuel_queue),
        ]
    )
