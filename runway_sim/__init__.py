"""Discrete-time simulation of departures from a single-runway airport."""
from runway_sim.airport import Airport
from runway_sim.config import SimulationConfig
from runway_sim.simulation import SimulationResult, TickSnapshot, run_simulation
from runway_sim.types import Plane

__all__ = [
    "Airport",
    "Plane",
    "SimulationConfig",
    "SimulationResult",
    "TickSnapshot",
    "run_simulation",
]
