"""Define types used in the runway simulation."""
from runway_sim.types.plane import Plane
from runway_sim.types.util import Fuel, PlaneId, Ticks

__all__ = [
    "Fuel",
    "PlaneId",
    "Ticks",
    "Plane",
]
