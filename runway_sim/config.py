"""Define the configuration of one simulation run."""
from dataclasses import dataclass

from runway_sim.airport import Airport
from runway_sim.constants import (
    DEFAULT_DEPARTURE_THRESHOLD,
    DEFAULT_FUEL_LEVEL,
    DEFAULT_FUEL_REQUIRED_FOR_DEPARTURE,
    DEFAULT_SIMULATION_TICKS,
    check_int,
    check_non_negative,
    check_positive,
)
from runway_sim.types.util import Fuel, Ticks


@dataclass(frozen=True)
class SimulationConfig:
    """Constants for one run of the departure simulation.

    Attributes:
        simulation_ticks: The injection budget; one new plane is started on each
            of the first simulation_ticks ticks.
        fuel_level: The fuel given to every new plane. May be below the fuel
            required for departure, or negative, in which case every plane is
            diverted.
        departure_threshold: The number of ticks a plane must hold the runway
            before it departs.
        fuel_required_for_departure: The minimum fuel a plane needs to be admitted
            to the runway.
    """

    simulation_ticks: Ticks = DEFAULT_SIMULATION_TICKS
    fuel_level: Fuel = DEFAULT_FUEL_LEVEL
    departure_threshold: Ticks = DEFAULT_DEPARTURE_THRESHOLD
    fuel_required_for_departure: Fuel = DEFAULT_FUEL_REQUIRED_FOR_DEPARTURE

    def __post_init__(self):
        check_non_negative("simulation_ticks", self.simulation_ticks)
        check_int("fuel_level", self.fuel_level)
        check_positive("departure_threshold", self.departure_threshold)
        check_positive("fuel_required_for_departure", self.fuel_required_for_departure)

    def make_airport(self) -> Airport:
        """Return an empty airport using these constants."""
        return Airport(
            fuel_level=self.fuel_level,
            departure_threshold=self.departure_threshold,
            fuel_required_for_departure=self.fuel_required_for_departure,
        )
