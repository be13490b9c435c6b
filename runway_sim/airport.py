"""Define a class representing a single-runway airport."""
from dataclasses import dataclass, field
from typing import Optional

from runway_sim.constants import (
    DEFAULT_DEPARTURE_THRESHOLD,
    DEFAULT_FUEL_LEVEL,
    DEFAULT_FUEL_REQUIRED_FOR_DEPARTURE,
    check_int,
    check_positive,
)
from runway_sim.types import Fuel, Plane, PlaneId, Ticks


@dataclass
class Airport:
    """Represents an airport with one runway and a departure queue.

    Attributes:
        fuel_level: The fuel given to each new plane. Never burned itself, so every
            plane starts with the same amount.
        departure_threshold: The number of ticks a plane holds the runway before
            it departs.
        fuel_required_for_departure: The minimum fuel a plane needs at the head of
            the queue to be let onto the runway.
        waiting_queue: The planes waiting for the runway, in arrival order.
        runway: The plane on the runway, or None if the runway is empty.
        departed_queue: The planes that have departed, in departure order.
        insufficient_fuel_queue: The planes diverted for lack of fuel, in the order
            they were diverted.
        total_planes_created: The number of planes started at this airport.
    """

    fuel_level: Fuel = DEFAULT_FUEL_LEVEL
    departure_threshold: Ticks = DEFAULT_DEPARTURE_THRESHOLD
    fuel_required_for_departure: Fuel = DEFAULT_FUEL_REQUIRED_FOR_DEPARTURE
    waiting_queue: list[Plane] = field(default_factory=list)
    runway: Optional[Plane] = None
    departed_queue: list[Plane] = field(default_factory=list)
    insufficient_fuel_queue: list[Plane] = field(default_factory=list)
    total_planes_created: int = 0

    def __post_init__(self):
        check_int("fuel_level", self.fuel_level)
        check_positive("departure_threshold", self.departure_threshold)
        check_positive("fuel_required_for_departure", self.fuel_required_for_departure)

    @property
    def num_waiting(self) -> int:
        return len(self.waiting_queue)

    @property
    def num_departed(self) -> int:
        return len(self.departed_queue)

    @property
    def num_diverted(self) -> int:
        return len(self.insufficient_fuel_queue)

    @property
    def runway_occupancy(self) -> int:
        return 0 if self.is_runway_empty() else 1

    @property
    def num_planes_accounted_for(self) -> int:
        """Count every plane held by the airport, wherever it is."""
        return (
            self.num_waiting
            + self.runway_occupancy
            + self.num_departed
            + self.num_diverted
        )

    def start_new_plane(self, plane_id: PlaneId) -> Plane:
        """Create a plane with the current fuel level and queue it for departure.

        Args:
            plane_id: The identifier of the new plane.

        Returns: the new plane.
        """
        plane = Plane(plane_id, self.fuel_level)
        self.waiting_queue.append(plane)
        self.total_planes_created += 1
        return plane

    def is_runway_empty(self) -> bool:
        return self.runway is None

    def release_runway(self) -> None:
        """Clear the runway. The plane on it must already have been moved."""
        self.runway = None

    def decrement_fuel_of_waiting_planes(self) -> None:
        """Burn one unit of fuel for every plane in the waiting queue."""
        for plane in self.waiting_queue:
            plane.decrement_fuel()

    def admit_from_queue(self) -> Optional[Plane]:
        """Let the first plane with enough fuel onto an empty runway.

        Planes are taken from the head of the waiting queue in arrival order. Any
        plane without enough fuel is diverted for good, and the scan moves on to
        the next one. Nothing happens if the runway is occupied.

        Returns: the admitted plane, or None if no plane was admitted.
        """
        if not self.is_runway_empty():
            return None

        while self.waiting_queue:
            plane = self.waiting_queue.pop(0)
            if plane.fuel >= self.fuel_required_for_departure:
                self.runway = plane
                return plane

            self.insufficient_fuel_queue.append(plane)

        return None

    def advance_runway_occupant(self) -> Optional[Plane]:
        """Depart the plane on the runway if it has waited long enough.

        Otherwise, the plane waits on the runway for another tick.

        Returns: the departed plane, or None if no plane departed.
        """
        if self.is_runway_empty():
            return None

        plane = self.runway
        if plane.queue_wait_ticks >= self.departure_threshold:
            self.departed_queue.append(plane)
            self.release_runway()
            return plane

        plane.increment_queue_wait_ticks()
        return None

    def tick(self) -> None:
        """Advance the airport by one time step.

        Fuel is burned before admission, so a plane let onto the runway this tick
        has already burned fuel for it. The plane then starts its runway wait
        in the same tick.
        """
        self.decrement_fuel_of_waiting_planes()
        self.admit_from_queue()
        self.advance_runway_occupant()
