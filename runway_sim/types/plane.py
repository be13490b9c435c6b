"""Define a class representing a plane waiting to depart."""
from dataclasses import dataclass

from runway_sim.types.util import Fuel, PlaneId, Ticks


@dataclass
class Plane:
    """A plane moving through the departure process.

    Attributes:
        _plane_id: The unique identifier of the plane, assigned in creation order and
            read through the plane_id property.
        fuel: The fuel remaining. Burned one unit per tick while waiting in the
            departure queue, and allowed to go negative.
        queue_wait_ticks: The number of ticks the plane has held the runway,
            starting at 1 when the plane is created.
    """

    _plane_id: PlaneId
    fuel: Fuel
    queue_wait_ticks: Ticks = 1

    @property
    def plane_id(self) -> PlaneId:
        return self._plane_id

    def decrement_fuel(self) -> None:
        self.fuel -= 1

    def increment_queue_wait_ticks(self) -> None:
        self.queue_wait_ticks += 1

    def __str__(self) -> str:
        return f"[{self.plane_id}, {self.fuel}]"
