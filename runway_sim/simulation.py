"""Run the departure simulation for a single-runway airport."""
from dataclasses import dataclass, field
from typing import Optional

import tqdm

from runway_sim.airport import Airport
from runway_sim.config import SimulationConfig
from runway_sim.types import PlaneId, Ticks


@dataclass
class TickSnapshot:
    """The state of the airport at the end of one tick.

    Attributes:
        tick: The index of the tick, starting at 0.
        num_waiting: The number of planes in the waiting queue.
        runway_plane_id: The plane on the runway, or None if it is empty.
        num_departed: The number of planes that have departed so far.
        num_diverted: The number of planes diverted for insufficient fuel so far.
        total_planes_created: The number of planes started so far.
    """

    tick: Ticks
    num_waiting: int
    runway_plane_id: Optional[PlaneId]
    num_departed: int
    num_diverted: int
    total_planes_created: int

    @classmethod
    def capture(cls, tick: Ticks, airport: Airport) -> "TickSnapshot":
        return cls(
            tick=tick,
            num_waiting=airport.num_waiting,
            runway_plane_id=None if airport.runway is None else airport.runway.plane_id,
            num_departed=airport.num_departed,
            num_diverted=airport.num_diverted,
            total_planes_created=airport.total_planes_created,
        )


@dataclass
class SimulationResult:
    """The outcome of a simulation run.

    Attributes:
        config: The constants the run used.
        airport: The airport in its final state.
        ticks_run: The number of ticks the airport was advanced.
        history: One snapshot per tick, if history was recorded.
    """

    config: SimulationConfig
    airport: Airport
    ticks_run: Ticks
    history: list[TickSnapshot] = field(default_factory=list)


def simulation_finished(i: Ticks, config: SimulationConfig, airport: Airport) -> bool:
    """Return True once no planes remain to inject and the waiting queue is empty."""
    return i >= config.simulation_ticks and not airport.waiting_queue


def run_simulation(
    config: Optional[SimulationConfig] = None,
    progress: bool = False,
    record_history: bool = False,
) -> SimulationResult:
    """
    Simulate departures from a single-runway airport.

    A new plane is started on each of the first simulation_ticks ticks. Ticking
    continues after that until the waiting queue has drained, and at least one
    tick always runs.

    Args:
        config: the constants for the run (the fixed defaults if None)
        progress: whether to show a progress bar while ticking
        record_history: whether to keep a snapshot of the airport after every tick
    """
    if config is None:
        config = SimulationConfig()

    airport = config.make_airport()
    history = []

    i = 0
    with tqdm.tqdm(desc="Ticks", unit="tick", disable=not progress) as pbar:
        while True:
            if i < config.simulation_ticks:
                airport.start_new_plane(i)
            airport.tick()

            if record_history:
                history.append(TickSnapshot.capture(i, airport))
            pbar.update(1)
            pbar.set_postfix(waiting=airport.num_waiting, departed=airport.num_departed)

            i += 1
            if simulation_finished(i, config, airport):
                break

    return SimulationResult(config=config, airport=airport, ticks_run=i, history=history)
