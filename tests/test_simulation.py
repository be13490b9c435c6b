"""Test the runway_sim.simulation module."""
import unittest
from unittest import mock

from runway_sim.airport import Airport
from runway_sim.config import SimulationConfig
from runway_sim.simulation import run_simulation, simulation_finished


class TestRunSimulation(unittest.TestCase):
    def test_two_plane_scenario(self):
        config = SimulationConfig(simulation_ticks=2)
        result = run_simulation(config)
        airport = result.airport

        self.assertEqual(airport.total_planes_created, 2)
        self.assertEqual(
            [(p.plane_id, p.fuel) for p in airport.departed_queue], [(0, 149)]
        )
        self.assertEqual(airport.num_waiting, 0)
        self.assertEqual(airport.num_diverted, 0)

        # Plane 1 is still on the runway when the waiting queue drains
        self.assertEqual(airport.runway.plane_id, 1)
        self.assertEqual(airport.runway.fuel, 147)
        self.assertEqual(result.ticks_run, 4)

    def test_insufficient_fuel_scenario(self):
        config = SimulationConfig(simulation_ticks=5, fuel_level=0)
        result = run_simulation(config, record_history=True)
        airport = result.airport

        # Each plane burns one unit before it reaches the head of the queue
        self.assertEqual(
            [(p.plane_id, p.fuel) for p in airport.insufficient_fuel_queue],
            [(i, -1) for i in range(5)],
        )
        self.assertEqual(airport.num_departed, 0)
        self.assertTrue(
            all(snapshot.runway_plane_id is None for snapshot in result.history)
        )

    def test_zero_ticks_runs_once(self):
        result = run_simulation(SimulationConfig(simulation_ticks=0))
        self.assertEqual(result.ticks_run, 1)
        self.assertEqual(result.airport.total_planes_created, 0)

    def test_default_run(self):
        result = run_simulation()
        airport = result.airport

        self.assertEqual(result.config, SimulationConfig())
        self.assertEqual(airport.total_planes_created, 50)
        self.assertEqual(airport.num_waiting, 0)
        self.assertEqual(airport.num_planes_accounted_for, 50)
        self.assertGreater(airport.num_departed, 0)
        self.assertEqual(result.history, [])

    def test_progress_bar(self):
        result = run_simulation(SimulationConfig(simulation_ticks=3), progress=True)
        self.assertEqual(result.airport.total_planes_created, 3)

    def test_progress_bar_closed_on_error(self):
        bar = mock.MagicMock()
        bar.__enter__.return_value = bar
        bar.__exit__.return_value = False

        with mock.patch("runway_sim.simulation.tqdm.tqdm", return_value=bar):
            with mock.patch.object(Airport, "tick", side_effect=RuntimeError("boom")):
                with self.assertRaises(RuntimeError):
                    run_simulation(progress=True)

        bar.__exit__.assert_called_once()

    def test_simulation_finished(self):
        config = SimulationConfig(simulation_ticks=2)
        airport = config.make_airport()
        self.assertFalse(simulation_finished(1, config, airport))
        self.assertTrue(simulation_finished(2, config, airport))

        airport.start_new_plane(0)
        self.assertFalse(simulation_finished(2, config, airport))


class TestSimulationProperties(unittest.TestCase):
    def setUp(self):
        self.result = run_simulation(record_history=True)
        self.airport = self.result.airport

    def test_history_covers_every_tick(self):
        self.assertEqual(len(self.result.history), self.result.ticks_run)
        self.assertEqual(
            [snapshot.tick for snapshot in self.result.history],
            list(range(self.result.ticks_run)),
        )

    def test_conservation(self):
        for snapshot in self.result.history:
            on_runway = 0 if snapshot.runway_plane_id is None else 1
            self.assertEqual(
                snapshot.total_planes_created,
                snapshot.num_waiting
                + on_runway
                + snapshot.num_departed
                + snapshot.num_diverted,
            )

    def test_fifo_admission_order(self):
        admitted = []
        for snapshot in self.result.history:
            plane_id = snapshot.runway_plane_id
            if plane_id is not None and (not admitted or admitted[-1] != plane_id):
                admitted.append(plane_id)

        self.assertEqual(admitted, sorted(admitted))
        departed_ids = [p.plane_id for p in self.airport.departed_queue]
        self.assertEqual(departed_ids, sorted(departed_ids))
        diverted_ids = [p.plane_id for p in self.airport.insufficient_fuel_queue]
        self.assertEqual(diverted_ids, sorted(diverted_ids))

    def test_departure_timing(self):
        for plane in self.airport.departed_queue:
            self.assertEqual(plane.queue_wait_ticks, self.airport.departure_threshold)

    def test_departed_planes_had_enough_fuel(self):
        for plane in self.airport.departed_queue:
            self.assertGreaterEqual(plane.fuel, self.airport.fuel_required_for_departure)
        for plane in self.airport.insufficient_fuel_queue:
            self.assertLess(plane.fuel, self.airport.fuel_required_for_departure)


class TestFuelMonotonicity(unittest.TestCase):
    def test_fuel_burns_only_while_waiting(self):
        config = SimulationConfig(simulation_ticks=10)
        airport = config.make_airport()
        planes = []

        for i in range(10):
            planes.append(airport.start_new_plane(i))
            waiting_before = {id(p): p.fuel for p in airport.waiting_queue}
            others_before = {
                id(p): p.fuel for p in planes if id(p) not in waiting_before
            }

            airport.tick()

            for plane in planes:
                if id(plane) in waiting_before:
                    self.assertEqual(plane.fuel, waiting_before[id(plane)] - 1)
                else:
                    self.assertEqual(plane.fuel, others_before[id(plane)])


class TestIdempotentTermination(unittest.TestCase):
    def test_ticking_an_idle_airport(self):
        result = run_simulation(SimulationConfig(simulation_ticks=2))
        airport = result.airport

        # Let the last plane leave the runway
        while not airport.is_runway_empty():
            airport.tick()
        departed = [(p.plane_id, p.fuel) for p in airport.departed_queue]

        for _ in range(5):
            airport.tick()

        self.assertEqual([(p.plane_id, p.fuel) for p in airport.departed_queue], departed)
        self.assertEqual(departed, [(0, 149), (1, 147)])
        self.assertTrue(airport.is_runway_empty())
        self.assertEqual(airport.num_waiting, 0)
        self.assertEqual(airport.total_planes_created, 2)


if __name__ == "__main__":
    unittest.main()
