import unittest

from violin_tuner.mock_frame_source import MockFrameSource
from violin_tuner.services.scheduler import TickScheduler
from violin_tuner.services.tuning_session import TuningSession


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class TestTickScheduler(unittest.TestCase):
    def setUp(self):
        self.source = MockFrameSource(frame_size=1024)
        self.session = TuningSession(self.source)
        self.clock = FakeClock()

    def make_scheduler(self, rate_hz=10.0):
        return TickScheduler(self.session, rate_hz=rate_hz, clock=self.clock, sleep=self.clock.sleep)

    def test_does_nothing_when_stopped(self):
        self.assertEqual(self.make_scheduler().run(max_ticks=5), 0)
        self.assertEqual(self.source.frames_served, 0)

    def test_max_ticks(self):
        self.session.start()
        self.assertEqual(self.make_scheduler().run(max_ticks=5), 5)
        self.assertEqual(self.source.frames_served, 5)

    def test_ticks_at_fixed_rate(self):
        self.session.start()
        self.make_scheduler(rate_hz=10.0).run(max_ticks=3)
        for delay in self.clock.sleeps:
            self.assertAlmostEqual(delay, 0.1)

    def test_duration(self):
        self.session.start()
        ticks = self.make_scheduler(rate_hz=10.0).run(duration=1.0)
        self.assertIn(ticks, (10, 11))

    def test_stops_when_session_stops(self):
        self.session.start()
        results = []

        def stop_after_three(result):
            results.append(result)
            if len(results) == 3:
                self.session.stop()

        self.session.events.on_result(stop_after_three)
        self.assertEqual(self.make_scheduler().run(max_ticks=100), 3)

    def test_invalid_rate(self):
        with self.assertRaises(ValueError):
            TickScheduler(self.session, rate_hz=0)


if __name__ == "__main__":
    unittest.main()
