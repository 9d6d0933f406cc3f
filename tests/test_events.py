import unittest

from violin_tuner.core.events import EventEmitter, TuningEvents
from violin_tuner.tuning_types import Classification, NoSignal, Reading


class TestEventEmitter(unittest.TestCase):
    def test_listeners_called_in_order(self):
        emitter = EventEmitter()
        calls = []
        emitter.on("tick", lambda x: calls.append(("a", x)))
        emitter.on("tick", lambda x: calls.append(("b", x)))
        emitter.emit("tick", 1)
        self.assertEqual(calls, [("a", 1), ("b", 1)])

    def test_duplicate_registration_ignored(self):
        emitter = EventEmitter()
        calls = []
        emitter.on("tick", calls.append)
        emitter.on("tick", calls.append)
        emitter.emit("tick", 1)
        self.assertEqual(calls, [1])

    def test_failing_listener_does_not_stop_others(self):
        emitter = EventEmitter()
        calls = []

        def broken(_):
            raise ValueError("boom")

        emitter.on("tick", broken)
        emitter.on("tick", calls.append)
        emitter.emit("tick", 2)
        self.assertEqual(calls, [2])

    def test_off_and_clear(self):
        emitter = EventEmitter()
        calls = []
        emitter.on("tick", calls.append)
        emitter.off("tick", calls.append)
        emitter.emit("tick", 1)
        emitter.on("tick", calls.append)
        emitter.clear()
        emitter.emit("tick", 1)
        self.assertEqual(calls, [])


class TestTuningEvents(unittest.TestCase):
    def test_results_routed_by_type(self):
        events = TuningEvents()
        readings, silences = [], []
        events.on_reading(readings.append)
        events.on_no_signal(silences.append)

        reading = Reading(440.0, "A4", 440.0, 0.0, Classification.IN_TUNE)
        events.emit_result(reading)
        events.emit_result(NoSignal())

        self.assertEqual(readings, [reading])
        self.assertEqual(silences, [NoSignal()])

    def test_errors(self):
        events = TuningEvents()
        errors = []
        events.on_error(errors.append)
        error = RuntimeError("no device")
        events.emit_error(error)
        self.assertEqual(errors, [error])


if __name__ == "__main__":
    unittest.main()
