import unittest

from violin_tuner.core.config import TunerConfig
from violin_tuner.core.errors import ConfigurationError
from violin_tuner.services.targets import FixedStrings, FreeChromatic


class TestTunerConfig(unittest.TestCase):
    def test_defaults(self):
        config = TunerConfig()
        self.assertEqual(config.reference_pitch, 440.0)
        self.assertIsInstance(config.mode, FreeChromatic)

    def test_reference_pitch_validation(self):
        config = TunerConfig()
        for bad in (0.0, -440.0, float("nan"), float("inf"), 400.0, 500.0, "abc"):
            with self.assertRaises(ConfigurationError):
                config.reference_pitch = bad
        self.assertEqual(config.reference_pitch, 440.0)

    def test_configuration_error_is_value_error(self):
        with self.assertRaises(ValueError):
            TunerConfig(reference_pitch=1000.0)

    def test_set_mode_by_name(self):
        config = TunerConfig()
        config.set_mode_by_name("violin")
        self.assertIsInstance(config.mode, FixedStrings)
        config.set_mode_by_name("chromatic")
        self.assertIsInstance(config.mode, FreeChromatic)
        with self.assertRaises(ConfigurationError):
            config.set_mode_by_name("cello")

    def test_mode_must_be_detection_mode(self):
        config = TunerConfig()
        with self.assertRaises(ConfigurationError):
            config.mode = "violin"

    def test_adjust_reference_pitch_clamps(self):
        config = TunerConfig(reference_pitch=465.0)
        self.assertEqual(config.adjust_reference_pitch(1.0), 466.0)
        self.assertEqual(config.adjust_reference_pitch(1.0), 466.0)
        config.reference_pitch = 416.0
        self.assertEqual(config.adjust_reference_pitch(-5.0), 415.0)


if __name__ == "__main__":
    unittest.main()
