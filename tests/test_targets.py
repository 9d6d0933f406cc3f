import unittest

import pytest

from violin_tuner.core.errors import ConfigurationError
from violin_tuner.services.targets import (
    FixedStrings,
    FreeChromatic,
    StringTarget,
    mode_from_name,
    resolve_target,
)


class TestFreeChromatic(unittest.TestCase):
    def setUp(self):
        self.mode = FreeChromatic()

    def test_a4_exact(self):
        target = resolve_target(440.0, self.mode, 440.0)
        self.assertEqual(target.label, "A4")
        self.assertEqual(target.frequency, 440.0)

    def test_snaps_to_nearest_semitone(self):
        target = resolve_target(445.0, self.mode, 440.0)
        self.assertEqual(target.label, "A4")
        self.assertEqual(target.frequency, 440.0)

        target = resolve_target(250.0, self.mode, 440.0)
        self.assertEqual(target.label, "B3")
        self.assertAlmostEqual(target.frequency, 246.94, places=2)

    def test_octave_boundary(self):
        self.assertEqual(resolve_target(261.63, self.mode, 440.0).label, "C4")
        self.assertEqual(resolve_target(246.94, self.mode, 440.0).label, "B3")

    def test_reference_pitch_shifts_targets(self):
        target = resolve_target(442.0, self.mode, 442.0)
        self.assertEqual(target.label, "A4")
        self.assertAlmostEqual(target.frequency, 442.0)
        target = resolve_target(884.0, self.mode, 442.0)
        self.assertEqual(target.label, "A5")
        self.assertAlmostEqual(target.frequency, 884.0)


class TestFixedStrings(unittest.TestCase):
    def setUp(self):
        self.mode = FixedStrings()

    def test_nearest_string_by_hz(self):
        # |200 - 196| < |200 - 293.66|
        target = resolve_target(200.0, self.mode, 440.0)
        self.assertEqual(target.label, "G3")
        self.assertEqual(target.frequency, 196.0)

    def test_each_string(self):
        self.assertEqual(resolve_target(290.0, self.mode, 440.0).label, "D4")
        self.assertEqual(resolve_target(430.0, self.mode, 440.0).label, "A4")
        self.assertEqual(resolve_target(1000.0, self.mode, 440.0).label, "E5")
        self.assertEqual(resolve_target(90.0, self.mode, 440.0).label, "G3")

    def test_label_is_string_not_chromatic_note(self):
        # 250 Hz is nearest to B3 chromatically but nearest to the D string
        self.assertEqual(resolve_target(250.0, self.mode, 440.0).label, "D4")

    def test_reference_pitch_scaling(self):
        self.assertEqual(resolve_target(441.0, self.mode, 442.0).frequency, 442.0)
        self.assertEqual(resolve_target(436.0, self.mode, 435.0).frequency, 435.0)
        self.assertAlmostEqual(
            resolve_target(196.0, self.mode, 442.0).frequency, 196.0 * 442.0 / 440.0
        )

    def test_ties_go_to_first_string(self):
        mode = FixedStrings(strings=(StringTarget("low", 100.0), StringTarget("high", 200.0)))
        self.assertEqual(mode.nearest_string(150.0).name, "low")

    def test_empty_table_rejected(self):
        with self.assertRaises(ConfigurationError):
            FixedStrings(strings=())


@pytest.mark.parametrize(
    "name, expected", [("chromatic", FreeChromatic), ("violin", FixedStrings), ("VIOLIN", FixedStrings)]
)
def test_mode_from_name(name, expected):
    assert isinstance(mode_from_name(name), expected)


def test_unknown_mode_name():
    with pytest.raises(ConfigurationError):
        mode_from_name("banjo")


def test_modes_compare_by_value():
    assert FreeChromatic() == FreeChromatic()
    assert FixedStrings() == FixedStrings()
    assert FixedStrings() != FreeChromatic()
