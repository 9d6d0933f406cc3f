import unittest

from violin_tuner.note_utils import (
    get_note_name,
    hz_to_note_number,
    nearest_note_number,
    note_name_from_number,
    note_number_to_hz,
)


class TestScientificPitchNotation(unittest.TestCase):
    def test_middle_c(self):
        # Middle C (C4) should be ~261.63 Hz
        self.assertEqual(get_note_name(261.63), "C4")

    def test_a4(self):
        self.assertEqual(get_note_name(440.0), "A4")
        self.assertEqual(hz_to_note_number(440.0), 69)

    def test_octave_transitions(self):
        self.assertEqual(get_note_name(246.94), "B3")
        self.assertEqual(get_note_name(261.63), "C4")

    def test_sharps(self):
        self.assertEqual(get_note_name(277.18), "C#4")
        self.assertEqual(get_note_name(311.13), "D#4")

    def test_violin_strings(self):
        self.assertEqual(get_note_name(196.0), "G3")
        self.assertEqual(get_note_name(293.66), "D4")
        self.assertEqual(get_note_name(659.25), "E5")

    def test_reference_pitch(self):
        self.assertEqual(get_note_name(442.0, reference_pitch=442.0), "A4")
        self.assertAlmostEqual(note_number_to_hz(69, 442.0), 442.0)
        self.assertAlmostEqual(note_number_to_hz(81), 880.0)

    def test_invalid_frequency(self):
        self.assertEqual(get_note_name(0.0), "--")
        self.assertEqual(get_note_name(-10.0), "--")
        self.assertEqual(get_note_name(float("nan")), "--")

    def test_negative_note_numbers(self):
        self.assertEqual(note_name_from_number(0), "C-1")
        self.assertEqual(note_name_from_number(-1), "B-2")

    def test_rounding_halves_up(self):
        self.assertEqual(nearest_note_number(69.5), 70)
        self.assertEqual(nearest_note_number(68.5), 69)
        self.assertEqual(nearest_note_number(69.49), 69)


if __name__ == "__main__":
    unittest.main()
