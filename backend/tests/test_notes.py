import unittest

from app.services.theory.notes import (
    CHROMATIC_SCALE,
    FLAT_TO_SHARP,
    display_label,
    normalize_note,
    note_at,
    note_index,
    prefers_flat,
)


class NormalizeNoteTests(unittest.TestCase):
    def test_canonical_names_are_unchanged(self) -> None:
        for note in CHROMATIC_SCALE:
            self.assertEqual(normalize_note(note), note)

    def test_flats_become_sharps(self) -> None:
        for flat, sharp in FLAT_TO_SHARP.items():
            self.assertEqual(normalize_note(flat), sharp)

    def test_cleans_case_whitespace_and_glyphs(self) -> None:
        self.assertEqual(normalize_note("  bb "), "A#")
        self.assertEqual(normalize_note("DB"), "C#")
        self.assertEqual(normalize_note("f#"), "F#")
        self.assertEqual(normalize_note("e♭"), "D#")
        self.assertEqual(normalize_note("G♯"), "G#")
        self.assertEqual(normalize_note("a"), "A")

    def test_enharmonic_fallback(self) -> None:
        self.assertEqual(normalize_note("B#"), "C")
        self.assertEqual(normalize_note("E#"), "F")
        self.assertEqual(normalize_note("Cb"), "B")
        self.assertEqual(normalize_note("Fb"), "E")

    def test_unknown_note_defaults_to_c_with_warning(self) -> None:
        with self.assertLogs("app.services.theory.notes", level="WARNING") as logs:
            self.assertEqual(normalize_note("H"), "C")
        self.assertIn("'H'", logs.output[0])

    def test_empty_and_suffixed_tokens_default_to_c(self) -> None:
        with self.assertLogs("app.services.theory.notes", level="WARNING"):
            self.assertEqual(normalize_note(""), "C")
        with self.assertLogs("app.services.theory.notes", level="WARNING"):
            self.assertEqual(normalize_note("Cmaj7"), "C")


class NoteLookupTests(unittest.TestCase):
    def test_note_at_wraps_modulo_12(self) -> None:
        self.assertEqual(note_at(0), "C")
        self.assertEqual(note_at(13), "C#")
        self.assertEqual(note_at(-1), "B")

    def test_note_index(self) -> None:
        self.assertEqual(note_index("C"), 0)
        self.assertEqual(note_index("Bb"), 10)
        self.assertEqual(note_index("B"), 11)

    def test_display_label(self) -> None:
        self.assertEqual(display_label("A#", prefer_flat=True), "Bb")
        self.assertEqual(display_label("A#"), "A#")
        self.assertEqual(display_label("E", prefer_flat=True), "E")

    def test_prefers_flat(self) -> None:
        self.assertTrue(prefers_flat("Bb"))
        self.assertTrue(prefers_flat("E♭"))
        self.assertFalse(prefers_flat("B"))
        self.assertFalse(prefers_flat("F#"))
        self.assertFalse(prefers_flat(None))


if __name__ == "__main__":
    unittest.main()
