import contextlib
import io
import json
import unittest

from app.scripts.show_progression import main


class ShowProgressionScriptTests(unittest.TestCase):
    def _run(self, argv: list[str]) -> tuple[int, str]:
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            code = main(argv)
        return code, buf.getvalue()

    def test_prints_one_line_per_chord(self) -> None:
        code, out = self._run(["C", "F", "--group", "Major Chords", "--shape", "Maj-Root6"])

        self.assertEqual(code, 0)
        lines = out.strip().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("C (Maj-Root6)"))
        self.assertTrue(lines[0].endswith("[8, x, 5, 9, x, x]"))
        self.assertTrue(lines[1].startswith("F (Maj-Fifth6)"))

    def test_json_output(self) -> None:
        code, out = self._run(["C F Bb", "--json"])

        self.assertEqual(code, 0)
        body = json.loads(out)
        self.assertEqual(len(body["entries"]), 3)

    def test_unknown_group_exits_nonzero(self) -> None:
        with self.assertLogs("app.services.guitar.progression", level="WARNING"):
            code, out = self._run(["C", "--group", "Minor Chords"])

        self.assertEqual(code, 1)
        self.assertIn("No progression generated", out)


if __name__ == "__main__":
    unittest.main()
