import io
import unittest

import numpy as np
import soundfile as sf

from app.services.audio import peak_normalize, render_voicing, voicing_to_wav_bytes


class RenderVoicingTests(unittest.TestCase):
    def test_render_shape_and_envelope(self) -> None:
        y = render_voicing((8, None, 5, 9, None, None), sr=8000, duration_s=0.5)

        self.assertEqual(y.dtype, np.float32)
        self.assertEqual(y.shape, (4000,))
        self.assertAlmostEqual(float(y[0]), 0.0, places=6)
        # three voices at 0.2 each
        self.assertLessEqual(float(np.max(np.abs(y))), 0.6 + 1e-6)
        self.assertGreater(float(np.max(np.abs(y))), 0.1)
        self.assertLess(float(np.max(np.abs(y[-20:]))), 0.01)

    def test_muted_voicing_renders_nothing(self) -> None:
        y = render_voicing((None,) * 6, sr=8000)

        self.assertEqual(y.size, 0)

    def test_invalid_parameters(self) -> None:
        with self.assertRaises(ValueError):
            render_voicing((8, None, 5, 9, None, None), sr=8000, duration_s=0.0)

    def test_peak_normalize(self) -> None:
        y = peak_normalize(np.array([0.5, -2.0, 1.0], dtype=np.float32))

        self.assertAlmostEqual(float(np.max(np.abs(y))), 1.0, places=5)


class WavEncodingTests(unittest.TestCase):
    def test_wav_bytes_round_trip(self) -> None:
        data = voicing_to_wav_bytes((8, None, 5, 9, None, None), sr=8000)

        self.assertTrue(data.startswith(b"RIFF"))
        y, sr = sf.read(io.BytesIO(data), dtype="float32")
        self.assertEqual(sr, 8000)
        self.assertEqual(y.shape[0], 4000)

    def test_full_six_string_voicing_does_not_clip(self) -> None:
        data = voicing_to_wav_bytes((3, 3, 3, 3, 3, 3), sr=8000)

        y, _sr = sf.read(io.BytesIO(data), dtype="float32")
        self.assertLessEqual(float(np.max(np.abs(y))), 1.0)

    def test_no_played_strings_raises(self) -> None:
        with self.assertRaises(ValueError):
            voicing_to_wav_bytes((None,) * 6, sr=8000)


if __name__ == "__main__":
    unittest.main()
