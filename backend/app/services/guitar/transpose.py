from __future__ import annotations

from typing import Optional

from app.services.guitar.fretboard import fret_for_note, played_frets
from app.services.guitar.shapes import Shape
from app.services.theory.notes import normalize_note, transpose_note

Voicing = tuple[Optional[int], ...]

OCTAVE = 12

# Semitones above the root for the chord tone on the reference string.
# Seventh shapes are laid out from the root, so they anchor at 0 too.
_ANCHOR_SEMITONES: dict[str, int] = {
    "root": 0,
    "third": 4,
    "fifth": 7,
    "seventh": 0,
}


def anchor_note(shape: Shape, root: str) -> str:
    semitones = _ANCHOR_SEMITONES.get(shape.anchor, 0)
    return transpose_note(normalize_note(root), semitones)


def _needs_octave_shift(frets: list[int]) -> bool:
    if not frets:
        return False
    return min(frets) < 0 or 0 in frets


def transpose_shape(shape: Shape, root: str) -> Voicing:
    """
    Place `shape` for the chord rooted at `root`.

    The anchor tone is found on the reference string in [0, 11], the offsets
    are added, and the whole voicing moves up an octave when any played fret
    would be negative or open. Every played fret of the result is >= 1.
    """
    target = anchor_note(shape, root)
    base_fret = fret_for_note(target, shape.reference_string)

    frets: list[Optional[int]] = [
        None if offset is None else int(base_fret) + int(offset) for offset in shape.offsets
    ]

    if _needs_octave_shift(played_frets(frets)):
        frets = [None if f is None else f + OCTAVE for f in frets]

    return tuple(frets)
