from __future__ import annotations

from typing import Iterable, Optional, Sequence

from app.services.theory.notes import display_label, note_at, note_index

# Strings are indexed low -> high: E A D G B e
STRING_LABELS = ("E", "A", "D", "G", "B", "e")
STRING_COUNT = len(STRING_LABELS)

# Pitch class of each open string
OPEN_STRING_PCS = (4, 9, 2, 7, 11, 4)

# Standard tuning as MIDI pitches: E2 A2 D3 G3 B3 E4
STANDARD_TUNING = (40, 45, 50, 55, 59, 64)

MUTED_LABEL = "x"

Fret = Optional[int]


def fret_for_note(note: str, string_index: int) -> int:
    """
    Lowest fret in [0, 11] that sounds `note` on the given string.
    """
    open_pc = OPEN_STRING_PCS[int(string_index)]
    return (note_index(note) - int(open_pc)) % 12


def note_at_position(string_index: int, fret: int) -> str:
    return note_at(OPEN_STRING_PCS[int(string_index)] + int(fret))


def note_label_at(string_index: int, fret: int, prefer_flat: bool = False) -> str:
    return display_label(note_at_position(string_index, fret), prefer_flat)


def played_frets(frets: Iterable[Fret]) -> list[int]:
    return [int(f) for f in frets if f is not None]


def voicing_pitches(
    frets: Sequence[Fret],
    tuning: tuple[int, ...] = STANDARD_TUNING,
) -> list[int]:
    """
    MIDI pitches of the sounding strings. Muted and negative frets are skipped.
    """
    pitches: list[int] = []
    for idx, fret in enumerate(frets):
        if fret is None or fret < 0 or idx >= len(tuning):
            continue
        pitches.append(int(tuning[idx]) + int(fret))
    return pitches


def format_frets(frets: Iterable[Fret]) -> str:
    return ", ".join(MUTED_LABEL if f is None else str(int(f)) for f in frets)
