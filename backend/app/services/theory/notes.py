from __future__ import annotations

import logging

_LOG = logging.getLogger(__name__)

CHROMATIC_SCALE = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

_NOTE_TO_INDEX: dict[str, int] = {name: i for i, name in enumerate(CHROMATIC_SCALE)}

FLAT_TO_SHARP: dict[str, str] = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}

SHARP_TO_FLAT: dict[str, str] = {sharp: flat for flat, sharp in FLAT_TO_SHARP.items()}

# Spellings that sit on a natural note's pitch class
ENHARMONIC_FALLBACK: dict[str, str] = {
    "Cb": "B",
    "Fb": "E",
    "B#": "C",
    "E#": "F",
}

DEFAULT_NOTE = "C"


def _clean(text: str) -> str:
    cleaned = str(text).strip().replace("♭", "b").replace("♯", "#")
    if len(cleaned) > 1:
        return cleaned[0].upper() + cleaned[1:].lower()
    return cleaned.upper()


def normalize_note(text: str) -> str:
    """
    Map a note name to one of the 12 canonical sharp spellings.

    Accepts unicode accidentals and any letter case ("bb", "B♭" -> "A#").
    Unknown names are logged and replaced with C; this never raises.
    """
    cleaned = _clean(text)
    if cleaned in FLAT_TO_SHARP:
        return FLAT_TO_SHARP[cleaned]
    if cleaned in _NOTE_TO_INDEX:
        return cleaned
    fallback = ENHARMONIC_FALLBACK.get(cleaned)
    if fallback is not None:
        return fallback
    _LOG.warning("Invalid note: %r, using %s instead", text, DEFAULT_NOTE)
    return DEFAULT_NOTE


def note_index(note: str) -> int:
    return _NOTE_TO_INDEX[normalize_note(note)]


def note_at(index: int) -> str:
    return CHROMATIC_SCALE[int(index) % 12]


def transpose_note(note: str, semitones: int) -> str:
    return note_at(note_index(note) + int(semitones))


def display_label(note: str, prefer_flat: bool = False) -> str:
    if prefer_flat and note in SHARP_TO_FLAT:
        return SHARP_TO_FLAT[note]
    return note


def prefers_flat(token: str | None) -> bool:
    """True when a user's chord token was spelled with a flat."""
    if not token:
        return False
    return "b" in token or "♭" in token
