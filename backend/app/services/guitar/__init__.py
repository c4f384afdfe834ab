from .fretboard import (
    OPEN_STRING_PCS,
    STANDARD_TUNING,
    STRING_LABELS,
    fret_for_note,
    format_frets,
    note_label_at,
)
from .shapes import CHORD_GROUPS, Shape, find_shape, get_group, group_names
from .transpose import Voicing, transpose_shape
from .progression import ProgressionEntry, build_progression, split_sequence
from .diagram import DiagramDot, DiagramLayout, layout_diagram

__all__ = [
    "OPEN_STRING_PCS",
    "STANDARD_TUNING",
    "STRING_LABELS",
    "fret_for_note",
    "format_frets",
    "note_label_at",
    "CHORD_GROUPS",
    "Shape",
    "find_shape",
    "get_group",
    "group_names",
    "Voicing",
    "transpose_shape",
    "ProgressionEntry",
    "build_progression",
    "split_sequence",
    "DiagramDot",
    "DiagramLayout",
    "layout_diagram",
]
