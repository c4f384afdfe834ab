from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from app.services.guitar.shapes import CHORD_GROUPS, ChordCatalog, Shape, find_shape, get_group
from app.services.guitar.transpose import Voicing, transpose_shape
from app.services.theory.notes import normalize_note, prefers_flat

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressionEntry:
    chord: str
    root: str
    shape_name: str
    voicing: Voicing

    @property
    def label(self) -> str:
        return f"{self.chord} ({self.shape_name})"

    @property
    def leftmost_fret(self) -> Optional[int]:
        return self.voicing[0] if self.voicing else None

    @property
    def prefer_flat(self) -> bool:
        return prefers_flat(self.chord)


@dataclass(frozen=True)
class _Candidate:
    shape: Shape
    voicing: Voicing

    @property
    def leftmost_fret(self) -> Optional[int]:
        return self.voicing[0] if self.voicing else None


def split_sequence(text: str | None) -> list[str]:
    if not text:
        return []
    return str(text).split()


def _movement(fret: Optional[int], prev_fret: Optional[int]) -> int:
    # A muted leftmost string counts as fret 0
    return abs(int(fret or 0) - int(prev_fret or 0))


def _entry(chord: str, root: str, shape: Shape, voicing: Voicing) -> ProgressionEntry:
    return ProgressionEntry(chord=chord, root=root, shape_name=shape.name, voicing=voicing)


def _first_entry(chord: str, shapes: tuple[Shape, ...], start_shape: str | None) -> ProgressionEntry:
    shape = find_shape(shapes, start_shape)
    if shape is None:
        _LOG.info("Shape %r not in group, starting with %s", start_shape, shapes[0].name)
        shape = shapes[0]
    root = normalize_note(chord)
    return _entry(chord, root, shape, transpose_shape(shape, root))


def _closest_entry(chord: str, shapes: tuple[Shape, ...], prev: ProgressionEntry) -> ProgressionEntry:
    root = normalize_note(chord)
    candidates = [_Candidate(shape=s, voicing=transpose_shape(s, root)) for s in shapes]
    # min() keeps the first of equal keys, so ties go to catalog order
    best = min(candidates, key=lambda c: _movement(c.leftmost_fret, prev.leftmost_fret))
    return _entry(chord, root, best.shape, best.voicing)


def build_progression(
    chord_names: Iterable[str],
    group: str,
    start_shape: str | None = None,
    *,
    catalog: ChordCatalog = CHORD_GROUPS,
) -> list[ProgressionEntry]:
    """
    Pick a shape from `group` for every chord, keeping the hand close to the
    previous chord.

    The first chord uses `start_shape` (the group's first shape when the name
    is unknown). Each later chord takes the shape whose leftmost-string fret
    is nearest the previous chord's. The choice is greedy: it only looks one
    chord back. A missing or empty group yields an empty progression.
    """
    chords = [str(c) for c in chord_names]
    shapes = get_group(group, catalog)
    if not shapes:
        _LOG.warning("No shapes available for chord group %r", group)
        return []
    if not chords:
        return []

    progression = [_first_entry(chords[0], shapes, start_shape)]
    for chord in chords[1:]:
        progression.append(_closest_entry(chord, shapes, progression[-1]))

    _LOG.debug(
        "Built %d-chord progression in %r: %s",
        len(progression),
        group,
        ", ".join(e.label for e in progression),
    )
    return progression
