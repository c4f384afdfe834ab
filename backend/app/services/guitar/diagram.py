from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Optional, Sequence

from app.services.guitar.fretboard import STRING_LABELS, note_label_at, played_frets
from app.services.theory.notes import prefers_flat

MIN_VISIBLE_FRETS = 5


@dataclass(frozen=True)
class DiagramDot:
    string: int
    fret: int
    label: str


@dataclass(frozen=True)
class DiagramLayout:
    starting_fret: int
    visible_frets: int
    show_nut: bool
    marked_fret: Optional[int]
    dots: list[DiagramDot] = field(default_factory=list)
    string_labels: tuple[str, ...] = STRING_LABELS

    def to_dict(self) -> dict:
        return asdict(self)


def layout_diagram(frets: Sequence[Optional[int]], chord: str | None = None) -> DiagramLayout:
    """
    Vertical chord box for a voicing.

    Rows start at the lowest played fret and span at least five frets. Only
    the leftmost string's fret gets a fret number. Dot labels use flats when
    the chord token was written with one.
    """
    played = played_frets(frets)
    start = min(played) if played else 0
    last = max(played) if played else MIN_VISIBLE_FRETS
    visible = max(MIN_VISIBLE_FRETS, last - start + 1)
    prefer_flat = prefers_flat(chord)

    dots: list[DiagramDot] = []
    for string_idx, fret in enumerate(frets):
        if fret is None or not (start <= fret < start + visible):
            continue
        dots.append(
            DiagramDot(
                string=int(string_idx),
                fret=int(fret),
                label=note_label_at(string_idx, fret, prefer_flat),
            )
        )

    return DiagramLayout(
        starting_fret=int(start),
        visible_frets=int(visible),
        show_nut=start == 0,
        marked_fret=frets[0] if frets else None,
        dots=dots,
    )
