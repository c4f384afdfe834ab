from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Optional

AnchorInterval = Literal["root", "third", "fifth", "seventh"]

_X = None  # muted string


@dataclass(frozen=True)
class Shape:
    """
    Movable chord shape.

    `offsets` are relative frets for strings low E -> high e (None = muted).
    Offset 0 on `reference_string` is where the `anchor` chord tone sits.
    """

    name: str
    offsets: tuple[Optional[int], ...]
    anchor: AnchorInterval = "root"
    reference_string: int = 0


ChordCatalog = Mapping[str, tuple[Shape, ...]]


_MAJOR = (
    Shape("Maj-Root6", (0, _X, -3, 1, _X, _X), "root"),
    Shape("Maj-Third6", (0, _X, -2, 0, _X, _X), "third"),
    Shape("Maj-Fifth6", (0, _X, -1, 2, _X, _X), "fifth"),
)

# The seventh-anchored shape is laid out from the root position
_MAJOR_7TH = (
    Shape("7th-Root6", (0, _X, -1, -1, 0, _X), "root"),
    Shape("7th-Third6", (0, _X, -2, 0, 0, _X), "third"),
    Shape("7th-Fifth6", (0, _X, -1, 1, _X, _X), "fifth"),
    Shape("7th-Seventh6", (0, _X, -2, -2, -2, _X), "seventh"),
)

_SIXTH = (
    Shape("6th-Root6", (0, _X, -1, 1, 0, _X), "root"),
    Shape("6th-Third6", (0, _X, -2, 0, -2, _X), "third"),
    Shape("6th-Fifth6", (0, _X, -1, -1, -2, _X), "fifth"),
    Shape("6th-Fifth6-Alt", (0, _X, 0, 0, 0, _X), "fifth"),
)

CHORD_GROUPS: ChordCatalog = MappingProxyType(
    {
        "Major Chords": _MAJOR,
        "Major 7th Chords": _MAJOR_7TH,
        "6 Chords": _SIXTH,
    }
)


def group_names(catalog: ChordCatalog = CHORD_GROUPS) -> list[str]:
    return list(catalog.keys())


def get_group(name: str, catalog: ChordCatalog = CHORD_GROUPS) -> Optional[tuple[Shape, ...]]:
    shapes = catalog.get(name)
    if shapes is None:
        return None
    return tuple(shapes)


def find_shape(shapes: tuple[Shape, ...], name: str | None) -> Optional[Shape]:
    if not name:
        return None
    for shape in shapes:
        if shape.name == name:
            return shape
    return None
