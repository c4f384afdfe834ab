from pydantic import BaseModel, Field
from typing import Literal, Optional, List

AnchorInterval = Literal["root", "third", "fifth", "seventh"]

class ShapeInfo(BaseModel):
    name: str
    anchor: AnchorInterval
    reference_string: int
    offsets: List[Optional[int]]

class ChordGroupInfo(BaseModel):
    name: str
    shapes: List[ShapeInfo] = []

class ProgressionRequest(BaseModel):
    sequence: Optional[str] = None
    group: Optional[str] = None
    start_shape: Optional[str] = None

class DiagramDot(BaseModel):
    string: int
    fret: int
    label: str

class Diagram(BaseModel):
    starting_fret: int
    visible_frets: int
    show_nut: bool
    marked_fret: Optional[int] = None
    dots: List[DiagramDot] = []
    string_labels: List[str] = []

class ProgressionEntryOut(BaseModel):
    label: str
    chord: str
    root: str
    shape_name: str
    frets: List[Optional[int]]
    frets_text: str
    diagram: Diagram

class ProgressionResponse(BaseModel):
    group: str
    start_shape: Optional[str] = None
    entries: List[ProgressionEntryOut] = []

class VoicingAudioRequest(BaseModel):
    frets: List[Optional[int]] = Field(..., min_length=1, max_length=6)
