from __future__ import annotations
from fastapi import APIRouter, HTTPException, Response
import logging

from app.core.config import settings
from app.schemas import (
    ChordGroupInfo,
    Diagram,
    ProgressionEntryOut,
    ProgressionRequest,
    ProgressionResponse,
    ShapeInfo,
    VoicingAudioRequest,
)
from app.services.audio import voicing_to_wav_bytes
from app.services.guitar import (
    CHORD_GROUPS,
    ProgressionEntry,
    build_progression,
    format_frets,
    layout_diagram,
    split_sequence,
)

_LOG = logging.getLogger(__name__)

router = APIRouter()

def _entry_out(entry: ProgressionEntry) -> ProgressionEntryOut:
    layout = layout_diagram(entry.voicing, entry.chord)
    return ProgressionEntryOut(
        label=entry.label,
        chord=entry.chord,
        root=entry.root,
        shape_name=entry.shape_name,
        frets=list(entry.voicing),
        frets_text=format_frets(entry.voicing),
        diagram=Diagram(**layout.to_dict()),
    )

@router.get("/chord-groups", response_model=list[ChordGroupInfo])
def list_chord_groups():
    return [
        ChordGroupInfo(
            name=name,
            shapes=[
                ShapeInfo(
                    name=s.name,
                    anchor=s.anchor,
                    reference_string=s.reference_string,
                    offsets=list(s.offsets),
                )
                for s in shapes
            ],
        )
        for name, shapes in CHORD_GROUPS.items()
    ]

@router.post("/progressions", response_model=ProgressionResponse)
def create_progression(req: ProgressionRequest):
    group = req.group or settings.DEFAULT_CHORD_GROUP
    start_shape = req.start_shape or settings.DEFAULT_START_SHAPE
    sequence = req.sequence if req.sequence is not None else settings.DEFAULT_SEQUENCE

    entries = build_progression(split_sequence(sequence), group, start_shape)
    return ProgressionResponse(
        group=group,
        start_shape=start_shape,
        entries=[_entry_out(e) for e in entries],
    )

@router.post("/voicings/audio")
def render_voicing_audio(req: VoicingAudioRequest):
    if not any(f is not None and f >= 0 for f in req.frets):
        raise HTTPException(422, "Voicing has no played strings")
    try:
        wav = voicing_to_wav_bytes(req.frets)
    except Exception:
        _LOG.exception("Audio rendering failed for %s", req.frets)
        raise HTTPException(500, "Could not render audio. Please try again.")
    return Response(content=wav, media_type="audio/wav")
