"""
Flatten trackers into plain, serializable snapshots.

Each source snapshot keeps the name of the symptom it belongs to so callers can
navigate back, but that field is excluded from dumps: the symptom name already
appears once at the top level of the output.
"""

from pydantic import BaseModel, Field

from expressed_symptoms.domain.models import SymptomRecord
from expressed_symptoms.services.source_track import SourceTrack
from expressed_symptoms.services.symptom_tracker import SymptomTracker


class SourceSnapshot(BaseModel):
    """Point-in-time copy of one module's track."""

    source: str
    symptom: str = Field(default="", exclude=True, description="Owning symptom name")
    resolved: bool
    current_value: int | None = None
    last_update_time: int | None = None
    records: list[SymptomRecord] = Field(default_factory=list)

    @classmethod
    def from_track(cls, track: SourceTrack) -> "SourceSnapshot":
        return cls(
            source=track.source,
            symptom=track.symptom,
            resolved=track.is_resolved(),
            current_value=track.get_current_value(),
            last_update_time=track.get_last_update_time(),
            records=list(track.records),
        )


class SymptomSnapshot(BaseModel):
    """Point-in-time copy of a whole tracker."""

    name: str
    value: int = Field(description="Aggregate value across unresolved sources")
    dominant_source: str | None = None
    sources: dict[str, SourceSnapshot] = Field(default_factory=dict)


def export_tracker(tracker: SymptomTracker) -> SymptomSnapshot:
    """Build a snapshot of ``tracker`` and all of its sources."""
    return SymptomSnapshot(
        name=tracker.name,
        value=tracker.get_aggregate_value(),
        dominant_source=tracker.get_dominant_source(),
        sources={
            module: SourceSnapshot.from_track(track)
            for module, track in tracker.get_sources().items()
        },
    )


def tracker_to_json(tracker: SymptomTracker, indent: int | None = None) -> str:
    return export_tracker(tracker).model_dump_json(indent=indent)
