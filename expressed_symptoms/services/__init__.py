"""
Stateful services for symptom tracking.

This package holds the per-module history tracks, the cross-module tracker and the
export helpers used to flatten trackers for output.
"""

from .export import SourceSnapshot, SymptomSnapshot, export_tracker, tracker_to_json
from .source_track import SourceTrack
from .symptom_tracker import SymptomTracker

__all__ = [
    "SourceTrack",
    "SymptomTracker",
    "SourceSnapshot",
    "SymptomSnapshot",
    "export_tracker",
    "tracker_to_json",
]
