"""Per-symptom value tracking for health simulations.

This package records the values a symptom takes over simulated time, as reported
independently by several causal modules, and exposes the aggregate view a patient
actually expresses: the highest value among the modules that are still active.
"""

from expressed_symptoms.domain.models import NO_SYMPTOM, SymptomRecord
from expressed_symptoms.services import SourceTrack, SymptomTracker

__all__ = ["NO_SYMPTOM", "SymptomRecord", "SourceTrack", "SymptomTracker"]
