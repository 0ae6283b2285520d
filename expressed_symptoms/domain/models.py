"""
Domain models for expressed symptoms.

Records are immutable snapshots; everything that changes over time lives in the
services package. Pydantic gives us validation and freezing for free.
"""

from pydantic import BaseModel, ConfigDict, Field

# Aggregate value reported when no active source holds a value
NO_SYMPTOM = 0


class SymptomRecord(BaseModel):
    """Value reported for a symptom at a given simulation time."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(description="Symptom intensity reported by the module")
    timestamp: int = Field(description="Simulation time of the report")

    def clone(self) -> "SymptomRecord":
        return self.model_copy()
