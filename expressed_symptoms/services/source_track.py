"""
History of a symptom as reported by a single module.

A track is append-only: records are never reordered or dropped, and the "current"
value is always the last record appended. Writes to one track are expected to come
from a single simulation thread at a time; nothing here takes a lock.
"""

from collections.abc import Sequence

from expressed_symptoms.domain.models import SymptomRecord


class SourceTrack:
    """One module's reported values for a symptom plus its resolved flag."""

    def __init__(self, source: str, symptom: str = "") -> None:
        self.source = source
        # Name of the owning tracker; exporters leave it out of their output
        self.symptom = symptom
        self.resolved = False
        self._records: list[SymptomRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return (
            f"SourceTrack(source={self.source!r}, resolved={self.resolved}, "
            f"records={len(self._records)})"
        )

    @property
    def records(self) -> Sequence[SymptomRecord]:
        """Reported records in the order they were added."""
        return tuple(self._records)

    def add_info(self, timestamp: int, value: int, resolved: bool = False) -> SymptomRecord:
        """Append a report and take over its resolved flag.

        Timestamps are not checked for ordering; repeated timestamps are kept as
        separate records.
        """
        record = SymptomRecord(value=value, timestamp=timestamp)
        self._records.append(record)
        self.resolved = bool(resolved)
        return record

    def resolve(self) -> None:
        self.resolved = True

    def activate(self) -> None:
        self.resolved = False

    def is_resolved(self) -> bool:
        return self.resolved

    def get_current_value(self) -> int | None:
        if not self._records:
            return None
        return self._records[-1].value

    def get_last_update_time(self) -> int | None:
        if not self._records:
            return None
        return self._records[-1].timestamp

    def get_value_at_time(self, timestamp: int) -> int | None:
        """Value of the first record reported at ``timestamp``, if any."""
        for record in self._records:
            if record.timestamp == timestamp:
                return record.value
        return None

    def clone(self) -> "SourceTrack":
        """Shallow copy: new history list holding the same (immutable) records."""
        track = SourceTrack(self.source, self.symptom)
        track.resolved = self.resolved
        track._records = list(self._records)
        return track

    __copy__ = clone
