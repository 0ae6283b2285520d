"""
Aggregate view of one symptom across every module that reports it.

Key behaviours:
- Tracks are created lazily on a module's first report
- The expressed value is the highest current value among unresolved modules
- The module map is safe to use from several simulation threads at once
- Cloning is shallow: clones share SourceTrack objects with the original
"""

import threading

import structlog

from expressed_symptoms.config import TrackingConfig
from expressed_symptoms.domain.models import NO_SYMPTOM
from expressed_symptoms.services.source_track import SourceTrack

logger = structlog.get_logger(__name__)


class SymptomTracker:
    """
    Tracks a named symptom as reported by multiple modules.

    Reads iterate over a snapshot of the module map taken under the lock, so a
    concurrent report may or may not be reflected in a given aggregate. Reports for
    the same module must be serialized by the caller.
    """

    def __init__(self, name: str, config: TrackingConfig | None = None) -> None:
        self._name = name
        self.config = config or TrackingConfig()
        self._sources: dict[str, SourceTrack] = {}
        self._lock = threading.Lock()
        self.logger = logger.bind(symptom=name)

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        return len(self._sources)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"SymptomTracker(name={self._name!r}, sources={len(self._sources)})"

    def _snapshot(self) -> list[tuple[str, SourceTrack]]:
        with self._lock:
            return list(self._sources.items())

    def _get(self, module: str | None) -> SourceTrack | None:
        if module is None:
            return None
        with self._lock:
            return self._sources.get(module)

    def _get_or_create(self, module: str) -> SourceTrack:
        with self._lock:
            track = self._sources.get(module)
            if track is None:
                track = SourceTrack(module, self._name)
                self._sources[module] = track
                created = True
            else:
                created = False
        if created and self.config.log_reports:
            self.logger.debug("source_registered", source=module)
        return track

    def on_set(self, module: str, timestamp: int, value: int, resolved: bool = False) -> None:
        """Record a report from ``module``; its resolved flag replaces the previous one."""
        track = self._get_or_create(module)

        if self.config.warn_on_out_of_order:
            last_update = track.get_last_update_time()
            if last_update is not None and timestamp < last_update:
                self.logger.warning(
                    "out_of_order_report",
                    source=module,
                    timestamp=timestamp,
                    last_update=last_update,
                )

        track.add_info(timestamp, value, resolved)

        if self.config.log_reports:
            self.logger.debug(
                "symptom_reported",
                source=module,
                timestamp=timestamp,
                value=value,
                resolved=bool(resolved),
            )

    def get_aggregate_value(self) -> int:
        """Highest current value among unresolved modules, or ``NO_SYMPTOM``.

        A module that is unresolved and reports 0 is indistinguishable from having
        no active module at all.
        """
        highest = NO_SYMPTOM
        for _, track in self._snapshot():
            value = track.get_current_value()
            if value is not None and not track.is_resolved() and value > highest:
                highest = value
        return highest

    def get_dominant_source(self) -> str | None:
        """Module holding the highest unresolved value; earliest-registered wins ties."""
        dominant: str | None = None
        highest = NO_SYMPTOM
        for module, track in self._snapshot():
            value = track.get_current_value()
            if value is None or track.is_resolved():
                continue
            if dominant is None or value > highest:
                dominant = module
                highest = value
        return dominant

    def get_value_from_source(self, module: str | None) -> int | None:
        track = self._get(module)
        return track.get_current_value() if track is not None else None

    def get_last_update_time_for_source(self, module: str | None) -> int | None:
        track = self._get(module)
        return track.get_last_update_time() if track is not None else None

    def resolve_source(self, module: str | None) -> None:
        """Mark ``module`` resolved. Unknown modules are ignored."""
        track = self._get(module)
        if track is not None:
            track.resolve()
            self.logger.debug("source_resolved", source=module)

    def activate_source(self, module: str | None) -> None:
        """Mark ``module`` active again. Unknown modules are ignored."""
        track = self._get(module)
        if track is not None:
            track.activate()
            self.logger.debug("source_activated", source=module)

    def has_source(self, module: str | None) -> bool:
        return self._get(module) is not None

    def get_sources(self) -> dict[str, SourceTrack]:
        """Snapshot of the module map; the tracks themselves are live."""
        with self._lock:
            return dict(self._sources)

    def clone(self) -> "SymptomTracker":
        """New tracker with its own module map pointing at the same tracks."""
        tracker = SymptomTracker(self._name, self.config)
        with self._lock:
            tracker._sources.update(self._sources)
        self.logger.debug("tracker_cloned", sources=len(tracker._sources))
        return tracker

    __copy__ = clone
