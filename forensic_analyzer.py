"""
forensic_analyzer.py - One entry point for the five access-log analyses over a parsed event set
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Optional, Set

from datamodels.events import Event
from settings import AnalysisConfig, load_config
from utils.performance import performance_monitor
from analysis import (
    load_events,
    find_invalid_sessions,
    reconstruct_timeline,
    prioritize_alerts,
    find_transfer_spikes,
    trace_contamination,
)

logger = logging.getLogger(__name__)


class ForensicAnalyzer:
    """
    Runs the forensic analyses over one ingested access log:
    - invalid sessions (broken LOGIN/LOGOUT sequencing)
    - per-session action timeline
    - top-N alerts by severity and recency
    - byte-transfer spikes per time bucket
    - contamination path between two resources

    The event set is parsed once and shared read-only; every query derives its
    own working structures and keeps nothing between calls.
    """

    def __init__(self, events: Iterable[Event], config: Optional[AnalysisConfig] = None):
        self.events = tuple(events)
        self.config = config or load_config()

    @classmethod
    def from_csv(cls, path: str, config: Optional[AnalysisConfig] = None,
                 strict: Optional[bool] = None) -> "ForensicAnalyzer":
        """Ingest a log file. strict defaults to the config's strict_ingest."""
        config = config or load_config()
        strict = config.strict_ingest if strict is None else strict
        with performance_monitor.monitor_operation("ingest"):
            events = load_events(path, strict=strict)
        return cls(events, config)

    def find_invalid_sessions(self) -> Set[str]:
        with performance_monitor.monitor_operation("invalid_sessions", len(self.events)):
            return find_invalid_sessions(self.events)

    def reconstruct_timeline(self, session_id: Optional[str]) -> List[str]:
        with performance_monitor.monitor_operation("timeline", len(self.events)):
            return reconstruct_timeline(self.events, session_id)

    def prioritize_alerts(self, n: int) -> List[Event]:
        with performance_monitor.monitor_operation("alerts", len(self.events)):
            return prioritize_alerts(self.events, n)

    def find_transfer_spikes(self) -> Dict[int, int]:
        with performance_monitor.monitor_operation("transfer_spikes", len(self.events)):
            return find_transfer_spikes(
                self.events, k=self.config.spike_k, bucket_width=self.config.bucket_width)

    def trace_contamination(self, start_resource: Optional[str],
                            target_resource: Optional[str]) -> Optional[List[str]]:
        with performance_monitor.monitor_operation("contamination", len(self.events)):
            return trace_contamination(self.events, start_resource, target_resource)

    def summary(self, n: int = 10) -> Dict[str, Any]:
        """JSON-serializable overview of the log: invalid sessions, top alerts and spikes."""
        return {
            'total_events': len(self.events),
            'invalid_sessions': sorted(self.find_invalid_sessions()),
            'top_alerts': [ev.to_dict() for ev in self.prioritize_alerts(n)],
            'transfer_spikes': {str(k): v for k, v in self.find_transfer_spikes().items()},
            'spike_config': {'k': self.config.spike_k, 'bucket_width': self.config.bucket_width},
        }
