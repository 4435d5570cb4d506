"""analysis package

Expose the forensic analyses while keeping their submodules importable
(session, timeline, alerts, spikes, contamination).
"""

from __future__ import annotations

from analysis.ingest import load_events, parse_lines, parse_row
from analysis.chronology import normalize, is_chronological
from analysis.session import find_invalid_sessions
from analysis.timeline import reconstruct_timeline
from analysis.alerts import prioritize_alerts, urgency_key
from analysis.spikes import bucket_totals, find_transfer_spikes
from analysis.contamination import build_transition_graph, trace_contamination

__all__ = [
    "load_events",
    "parse_lines",
    "parse_row",
    "normalize",
    "is_chronological",
    "find_invalid_sessions",
    "reconstruct_timeline",
    "prioritize_alerts",
    "urgency_key",
    "bucket_totals",
    "find_transfer_spikes",
    "build_transition_graph",
    "trace_contamination",
]
