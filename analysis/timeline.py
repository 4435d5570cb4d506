# analysis/timeline.py
from __future__ import annotations
from typing import List, Optional, Sequence
from datamodels.events import Event
from analysis.chronology import normalize

def reconstruct_timeline(events: Sequence[Event], session_id: Optional[str]) -> List[str]:
    """Action types of one session, oldest first."""
    if session_id is None:
        return []
    return [e.action_type for e in normalize(events) if e.session_id == session_id]
