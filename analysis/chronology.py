# analysis/chronology.py
from __future__ import annotations
from typing import List, Sequence
from datamodels.events import Event

def is_chronological(events: Sequence[Event]) -> bool:
    for i in range(1, len(events)):
        if events[i].timestamp < events[i - 1].timestamp:
            return False
    return True

def normalize(events: Sequence[Event]) -> List[Event]:
    """Return events in non-decreasing timestamp order.

    Sorting only happens when the forward scan finds an inversion; ties keep
    their input order.
    """
    if is_chronological(events):
        return list(events)
    return sorted(events, key=lambda e: e.timestamp)
