# analysis/alerts.py
from __future__ import annotations
import heapq
from typing import List, Sequence, Tuple
from dataclasses import dataclass
from datamodels.events import Event

UrgencyKey = Tuple[int, int, str, str]

def urgency_key(ev: Event) -> UrgencyKey:
    """Sort key where smaller means more urgent.

    Higher severity first, then more recent, then user id and session id
    ascending so that equal alerts still come out in a fixed order.
    """
    return (-ev.severity_level, -ev.timestamp, ev.user_id or "", ev.session_id or "")

@dataclass(frozen=True)
class _Ranked:
    """Heap entry ordered least-urgent-first, so the heap root is the worst kept alert."""
    key: UrgencyKey
    event: Event

    def __lt__(self, other: "_Ranked") -> bool:
        return self.key > other.key

def prioritize_alerts(events: Sequence[Event], n: int) -> List[Event]:
    """Top-n most urgent events, most urgent first.

    Keeps a heap of at most n entries, so the scan is O(m log n).
    """
    if n <= 0 or not events:
        return []

    heap: List[_Ranked] = []
    for ev in events:
        cand = _Ranked(urgency_key(ev), ev)
        if len(heap) < n:
            heapq.heappush(heap, cand)
        elif cand.key < heap[0].key:
            heapq.heapreplace(heap, cand)

    return [r.event for r in sorted(heap, key=lambda r: r.key)]
