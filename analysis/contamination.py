# analysis/contamination.py
from __future__ import annotations
import logging
import networkx as nx
from typing import Dict, List, Optional, Sequence
from datamodels.events import Event
from utils.performance import performance_timer

logger = logging.getLogger(__name__)

@performance_timer
def build_transition_graph(events: Sequence[Event]) -> nx.DiGraph:
    """Directed graph of resource hand-offs inside each session.

    An edge A -> B means B was touched immediately after A in the same
    session, by timestamp.
    """
    by_session: Dict[str, List[Event]] = {}
    for e in events:
        if not e.session_id:
            continue
        by_session.setdefault(e.session_id, []).append(e)

    graph = nx.DiGraph()
    for session_events in by_session.values():
        if len(session_events) < 2:
            continue
        previous = ""
        for e in sorted(session_events, key=lambda x: x.timestamp):
            current = (e.target_resource or "").strip()
            # a blank entry breaks the chain
            if previous and current and previous != current:
                graph.add_edge(previous, current)
            previous = current
    return graph

def _bfs_path(graph: nx.DiGraph, start: str, target: str) -> Optional[List[str]]:
    if start not in graph:
        return None
    parent: Dict[str, str] = {}
    for u, v in nx.bfs_edges(graph, start):
        parent[v] = u
        if v == target:
            break
    if target not in parent:
        return None

    path = [target]
    while path[-1] != start:
        path.append(parent[path[-1]])
    path.reverse()
    return path

def trace_contamination(events: Sequence[Event], start: Optional[str],
                        target: Optional[str]) -> Optional[List[str]]:
    """Shortest chain of resources from start to target, or None if there is none."""
    if start is None or target is None:
        return None
    start = start.strip()
    target = target.strip()
    if start == target:
        return [start]

    graph = build_transition_graph(events)
    if graph.number_of_edges() == 0:
        return None

    path = _bfs_path(graph, start, target)
    logger.debug(f"Contamination {start} -> {target}: "
                 f"{'path of ' + str(len(path)) if path else 'no path'} "
                 f"over {graph.number_of_nodes()} resources")
    return path
