# analysis/session.py
from __future__ import annotations
import logging
from typing import Dict, List, Sequence, Set
from datamodels.events import Event
from analysis.chronology import normalize
from constants import ACTION_LOGIN, ACTION_LOGOUT

logger = logging.getLogger(__name__)

def find_invalid_sessions(events: Sequence[Event]) -> Set[str]:
    """Flag sessions whose LOGIN/LOGOUT sequencing is broken.

    Each user keeps a stack of open session ids. A LOGIN while another session
    is open flags the new session. A LOGOUT with nothing open, or one that does
    not close the most recent session, flags the logout's session. Whatever is
    still open at the end was never closed.
    """
    invalid: Set[str] = set()
    open_by_user: Dict[str, List[str]] = {}

    for e in normalize(events):
        if not e.has_identity:
            continue
        user = e.user_id.strip()
        session = e.session_id.strip()
        action = e.action_type.strip().upper()
        stack = open_by_user.setdefault(user, [])

        if action == ACTION_LOGIN:
            if stack:
                invalid.add(session)
            stack.append(session)
        elif action == ACTION_LOGOUT:
            if not stack:
                invalid.add(session)
            elif stack[-1] != session:
                invalid.add(session)
            else:
                stack.pop()

    for stack in open_by_user.values():
        invalid.update(stack)

    logger.debug(f"{len(invalid)} invalid sessions across {len(open_by_user)} users")
    return invalid
