# tests/helpers.py
from datamodels.events import Event


def make_event(ts, user="u1", session="s1", action="VIEW", resource="", severity=1, nbytes=0):
    return Event(
        timestamp=ts,
        user_id=user,
        session_id=session,
        action_type=action,
        target_resource=resource,
        severity_level=severity,
        bytes_transferred=nbytes,
    )
