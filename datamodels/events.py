# datamodels/events.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

@dataclass(frozen=True)
class Event:
    timestamp: int                  # event time, in the log's own unit
    user_id: str                    # "" when missing
    session_id: str                 # "" when missing
    action_type: str                # LOGIN / LOGOUT / arbitrary action name
    target_resource: str            # resource identifier, may be ""
    severity_level: int             # higher = more severe
    bytes_transferred: int          # non-negative

    @property
    def has_identity(self) -> bool:
        """True when user, session and action are all present."""
        return bool(
            (self.user_id or "").strip()
            and (self.session_id or "").strip()
            and (self.action_type or "").strip()
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "userId": self.user_id,
            "sessionId": self.session_id,
            "actionType": self.action_type,
            "targetResource": self.target_resource,
            "severityLevel": self.severity_level,
            "bytesTransferred": self.bytes_transferred,
        }
