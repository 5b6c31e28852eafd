"""
Append-only JSON-lines log of booking session events.
"""

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

# Overridable via EVENT_LOG_PATH or set_log_path
_LOG_PATH = Path(os.environ.get("EVENT_LOG_PATH", "travelglide_event_log.jsonl"))


def set_log_path(path: str | Path) -> None:
    """Point the event log at ``path``."""
    global _LOG_PATH
    _LOG_PATH = Path(path)


def get_log_path() -> Path:
    return _LOG_PATH


def log_event(event: str, data: Dict[str, Any], *, session_id: Optional[str] = None) -> None:
    """Append one event record.

    Each line carries the booking session id, the event name, a UTC
    timestamp and the payload keys. Values that are not JSON types
    (dates, enums) are written with ``str``.
    """
    record = {
        "session_id": session_id,
        "event": event,
        "ts": datetime.now(timezone.utc).isoformat(),
        **data,
    }
    _LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with _LOG_PATH.open("a", encoding="utf-8") as f:
        json.dump(record, f, ensure_ascii=False, default=str)
        f.write("\n")


def read_events(session_id: Optional[str] = None) -> List[Dict[str, Any]]:
    """Load logged events, optionally only those of one session."""
    if not _LOG_PATH.exists():
        return []
    with _LOG_PATH.open("r", encoding="utf-8") as f:
        events = [json.loads(line) for line in f if line.strip()]
    if session_id is not None:
        events = [e for e in events if e.get("session_id") == session_id]
    return events
