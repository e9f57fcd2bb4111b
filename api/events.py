import json
import os
from datetime import datetime, timezone

from api import config


def _ensure_log_dir() -> None:
    dir_path = os.path.dirname(config.EVENT_LOG_PATH)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)


def _record(event_type: str, payload: dict) -> str:
    record = {
        "event_type": event_type,
        "ts": datetime.now(timezone.utc).isoformat(),
        **dict(payload or {}),
    }
    return json.dumps(record, ensure_ascii=True) + "\n"


def log_event(event_type: str, payload: dict) -> None:
    try:
        _ensure_log_dir()
        with open(config.EVENT_LOG_PATH, "a", encoding="utf-8") as f:
            f.write(_record(event_type, payload))
    except OSError:
        pass


def reset_event_log(reason: str) -> None:
    try:
        _ensure_log_dir()
        with open(config.EVENT_LOG_PATH, "w", encoding="utf-8") as f:
            f.write(_record("event_log_reset", {"reason": reason}))
    except OSError:
        pass


def log_ref_event(event_type: str, payload: dict) -> None:
    log_event(event_type, payload)


def log_sermon_event(event_type: str, payload: dict) -> None:
    log_event(event_type, payload)
