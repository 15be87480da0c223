"""
Structured JSON event log: append-only, one object per line (.jsonl).

Usage:
    from modules.observability.logger import StructuredLogger

    events = StructuredLogger()
    events.log("trip_42", "SUGGEST_DONE", {"days": 3})

Events are written to  <LOGS_DIR>/<stream>.jsonl  (config.LOGS_DIR).
The suggestion engine uses the trip id as the stream name, so the number of
streams is unbounded: each record opens, appends and closes its file, and
no handle outlives a call.
"""

from __future__ import annotations

import json
import os
import re
import threading
from datetime import datetime, timezone
from pathlib import Path

import config

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class StructuredLogger:
    """Thread-safe, append-only JSONL logger."""

    def __init__(self, logs_dir: Path | str | None = None) -> None:
        self._logs_dir = Path(logs_dir) if logs_dir else Path(config.LOGS_DIR)
        self._lock = threading.Lock()

    # ── public API ────────────────────────────────────────────────────────

    def log(self, stream: str, event_type: str, payload: dict) -> None:
        """Append one structured JSON record to ``<stream>.jsonl``."""
        record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "stream": stream,
            "event_type": event_type,
            "payload": payload,
        }
        line = json.dumps(record, default=str, ensure_ascii=False) + "\n"

        with self._lock:
            os.makedirs(self._logs_dir, exist_ok=True)
            with open(self.path_for(stream), "a", encoding="utf-8") as fh:
                fh.write(line)

    def read(self, stream: str) -> list[dict]:
        """Return every record of a stream, oldest first ([] if none)."""
        path = self.path_for(stream)
        if not path.exists():
            return []
        with open(path, encoding="utf-8") as fh:
            return [json.loads(line) for line in fh if line.strip()]

    def path_for(self, stream: str) -> Path:
        return self._logs_dir / f"{_UNSAFE_CHARS.sub('_', stream)}.jsonl"
