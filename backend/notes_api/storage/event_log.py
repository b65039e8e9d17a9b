import json
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class Event:
    """One note mutation, e.g. ``NOTE_UPDATED`` on note 3 via ``/notes/3``."""

    event_type: str
    note_id: int
    path: str
    meta: dict[str, Any] = field(default_factory=dict)
    event_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    ts: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "ts": self.ts.isoformat(),
            "note_id": self.note_id,
            "path": self.path,
            "meta": self.meta,
        }


class EventLog:
    """Append-only trail of note mutations, one JSON line per event.

    Lines go to the ``notes_api.events`` logger; where they end up is a
    handler decision (see ``notes_api.main.configure_logging``).
    """

    def __init__(self, logger_name: str = "notes_api.events"):
        self.logger = logging.getLogger(logger_name)

    def emit(self, event: Event) -> None:
        self.logger.info(json.dumps(event.to_dict(), ensure_ascii=False))

    def note_created(self, note_id: int, path: str) -> None:
        self.emit(Event("NOTE_CREATED", note_id, path))

    def note_updated(self, note_id: int, path: str, title: str, body: str, updated_at: datetime) -> None:
        self.emit(Event(
            "NOTE_UPDATED",
            note_id,
            path,
            meta={
                "title_length": len(title),
                "body_length": len(body),
                "updated_at": updated_at.isoformat(),
            },
        ))

    def note_deleted(self, note_id: int, path: str) -> None:
        self.emit(Event("NOTE_DELETED", note_id, path))
