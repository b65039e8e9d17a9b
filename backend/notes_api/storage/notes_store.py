import logging
import threading
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Any

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Note:
    id: int
    title: str
    body: str
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Note":
        return cls(
            id=int(raw["id"]),
            title=raw["title"],
            body=raw["body"],
            created_at=datetime.fromisoformat(raw["createdAt"]),
            updated_at=datetime.fromisoformat(raw["updatedAt"]),
        )


class NotesStore:
    """In-memory keeper of notes and of the id counter.

    Ids start at 1 and are never reused, even after a delete. Every public
    method holds the same lock, so id assignment and map mutation happen
    together and readers never see a half-applied change.

    Title/body are trusted: callers validate them before getting here.
    """

    def __init__(self, clock=_utc_now):
        self._clock = clock
        self._lock = threading.RLock()
        self._notes: dict[int, Note] = {}
        self._next_id = 1

    def insert(self, title: str, body: str) -> Note:
        with self._lock:
            note_id = self._next_id
            self._next_id += 1
            now = self._clock()
            note = Note(id=note_id, title=title, body=body, created_at=now, updated_at=now)
            self._notes[note_id] = note
        logger.debug("note %s inserted", note_id)
        return note

    def list_notes(self) -> list[Note]:
        with self._lock:
            return list(self._notes.values())

    def get_note(self, note_id: int) -> Note | None:
        with self._lock:
            return self._notes.get(note_id)

    def update_note(self, note_id: int, title: str, body: str) -> Note | None:
        with self._lock:
            existing = self._notes.get(note_id)
            if existing is None:
                return None

            now = self._clock()
            # clock resolution: updated_at must still move forward
            if now <= existing.updated_at:
                now = existing.updated_at + timedelta(microseconds=1)

            updated = replace(existing, title=title, body=body, updated_at=now)
            self._notes[note_id] = updated
        logger.debug("note %s updated", note_id)
        return updated

    def delete_note(self, note_id: int) -> bool:
        with self._lock:
            removed = self._notes.pop(note_id, None) is not None
        if removed:
            logger.debug("note %s deleted", note_id)
        return removed

    def count(self) -> int:
        with self._lock:
            return len(self._notes)
