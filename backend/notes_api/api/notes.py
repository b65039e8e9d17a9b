from fastapi import APIRouter, Request, Response

from notes_api.models.notes import ErrorOut, NoteIn, NoteOut
from notes_api.storage.event_log import EventLog
from notes_api.storage.notes_store import NotesStore
from notes_api.utils.errors import NoteNotFoundError

router = APIRouter(prefix="/notes", tags=["notes"])

# process-local: everything is gone on restart
store = NotesStore()
event_log = EventLog()

_NOT_FOUND = {404: {"model": ErrorOut, "description": "Note not found"}}
_INVALID = {400: {"model": ErrorOut, "description": "Invalid input data"}}


# NoteIn is validated by FastAPI before any handler runs, so a bad payload
# is rejected with 400 before the store is consulted.

@router.post(
    "",
    response_model=NoteOut,
    status_code=201,
    responses=_INVALID,
    summary="Create a new note",
    description="Creates a new note with title and body",
)
def create_note(payload: NoteIn, request: Request) -> NoteOut:
    note = store.insert(title=payload.title, body=payload.body)
    event_log.note_created(note.id, request.url.path)
    return NoteOut(**note.to_dict())


@router.get(
    "",
    response_model=list[NoteOut],
    summary="Get all notes",
    description="Retrieves all notes in the system",
)
def list_notes() -> list[NoteOut]:
    return [NoteOut(**n.to_dict()) for n in store.list_notes()]


@router.get(
    "/{note_id}",
    response_model=NoteOut,
    responses=_NOT_FOUND,
    summary="Get note by ID",
    description="Retrieves a specific note by its ID",
)
def get_note(note_id: int) -> NoteOut:
    note = store.get_note(note_id)
    if note is None:
        raise NoteNotFoundError(note_id)
    return NoteOut(**note.to_dict())


@router.put(
    "/{note_id}",
    response_model=NoteOut,
    responses={**_INVALID, **_NOT_FOUND},
    summary="Update a note",
    description="Updates an existing note with new title and body",
)
def update_note(note_id: int, payload: NoteIn, request: Request) -> NoteOut:
    updated = store.update_note(note_id, title=payload.title, body=payload.body)
    if updated is None:
        raise NoteNotFoundError(note_id)

    event_log.note_updated(note_id, request.url.path, updated.title, updated.body, updated.updated_at)

    return NoteOut(**updated.to_dict())


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete a note",
    description="Deletes a note by its ID",
)
def delete_note(note_id: int, request: Request) -> Response:
    if not store.delete_note(note_id):
        raise NoteNotFoundError(note_id)

    event_log.note_deleted(note_id, request.url.path)

    return Response(status_code=204)
