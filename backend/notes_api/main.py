import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notes_api.api import notes
from notes_api.utils.errors import register_exception_handlers

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


def configure_logging(level: str = LOG_LEVEL) -> None:
    root = logging.getLogger("notes_api")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)


configure_logging()

app = FastAPI(title="Notes API", description="CRUD API for managing notes")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(notes.router)


@app.get("/health")
def health():
    return {"ok": True, "notes": notes.store.count()}
