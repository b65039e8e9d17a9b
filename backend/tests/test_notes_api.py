from datetime import datetime


def _create(client, title="t1", body="b1"):
    r = client.post("/notes", json={"title": title, "body": body})
    assert r.status_code == 201
    return r.json()


def test_create_returns_note_with_server_fields(client):
    note = _create(client, "My First Note", "This is the content of my note")

    assert note["id"] == 1
    assert note["title"] == "My First Note"
    assert note["body"] == "This is the content of my note"
    assert note["createdAt"] == note["updatedAt"]


def test_client_supplied_id_is_ignored(client):
    _create(client)
    r = client.post("/notes", json={"id": 42, "title": "t", "body": "b"})
    assert r.status_code == 201
    assert r.json()["id"] == 2


def test_list_notes(client):
    r = client.get("/notes")
    assert r.status_code == 200
    assert r.json() == []

    a = _create(client, "a", "a")
    b = _create(client, "b", "b")

    r = client.get("/notes")
    assert r.status_code == 200
    assert sorted(n["id"] for n in r.json()) == sorted([a["id"], b["id"]])


def test_get_one_and_not_found(client):
    note = _create(client)

    r = client.get(f"/notes/{note['id']}")
    assert r.status_code == 200
    assert r.json() == note

    r = client.get("/notes/999999")
    assert r.status_code == 404
    err = r.json()
    assert err["status"] == 404
    assert err["message"] == "Note not found with id: 999999"
    assert err["path"] == "/notes/999999"
    assert "fieldErrors" not in err


def test_update_note(client):
    note = _create(client)

    r = client.put(f"/notes/{note['id']}", json={"title": "t2", "body": "b2"})
    assert r.status_code == 200
    updated = r.json()
    assert updated["id"] == note["id"]
    assert updated["title"] == "t2"
    assert updated["body"] == "b2"
    assert updated["createdAt"] == note["createdAt"]
    assert datetime.fromisoformat(updated["updatedAt"]) > datetime.fromisoformat(note["createdAt"])


def test_update_missing_note_is_404(client):
    r = client.put("/notes/999999", json={"title": "t", "body": "b"})
    assert r.status_code == 404
    assert r.json()["message"] == "Note not found with id: 999999"


def test_update_validates_before_lookup(client):
    r = client.put("/notes/999999", json={"title": "", "body": "b"})
    assert r.status_code == 400
    assert r.json()["fieldErrors"] == {"title": "Title is required"}


def test_invalid_update_leaves_existing_note_untouched(client):
    note = _create(client, "keep", "me")

    r = client.put(f"/notes/{note['id']}", json={"title": "t" * 101, "body": "b"})
    assert r.status_code == 400
    assert r.json()["message"] == "Validation failed"
    assert r.json()["fieldErrors"] == {"title": "Title must not exceed 100 characters"}

    r = client.put(f"/notes/{note['id']}", json={"title": "t", "body": "   "})
    assert r.status_code == 400
    assert r.json()["fieldErrors"] == {"body": "Body is required"}

    r = client.get(f"/notes/{note['id']}")
    assert r.status_code == 200
    assert r.json() == note


def test_delete_note(client):
    note = _create(client)

    r = client.delete(f"/notes/{note['id']}")
    assert r.status_code == 204
    assert r.content == b""

    r = client.get(f"/notes/{note['id']}")
    assert r.status_code == 404

    r = client.delete(f"/notes/{note['id']}")
    assert r.status_code == 404


def test_create_validation_errors(client):
    r = client.post("/notes", json={"title": "   ", "body": "b" * 1001})
    assert r.status_code == 400
    err = r.json()
    assert err["status"] == 400
    assert err["message"] == "Validation failed"
    assert err["path"] == "/notes"
    assert err["fieldErrors"] == {
        "title": "Title is required",
        "body": "Body must not exceed 1000 characters",
    }

    r = client.post("/notes", json={"title": "t"})
    assert r.status_code == 400
    assert r.json()["fieldErrors"] == {"body": "Body is required"}

    # nothing reached the store
    assert client.get("/notes").json() == []


def test_malformed_requests_are_400(client):
    r = client.post("/notes", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["message"] == "Malformed request"

    r = client.post("/notes", json={"title": 5, "body": "b"})
    assert r.status_code == 400
    assert "title" in r.json()["fieldErrors"]

    r = client.get("/notes/not-a-number")
    assert r.status_code == 400
    assert "id" in r.json()["fieldErrors"]


def test_cors_allows_any_origin(client):
    r = client.get("/notes", headers={"Origin": "http://example.com"})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_health_counts_notes(client):
    _create(client)
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "notes": 1}


def test_openapi_documents_routes_and_examples(client):
    schema = client.get("/openapi.json").json()

    assert schema["paths"]["/notes"]["post"]["summary"] == "Create a new note"
    assert schema["paths"]["/notes"]["get"]["summary"] == "Get all notes"
    assert schema["paths"]["/notes/{note_id}"]["get"]["summary"] == "Get note by ID"
    assert schema["paths"]["/notes/{note_id}"]["put"]["summary"] == "Update a note"
    assert schema["paths"]["/notes/{note_id}"]["delete"]["summary"] == "Delete a note"
    assert "404" in schema["paths"]["/notes/{note_id}"]["delete"]["responses"]

    components = schema["components"]["schemas"]
    assert components["NoteIn"]["examples"][0]["title"] == "My First Note"
    assert components["NoteOut"]["examples"][0]["id"] == 1
    title_schema = components["NoteIn"]["properties"]["title"]
    assert any(s.get("maxLength") == 100 for s in title_schema.get("anyOf", [title_schema]))
