"""Tests for the document metadata endpoints."""

import time


def test_list_empty(client):
    response = client.get("/api/docs")
    assert response.status_code == 200
    assert response.json() == []


def test_create_then_list_contains_doc_once(client, create_doc):
    created = create_doc(id="doc-1", title="First")

    docs = client.get("/api/docs").json()
    assert [doc["id"] for doc in docs].count("doc-1") == 1
    assert docs[0] == created


def test_create_returns_generated_fields(client):
    before = int(time.time() * 1000)
    response = client.post("/api/docs", json={"title": "No id"})

    assert response.status_code == 201
    doc = response.json()
    assert doc["id"]
    assert doc["title"] == "No id"
    assert doc["tags"] == []
    assert doc["createdAt"] >= before
    assert doc["updatedAt"] == doc["createdAt"]


def test_create_keeps_client_fields(create_doc):
    doc = create_doc(id="doc-1", title="Extra", createDate=123, favorite=True)
    assert doc["createDate"] == 123
    assert doc["favorite"] is True


def test_create_duplicate_id_fails(client, create_doc):
    create_doc(id="doc-1", title="First")

    response = client.post("/api/docs", json={"id": "doc-1", "title": "Again"})
    assert response.status_code == 500
    assert response.text == "Failed to create document"
    assert len(client.get("/api/docs").json()) == 1


def test_get_document(client, create_doc):
    created = create_doc(id="doc-1", title="First")

    response = client.get("/api/docs/doc-1")
    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_document(client):
    response = client.get("/api/docs/missing")
    assert response.status_code == 404
    assert response.text == "Document missing not found"


def test_update_title_changes_only_title(client, create_doc):
    created = create_doc(id="doc-1", title="Old", tags=["a", "b"])

    response = client.patch("/api/docs/doc-1/title", json={"title": "New"})
    assert response.status_code == 200

    updated = response.json()
    assert updated["title"] == "New"
    assert updated["id"] == created["id"]
    assert updated["tags"] == created["tags"]
    assert updated["createdAt"] == created["createdAt"]
    assert updated["updatedAt"] >= created["updatedAt"]
    assert client.get("/api/docs/doc-1").json() == updated


def test_update_title_non_string_rejected(client, create_doc):
    created = create_doc(id="doc-1", title="Old")

    response = client.patch("/api/docs/doc-1/title", json={"title": 42})
    assert response.status_code == 400
    assert response.text == "Missing title"
    assert client.get("/api/docs/doc-1").json() == created


def test_update_title_missing_field_rejected(client, create_doc):
    create_doc(id="doc-1", title="Old")

    response = client.patch("/api/docs/doc-1/title", json={})
    assert response.status_code == 400


def test_update_title_unknown_document(client):
    response = client.patch("/api/docs/missing/title", json={"title": "New"})
    assert response.status_code == 404


def test_update_title_write_failure(client, create_doc, monkeypatch):
    from collab_backend.core.exceptions import DocumentStoreError

    create_doc(id="doc-1", title="Old")
    database = client.app.state.context.database

    def fail(payload):
        raise DocumentStoreError("disk full")

    monkeypatch.setattr(database, "_write_file", fail)

    response = client.patch("/api/docs/doc-1/title", json={"title": "New"})
    assert response.status_code == 500
    assert response.text == "Failed to update document"
    assert client.get("/api/docs/doc-1").json()["title"] == "Old"


def test_delete_unknown_document(client):
    response = client.delete("/api/docs/missing")
    assert response.status_code == 404
    assert response.text == "Document missing not found"


def test_delete_removes_document(client, create_doc):
    create_doc(id="doc-1", title="First")
    create_doc(id="doc-2", title="Second")

    response = client.delete("/api/docs/doc-1")
    assert response.status_code == 200
    assert response.text == "Document doc-1 removed"

    ids = [doc["id"] for doc in client.get("/api/docs").json()]
    assert ids == ["doc-2"]
    assert client.delete("/api/docs/doc-1").status_code == 404


def test_invalid_create_body_is_bad_request(client):
    response = client.post("/api/docs", json={"title": ["not", "a", "string"]})
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_delete_write_failure_is_server_error(client, create_doc, monkeypatch):
    from collab_backend.core.exceptions import DocumentStoreError

    create_doc(id="doc-1", title="First")
    database = client.app.state.context.database

    def fail(payload):
        raise DocumentStoreError("disk full")

    monkeypatch.setattr(database, "_write_file", fail)

    response = client.delete("/api/docs/doc-1")
    assert response.status_code == 500
    assert response.text == "Failed to delete document"
    assert [doc["id"] for doc in client.get("/api/docs").json()] == ["doc-1"]


def test_create_accepts_long_title_and_id(create_doc):
    title = "t" * 5000
    doc_id = "d" * 500

    doc = create_doc(id=doc_id, title=title)
    assert doc["id"] == doc_id
    assert doc["title"] == title
