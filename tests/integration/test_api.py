import json

import pytest
from fastapi.testclient import TestClient

from main import create_app

TEXT = "Photosynthesis converts light into chemical energy."
CARD = {"question": "What does photosynthesis convert?", "answer": "Light into chemical energy."}
MCQ = {
    "question": "What is produced?",
    "options": ["Glucose", "Salt", "Iron", "Sand"],
    "correctAnswer": "Glucose",
    "explanation": "Photosynthesis makes sugar.",
}


@pytest.fixture
def api(backend):
    with TestClient(create_app(generation_client=backend.client())) as client:
        client.delete("/v1/search/history")
        yield client


@pytest.fixture
def loaded(api):
    assert api.post("/v1/ingest/text", json={"text": TEXT}).status_code == 201
    return api


def test_health(api):
    assert api.get("/").json()["status"] == "ok"


def test_context_starts_empty(api):
    body = api.get("/v1/context").json()
    assert body["has_text"] is False
    assert body["model_id"] == "gemini-2.5-flash"


def test_features_need_text(api, backend):
    for path in ("/v1/flashcards", "/v1/summary", "/v1/quiz/mcqs"):
        resp = api.post(path, json={})
        assert resp.status_code == 409
        assert resp.json() == {"detail": "Please ingest some text first."}
    assert backend.calls == []


def test_blank_ingest_is_rejected(api):
    assert api.post("/v1/ingest/text", json={"text": "  "}).status_code == 409


def test_flashcards_from_ingested_text(loaded, backend):
    backend.script(json.dumps([CARD]))
    resp = loaded.post("/v1/flashcards", json={"count": 1})
    assert resp.status_code == 200
    assert resp.json() == {"flashcards": [CARD]}


def test_backend_failure_is_bad_gateway(loaded, backend):
    backend.script(RuntimeError("quota exceeded"))
    resp = loaded.post("/v1/summary")
    assert resp.status_code == 502
    assert resp.json()["detail"] == "API Error during summary generation: quota exceeded"


def test_malformed_reply_hides_raw_text(loaded, backend):
    backend.script("Sure! Here you go")
    resp = loaded.post("/v1/flashcards", json={})
    assert resp.status_code == 502
    detail = resp.json()["detail"]
    assert detail == "The API returned an invalid format for flashcard generation. Please try again."


def test_settings_change_model_and_language(loaded, backend):
    resp = loaded.put("/v1/context/settings", json={"model_id": "gemini-2.5-pro", "language": "Spanish"})
    assert resp.status_code == 200
    backend.script("Resumen")
    assert loaded.post("/v1/summary").json() == {"text": "Resumen"}
    assert backend.model_ids[-1] == "gemini-2.5-pro"
    assert "in Spanish" in backend.last_prompt


def test_unknown_model_is_rejected(api):
    assert api.put("/v1/context/settings", json={"model_id": "nope"}).status_code == 422


def test_clear_ingested(loaded):
    assert loaded.delete("/v1/ingest").json()["has_text"] is False
    assert loaded.post("/v1/summary").status_code == 409


def test_ingest_topic_replaces_text(api, backend):
    backend.script("Notes about cells.")
    resp = api.post("/v1/ingest/topic", json={"topic": "Cells"})
    assert resp.status_code == 201
    assert resp.json()["text"] == "Notes about cells."
    assert api.get("/v1/context").json()["characters"] == len("Notes about cells.")


def test_ingest_file_upload(api, backend):
    backend.script("Extracted text.")
    resp = api.post(
        "/v1/ingest/file",
        files={"file": ("notes.pdf", b"%PDF-1.4", "application/pdf")},
    )
    assert resp.status_code == 201
    assert resp.json()["context"]["has_text"] is True
    assert backend.last_prompt[1].media_type == "application/pdf"


def test_srs_schedule_and_review(api):
    scheduled = api.post(
        "/v1/srs/cards", json={"flashcards": [CARD], "today": "2026-03-02"}
    ).json()["cards"]
    assert scheduled[0]["interval"] == 0
    assert scheduled[0]["due_date"] == "2026-03-02"

    resp = api.post(
        "/v1/srs/review",
        json={"card": scheduled[0], "grade": "good", "today": "2026-03-02"},
    )
    card = resp.json()["card"]
    assert card["interval"] == 1
    assert card["due_date"] == "2026-03-03"

    due = api.post("/v1/srs/due", json={"cards": [card], "today": "2026-03-02"}).json()
    assert due["cards"] == []


def test_quiz_flow(loaded, backend):
    backend.script(json.dumps({"mcqs": [MCQ]}))
    mcqs = loaded.post("/v1/quiz/mcqs", json={"difficulty": "Easy", "count": 1}).json()["mcqs"]
    assert mcqs == [MCQ]

    resp = loaded.post("/v1/quiz/attempts", json={"mcqs": mcqs, "answers": ["Salt"]})
    assert resp.status_code == 201
    attempt = resp.json()["attempt"]
    assert (attempt["score"], attempt["total"]) == (0, 1)
    assert attempt["incorrectQuestions"] == ["What is produced?"]

    history = loaded.get("/v1/quiz/attempts").json()["attempts"]
    assert len(history) == 1

    backend.script("Review where glucose comes from.")
    guide = loaded.post("/v1/quiz/study-guide", json={"incorrect": resp.json()["incorrect"]})
    assert guide.json() == {"text": "Review where glucose comes from."}


def test_search_records_history(loaded, backend):
    backend.script('{"snippets": ["light into chemical energy"]}')
    for q in ("light", "energy", "LIGHT"):
        resp = loaded.post("/v1/search", json={"query": q})
        assert resp.status_code == 200
    assert resp.json()["snippets"] == ["light into chemical energy"]
    assert resp.json()["history"] == ["LIGHT", "energy"]
    assert loaded.get("/v1/search/history").json() == {"history": ["LIGHT", "energy"]}

    assert loaded.delete("/v1/search/history").json() == {"history": []}
    assert loaded.get("/v1/search/history").json() == {"history": []}


def test_search_without_text_keeps_history(api):
    assert api.post("/v1/search", json={"query": "light"}).status_code == 409
    assert api.get("/v1/search/history").json() == {"history": []}


def test_tutor_returns_extended_history(loaded, backend):
    backend.script("What do leaves absorb?")
    resp = loaded.post("/v1/tutor", json={"history": [], "question": "How do plants eat?"})
    body = resp.json()
    assert body["reply"] == "What do leaves absorb?"
    assert [m["role"] for m in body["history"]] == ["user", "model"]


def test_concept_map_empty_reply(loaded, backend):
    backend.script("null")
    assert loaded.post("/v1/concept-map", json={}).json() == {"nodes": [], "links": []}


def test_study_plan_wire_names(loaded, backend):
    backend.script(json.dumps({"title": "Prep", "durationDays": 1, "schedule": [
        {"day": 1, "topic": "Light", "tasks": ["Read"]},
    ]}))
    body = loaded.post("/v1/study-plan", json={"days": 1}).json()
    assert body["durationDays"] == 1
