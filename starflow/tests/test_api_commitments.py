from fastapi.testclient import TestClient

from starflow.main import app

client = TestClient(app)

WEEK = "2026-02-W2"


def _goal_document(make_document, make_entry, **kwargs):
    entries = [make_entry("2026-02-08"), make_entry("2026-02-09"), make_entry("2026-02-10")]
    return make_document(entries, **kwargs).to_dict()


def test_state_of_empty_week(make_document):
    resp = client.post("/v1/commitments/state", json={"document": make_document().to_dict(), "weekKey": WEEK})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["state"] == "no_promise"
    assert data["weekStars"] == 0.0
    assert data["weeklyStarTarget"] == 3.0


def test_promise_returns_updated_document(make_document):
    resp = client.post(
        "/v1/commitments/promise",
        json={"document": make_document().to_dict(), "weekKey": WEEK, "text": "walk three times", "userId": "u-1"},
    )
    data = resp.json()["data"]
    assert data["status"]["state"] == "promise_set"
    assert data["document"]["promises"] == {WEEK: "walk three times"}


def test_claim_then_undo(make_document, make_entry):
    document = _goal_document(make_document, make_entry, promises={WEEK: "walk"})

    claimed = client.post("/v1/commitments/claim", json={"document": document, "weekKey": WEEK})
    assert claimed.status_code == 200
    data = claimed.json()["data"]
    assert data["status"]["state"] == "claimed"
    assert data["status"]["exceeded"] is False
    assert data["document"]["claimed"] == [WEEK]

    undone = client.post("/v1/commitments/undo", json={"document": data["document"], "weekKey": WEEK})
    data = undone.json()["data"]
    assert data["status"]["state"] == "goal_met_pending_reflection"
    assert data["document"]["claimed"] == []
    assert data["document"]["promises"] == {WEEK: "walk"}


def test_claim_before_goal_conflicts(make_document):
    resp = client.post(
        "/v1/commitments/claim",
        json={"document": make_document(promises={WEEK: "walk"}).to_dict(), "weekKey": WEEK},
    )
    assert resp.status_code == 409
    body = resp.json()
    assert body["error"]["code"] == "conflict"
    assert body["error"]["request_id"] == resp.headers["x-request-id"]


def test_undo_unclaimed_conflicts(make_document):
    resp = client.post("/v1/commitments/undo", json={"document": make_document().to_dict(), "weekKey": WEEK})
    assert resp.status_code == 409


def test_empty_promise_rejected(make_document):
    resp = client.post(
        "/v1/commitments/promise",
        json={"document": make_document().to_dict(), "weekKey": WEEK, "text": "  "},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "validation_error"


def test_malformed_week_key(make_document):
    resp = client.post("/v1/commitments/state", json={"document": make_document().to_dict(), "weekKey": "2026-W7"})
    assert resp.status_code == 400


def test_state_reports_reward_reveal(make_document):
    body = {"document": make_document().to_dict(), "weekKey": WEEK}
    before = client.post("/v1/commitments/state", json={**body, "today": "2026-02-12"}).json()["data"]
    after = client.post("/v1/commitments/state", json={**body, "today": "2026-02-13"}).json()["data"]

    assert before["revealDate"] == "2026-02-13"
    assert before["unlocked"] is False
    assert after["unlocked"] is True
