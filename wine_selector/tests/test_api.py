from __future__ import annotations

from fastapi.testclient import TestClient

from wine_selector.app import app

client = TestClient(app)


def _fresh_client() -> TestClient:
    return TestClient(app)


# ── Public endpoints ─────────────────────────────────────────────────────


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_metadata_lists_options_and_collections():
    resp = client.get("/metadata")
    assert resp.status_code == 200
    body = resp.json()
    assert set(body["options"]) == {"words", "foods", "moods"}
    assert "bold" in body["options"]["words"]
    assert len(body["options"]["foods"]) == 18
    assert body["collections"] == ["The Classics", "80 Calories", "Lower Calorie"]


def test_wines_lists_catalog():
    resp = client.get("/wines")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 6
    assert body[0]["name"] == "Cabernet Sauvignon"
    assert body[0]["words"] == sorted(body[0]["words"])


# ── Stateless recommendations ────────────────────────────────────────────


def test_recommendations_idle_for_empty_body():
    resp = client.post("/recommendations", json={})
    assert resp.status_code == 200
    body = resp.json()
    assert body["state"] == "idle"
    assert body["has_selection"] is False
    assert body["results"] == []


def test_recommendations_single_word():
    resp = client.post("/recommendations", json={"words": ["bold"]})
    body = resp.json()
    assert body["state"] == "matches"
    assert [r["wine"]["id"] for r in body["results"]] == [1, 6]
    assert body["results"][0]["match_score"] == 100.0
    assert body["results"][0]["display_score"] == 100


def test_recommendations_score_ordering():
    resp = client.post(
        "/recommendations",
        json={"words": ["rich", "crisp"], "foods": ["chocolate"], "moods": ["evening"]},
    )
    body = resp.json()
    scores = [r["match_score"] for r in body["results"]]
    assert scores == sorted(scores, reverse=True)
    assert body["results"][0]["wine"]["id"] == 1
    assert body["results"][0]["match_score"] == 75.0


def test_recommendations_no_matches():
    resp = client.post("/recommendations", json={"foods": ["steak", "grilled foods"]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["state"] == "no_matches"
    assert body["has_selection"] is True
    assert body["results"] == []


def test_recommendations_echoes_selection():
    resp = client.post("/recommendations", json={"moods": ["casual", "social"]})
    assert resp.json()["selection"] == {"words": [], "foods": [], "moods": ["casual", "social"]}


def test_recommendations_rejects_unknown_tag():
    resp = client.post("/recommendations", json={"words": ["oaky"]})
    assert resp.status_code == 422


def test_recommendations_rejects_tag_in_wrong_category():
    resp = client.post("/recommendations", json={"foods": ["bold"]})
    assert resp.status_code == 422


# ── Session selection ────────────────────────────────────────────────────


def test_selection_starts_idle():
    c = _fresh_client()
    resp = c.get("/selection")
    assert resp.status_code == 200
    assert resp.json()["state"] == "idle"


def test_toggle_persists_within_session():
    c = _fresh_client()
    resp = c.post("/selection/toggle", json={"category": "words", "tag": "bold"})
    assert resp.status_code == 200
    assert resp.json()["state"] == "matches"

    resp = c.post("/selection/toggle", json={"category": "words", "tag": "crisp"})
    body = resp.json()
    assert body["selection"]["words"] == ["bold", "crisp"]
    assert [r["wine"]["id"] for r in body["results"]] == [1, 2, 5, 6]

    assert c.get("/selection").json()["selection"]["words"] == ["bold", "crisp"]


def test_toggle_same_tag_twice_returns_to_idle():
    c = _fresh_client()
    c.post("/selection/toggle", json={"category": "moods", "tag": "romantic"})
    resp = c.post("/selection/toggle", json={"category": "moods", "tag": "romantic"})
    assert resp.json()["state"] == "idle"


def test_toggle_rejects_unknown_tag():
    c = _fresh_client()
    resp = c.post("/selection/toggle", json={"category": "foods", "tag": "tacos"})
    assert resp.status_code == 422
    assert c.get("/selection").json()["state"] == "idle"


def test_toggle_rejects_unknown_category():
    c = _fresh_client()
    resp = c.post("/selection/toggle", json={"category": "colors", "tag": "red"})
    assert resp.status_code == 422


def test_reset_clears_all_categories():
    c = _fresh_client()
    c.post("/selection/toggle", json={"category": "words", "tag": "bold"})
    c.post("/selection/toggle", json={"category": "foods", "tag": "lamb"})
    c.post("/selection/toggle", json={"category": "moods", "tag": "evening"})
    resp = c.post("/selection/reset")
    assert resp.status_code == 200
    body = resp.json()
    assert body["state"] == "idle"
    assert body["selection"] == {"words": [], "foods": [], "moods": []}
    assert c.get("/selection").json()["state"] == "idle"


def test_sessions_are_independent():
    a = _fresh_client()
    b = _fresh_client()
    a.post("/selection/toggle", json={"category": "words", "tag": "bold"})
    assert b.get("/selection").json()["state"] == "idle"
