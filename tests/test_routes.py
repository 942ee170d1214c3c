from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote creditbook seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from creditbook.app import create_app  # noqa: E402
from creditbook.repositories.json_storage import MemoryStorage  # noqa: E402


@pytest.fixture()
def storage():
    return MemoryStorage()


@pytest.fixture()
def client(storage):
    app = create_app(storage=storage)
    with TestClient(app) as c:
        yield c


def test_list_shows_ranked_people(client):
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.text
    assert body.index("Ali") < body.index("Zahra") < body.index("Ahoo") < body.index("Kaman")
    assert "Score: 60" in body
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_add_person_redirects_and_persists(client, storage):
    resp = client.post("/people", data={"name": "Nima", "tier": "3", "base": ""}, follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"
    people = json.loads(storage.data["credit.people"])
    assert people[-1]["name"] == "Nima"
    assert people[-1]["baseCredit"] == 45


def test_add_person_validation_message(client, storage):
    resp = client.post("/people", data={"name": "   ", "tier": "1"})
    assert resp.status_code == 400
    assert "Name required" in resp.text
    assert storage.data == {}

    resp = client.post("/people", data={"name": "Sam", "tier": "5"})
    assert resp.status_code == 400
    assert "Tier must be 1,2,3" in resp.text


def test_detail_page_and_unknown_person(client):
    resp = client.get("/people/1")
    assert resp.status_code == 200
    assert "cancel last minute" in resp.text
    assert "Score: 60" in resp.text
    assert client.get("/people/404").status_code == 404


def test_log_event_via_form(client):
    resp = client.post("/people/1/events", data={"delta": "5", "note": "<b>ok</b>"}, follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/people/1"
    page = client.get("/people/1").text
    assert "Score: 65" in page
    assert "&lt;b&gt;ok&lt;/b&gt;" in page


def test_log_event_rejects_bad_delta(client):
    resp = client.post("/people/1/events", data={"delta": "7", "note": "x"})
    assert resp.status_code == 400
    assert "Delta must be -10, -5, +5 or +10" in resp.text
    assert client.get("/api/people/1").json()["eventCount"] == 1


def test_edit_and_deactivate(client):
    resp = client.post("/people/2/edit", data={"name": "Kamran", "tier": "9", "base": "90"}, follow_redirects=False)
    assert resp.status_code == 303
    data = client.get("/api/people/2").json()
    assert (data["name"], data["tier"], data["baseCredit"], data["score"]) == ("Kamran", 2, 90, 90)

    resp = client.post("/people/2/deactivate", follow_redirects=False)
    assert resp.headers["location"] == "/"
    names = [p["name"] for p in client.get("/api/people").json()]
    assert "Kamran" not in names
    assert client.get("/api/people/2").json()["active"] is False


def test_api_people_ranked_with_scores(client):
    ranked = client.get("/api/people").json()
    assert [(p["name"], p["score"]) for p in ranked] == [("Ali", 70), ("Zahra", 60), ("Ahoo", 55), ("Kaman", 55)]
    detail = client.get("/api/people/1").json()
    assert detail["history"][0]["delta"] == -10
    assert client.get("/api/people/77").status_code == 404


def test_shutdown_persists_state(storage):
    with TestClient(create_app(storage=storage)):
        pass
    assert set(storage.data) == {"credit.people", "credit.events"}
