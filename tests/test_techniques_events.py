# tests/test_techniques_events.py
from .conftest import register


def _technique(client, name, category, belt_level=None):
    body = {"name": name, "category": category}
    if belt_level:
        body["beltLevel"] = belt_level
    response = client.post("/api/techniques", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def test_technique_filters(client, instructor):
    armbar = _technique(client, "Armbar", "submission", "white")
    _technique(client, "Berimbolo", "sweep", "purple")
    kimura = _technique(client, "Kimura", "submission", "blue")

    by_category = client.get("/api/techniques/category/submission").json()
    assert {t["id"] for t in by_category} == {armbar["id"], kimura["id"]}

    by_belt = client.get("/api/techniques/belt/white").json()
    assert [t["name"] for t in by_belt] == ["Armbar"]

    combined = client.get("/api/techniques", params={"category": "submission", "beltLevel": "blue"}).json()
    assert [t["name"] for t in combined] == ["Kimura"]

    assert len(client.get("/api/techniques").json()) == 3


def test_unknown_belt_is_rejected(client, instructor):
    assert client.get("/api/techniques/belt/green").status_code == 400


def test_technique_update_and_delete(client, instructor):
    technique = _technique(client, "Triangle", "submission")

    response = client.put(f"/api/techniques/{technique['id']}", json={"beltLevel": "blue", "description": "From guard"})
    assert response.status_code == 200
    assert response.json()["beltLevel"] == "blue"

    assert client.get(f"/api/techniques/{technique['id']}").json()["description"] == "From guard"
    assert client.delete(f"/api/techniques/{technique['id']}").status_code == 204
    assert client.get(f"/api/techniques/{technique['id']}").status_code == 404


def test_students_read_but_cannot_write_techniques(client, instructor):
    _technique(client, "Hip Escape", "escape", "white")
    register(client, "rookie")

    assert len(client.get("/api/techniques").json()) == 1
    assert client.post("/api/techniques", json={"name": "Heel Hook", "category": "submission"}).status_code == 403


SEMINAR = {
    "title": "Spring Seminar",
    "description": "Guest black belt seminar with open Q&A",
    "eventType": "seminar",
    "date": "2026-04-10",
    "startTime": "10:00",
    "endTime": "13:00",
    "location": "Main mat",
}


def test_event_lifecycle(client, instructor):
    response = client.post(
        "/api/events",
        json={**SEMINAR, "instructorId": instructor["id"], "externalLink": "", "cost": "$40", "registrationRequired": True},
    )
    assert response.status_code == 201
    event = response.json()
    assert event["externalLink"] is None
    assert event["registrationRequired"] is True
    assert event["eventType"] == "seminar"

    updated = client.put(f"/api/events/{event['id']}", json={"externalLink": "https://kimura-dojo.com/seminar"})
    assert updated.status_code == 200
    assert updated.json()["externalLink"].startswith("https://kimura-dojo.com/seminar")

    assert [e["id"] for e in client.get("/api/events").json()] == [event["id"]]
    assert client.delete(f"/api/events/{event['id']}").status_code == 204
    assert client.get(f"/api/events/{event['id']}").status_code == 404


def test_event_validation(client, instructor):
    bad_window = client.post("/api/events", json={**SEMINAR, "startTime": "14:00"})
    assert bad_window.status_code == 400

    bad_type = client.post("/api/events", json={**SEMINAR, "eventType": "party"})
    assert bad_type.status_code == 400

    bad_link = client.post("/api/events", json={**SEMINAR, "externalLink": "not a url"})
    assert bad_link.status_code == 400


def test_event_update_checks_merged_time_window(client, instructor):
    event = client.post("/api/events", json=SEMINAR).json()
    response = client.put(f"/api/events/{event['id']}", json={"endTime": "09:00"})
    assert response.status_code == 400
