# tests/test_end_to_end.py
"""A new student promotes themself to admin and starts running classes."""


def test_alice_runs_her_own_class(client):
    registered = client.post(
        "/api/register",
        json={"username": "alice", "password": "kimura123", "displayName": "Alice", "email": "alice@kimura-dojo.com"},
    )
    assert registered.status_code == 201
    alice = registered.json()
    assert alice["role"] == "student"

    class_body = {
        "title": "Women's Self Defense",
        "description": "Fundamentals of escapes and control",
        "instructorId": alice["id"],
        "level": "beginner",
        "type": "gi",
        "maxCapacity": 16,
    }
    assert client.post("/api/classes", json=class_body).status_code == 403

    promoted = client.post("/api/become-admin").json()
    assert promoted["role"] == "admin"
    assert client.get("/api/user").json()["role"] == "admin"

    created = client.post("/api/classes", json=class_body)
    assert created.status_code == 201
    class_obj = created.json()

    listed = client.get("/api/classes").json()
    assert class_obj["id"] in [c["id"] for c in listed]

    weekly = client.post(
        "/api/sessions/recurring",
        json={
            "classId": class_obj["id"],
            "date": "2026-02-02",
            "startTime": "18:30",
            "endTime": "19:30",
            "daysOfWeek": [1],
            "recurrenceEndDate": "2026-02-23",
        },
    )
    assert weekly.status_code == 201
    assert len(weekly.json()) == 4

    calendar = client.get("/api/sessions").json()
    assert len(calendar) == 4
    assert all(s["classTitle"] == "Women's Self Defense" for s in calendar)

    client.post("/api/logout")
    assert client.get("/api/classes").status_code == 401
