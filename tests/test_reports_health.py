# tests/test_reports_health.py
from .conftest import create_class, create_session, register


def test_health_endpoints(client):
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"

    db = client.get("/health/db")
    assert db.status_code == 200
    assert db.json() == {"status": "healthy", "database": "sqlite"}


def test_root_and_process_time_header(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "active"
    assert "X-Process-Time" in response.headers


def test_report_summary_counts(client, instructor):
    member = client.post(
        "/api/members",
        json={"username": "sam", "email": "sam@kimura-dojo.com", "beltRank": "blue"},
    ).json()
    class_obj = create_class(client, instructor["id"])
    first = create_session(client, class_obj["id"], date="2026-01-05")
    second = create_session(client, class_obj["id"], date="2026-01-07")
    for session, status in ((first, "present"), (second, "absent")):
        client.post("/api/attendance", json={"sessionId": session["id"], "studentId": member["id"], "status": status})

    response = client.get("/api/reports/summary")
    assert response.status_code == 200
    summary = response.json()
    assert summary["membersByRole"] == {"student": 1, "instructor": 1, "admin": 0}
    assert summary["beltDistribution"]["blue"] == 1
    assert summary["beltDistribution"]["black"] == 0
    assert summary["totalClasses"] == 1
    assert summary["totalSessions"] == 2
    assert summary["attendance"]["total"] == 2
    assert summary["attendance"]["byStatus"] == {"present": 1, "absent": 1, "late": 0}
    assert summary["attendance"]["attendanceRate"] == 50.0


def test_empty_report_has_zero_rate(client, instructor):
    summary = client.get("/api/reports/summary").json()
    assert summary["attendance"] == {"total": 0, "byStatus": {"present": 0, "absent": 0, "late": 0}, "attendanceRate": 0.0}


def test_students_cannot_read_reports(client):
    register(client, "curious")
    assert client.get("/api/reports/summary").status_code == 403
