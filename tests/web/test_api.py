from __future__ import annotations


def test_list_seeded_children_and_subjects(client):
    children = client.get("/api/children").get_json()["children"]
    subjects = client.get("/api/subjects").get_json()["subjects"]

    assert [c["id"] for c in children] == ["child-a", "child-b", "child-c"]
    assert subjects[0] == {"id": "math", "name": "Math", "order": 0}
    assert len(subjects) == 8


def test_child_crud(client):
    res = client.post("/api/children", json={"name": "Dana"})
    assert res.status_code == 201
    child_id = res.get_json()["id"]
    assert res.get_json()["child"]["order"] == 3

    res = client.put(f"/api/children/{child_id}", json={"order": -1})
    assert res.get_json()["child"] == {"id": child_id, "name": "Dana", "order": -1}
    assert client.get("/api/children").get_json()["children"][0]["id"] == child_id

    assert client.delete(f"/api/children/{child_id}").status_code == 200
    assert client.delete(f"/api/children/{child_id}").status_code == 404


def test_update_child_with_fractional_order_is_rejected(client):
    res = client.put("/api/children/child-a", json={"order": 1.9})

    assert res.status_code == 400
    assert client.get("/api/children").get_json()["children"][0] == {"id": "child-a", "name": "Child A", "order": 0}


def test_add_subject_with_blank_name_is_rejected(client):
    res = client.post("/api/subjects", json={"name": "  "})

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_non_json_body_is_rejected(client):
    res = client.post("/api/children", data="name=Dana")
    assert res.status_code == 400


def test_toggle_and_day_overview(client):
    res = client.post("/api/records/toggle", json={"date": "2024-09-03", "child_id": "child-a", "subject_id": "math"})
    assert res.get_json() == {"success": True, "completed": True}

    day = client.get("/api/days/2024-09-03").get_json()["day"]
    child_a = day["children"][0]
    assert child_a["status"] == "Present"
    assert child_a["completed_subject_ids"] == ["math"]
    assert child_a["progress_percent"] == 13
    assert day["children"][1]["status"] == "Absent"
    assert day["children_active"] == 1

    res = client.post("/api/records/toggle", json={"date": "2024-09-03", "child_id": "child-a", "subject_id": "math"})
    assert res.get_json()["completed"] is False


def test_toggle_defaults_to_today(client):
    client.post("/api/records/toggle", json={"child_id": "child-b", "subject_id": "pe"})

    day = client.get("/api/days/today").get_json()["day"]

    assert day["date"] == "2024-09-15"
    assert day["children"][1]["completed_subject_ids"] == ["pe"]


def test_toggle_errors(client):
    assert client.post("/api/records/toggle", json={"child_id": "child-a"}).status_code == 400
    res = client.post("/api/records/toggle", json={"child_id": "ghost", "subject_id": "math"})
    assert res.status_code == 404
    assert client.get("/api/days/yesterday").status_code == 400


def test_school_year_update_and_validation(client):
    res = client.put("/api/school-year", json={"start_date": "2024-08-15", "end_date": "2025-05-30"})
    assert res.get_json()["school_year"] == {"start_date": "2024-08-15", "end_date": "2025-05-30"}

    res = client.put("/api/school-year", json={"start_date": "2025-08-15", "end_date": "2025-05-30"})
    assert res.status_code == 400
    assert client.get("/api/school-year").get_json()["school_year"]["start_date"] == "2024-08-15"


def test_clear_restores_defaults(client):
    client.post("/api/children", json={"name": "Dana"})
    client.post("/api/records/toggle", json={"child_id": "child-a", "subject_id": "math"})

    res = client.post("/api/data/clear").get_json()

    assert [c["id"] for c in res["children"]] == ["child-a", "child-b", "child-c"]
    assert res["school_year"] == {"start_date": "2024-09-01", "end_date": "2025-06-30"}
    summary = client.get("/api/reports/summary").get_json()["summary"]
    assert all(cs["total_days"] == 0 for cs in summary)


def test_report_summary_and_subjects(client):
    client.post("/api/records/toggle", json={"date": "2024-09-03", "child_id": "child-a", "subject_id": "math"})
    client.post("/api/records/toggle", json={"date": "2024-09-04", "child_id": "child-a", "subject_id": "math"})

    body = client.get("/api/reports/summary?start=2024-09-01&end=2024-09-30").get_json()
    assert body["days"] == 30
    assert body["summary"][0]["total_days"] == 2
    assert body["summary"][0]["subject_totals"]["math"] == 2

    pivot = client.get("/api/reports/subjects?start=2024-09-01&end=2024-09-30").get_json()
    assert pivot["rows"][0] == {"subject_id": "math", "subject_name": "Math", "counts": [2, 0, 0], "total": 2}
    assert pivot["average_days_per_child"] == 0.7


def test_report_summary_defaults_to_recent_window(client):
    body = client.get("/api/reports/summary").get_json()
    assert (body["start"], body["end"]) == ("2024-08-16", "2024-09-15")


def test_report_rejects_reversed_range(client):
    assert client.get("/api/reports/summary?start=2024-09-30&end=2024-09-01").status_code == 400


def test_presets(client):
    presets = client.get("/api/reports/presets").get_json()["presets"]
    assert [p["label"] for p in presets] == ["Current School Year", "Last 30 Days", "Last 90 Days", "This Month"]
    assert presets[3] == {"label": "This Month", "start": "2024-09-01", "end": "2024-09-30", "days": 30}


def test_export_download(client):
    res = client.get("/reports/matrix.csv?start=2024-09-01&end=2024-09-30")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert "attendance-matrix-2024-09-15-1430.csv" in res.headers["Content-Disposition"]
    assert res.data.decode("utf-8-sig").startswith("Child,Total Days,Math")


def test_export_pdf_download(client):
    res = client.get("/reports/attendance.pdf?start=2024-09-01&end=2024-09-30")
    assert res.status_code == 200
    assert res.data.startswith(b"%PDF")


def test_export_unknown_format(client):
    assert client.get("/reports/matrix.docx").status_code == 400
