# /tests/test_class_roster_api.py

import io

import pandas as pd
import pytest


@pytest.fixture
def campus(make_department, make_batch, make_class, make_faculty, make_course, make_student, client):
    """Two classes, two faculty members, and allocations tying them together."""
    dept = make_department(code="CSE", name="Computer Science")
    batch = make_batch(name="2022-2026")
    class_a = make_class(name="A", departmentId=dept["id"], batchId=batch["id"])
    class_b = make_class(name="B", departmentId=dept["id"], batchId=batch["id"])
    anna = make_faculty(name="Anna", email="anna@college.edu", departmentId=dept["id"])
    bob = make_faculty(name="Bob", email="bob@college.edu", departmentId=dept["id"])
    course = make_course(code="CSE101", departmentId=dept["id"])

    for faculty, cls in ((anna, class_a), (bob, class_b)):
        response = client.post("/api/course-allocations", json={
            "courseId": course["id"], "facultyId": faculty["id"], "classId": cls["id"], "academicYear": "2024-2025"
        })
        assert response.status_code == 201

    make_student(class_a["id"], name="Zoe", rollNo="R-002", email="zoe@college.edu")
    make_student(class_a["id"], name="John", rollNo="R-001", email="john@college.edu", guardianMobile="9876543210")
    make_student(class_b["id"], name="Amy", rollNo="R-100", email="amy@college.edu")
    return {"dept": dept, "batch": batch, "class_a": class_a, "class_b": class_b, "anna": anna, "bob": bob, "course": course}


def test_classes_are_returned_with_department_and_batch_populated(client, campus):
    classes = client.get("/api/classes").json()["data"]

    assert [c["name"] for c in classes] == ["A", "B"]
    assert classes[0]["departmentId"]["code"] == "CSE"
    assert classes[0]["batchId"]["name"] == "2022-2026"


def test_class_roster_is_sorted_by_roll_number(client, campus):
    roster = client.get(f"/api/classes/{campus['class_a']['id']}/students").json()["data"]

    assert [s["rollNo"] for s in roster] == ["R-001", "R-002"]
    assert roster[0]["guardianMobile"] == "9876543210"


def test_roster_of_unknown_class_is_not_found(client):
    assert client.get("/api/classes/cls_missing/students").status_code == 404


def test_allocations_filtered_by_faculty_populate_the_class(client, campus):
    response = client.get("/api/course-allocations", params={"facultyId": campus["anna"]["id"]})

    allocations = response.json()["data"]
    assert len(allocations) == 1
    allocation = allocations[0]
    assert allocation["classId"]["id"] == campus["class_a"]["id"]
    assert allocation["classId"]["departmentId"]["code"] == "CSE"
    assert allocation["courseId"]["code"] == "CSE101"
    assert "password" not in allocation["facultyId"]


def test_allocation_with_unknown_reference_is_rejected(client, campus):
    response = client.post("/api/course-allocations", json={
        "courseId": campus["course"]["id"], "facultyId": "fac_missing", "classId": campus["class_a"]["id"]
    })

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REFERENCE"


def test_duplicate_roll_number_is_rejected(client, campus, make_student):
    response = client.post("/api/students", json={
        "name": "Clone", "rollNo": "R-001", "email": "clone@college.edu", "classId": campus["class_b"]["id"]
    })

    assert response.status_code == 400


def test_deleting_a_class_removes_its_students(client, campus):
    class_id = campus["class_b"]["id"]

    assert client.delete(f"/api/classes/{class_id}").status_code == 200
    assert client.get(f"/api/classes/{class_id}/students").status_code == 404
    assert client.get("/api/dashboard/summary").json()["studentCount"] == 2


def test_roster_export_is_csv(client, campus):
    response = client.get(f"/api/classes/{campus['class_a']['id']}/students/export")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    df = pd.read_csv(io.StringIO(response.text), dtype=str)
    assert list(df["Roll No"]) == ["R-001", "R-002"]
    assert set(df["Class"]) == {"CSE - 2022-2026 - Section A"}


def test_dashboard_summary_counts_records(client, campus):
    summary = client.get("/api/dashboard/summary").json()

    assert summary == {
        "departmentCount": 1, "courseCount": 1, "facultyCount": 2, "classCount": 2, "studentCount": 3
    }


def test_student_update_and_delete(client, campus):
    roster = client.get(f"/api/classes/{campus['class_a']['id']}/students").json()["data"]
    student_id = roster[0]["id"]

    moved = client.put(f"/api/students/{student_id}", json={"classId": campus["class_b"]["id"], "name": "Johnny"})
    assert moved.status_code == 200
    assert moved.json()["name"] == "Johnny"
    assert moved.json()["classId"] == campus["class_b"]["id"]

    clash = client.put(f"/api/students/{student_id}", json={"rollNo": "R-100"})
    assert clash.status_code == 400

    assert client.delete(f"/api/students/{student_id}").status_code == 200
    assert client.get(f"/api/students/{student_id}").status_code == 404


def test_departments_and_batches_are_listed(client, campus):
    departments = client.get("/api/departments").json()["data"]
    batches = client.get("/api/batches").json()["data"]

    assert [d["code"] for d in departments] == ["CSE"]
    assert batches[0]["startYear"] == 2022
    assert batches[0]["endYear"] == 2026
