# /tests/test_course_api.py

import pytest


@pytest.fixture
def course_payload(make_department):
    dept = make_department()
    return {
        "id": "CSE201",
        "code": "CSE201",
        "title": "Data Structures",
        "credits": 4,
        "category": "Core",
        "description": "Lists, trees and graphs.",
        "semester": 3,
        "departmentId": dept["id"],
    }


def test_create_then_fetch_returns_the_submitted_fields(client, course_payload):
    before = len(client.get("/api/courses").json()["data"])

    created = client.post("/api/courses", json=course_payload)
    assert created.status_code == 201

    courses = client.get("/api/courses").json()["data"]
    assert len(courses) == before + 1

    fetched = client.get(f"/api/courses/{course_payload['id']}").json()
    for field in ("id", "code", "title", "credits", "category", "description", "semester"):
        assert fetched[field] == course_payload[field]
    # The department reference comes back populated.
    assert fetched["departmentId"]["id"] == course_payload["departmentId"]
    assert fetched["departmentId"]["code"] == "CSE"


def test_create_without_id_generates_one(client):
    response = client.post("/api/courses", json={"code": "MTH101", "title": "Calculus"})

    assert response.status_code == 201
    body = response.json()
    assert body["id"].startswith("crs_")
    assert body["credits"] == 3
    assert body["category"] == "Core"
    assert body["semester"] == 1
    assert body["departmentId"] is None


@pytest.mark.parametrize("field,value", [("credits", 7), ("credits", 0), ("semester", 9), ("category", "Seminar")])
def test_create_rejects_out_of_range_values(client, field, value):
    payload = {"code": "BAD1", "title": "Bad", field: value}

    response = client.post("/api/courses", json=payload)

    assert response.status_code == 400
    assert field in response.json()["message"]


def test_duplicate_course_code_is_rejected(client, make_course):
    make_course(code="CSE101")

    response = client.post("/api/courses", json={"code": "CSE101", "title": "Again"})

    assert response.status_code == 400
    assert response.json()["code"] == "DUPLICATE_KEY"


def test_update_changes_fields_but_not_the_code(client, make_course):
    course = make_course(code="CSE101", title="Old Title")

    ok = client.put(f"/api/courses/{course['id']}", json={"code": "CSE101", "title": "New Title", "credits": 5})
    assert ok.status_code == 200
    assert ok.json()["title"] == "New Title"
    assert ok.json()["credits"] == 5

    rejected = client.put(f"/api/courses/{course['id']}", json={"code": "CSE999"})
    assert rejected.status_code == 400
    assert rejected.json()["code"] == "IMMUTABLE_FIELD"
    assert client.get(f"/api/courses/{course['id']}").json()["code"] == "CSE101"


def test_update_unknown_course_is_not_found(client):
    response = client.put("/api/courses/nope", json={"title": "x"})

    assert response.status_code == 404


def test_delete_course(client, make_course):
    course = make_course()

    assert client.delete(f"/api/courses/{course['id']}").json() == {"message": "Course deleted successfully"}
    assert client.delete(f"/api/courses/{course['id']}").status_code == 404
    assert client.get("/api/courses").json()["data"] == []
