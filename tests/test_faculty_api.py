# /tests/test_faculty_api.py

import pytest

from app.core.security import verify_password
from app.db.models.faculty_model import Faculty


def _stored_hash(session_factory, faculty_id):
    with session_factory() as session:
        return session.query(Faculty).filter(Faculty.id == faculty_id).one().password


def _count(session_factory):
    with session_factory() as session:
        return session.query(Faculty).count()


# --- create ---

def test_create_faculty_hashes_password_and_hides_it(client, session_factory, make_department):
    dept = make_department()
    response = client.post("/api/faculty", json={
        "name": "Anna Joseph", "email": "anna@college.edu",
        "password": "plain-secret", "departmentId": dept["id"]
    })

    assert response.status_code == 201
    body = response.json()
    assert "password" not in body
    assert body["name"] == "Anna Joseph"
    assert body["departmentId"]["code"] == "CSE"

    stored = _stored_hash(session_factory, body["id"])
    assert stored != "plain-secret"
    assert stored.startswith("$2b$10$")
    assert verify_password("plain-secret", stored)


def test_create_faculty_missing_password_is_a_client_error(client, session_factory):
    response = client.post("/api/faculty", json={"name": "No Secret", "email": "nosecret@college.edu"})

    assert response.status_code == 400
    assert "password" in response.json()["message"]
    assert _count(session_factory) == 0


def test_create_faculty_with_duplicate_email_is_rejected(client, make_faculty):
    make_faculty(email="dup@college.edu")
    response = client.post("/api/faculty", json={"name": "Other", "email": "dup@college.edu", "password": "another-pass"})

    assert response.status_code == 400
    assert response.json()["code"] == "DUPLICATE_KEY"


def test_duplicate_email_check_ignores_case(client, make_faculty):
    make_faculty(name="First", email="Dup@college.edu")

    response = client.post("/api/faculty", json={"name": "Second", "email": "dup@college.edu", "password": "another-pass"})

    assert response.status_code == 400
    assert response.json()["code"] == "DUPLICATE_KEY"
    assert client.get("/api/faculty").json()["data"][0]["email"] == "dup@college.edu"


def test_create_faculty_with_unknown_department_is_rejected(client):
    response = client.post("/api/faculty", json={
        "name": "Lost", "email": "lost@college.edu", "password": "secret-pass", "departmentId": "dep_missing"
    })

    assert response.status_code == 400
    assert "dep_missing" in response.json()["message"]


# --- list ---

def test_list_search_is_case_insensitive_substring_on_name_or_email(client, make_faculty):
    make_faculty(name="Anna Joseph", email="aj@college.edu")
    make_faculty(name="Bob Stone", email="bob.hannah@college.edu")
    make_faculty(name="Carl Reed", email="carl@college.edu")

    response = client.get("/api/faculty", params={"search": "ANN"})

    assert response.status_code == 200
    names = [f["name"] for f in response.json()["data"]]
    assert names == ["Anna Joseph", "Bob Stone"]


def test_list_search_and_department_filter_combine_with_and(client, make_department, make_faculty):
    d1 = make_department(code="D1", name="Dept One")
    d2 = make_department(code="D2", name="Dept Two")
    first = make_faculty(name="Anna", email="anna1@college.edu", departmentId=d1["id"])
    make_faculty(name="Anna", email="anna2@college.edu", departmentId=d2["id"])
    make_faculty(name="Zed", email="zed@college.edu", departmentId=d1["id"])

    response = client.get("/api/faculty", params={"search": "ann", "departmentId": d1["id"]})

    data = response.json()["data"]
    assert [f["id"] for f in data] == [first["id"]]
    assert response.json()["pagination"]["total"] == 1


def test_list_search_treats_wildcards_literally(client, make_faculty):
    make_faculty(name="Percy", email="percy@college.edu")

    response = client.get("/api/faculty", params={"search": "%"})

    assert response.json()["data"] == []


def test_list_is_sorted_by_name_and_paginated(client, make_faculty):
    for index, name in enumerate(["Cara", "Abel", "Bea"]):
        make_faculty(name=name, email=f"f{index}@college.edu")

    page_two = client.get("/api/faculty", params={"page": 2, "limit": 2}).json()

    assert [f["name"] for f in page_two["data"]] == ["Cara"]
    assert page_two["pagination"] == {"page": 2, "limit": 2, "total": 3}

    everything = client.get("/api/faculty").json()
    assert [f["name"] for f in everything["data"]] == ["Abel", "Bea", "Cara"]
    assert everything["pagination"]["limit"] == 1000
    assert all("password" not in f for f in everything["data"])


# --- update ---

def test_update_without_password_keeps_the_stored_hash(client, session_factory, make_faculty):
    faculty = make_faculty()
    before = _stored_hash(session_factory, faculty["id"])

    response = client.put(f"/api/faculty/{faculty['id']}", json={"name": "Anna J."})

    assert response.status_code == 200
    assert response.json()["name"] == "Anna J."
    assert "password" not in response.json()
    assert _stored_hash(session_factory, faculty["id"]) == before


def test_update_with_empty_password_keeps_the_stored_hash(client, session_factory, make_faculty):
    faculty = make_faculty()
    before = _stored_hash(session_factory, faculty["id"])

    client.put(f"/api/faculty/{faculty['id']}", json={"password": ""})

    assert _stored_hash(session_factory, faculty["id"]) == before


def test_update_with_new_password_rehashes(client, session_factory, make_faculty):
    faculty = make_faculty(password="first-pass")
    before = _stored_hash(session_factory, faculty["id"])

    response = client.put(f"/api/faculty/{faculty['id']}", json={"password": "second-pass"})

    assert response.status_code == 200
    after = _stored_hash(session_factory, faculty["id"])
    assert after != before
    assert after != "second-pass"
    assert verify_password("second-pass", after)


@pytest.mark.parametrize("field", ["name", "email"])
def test_update_with_null_required_field_is_a_client_error(client, make_faculty, field):
    faculty = make_faculty()

    response = client.put(f"/api/faculty/{faculty['id']}", json={field: None})

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert field in response.json()["message"]
    unchanged = client.get(f"/api/faculty/{faculty['id']}").json()
    assert unchanged["name"] == faculty["name"]
    assert unchanged["email"] == faculty["email"]


def test_update_unknown_faculty_is_not_found(client):
    response = client.put("/api/faculty/fac_missing", json={"name": "Ghost"})

    assert response.status_code == 404
    assert response.json()["message"] == "Faculty with id 'fac_missing' not found"


# --- delete ---

def test_delete_faculty_returns_confirmation(client, session_factory, make_faculty):
    faculty = make_faculty()

    response = client.delete(f"/api/faculty/{faculty['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Faculty deleted successfully"}
    assert client.get(f"/api/faculty/{faculty['id']}").status_code == 404


def test_delete_unknown_faculty_is_not_found_and_changes_nothing(client, session_factory, make_faculty):
    make_faculty()

    response = client.delete("/api/faculty/fac_does_not_exist")

    assert response.status_code == 404
    assert "message" in response.json()
    assert _count(session_factory) == 1
