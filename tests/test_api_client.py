# /tests/test_api_client.py

import httpx
import pytest

from app.client.api_client import ApiError, CollegeApiClient, unwrap_list
from app.client.references import Ref, entity_id, normalize_record
from app.main import app


# --- Payload normalization ---

def test_unwrap_list_accepts_bare_and_enveloped_lists():
    bare = [{"_id": "1", "name": "A"}]
    enveloped = {"data": [{"id": "2", "name": "B"}]}

    assert unwrap_list(bare) == [{"_id": "1", "id": "1", "name": "A"}]
    assert unwrap_list(enveloped) == [{"id": "2", "name": "B"}]


@pytest.mark.parametrize("payload", [None, {}, {"data": None}, {"items": [1]}, "oops"])
def test_unwrap_list_treats_other_shapes_as_empty(payload):
    assert unwrap_list(payload) == []


def test_entity_id_prefers_underscore_id():
    assert entity_id({"_id": "mongo", "id": "plain"}) == "mongo"
    assert entity_id({"id": "plain"}) == "plain"
    assert entity_id("plain") is None
    assert normalize_record({"name": "x"}) == {"name": "x"}


def test_ref_parse_distinguishes_resolved_from_unresolved():
    populated = Ref.parse({"_id": "dep_1", "code": "CSE", "name": ""})
    raw = Ref.parse("dep_1")
    missing = Ref.parse(None)

    assert populated.resolved and populated.id == "dep_1"
    assert populated.get("code") == "CSE"
    # Empty strings fall back to the default like missing keys do.
    assert populated.get("name", "Department") == "Department"
    assert not raw.resolved and raw.id == "dep_1"
    assert raw.get("code", "Dept") == "Dept"
    assert missing.id is None


# --- HTTP behavior ---

def _mock_client(handler) -> CollegeApiClient:
    return CollegeApiClient(base_url="http://testserver", transport=httpx.MockTransport(handler))


async def test_list_calls_forward_query_params():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=[{"_id": "alc_1"}])

    async with _mock_client(handler) as api:
        allocations = await api.get_course_allocations({"facultyId": "fac_1"})

    assert seen == {"path": "/api/course-allocations", "params": {"facultyId": "fac_1"}}
    assert allocations == [{"_id": "alc_1", "id": "alc_1"}]


async def test_error_responses_raise_with_the_server_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"success": False, "message": "Course code 'X' cannot be changed"})

    async with _mock_client(handler) as api:
        with pytest.raises(ApiError) as excinfo:
            await api.update_course("X", {"code": "Y"})

    assert excinfo.value.status_code == 400
    assert str(excinfo.value) == "Course code 'X' cannot be changed"


async def test_error_without_a_json_body_gets_a_generic_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    async with _mock_client(handler) as api:
        with pytest.raises(ApiError, match="status 502"):
            await api.get_courses()


async def test_transport_failures_become_api_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _mock_client(handler) as api:
        with pytest.raises(ApiError) as excinfo:
            await api.get_departments()

    assert excinfo.value.status_code == 0


# --- Against the real application ---

async def test_client_round_trip_against_the_app(client):
    # `client` installs the test database override on the app.
    transport = httpx.ASGITransport(app=app)
    async with CollegeApiClient(base_url="http://testserver", transport=transport) as api:
        created = await api.create_course({"id": "PHY101", "code": "PHY101", "title": "Physics I"})
        courses = await api.get_courses()

        with pytest.raises(ApiError) as excinfo:
            await api.delete_course("NOPE")

    assert created["id"] == "PHY101"
    assert [c["code"] for c in courses] == ["PHY101"]
    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Course with id 'NOPE' not found"
