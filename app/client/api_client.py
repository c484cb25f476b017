# /app/client/api_client.py

"""
Async HTTP client for the college administration API.

This is the only place that knows the wire format. Every list endpoint is
normalized to a plain `list` of records (the server may answer with a bare
array or with `{"data": [...]}`), every record gets an `id`, and every
non-2xx answer is raised as `ApiError` carrying the server's `message`.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..core.config import API_BASE_URL
from .references import normalize_record

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised for any failed API call. `status_code` is 0 for transport failures."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


def unwrap_list(payload: Any) -> List[Dict[str, Any]]:
    """Accepts a bare list or a `{"data": [...]}` envelope; anything else is empty."""
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict) and isinstance(payload.get("data"), list):
        items = payload["data"]
    else:
        items = []
    return [normalize_record(item) for item in items if isinstance(item, dict)]


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message") or body.get("detail")
        if isinstance(message, str) and message:
            return message
    return f"Request failed with status {response.status_code}"


class CollegeApiClient:
    def __init__(
        self,
        base_url: str = API_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None
    ):
        # No timeout by default: a hung request keeps the caller waiting.
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "CollegeApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiError(0, f"Network error: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"{method} {path} -> {response.status_code}: {message}")
            raise ApiError(response.status_code, message)
        if not response.content:
            return None
        return response.json()

    async def _get_list(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return unwrap_list(await self._request("GET", path, params=params or None))

    async def _send(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        body = await self._request(method, path, json=payload)
        return normalize_record(body) if isinstance(body, dict) else body

    # --- Courses ---
    async def get_courses(self) -> List[Dict[str, Any]]: return await self._get_list("/api/courses")
    async def create_course(self, payload: Dict[str, Any]) -> Dict[str, Any]: return await self._send("POST", "/api/courses", payload)
    async def update_course(self, course_id: str, payload: Dict[str, Any]) -> Dict[str, Any]: return await self._send("PUT", f"/api/courses/{course_id}", payload)
    async def delete_course(self, course_id: str) -> Dict[str, Any]: return await self._send("DELETE", f"/api/courses/{course_id}")

    # --- Departments & class rosters ---
    async def get_departments(self) -> List[Dict[str, Any]]: return await self._get_list("/api/departments")
    async def get_class_students(self, class_id: str) -> List[Dict[str, Any]]: return await self._get_list(f"/api/classes/{class_id}/students")

    # --- Course allocations ---
    async def get_course_allocations(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return await self._get_list("/api/course-allocations", params)

    # --- Faculty ---
    async def get_faculty(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return await self._get_list("/api/faculty", params)
    async def create_faculty(self, payload: Dict[str, Any]) -> Dict[str, Any]: return await self._send("POST", "/api/faculty", payload)
    async def update_faculty(self, faculty_id: str, payload: Dict[str, Any]) -> Dict[str, Any]: return await self._send("PUT", f"/api/faculty/{faculty_id}", payload)
    async def delete_faculty(self, faculty_id: str) -> Dict[str, Any]: return await self._send("DELETE", f"/api/faculty/{faculty_id}")
