from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from .errors import error_for_status

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:5000"


def clean_params(params: Optional[Mapping[str, Any]]) -> dict:
    """Drop unset and blank query values; the server treats them as absent anyway."""
    if not params:
        return {}
    return {k: str(v) for k, v in params.items() if v is not None and str(v) != ""}


class ApiClient:
    """One coroutine per API route over a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        response = await self._http.request(method, path, params=clean_params(params), json=json)
        if response.is_success:
            if response.status_code == 204 or not response.content:
                return None
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get("message") or response.reason_phrase
        logger.warning("%s %s failed with %s: %s", method, path, response.status_code, message)
        raise error_for_status(response.status_code, message, body.get("errors"))

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    # dashboard

    async def attendance_summary(self) -> dict:
        return await self.get("/api/dashboard/attendance-summary")

    async def recent_activities(self) -> list:
        return await self.get("/api/dashboard/recent-activities")

    async def recent_announcements(self) -> list:
        return await self.get("/api/dashboard/recent-announcements")

    # students

    async def list_students(
        self,
        *,
        class_name: Optional[str] = None,
        section: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list:
        return await self.get("/api/students", {"class": class_name, "section": section, "search": search})

    async def get_student(self, student_id: int) -> dict:
        return await self.get(f"/api/students/{int(student_id)}")

    async def create_student(self, *, name: str, class_name: str, section: str) -> dict:
        return await self.request(
            "POST", "/api/students", json={"name": name, "className": class_name, "section": section}
        )

    # attendance

    async def list_attendance(
        self,
        *,
        class_name: Optional[str] = None,
        section: Optional[str] = None,
        date: Optional[str] = None,
    ) -> list:
        return await self.get("/api/attendance", {"class": class_name, "section": section, "date": date})

    async def save_attendance(
        self,
        *,
        student_id: int,
        date: str,
        status: str,
        notes: Optional[str] = None,
    ) -> dict:
        payload = {"studentId": student_id, "date": date, "status": status}
        if notes is not None:
            payload["notes"] = notes
        return await self.request("POST", "/api/attendance", json=payload)

    # behavior

    async def list_violations(self) -> list:
        return await self.get("/api/behavior")

    async def create_violation(
        self,
        *,
        student_id: int,
        violation_type: str,
        description: str,
        date: str,
        severity: str,
        lesson_period: Optional[str] = None,
    ) -> dict:
        payload = {
            "studentId": student_id,
            "violationType": violation_type,
            "description": description,
            "date": date,
            "severity": severity,
        }
        if lesson_period is not None:
            payload["lessonPeriod"] = lesson_period
        return await self.request("POST", "/api/behavior", json=payload)

    async def delete_violation(self, violation_id: int) -> None:
        await self.request("DELETE", f"/api/behavior/{int(violation_id)}")

    # announcements

    async def list_announcements(self) -> list:
        return await self.get("/api/announcements")

    async def create_announcement(
        self,
        *,
        title: str,
        content: str,
        start_date: str,
        end_date: Optional[str],
        importance: str,
    ) -> dict:
        return await self.request(
            "POST",
            "/api/announcements",
            json={
                "title": title,
                "content": content,
                "startDate": start_date,
                "endDate": end_date,
                "importance": importance,
            },
        )

    async def delete_announcement(self, announcement_id: int) -> None:
        await self.request("DELETE", f"/api/announcements/{int(announcement_id)}")

    # schedule & reports

    async def get_schedule(self, *, class_name: Optional[str] = None, section: Optional[str] = None) -> dict:
        return await self.get("/api/schedule", {"class": class_name, "section": section})

    async def get_report(
        self,
        report_type: str,
        *,
        class_name: Optional[str] = None,
        section: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        period: Optional[str] = None,
    ) -> dict:
        params = {"class": class_name, "section": section, "start": start, "end": end, "period": period}
        return await self.get(f"/api/reports/{report_type}", params)
