"""Thin helpers over the backend's PostgREST table API and auth API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import requests

from ..core.exceptions import BackendError
from .connection import BackendConnection

logger = logging.getLogger(__name__)


def eq(value: Any) -> str:
    return f"eq.{value}"


def gte(value: Any) -> str:
    return f"gte.{value}"


def lte(value: Any) -> str:
    return f"lte.{value}"


def _error_details(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error_description") or body.get("error") or body)
    return str(body)


def request_json(
    conn: BackendConnection,
    method: str,
    path: str,
    *,
    params: Optional[Dict[str, Any]] = None,
    payload: Any = None,
    bearer: Optional[str] = None,
    prefer: Optional[str] = None,
) -> Any:
    headers = conn.headers(bearer=bearer)
    if prefer:
        headers["Prefer"] = prefer
    try:
        resp = conn.session.request(
            method,
            conn.url(path),
            headers=headers,
            params=params,
            json=payload,
            timeout=conn.config.timeout,
        )
    except requests.RequestException as e:
        logger.error("Backend request %s %s failed: %s", method, path, e)
        raise BackendError("Backend unreachable", details=str(e)) from e

    if resp.status_code >= 400:
        details = _error_details(resp)
        logger.warning("Backend %s %s answered %s: %s", method, path, resp.status_code, details)
        raise BackendError("Backend request failed", status_code=resp.status_code, details=details)

    if resp.status_code == 204 or not resp.content:
        return None
    return resp.json()


def select_rows(
    conn: BackendConnection,
    table: str,
    *,
    columns: str = "*",
    filters: Optional[Dict[str, str]] = None,
    order: Sequence[str] = (),
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    params: Dict[str, Any] = {"select": columns}
    params.update(filters or {})
    if order:
        params["order"] = ",".join(order)
    if limit is not None:
        params["limit"] = int(limit)
    rows = request_json(conn, "GET", f"rest/v1/{table}", params=params)
    return list(rows or [])


def insert_row(conn: BackendConnection, table: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    rows = request_json(conn, "POST", f"rest/v1/{table}", payload=payload, prefer="return=representation")
    return rows[0]


def update_rows(
    conn: BackendConnection, table: str, payload: Dict[str, Any], *, filters: Dict[str, str]
) -> List[Dict[str, Any]]:
    rows = request_json(
        conn, "PATCH", f"rest/v1/{table}", params=filters, payload=payload, prefer="return=representation"
    )
    return list(rows or [])


def delete_rows(conn: BackendConnection, table: str, *, filters: Dict[str, str]) -> int:
    rows = request_json(conn, "DELETE", f"rest/v1/{table}", params=filters, prefer="return=representation")
    return len(rows or [])


def fetch_auth_user(conn: BackendConnection, access_token: str) -> Optional[Dict[str, Any]]:
    """Resolve an access token to its auth user, ``None`` when the token is rejected."""
    try:
        return request_json(conn, "GET", "auth/v1/user", bearer=access_token)
    except BackendError as e:
        if e.status_code in (401, 403):
            return None
        raise
