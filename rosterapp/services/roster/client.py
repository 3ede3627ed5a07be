import requests
from typing import Any, Dict, Optional

from rosterapp.core.config import settings


class RosterAPIError(RuntimeError):
    """Transport failure or non-2xx status from the roster API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RosterDecodeError(RosterAPIError):
    """Body was not JSON, or not the shape we expect."""


class RosterRejectedError(RosterAPIError):
    """The API answered with an `error` object (validation, not found, ...)."""


def _json_headers() -> Dict[str, str]:
    return {"Content-Type": "application/json", "Accept": "application/json"}

def _remote_error_message(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    err = payload.get("error")
    if not err:
        return None
    if isinstance(err, dict):
        return str(err.get("message") or err.get("name") or err)
    return str(err)

def _check_payload(status: int, payload: Any, method: str, url: str) -> Any:
    message = _remote_error_message(payload)
    if message:
        raise RosterRejectedError(f"Roster API rejected {method} {url} :: {message}", status_code=status)
    if status >= 400:
        raise RosterAPIError(f"Roster API error {status} on {method} {url}", status_code=status)
    return payload

def _raise_with_body(resp: requests.Response, method: str) -> None:
    # surface the upstream body so the log says *why*
    try:
        body = resp.json()
    except ValueError:
        body = None
    if body is not None:
        _check_payload(resp.status_code, body, method, resp.url)
    try:
        msg = resp.text[:2000]
    except Exception:
        msg = "<no-body>"
    raise RosterAPIError(f"Roster API error {resp.status_code} on {method} {resp.url} :: {msg}", status_code=resp.status_code)

def build_url(path: str) -> str:
    base = settings.api_url.rstrip("/")
    rel = path.lstrip("/")
    return f"{base}/{rel}"

def roster_request(
    method: str,
    path: str,                 # e.g. "/players" or "/players/42"
    json: Optional[dict] = None,
) -> Any:
    """
    Core roster API call. Returns the decoded JSON body (None for an empty body).
    Raises RosterAPIError / RosterDecodeError / RosterRejectedError; callers at the
    operation boundary decide what to do with them.
    """
    method = method.upper()
    if settings.ROSTER_FAKE_MODE:
        from rosterapp.services.roster.fake import fake_api

        status, payload = fake_api.handle(method, "/" + path.lstrip("/"), json)
        return _check_payload(status, payload, method, path)

    url = build_url(path)
    try:
        resp = requests.request(
            method,
            url,
            headers=_json_headers(),
            json=json,
            timeout=settings.ROSTER_REQUEST_TIMEOUT,
        )
    except requests.RequestException as exc:
        raise RosterAPIError(f"Roster API unreachable on {method} {url}: {exc}") from exc

    if not resp.ok:
        _raise_with_body(resp, method)

    if not resp.content:
        return None
    try:
        payload = resp.json()
    except ValueError as exc:
        raise RosterDecodeError(f"Roster API sent non-JSON body on {method} {url}", status_code=resp.status_code) from exc
    return _check_payload(resp.status_code, payload, method, url)

def roster_get(path: str) -> Any:
    return roster_request("GET", path)

def roster_post(path: str, body: dict) -> Any:
    return roster_request("POST", path, json=body)

def roster_delete(path: str) -> Any:
    return roster_request("DELETE", path)

