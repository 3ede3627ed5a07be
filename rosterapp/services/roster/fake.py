# rosterapp/services/roster/fake.py
"""
In-process stand-in for the Puppy Bowl API, used when ROSTER_FAKE_MODE is on.

It speaks the same envelopes as the real service:
    {"success": bool, "error": {"name", "message"} | None, "data": ...}
and it is the only place player ids are ever minted outside the real remote.
"""
from __future__ import annotations

import re
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

_ITEM_RE = re.compile(r"^/players/(?P<id>[^/]+)/?$")

SEED_PLAYERS: List[Dict[str, Any]] = [
    {"name": "Anise", "breed": "Australian Shepherd", "status": "bench",
     "imageUrl": "https://learndotresources.s3.amazonaws.com/workshop/60ad725bbe74cd0004a6cba0/puppybowl-anise.png",
     "teamId": None},
    {"name": "Crumpet", "breed": "American Staffordshire Terrier", "status": "field",
     "imageUrl": "https://learndotresources.s3.amazonaws.com/workshop/60ad725bbe74cd0004a6cba0/puppybowl-crumpet.png",
     "teamId": 1},
]


def _ok(data: Any) -> Dict[str, Any]:
    return {"success": True, "error": None, "data": data}

def _err(name: str, message: str) -> Dict[str, Any]:
    return {"success": False, "error": {"name": name, "message": message}, "data": None}


class FakeRosterAPI:
    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None):
        self._lock = threading.Lock()
        self.reset(seed)

    def reset(self, seed: Optional[Iterable[Dict[str, Any]]] = None) -> None:
        with self._lock:
            self._players: Dict[int, Dict[str, Any]] = {}
            self._next_id = 1
            for raw in seed or ():
                self._insert(dict(raw))

    def _insert(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(timezone.utc).isoformat()
        record = {
            "id": self._next_id,
            "name": fields.get("name"),
            "breed": fields.get("breed"),
            "status": fields.get("status") or "bench",
            "imageUrl": fields.get("imageUrl"),
            "teamId": fields.get("teamId"),
            "cohortId": 0,
            "createdAt": now,
            "updatedAt": now,
        }
        self._players[record["id"]] = record
        self._next_id += 1
        return record

    @property
    def players(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(p) for p in self._players.values()]

    def handle(self, method: str, path: str, body: Optional[dict] = None) -> Tuple[int, Dict[str, Any]]:
        path = path.split("?", 1)[0]
        with self._lock:
            if path.rstrip("/") == "/players":
                if method == "GET":
                    return 200, _ok({"players": [dict(p) for p in self._players.values()]})
                if method == "POST":
                    return self._create(body or {})
                return 405, _err("MethodNotAllowed", f"{method} not supported on /players")

            m = _ITEM_RE.match(path)
            if not m:
                return 404, _err("NotFoundError", f"No route for {path}")
            try:
                player_id = int(m.group("id"))
            except ValueError:
                return 400, _err("BadRequest", f"Invalid player id {m.group('id')!r}")

            if method == "GET":
                found = self._players.get(player_id)
                if not found:
                    return 404, _err("NotFoundError", f"Player with id {player_id} not found")
                return 200, _ok({"player": dict(found)})
            if method == "DELETE":
                if self._players.pop(player_id, None) is None:
                    return 404, _err("NotFoundError", f"Player with id {player_id} not found")
                return 200, _ok(None)
            return 405, _err("MethodNotAllowed", f"{method} not supported on {path}")

    def _create(self, body: Dict[str, Any]) -> Tuple[int, Dict[str, Any]]:
        name = body.get("name")
        if not isinstance(name, str) or not name.strip():
            # the real service answers validation failures with a 200-shaped body
            return 200, _err("ValidationError", "Player name is required")
        team_id = body.get("teamId")
        if team_id is not None and not isinstance(team_id, int):
            return 200, _err("ValidationError", "teamId must be an integer or null")
        return 200, _ok({"newPlayer": dict(self._insert(body))})


fake_api = FakeRosterAPI(SEED_PLAYERS)
