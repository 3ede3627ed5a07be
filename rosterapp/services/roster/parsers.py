# rosterapp/services/roster/parsers.py
from __future__ import annotations
from typing import Any, List, Optional

from pydantic import ValidationError

from rosterapp.schemas.player import Player
from rosterapp.services.roster.client import RosterDecodeError

def _data_node(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise RosterDecodeError(f"Expected a JSON object, got {type(payload).__name__}")
    data = payload.get("data")
    if not isinstance(data, dict):
        raise RosterDecodeError("Response has no 'data' object")
    return data

def _to_player(raw: Any) -> Player:
    try:
        return Player.model_validate(raw)
    except ValidationError as exc:
        raise RosterDecodeError(f"Malformed player record: {exc.error_count()} error(s)") from exc

def parse_players(payload: Any) -> List[Player]:
    """
    GET /players -> {"success": true, "error": null, "data": {"players": [...]}}
    Order is kept exactly as the API sent it.
    """
    players = _data_node(payload).get("players")
    if not isinstance(players, list):
        raise RosterDecodeError("Response 'data.players' is not a list")
    return [_to_player(p) for p in players]

def parse_player(payload: Any) -> Player:
    """GET /players/{id} -> {"data": {"player": {...}}}"""
    raw = _data_node(payload).get("player")
    if not raw:
        raise RosterDecodeError("Response has no 'data.player'")
    return _to_player(raw)

def parse_new_player(payload: Any) -> Optional[Player]:
    """
    POST /players echoes the stored record as data.newPlayer. The create contract
    only relies on the absence of `error`, so a missing echo is not a failure.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        return None
    raw = payload["data"].get("newPlayer")
    return _to_player(raw) if raw else None
