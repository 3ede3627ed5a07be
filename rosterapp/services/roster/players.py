# rosterapp/services/roster/players.py
from __future__ import annotations

import logging
from typing import List, Optional

from rosterapp.schemas.player import NewPlayer, Player
from rosterapp.services.roster.client import (
    RosterAPIError,
    roster_delete,
    roster_get,
    roster_post,
)
from rosterapp.services.roster.parsers import parse_new_player, parse_player, parse_players

logger = logging.getLogger(__name__)

# Every operation here catches at its own boundary: a failed call is logged and
# comes back as None/False so the page stays usable.


def fetch_all_players() -> Optional[List[Player]]:
    """Fetches all players from the API. None means the fetch failed."""
    try:
        players = parse_players(roster_get("/players"))
    except RosterAPIError:
        logger.exception("Uh oh, trouble fetching players!")
        return None
    logger.debug("Fetched %d player(s): %s", len(players), [p.id for p in players])
    return players


def fetch_single_player(player_id: int) -> Optional[Player]:
    """
    Fetches a single player from the API. The player is read from this
    response's own data.player node.
    """
    try:
        player = parse_player(roster_get(f"/players/{int(player_id)}"))
    except (RosterAPIError, ValueError, TypeError):
        logger.exception("Oh no, trouble fetching player #%s!", player_id)
        return None
    logger.debug("Fetched player #%s: %s", player_id, player.name)
    return player


def add_new_player(new_player: NewPlayer) -> Optional[Player]:
    """
    Adds a new player to the roster via the API. Nothing is inserted locally;
    callers refetch to see it. Returns the stored record when the API echoes one.
    """
    logger.info("Adding a new Puppy")
    try:
        payload = roster_post("/players", new_player.to_payload())
        return parse_new_player(payload)
    except RosterAPIError:
        logger.exception("Oops, something went wrong with adding that player!")
        return None


def remove_player(player_id: int) -> bool:
    """Removes a player via the API. True only means no error came back."""
    try:
        roster_delete(f"/players/{int(player_id)}")
    except (RosterAPIError, ValueError, TypeError):
        logger.exception("Whoops, trouble removing player #%s from the roster!", player_id)
        return False
    return True
