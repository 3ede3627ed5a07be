# rosterapp/views/events.py
"""
Delegated event handlers: one for the main region, one for the creation form.
Controls only carry an `action[:player_id]` value; these handlers map it back
onto the roster client, the state and the renderers.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Mapping, Optional

from rosterapp.schemas.player import NewPlayer
from rosterapp.services.roster import add_new_player, remove_player
from rosterapp.services.state import RosterContext
from rosterapp.views.document import Handler, RegionEvent
from rosterapp.views.flows import refresh_player_list, render_main_page
from rosterapp.views.render import render_single_player, reset_new_player_form

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_team_id(raw: Optional[str]) -> Optional[int]:
    """
    Read the team field the way parseInt does ("12", " 7 ", "3abc" -> 3).
    Blank or non-numeric input means unassigned: None, sent to the API as null.
    """
    m = _LEADING_INT.match(raw or "")
    return int(m.group(1)) if m else None


def new_player_from_form(fields: Mapping[str, str]) -> NewPlayer:
    return NewPlayer(
        name=fields.get("playerName", ""),
        breed=fields.get("playerBreed", ""),
        status=fields.get("playerStatus", ""),
        image_url=fields.get("playerImage", ""),
        team_id=parse_team_id(fields.get("playerTeam")),
    )


def show_player_details(ctx: RosterContext, player_id: Optional[int]) -> None:
    # snapshot from the last fetch; no extra request
    player = ctx.state.select(player_id) if player_id is not None else None
    if player is None:
        logger.warning("Player #%s is not in the current roster; ignoring details request", player_id)
        return
    render_single_player(ctx.document, player)


def remove_and_refresh(ctx: RosterContext, player_id: Optional[int]) -> None:
    if player_id is None:
        logger.warning("Remove requested without a player id")
        return
    remove_player(player_id)
    # refetch even when the delete failed: the remote decides what's left
    refresh_player_list(ctx)


def return_to_list(ctx: RosterContext, player_id: Optional[int] = None) -> None:
    render_main_page(ctx)


MAIN_ACTIONS: Dict[str, Callable[[RosterContext, Optional[int]], None]] = {
    "details": show_player_details,
    "remove": remove_and_refresh,
    "return": return_to_list,
}


def main_region_handler(ctx: RosterContext) -> Handler:
    def handle(event: RegionEvent) -> None:
        action = MAIN_ACTIONS.get(event.action)
        if action is None:
            logger.warning("Unknown main-region action %r", event.action)
            return
        action(ctx, event.player_id)

    return handle


def form_submit_handler(ctx: RosterContext) -> Handler:
    def handle(event: RegionEvent) -> None:
        add_new_player(new_player_from_form(event.fields))
        render_main_page(ctx)
        reset_new_player_form(ctx.document)

    return handle
