# rosterapp/views/flows.py
from __future__ import annotations

import logging
from typing import List, Optional

from rosterapp.schemas.player import Player
from rosterapp.services.roster import fetch_all_players
from rosterapp.services.state import RosterContext
from rosterapp.views.render import render_all_players, render_main_page_heading, set_form_hidden

logger = logging.getLogger(__name__)


def load_players(ctx: RosterContext) -> Optional[List[Player]]:
    """Fetch the roster and store it; state is left alone when the fetch fails."""
    players = fetch_all_players()
    if players is not None:
        ctx.state.replace_players(players)
    return players


def refresh_player_list(ctx: RosterContext) -> bool:
    """Fresh fetch, then List View. On failure the current view stays on screen."""
    players = load_players(ctx)
    if players is None:
        logger.warning("Player list unavailable; keeping the current view")
        return False
    return render_all_players(ctx.document, players)


def render_main_page(ctx: RosterContext) -> bool:
    """
    Heading, form and List View from a fresh fetch. When the fetch fails the
    page is left exactly as it was, detail view included.
    """
    players = load_players(ctx)
    if players is None:
        logger.warning("Player list unavailable; keeping the current view")
        return False
    ctx.state.clear_selection()
    render_main_page_heading(ctx.document)
    set_form_hidden(ctx.document, False)
    return render_all_players(ctx.document, players)
