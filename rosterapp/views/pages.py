# rosterapp/views/pages.py
from __future__ import annotations

from rosterapp.core.config import settings
from rosterapp.services.state import AppState, RosterContext
from rosterapp.views.document import Document
from rosterapp.views.events import form_submit_handler, main_region_handler
from rosterapp.views.flows import load_players
from rosterapp.views.render import (
    render_all_players,
    render_main_page_heading,
    render_new_player_form,
    set_form_hidden,
)


def build_context() -> RosterContext:
    return RosterContext()


def init(ctx: RosterContext) -> None:
    """
    Initializes the page: fresh state and document, heading, creation form,
    then fetches all players and renders them. Runs on every page load.
    """
    ctx.state = AppState()
    ctx.document = Document.host()
    ctx.document.bind("main", main_region_handler(ctx))

    render_main_page_heading(ctx.document)
    set_form_hidden(ctx.document, False)
    render_new_player_form(ctx.document, form_submit_handler(ctx))
    players = load_players(ctx)
    # nothing has been painted yet, so a failed fetch shows the empty list
    render_all_players(ctx.document, players if players is not None else [])


def page_html(ctx: RosterContext) -> str:
    title = ctx.state.selected_player.name if ctx.state.selected_player else settings.PAGE_TITLE
    return ctx.document.to_html(title)
