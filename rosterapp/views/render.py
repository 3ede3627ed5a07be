# rosterapp/views/render.py
from __future__ import annotations

import logging
from html import escape
from typing import Optional, Sequence

from rosterapp.core.config import settings
from rosterapp.schemas.player import Player
from rosterapp.views.document import FORM_ID, Document, Handler, RenderError

logger = logging.getLogger(__name__)

LIST_TITLE = "Current Players"
EMPTY_MESSAGE = "The player list is empty"
UNASSIGNED = "Unassigned"

# (field name, label) in the order the form shows them
FORM_FIELDS = (
    ("playerName", "Name"),
    ("playerBreed", "Breed"),
    ("playerStatus", "Status"),
    ("playerImage", "Link to Image"),
    ("playerTeam", "Team"),
)

_RENDER_ERRORS = (RenderError, AttributeError, TypeError)


def _e(value) -> str:
    return escape("" if value is None else str(value), quote=True)

def _control(action: str, label: str, player_id: Optional[int] = None) -> str:
    value = action if player_id is None else f"{action}:{player_id}"
    pid_attr = "" if player_id is None else f' data-player-id="{player_id}"'
    return (
        f'<button type="submit" name="event" value="{_e(value)}" '
        f'data-action="{_e(action)}"{pid_attr}>{_e(label)}</button>'
    )

def _player_card(player: Player) -> str:
    return (
        f'<li class="player_card" data-player-id="{player.id}">'
        f"<h3>{_e(player.name)}</h3>"
        f"<h4>Player Id: {player.id}</h4>"
        f'<img src="{_e(player.image_url)}" alt="{_e(player.name)}" />'
        f"{_control('details', 'See Details', player.id)}"
        f"{_control('remove', 'Remove Player', player.id)}"
        "</li>"
    )

def team_assignment(player: Player) -> str:
    return str(player.team_id) if player.team_id is not None else UNASSIGNED


def render_main_page_heading(document: Document, title: Optional[str] = None) -> bool:
    try:
        header = document.query("header")
        header.replace_children(f"<h1>{_e(title or settings.PAGE_TITLE)}</h1>")
    except RenderError:
        logger.exception("Failed to render the page heading.")
        return False
    return True


def set_form_hidden(document: Document, hidden: bool) -> bool:
    try:
        document.query(f"#{FORM_ID}").hidden = hidden
    except RenderError:
        logger.exception("Failed to %s the new player form.", "hide" if hidden else "show")
        return False
    return True


def render_all_players(document: Document, player_list: Sequence[Player]) -> bool:
    """
    Replaces the main region with the list of all players.

    Shows an empty-state message when there are none, otherwise one card per
    player with its name, id and image plus "See Details" / "Remove Player"
    controls. The controls only carry their event; the main region's single
    delegated handler does the rest, so nothing is rebound here.
    """
    try:
        main = document.query("main")
        if not len(player_list):
            content = f"<div><p>{EMPTY_MESSAGE}</p></div>"
        else:
            cards = "".join(_player_card(p) for p in player_list)
            content = f'<div><ul class="players">{cards}</ul></div>'
        main.replace_children(f"<h2>{LIST_TITLE}</h2>", content)
    except _RENDER_ERRORS:
        logger.exception("Failed to render players.")
        return False
    return True


def render_single_player(document: Document, player: Player) -> bool:
    """
    Replaces the header with the player's name, hides the creation form and
    shows one card: id, breed, image, team (or "Unassigned") and a
    "Back to all players" control.
    """
    try:
        header = document.query("header")
        main = document.query("main")
        form = document.query(f"#{FORM_ID}")
        card = (
            '<div><div class="player_detail">'
            f"<h3>Player Id: {player.id}</h3>"
            f"<h3>Breed: {_e(player.breed)}</h3>"
            f'<img src="{_e(player.image_url)}" alt="{_e(player.name)}" />'
            f"<h3>Current Team: {_e(team_assignment(player))}</h3>"
            f"{_control('return', 'Back to all players')}"
            "</div></div>"
        )
        header.replace_children(f"<h1>{_e(player.name)}</h1>")
        form.hidden = True
        main.replace_children(card)
    except _RENDER_ERRORS:
        logger.exception("Failed to render player.")
        return False
    return True


def _form_markup() -> str:
    labels = "".join(
        f'<label>{label}: <input type="text" name="{name}" /></label>'
        for name, label in FORM_FIELDS
    )
    return f"<h3>Add a new player: </h3>{labels}<button type=\"submit\">Submit</button>"


def render_new_player_form(document: Document, on_submit: Optional[Handler] = None) -> bool:
    """Fills the creation form with its inputs and binds its submit handler."""
    try:
        form = document.query(f"#{FORM_ID}")
        form.replace_children(_form_markup())
        if on_submit is not None:
            document.bind(f"#{FORM_ID}", on_submit)
    except _RENDER_ERRORS:
        logger.exception("Uh oh, trouble rendering the new player form!")
        return False
    return True


def reset_new_player_form(document: Document) -> None:
    """Repaints the inputs empty, like form.reset()."""
    document.query(f"#{FORM_ID}").replace_children(_form_markup())
