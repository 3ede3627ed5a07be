# rosterapp/api/routes_page.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse

from rosterapp.deps import get_context
from rosterapp.middleware.view_log import VIEW_HEADER
from rosterapp.services.state import RosterContext
from rosterapp.views.document import FORM_ID
from rosterapp.views.pages import init, page_html

router = APIRouter(tags=["page"])

def _page(ctx: RosterContext) -> HTMLResponse:
    return HTMLResponse(page_html(ctx), headers={VIEW_HEADER: ctx.state.view})

@router.get("/", response_class=HTMLResponse)
def page_load(ctx: RosterContext = Depends(get_context)):
    """
    A page load: rebuilds the page from scratch and fetches the roster.
    """
    with ctx.lock:
        init(ctx)
        return _page(ctx)

@router.post("/events/main", response_class=HTMLResponse)
def main_region_event(
    event: str = Form("", description="Control value, e.g. details:3, remove:3, return"),
    ctx: RosterContext = Depends(get_context),
):
    with ctx.lock:
        ctx.document.dispatch("main", event)
        return _page(ctx)

@router.post("/events/form", response_class=HTMLResponse)
def new_player_form_submit(
    playerName: str = Form(""),
    playerBreed: str = Form(""),
    playerStatus: str = Form(""),
    playerImage: str = Form(""),
    playerTeam: str = Form(""),
    ctx: RosterContext = Depends(get_context),
):
    fields = {
        "playerName": playerName,
        "playerBreed": playerBreed,
        "playerStatus": playerStatus,
        "playerImage": playerImage,
        "playerTeam": playerTeam,
    }
    with ctx.lock:
        ctx.document.dispatch(f"#{FORM_ID}", "submit", fields)
        return _page(ctx)
