from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path

from rosterapp.deps import get_context
from rosterapp.services.roster import build_url, fetch_single_player
from rosterapp.services.state import RosterContext

router = APIRouter(prefix="/debug", tags=["debug"])

@router.get("/state")
def debug_state(ctx: RosterContext = Depends(get_context)):
    """
    What the page currently holds: the last fetched roster and the open player.
    """
    state = ctx.state
    return {
        "view": state.view,
        "api_url": build_url("/players"),
        "players": [p.model_dump(by_alias=True) for p in state.players],
        "selected_player": state.selected_player.model_dump(by_alias=True) if state.selected_player else None,
    }

@router.get("/players/{player_id}")
def debug_player(player_id: int = Path(..., gt=0, description="Remote player id")):
    """
    Fetches one player straight from the roster API (bypasses the page state).
    """
    player = fetch_single_player(player_id)
    if player is None:
        raise HTTPException(status_code=404, detail=f"Player #{player_id} could not be fetched")
    return player.model_dump(by_alias=True)
