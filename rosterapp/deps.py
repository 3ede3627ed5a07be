from fastapi import HTTPException, Request

from rosterapp.services.state import RosterContext

def get_context(request: Request) -> RosterContext:
    """
    The page context built at startup. Every route shares the one instance.
    """
    ctx = getattr(request.app.state, "roster", None)
    if ctx is None:
        raise HTTPException(status_code=503, detail="Roster page not initialized")
    return ctx
