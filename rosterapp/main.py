# rosterapp/main.py
import logging

from fastapi import FastAPI

from rosterapp.core.config import settings
from rosterapp.core.log import configure_logging
from rosterapp.api import routes_page
from rosterapp.api.routes_debug import router as debug_router
from rosterapp.middleware.view_log import ViewHeaderLogMiddleware
from rosterapp.views.pages import build_context

configure_logging()
settings.validate_at_startup()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)
app.add_middleware(ViewHeaderLogMiddleware)

# one page per process
app.state.roster = build_context()
logger.info("Roster API at %s (fake_mode=%s)", settings.api_url, settings.ROSTER_FAKE_MODE)

# Routers
app.include_router(routes_page.router)
app.include_router(debug_router)


@app.get("/health")
def health():
    return {"ok": True, "env": settings.APP_ENV}
