# rosterapp/middleware/view_log.py
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)

VIEW_HEADER = "X-Roster-View"

class ViewHeaderLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        view = response.headers.get(VIEW_HEADER)
        if view:
            logger.info("[VIEW] %s %s -> %s", request.method, request.url.path, view)
        return response
