"""
Web App — Ping Route Handler
=============================

What:  Handles GET /ping with the JSON object {"message":"pong"}.
How:   The handler returns a PingResponse; FastAPI serializes it through
       UTF8JSONResponse so the content type carries an explicit charset.
Who:   Clients and smoke tests checking that JSON rendering works end to end.
"""

from fastapi import APIRouter

from web_app.responses import UTF8JSONResponse
from web_app.schemas.messages import PingResponse

router = APIRouter(tags=["Ping"])

# Immutable, shared by every request
PONG = PingResponse(message="pong")


@router.get(
    "/ping",
    response_model=PingResponse,
    response_class=UTF8JSONResponse,
    summary="JSON ping/pong",
)
async def ping() -> PingResponse:
    """
    Reply to a ping.

    Returns:
        PingResponse rendered as `{"message":"pong"}`.
    """
    return PONG
