"""
Web App — Welcome Route Handler
================================

What:  Handles GET / with a fixed plain-text greeting.
Who:   Humans poking the service with a browser or curl.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

WELCOME_MESSAGE = "Welcome to the Go Gin Web App!"

router = APIRouter(tags=["Welcome"])


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Welcome message",
)
async def welcome() -> str:
    return WELCOME_MESSAGE
