"""
Web App — Response Classes
===========================

Starlette only appends a charset to `text/*` media types, so its stock
JSONResponse goes out as a bare `application/json`. Clients of this service
expect the charset to be explicit on JSON as well.
"""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """Compact JSON body with `Content-Type: application/json; charset=utf-8`."""

    media_type = "application/json; charset=utf-8"
