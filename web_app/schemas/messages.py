"""
Web App — Pydantic Response Schemas
====================================

What:  Pydantic models for the JSON responses the API returns.
How:   FastAPI validates handler return values against these models and
       serializes them with the route's response class.
"""

from pydantic import BaseModel, Field


class PingResponse(BaseModel):
    """
    What:  Body of GET /ping.
    Wire:  {"message":"pong"}
    """
    message: str = Field(description="Always 'pong'")

    model_config = {"frozen": True}
