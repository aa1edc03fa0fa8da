"""
Web App — Health Check Routes
==============================

What:  Liveness and readiness endpoints for orchestrator probes.
How:   Both return fixed plain-text bodies with status 200.
Who:   Called by Kubernetes probes, Docker health checks and load balancers.
When:  Periodically (every few seconds per probe).

Probe semantics:
    /healthz  liveness:  the process is up and the event loop answers.
    /ready    readiness: the process accepts traffic.

    The service has no dependencies to probe, so both checks succeed for as
    long as the process can serve a request at all.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

HEALTHY_MESSAGE = "I am healthy!"
READY_MESSAGE = "I am ready!"

router = APIRouter(tags=["Health"])


@router.get(
    "/healthz",
    response_class=PlainTextResponse,
    summary="Liveness probe",
    description="Returns 200 while the process is running.",
)
async def liveness() -> str:
    return HEALTHY_MESSAGE


@router.get(
    "/ready",
    response_class=PlainTextResponse,
    summary="Readiness probe",
    description="Returns 200 once the process can accept traffic.",
)
async def readiness() -> str:
    return READY_MESSAGE
