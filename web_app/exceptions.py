"""
Web App — Custom Exception Hierarchy
=====================================

What:  Application-specific exceptions.
How:   Each exception carries a message and an optional context dict.
       Context is logged server-side; it is never written to a response.
Who:   Raised by server.py; caught by server.main().

Exception Hierarchy:
    WebAppError (base)
    └── ServerStartupError   → fatal, process exits with status 1

Request-time errors (unknown route, wrong method, handler crash) are
framework exceptions and are mapped to responses by the handlers registered
in main.py, not by this hierarchy.
"""

from typing import Any, Dict, Optional


class WebAppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged, never returned to clients)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ServerStartupError(WebAppError):
    """
    Raised when the HTTP listener cannot be bound.

    When:    Port already in use, permission denied on a privileged port,
             unknown host address.
    Effect:  Fatal. server.main() logs it at CRITICAL and exits with status 1.
    """

    def __init__(
        self,
        host: str,
        port: int,
        reason: str = "bind failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"listen tcp {host}:{port}: {reason}"
        ctx = dict(context or {})
        ctx["host"] = host
        ctx["port"] = port
        super().__init__(message=message, context=ctx)
        self.host = host
        self.port = port
