# Middleware package init
"""
Web App — Middleware Package
=============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request Logging] → Router → Route Handler

The access log is the only middleware. It sits outside the router so that
404 fallthroughs are logged the same way as matched routes.
"""
