"""
Web App — Application Package Initializer
==========================================

What: Marks the `web_app` directory as a Python package.
Who:  Imported by uvicorn (`web_app.main:app`), the console script and pytest.

Architecture Note:
    The service is deliberately flat:

    ┌─────────────────────────────────────┐
    │      Server (socket + uvicorn)      │  ← bind, serve, fatal exit
    ├─────────────────────────────────────┤
    │   App (middleware, error handlers)  │  ← access log, 404 fallthrough
    ├─────────────────────────────────────┤
    │        Routes (static table)        │  ← /, /healthz, /ready, /ping
    └─────────────────────────────────────┘

    Routes return fixed literals, so there is no service or persistence layer.
"""

__version__ = "1.0.0"
