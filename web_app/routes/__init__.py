# Routes package init
"""
Web App — API Routes Package
=============================

What:  HTTP route handlers, one module per concern.

Route Inventory:
    - welcome.py:  GET /         (plain-text greeting)
    - health.py:   GET /healthz  (liveness probe)
                   GET /ready    (readiness probe)
    - ping.py:     GET /ping     (JSON ping/pong)

Every handler returns a fixed literal. Anything not listed here falls
through to the 404 handler registered in main.py.
"""
