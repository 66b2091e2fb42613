# Middleware package init
"""
QuickNotes Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Responses travel back through the same chain in reverse, so the
    logging middleware sees the final status code and the request id
    header is added last.
"""
