# Middleware package init
"""
DreamHome API — Middleware Package
====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: Assign the correlation ID used by every log line
    2. Logging: One access line per request, tagged with that ID
    3. CORS: Applied by FastAPI's CORSMiddleware (handles preflight)

    Responses pass back through in reverse, so the request ID header is
    set and the access line sees the final status code.
"""
