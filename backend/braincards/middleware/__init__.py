# Middleware package init
"""
Brain Cards Backend — Middleware Package
=========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging
    2. Logging: Log request details with the generated request ID
    3. CORS: Answer OPTIONS directly, stamp CORS headers on every response

    Because CORS sits innermost, preflight answers are still logged and
    still carry an X-Request-ID.
"""
