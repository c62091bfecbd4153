"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it dispatches commands/queries to the application layer and
translates results to HTTP responses.

Structure:
- routers/system.py: status endpoints
- routers/api/: authenticated and public API resources
- routers/api/middleware/: trace ID and auth dependencies
- routers/api/errors/: uniform error envelope and exception handlers

The presentation layer depends on the application layer (dispatches
commands/queries) but contains NO business logic.
"""
