"""
Application package initializer.

The API is organised by layer: ``core`` (configuration, logging,
security, errors and the in-memory store), ``schemas`` (Pydantic
payloads), ``services`` (business logic per domain) and ``api``
(routers).  ``main`` assembles them into the FastAPI application.
"""

from .main import app  # noqa: F401
