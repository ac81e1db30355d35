"""
Application package initializer.

The service is split into a few small pieces: ``core`` holds
configuration, logging, error rendering and the in-memory stores,
``schemas`` the wire models and ``api`` the HTTP endpoints.
``main`` wires them together into a FastAPI application.
"""

from .main import app, create_app  # noqa: F401
