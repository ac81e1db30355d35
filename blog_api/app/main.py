"""
Main entrypoint for the Blog API.

This module assembles the FastAPI application: it sets up logging,
creates the in-memory post and comment stores, installs the error
handlers that render the JSON envelope and includes the API router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, so it can be run
with uvicorn or another ASGI server, e.g.::

    uvicorn blog_api.app.main:app --port 8080

``run.py`` at the project root does the same with command-line
control over host and port.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import CommentStore, PostStore


def create_app(
    settings: Optional[Settings] = None,
    post_store: Optional[PostStore] = None,
    comment_store: Optional[CommentStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; defaults to the module-level ``settings``.
    post_store, comment_store : optional
        Stores to serve from.  Fresh, empty stores are created when
        omitted, so every application owns its own data.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.state.post_store = post_store if post_store is not None else PostStore()
    app.state.comment_store = comment_store if comment_store is not None else CommentStore()

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    logging.getLogger(__name__).debug(
        "Application created with %d posts and %d comments",
        len(app.state.post_store),
        len(app.state.comment_store),
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
