"""Mini README: HTTP interface for the expense tracker.

Exports the FastAPI application factory used by uvicorn and the tests.
"""

from .web_app import create_application

__all__ = ["create_application"]
