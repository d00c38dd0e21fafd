"""Mini README: Package initializer for the expense tracker.

The package is split into ``finance`` (the in-memory transaction store),
``interface`` (the FastAPI application), and ``client`` (the HTTP client
application with its local state and summary totals). Only the logging
helper is re-exported here to keep imports cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
