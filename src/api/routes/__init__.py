"""API route modules."""

from .health import router as health_router
from .layout import router as layout_router
from .proxy import router as proxy_router

__all__ = ["health_router", "layout_router", "proxy_router"]
