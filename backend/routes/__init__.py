from .health import router as health_router
from .analyze import router as analyze_router
from .waitlist import router as waitlist_router
from .pages import router as pages_router

__all__ = ["health_router", "analyze_router", "waitlist_router", "pages_router"]
