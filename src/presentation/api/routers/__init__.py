from .path_reference_router import router as path_reference_router
from .session_router import router as session_router

__all__ = ["path_reference_router", "session_router"]
