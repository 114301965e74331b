from eventboard.web.routers.auth import router as auth_router
from eventboard.web.routers.events import router as events_router
from eventboard.web.routers.metadata import router as metadata_router

__all__ = [
    "auth_router",
    "events_router",
    "metadata_router",
]
