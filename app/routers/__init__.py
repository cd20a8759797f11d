from app.routers.uploads import router as uploads_router
from app.routers.analyses import router as analyses_router
from app.routers.dashboard import router as dashboard_router

__all__ = [
    "uploads_router",
    "analyses_router",
    "dashboard_router"
]
