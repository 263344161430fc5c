from .projects import router as projects_router
from .operations import router as operations_router
from .timelines import router as timelines_router
from .upstream import router as upstream_router

__all__ = ["projects_router", "operations_router", "timelines_router", "upstream_router"]
