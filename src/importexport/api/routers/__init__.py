"""API routers package."""

from importexport.api.routers.templates import router as templates_router
from importexport.api.routers.transfer import router as transfer_router
from importexport.api.routers.backends import router as backends_router

__all__ = [
    "templates_router",
    "transfer_router",
    "backends_router",
]
