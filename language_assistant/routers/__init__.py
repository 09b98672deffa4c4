"""
Routers package.
Contains FastAPI routers for the assistant API.
"""

from .assistant import router as assistant_router

__all__ = ["assistant_router"]
