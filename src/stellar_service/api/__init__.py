"""
HTTP API layer.
"""

from stellar_service.api.routes import router

__all__ = ["router"]
