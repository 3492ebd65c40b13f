from .controller import Controller
from .router import build_router

__all__ = ["Controller", "build_router"]
