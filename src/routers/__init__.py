from src.routers.healthz.router import router as healthz
from src.routers.pages.router import router as pages

__all__ = [
    "healthz",
    "pages",
]
